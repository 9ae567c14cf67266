"""Split PDF and EPUB documents into ordered, self-contained chunks."""

__version__ = "0.1.0"
