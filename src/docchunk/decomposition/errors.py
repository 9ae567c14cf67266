"""Fatal conditions raised while decomposing a document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class DecompositionError(Exception):
    """Base error for input, archive and extraction failures."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


class NotFoundError(DecompositionError):
    """Input path is missing or is not a regular file."""


class UnsupportedFormatError(DecompositionError):
    """Input extension is neither .pdf nor .epub."""


class InvalidArchiveError(DecompositionError):
    """Packaged archive is unreadable or its package cannot be resolved."""


class InvalidDocumentError(DecompositionError):
    """Page-oriented document could not be loaded."""


class EmptyDocumentError(DecompositionError):
    """Packaged archive yielded no readable text sections."""
