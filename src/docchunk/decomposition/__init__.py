"""Document decomposition interfaces."""

from .decomposer import DecompositionResult, DocumentDecomposer
from .errors import (
    DecompositionError,
    EmptyDocumentError,
    InvalidArchiveError,
    InvalidDocumentError,
    NotFoundError,
    UnsupportedFormatError,
)

__all__ = [
    "DecompositionError",
    "DecompositionResult",
    "DocumentDecomposer",
    "EmptyDocumentError",
    "InvalidArchiveError",
    "InvalidDocumentError",
    "NotFoundError",
    "UnsupportedFormatError",
]
