"""Split a PDF into fixed-size, contiguous page-range documents."""

from __future__ import annotations

import logging
from pathlib import Path

import pymupdf

from docchunk.decomposition.errors import InvalidDocumentError
from docchunk.decomposition.models import ChunkRecord, PageRange

logger = logging.getLogger(__name__)


def chunk_name(index: int, extension: str) -> str:
    """Deterministic file name for the 1-based chunk *index*."""
    return f"chunk_{index:03d}.{extension}"


def plan_page_ranges(total_pages: int, pages_per_chunk: int) -> list[PageRange]:
    """Cover ``[0, total_pages)`` with ranges of *pages_per_chunk* pages."""

    if pages_per_chunk <= 0:
        raise ValueError("pages_per_chunk must be positive")
    if total_pages < 0:
        raise ValueError("total_pages cannot be negative")

    return [
        PageRange(index=index, start=start, end=min(start + pages_per_chunk, total_pages))
        for index, start in enumerate(range(0, total_pages, pages_per_chunk), start=1)
    ]


def load_pdf(data: bytes, source: Path) -> pymupdf.Document:
    try:
        return pymupdf.open(stream=data, filetype="pdf")
    except pymupdf.FileDataError as exc:
        raise InvalidDocumentError(source, f"Failed to load PDF: {exc}") from exc


def copy_page_range(document: pymupdf.Document, page_range: PageRange) -> bytes:
    """Return a standalone PDF holding exactly the pages of *page_range*."""

    with pymupdf.open() as chunk:
        chunk.insert_pdf(document, from_page=page_range.start, to_page=page_range.end - 1)
        return chunk.tobytes()


def write_page_chunks(
    document: pymupdf.Document,
    page_ranges: list[PageRange],
    output_dir: Path,
) -> list[ChunkRecord]:
    records: list[ChunkRecord] = []

    for page_range in page_ranges:
        name = chunk_name(page_range.index, "pdf")
        chunk_path = output_dir / name
        chunk_path.write_bytes(copy_page_range(document, page_range))

        records.append(
            ChunkRecord(
                name=name,
                path=chunk_path,
                unit_range=page_range.label,
                unit_count=page_range.page_count,
            )
        )
        logger.info("Created: %s (pages %s)", name, page_range.label)

    return records
