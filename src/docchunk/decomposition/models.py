"""Records shared by the resolver, chunkers and manifest builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

InputType = Literal["pdf", "epub"]


@dataclass(frozen=True, slots=True)
class InputDescriptor:
    """Input path classified by its extension."""

    path: Path
    extension: str
    base_name: str


@dataclass(frozen=True, slots=True)
class PageRange:
    """Half-open, 0-based page interval covered by one chunk."""

    index: int
    start: int
    end: int

    @property
    def page_count(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        """1-based inclusive range as reported in the manifest."""
        return f"{self.start + 1}-{self.end}"


@dataclass(frozen=True, slots=True)
class PackageResource:
    """Manifest item of a packaged archive resolved to an archive path."""

    id: str
    path: str
    media_type: str
    is_markup: bool


@dataclass(frozen=True, slots=True)
class Section:
    """Normalized plain text extracted from one reading-order resource."""

    source_path: str
    text: str


@dataclass(frozen=True, slots=True)
class SectionGroup:
    """Contiguous slice ``[start, end)`` of the section sequence."""

    index: int
    start: int
    end: int
    sections: tuple[Section, ...]

    @property
    def section_count(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        return f"{self.start + 1}-{self.end}"


@dataclass(slots=True)
class ChunkRecord:
    """One written chunk file and the unit range it covers."""

    name: str
    path: Path
    unit_range: str
    unit_count: int


@dataclass(slots=True)
class Manifest:
    """Descriptor of how a document was partitioned into chunks."""

    original_file: str
    input_type: InputType
    total_units: int
    units_per_chunk: int
    chunks: list[ChunkRecord] = field(default_factory=list)

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def to_dict(self) -> dict[str, object]:
        if self.input_type == "pdf":
            total_key, per_chunk_key = "totalPages", "pagesPerChunk"
            range_key, count_key = "pages", "pageCount"
        else:
            total_key, per_chunk_key = "totalSections", "sectionsPerChunk"
            range_key, count_key = "sections", "sectionCount"

        return {
            "originalFile": self.original_file,
            "inputType": self.input_type,
            total_key: self.total_units,
            per_chunk_key: self.units_per_chunk,
            "totalChunks": self.total_chunks,
            "chunks": [
                {"name": chunk.name, range_key: chunk.unit_range, count_key: chunk.unit_count}
                for chunk in self.chunks
            ],
        }
