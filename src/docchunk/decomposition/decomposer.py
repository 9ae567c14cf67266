"""Entry point that routes a document to the matching chunker."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from zipfile import BadZipFile, ZipFile

from docchunk.config import DecompositionSettings
from docchunk.decomposition.errors import InvalidArchiveError, NotFoundError, UnsupportedFormatError
from docchunk.decomposition.manifest import build_manifest, write_manifest
from docchunk.decomposition.models import InputDescriptor, Manifest
from docchunk.decomposition.package import resolve_reading_order
from docchunk.decomposition.page_chunker import load_pdf, plan_page_ranges, write_page_chunks
from docchunk.decomposition.resolver import input_type_for, resolve_input
from docchunk.decomposition.section_chunker import plan_section_groups, write_section_chunks
from docchunk.decomposition.sections import extract_sections

logger = logging.getLogger(__name__)

_BYTES_PER_MB = 1024 * 1024


@dataclass(slots=True)
class DecompositionResult:
    """Manifest plus the locations written for one decomposition run."""

    manifest: Manifest
    output_dir: Path
    manifest_path: Path
    chunk_paths: list[Path] = field(default_factory=list)


class DocumentDecomposer:
    """Split PDF and EPUB inputs into chunk files plus a manifest."""

    def __init__(self, settings: DecompositionSettings | None = None) -> None:
        self._settings = settings or DecompositionSettings()
        if self._settings.units_per_chunk < 1:
            raise ValueError("units_per_chunk must be positive")

    @property
    def settings(self) -> DecompositionSettings:
        return self._settings

    def default_output_dir(self, descriptor: InputDescriptor) -> Path:
        return descriptor.path.parent / f"{descriptor.base_name}{self._settings.output_suffix}"

    def decompose(self, path: str | Path, output_dir: str | Path | None = None) -> DecompositionResult:
        """Decompose *path*; chunk files already written stay on disk on failure."""

        descriptor = resolve_input(path)
        input_type = input_type_for(descriptor)
        if input_type is None:
            raise UnsupportedFormatError(
                descriptor.path,
                f"Unsupported file type: {descriptor.extension or '(none)'} (expected .pdf or .epub)",
            )

        self._ensure_input_exists(descriptor.path)
        self._check_file_size(descriptor.path)

        target_dir = Path(output_dir) if output_dir is not None else self.default_output_dir(descriptor)
        target_dir.mkdir(parents=True, exist_ok=True)

        if input_type == "pdf":
            manifest = self._split_pdf(descriptor, target_dir)
        else:
            manifest = self._split_epub(descriptor, target_dir)

        manifest_path = write_manifest(target_dir, manifest, name=self._settings.manifest_name)
        logger.info("Done! Created %d chunks in: %s", manifest.total_chunks, target_dir)
        logger.info("Manifest saved to: %s", manifest_path)

        return DecompositionResult(
            manifest=manifest,
            output_dir=target_dir,
            manifest_path=manifest_path,
            chunk_paths=[chunk.path for chunk in manifest.chunks],
        )

    def _split_pdf(self, descriptor: InputDescriptor, output_dir: Path) -> Manifest:
        pages_per_chunk = self._settings.units_per_chunk
        logger.info("Loading PDF: %s", descriptor.path)

        with load_pdf(descriptor.path.read_bytes(), descriptor.path) as document:
            total_pages = document.page_count
            page_ranges = plan_page_ranges(total_pages, pages_per_chunk)
            logger.info("Total pages: %d", total_pages)
            logger.info("Pages per chunk: %d", pages_per_chunk)
            logger.info("Creating %d chunk(s)...", len(page_ranges))
            records = write_page_chunks(document, page_ranges, output_dir)

        return build_manifest(
            original_file=descriptor.path.name,
            input_type="pdf",
            total_units=total_pages,
            units_per_chunk=pages_per_chunk,
            chunks=records,
        )

    def _split_epub(self, descriptor: InputDescriptor, output_dir: Path) -> Manifest:
        sections_per_chunk = self._settings.units_per_chunk
        logger.info("Loading EPUB: %s", descriptor.path)

        try:
            archive = ZipFile(descriptor.path, "r")
        except BadZipFile as exc:
            raise InvalidArchiveError(descriptor.path, f"Invalid EPUB: not a ZIP archive: {exc}") from exc

        with archive:
            resources = resolve_reading_order(archive, descriptor.path)
            sections = extract_sections(archive, resources, descriptor.path)

        groups = plan_section_groups(sections, sections_per_chunk)
        logger.info("Total sections: %d", len(sections))
        logger.info("Sections per chunk: %d", sections_per_chunk)
        logger.info("Creating %d chunk(s)...", len(groups))
        records = write_section_chunks(groups, output_dir)

        return build_manifest(
            original_file=descriptor.path.name,
            input_type="epub",
            total_units=len(sections),
            units_per_chunk=sections_per_chunk,
            chunks=records,
        )

    def _ensure_input_exists(self, path: Path) -> None:
        if not path.exists():
            raise NotFoundError(path, f"File not found: {path}")
        if not path.is_file():
            raise NotFoundError(path, f"Path is not a file: {path}")

    def _check_file_size(self, path: Path) -> float:
        """Warn when the input is large; never blocks the run."""

        size_mb = path.stat().st_size / _BYTES_PER_MB
        if size_mb > self._settings.large_file_warning_mb:
            logger.warning("File is %.0f MB. Memory usage may be high during chunking.", size_mb)
        return size_mb
