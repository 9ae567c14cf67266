from __future__ import annotations

import json
from pathlib import Path

from docchunk.decomposition.manifest import build_manifest, write_manifest
from docchunk.decomposition.models import ChunkRecord


def test_pdf_manifest_uses_page_field_names(tmp_path: Path) -> None:
    manifest = build_manifest(
        original_file="book.pdf",
        input_type="pdf",
        total_units=7,
        units_per_chunk=5,
        chunks=[
            ChunkRecord(name="chunk_001.pdf", path=tmp_path / "chunk_001.pdf", unit_range="1-5", unit_count=5),
            ChunkRecord(name="chunk_002.pdf", path=tmp_path / "chunk_002.pdf", unit_range="6-7", unit_count=2),
        ],
    )

    assert manifest.to_dict() == {
        "originalFile": "book.pdf",
        "inputType": "pdf",
        "totalPages": 7,
        "pagesPerChunk": 5,
        "totalChunks": 2,
        "chunks": [
            {"name": "chunk_001.pdf", "pages": "1-5", "pageCount": 5},
            {"name": "chunk_002.pdf", "pages": "6-7", "pageCount": 2},
        ],
    }


def test_epub_manifest_uses_section_field_names_in_stable_order(tmp_path: Path) -> None:
    manifest = build_manifest(
        original_file="book.epub",
        input_type="epub",
        total_units=1,
        units_per_chunk=5,
        chunks=[ChunkRecord(name="chunk_001.txt", path=tmp_path / "chunk_001.txt", unit_range="1-1", unit_count=1)],
    )

    payload = manifest.to_dict()

    assert list(payload) == [
        "originalFile",
        "inputType",
        "totalSections",
        "sectionsPerChunk",
        "totalChunks",
        "chunks",
    ]
    assert payload["chunks"] == [{"name": "chunk_001.txt", "sections": "1-1", "sectionCount": 1}]


def test_write_manifest_overwrites_previous_file(tmp_path: Path) -> None:
    (tmp_path / "manifest.json").write_text('{"stale": true, "padding": "' + "x" * 500 + '"}', encoding="utf-8")
    manifest = build_manifest(
        original_file="книга.pdf",
        input_type="pdf",
        total_units=0,
        units_per_chunk=5,
        chunks=[],
    )

    manifest_path = write_manifest(tmp_path, manifest)
    raw = manifest_path.read_text(encoding="utf-8")

    assert manifest_path == tmp_path / "manifest.json"
    assert json.loads(raw) == manifest.to_dict()
    assert "книга.pdf" in raw
    assert '\n  "inputType": "pdf"' in raw
