"""Build and persist the chunk manifest."""

from __future__ import annotations

import json
from pathlib import Path

from docchunk.config import DEFAULT_MANIFEST_NAME
from docchunk.decomposition.models import ChunkRecord, InputType, Manifest


def build_manifest(
    *,
    original_file: str,
    input_type: InputType,
    total_units: int,
    units_per_chunk: int,
    chunks: list[ChunkRecord],
) -> Manifest:
    return Manifest(
        original_file=original_file,
        input_type=input_type,
        total_units=total_units,
        units_per_chunk=units_per_chunk,
        chunks=list(chunks),
    )


def write_manifest(output_dir: Path, manifest: Manifest, *, name: str = DEFAULT_MANIFEST_NAME) -> Path:
    """Write *manifest* as indented UTF-8 JSON, replacing any previous file."""

    manifest_path = output_dir / name
    manifest_path.write_text(json.dumps(manifest.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    return manifest_path
