"""Group extracted sections into delimited text chunks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from docchunk.decomposition.models import ChunkRecord, Section, SectionGroup
from docchunk.decomposition.page_chunker import chunk_name

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n\n"


def plan_section_groups(sections: Sequence[Section], sections_per_chunk: int) -> list[SectionGroup]:
    if sections_per_chunk <= 0:
        raise ValueError("sections_per_chunk must be positive")

    groups: list[SectionGroup] = []
    for index, start in enumerate(range(0, len(sections), sections_per_chunk), start=1):
        end = min(start + sections_per_chunk, len(sections))
        groups.append(SectionGroup(index=index, start=start, end=end, sections=tuple(sections[start:end])))
    return groups


def render_group(group: SectionGroup) -> str:
    """Serialize *group* with a ``[Section N: path]`` header per section."""

    body = SECTION_SEPARATOR.join(
        f"[Section {number}: {section.source_path}]\n\n{section.text}"
        for number, section in enumerate(group.sections, start=group.start + 1)
    )
    return f"{body}\n"


def write_section_chunks(groups: list[SectionGroup], output_dir: Path) -> list[ChunkRecord]:
    records: list[ChunkRecord] = []

    for group in groups:
        name = chunk_name(group.index, "txt")
        chunk_path = output_dir / name
        chunk_path.write_text(render_group(group), encoding="utf-8")

        records.append(
            ChunkRecord(
                name=name,
                path=chunk_path,
                unit_range=group.label,
                unit_count=group.section_count,
            )
        )
        logger.info("Created: %s (sections %s)", name, group.label)

    return records
