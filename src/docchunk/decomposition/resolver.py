"""Classify an input path by extension and derive its base name."""

from __future__ import annotations

from pathlib import Path

from docchunk.decomposition.models import InputDescriptor, InputType

SUPPORTED_EXTENSIONS: dict[str, InputType] = {
    ".pdf": "pdf",
    ".epub": "epub",
}


def resolve_input(path: str | Path) -> InputDescriptor:
    """Return the lower-cased extension and extension-less file name."""

    source = Path(path)
    return InputDescriptor(path=source, extension=source.suffix.lower(), base_name=source.stem)


def input_type_for(descriptor: InputDescriptor) -> InputType | None:
    return SUPPORTED_EXTENSIONS.get(descriptor.extension)
