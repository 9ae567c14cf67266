"""Runtime configuration for document decomposition."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_UNITS_PER_CHUNK = 5
DEFAULT_OUTPUT_SUFFIX = "_chunks"
DEFAULT_MANIFEST_NAME = "manifest.json"
DEFAULT_LARGE_FILE_WARNING_MB = 100.0


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class DecompositionSettings:
    """Chunk size and output naming used by a single decomposer."""

    units_per_chunk: int = DEFAULT_UNITS_PER_CHUNK
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    manifest_name: str = DEFAULT_MANIFEST_NAME
    large_file_warning_mb: float = DEFAULT_LARGE_FILE_WARNING_MB

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DecompositionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        units_raw = source.get("DOCCHUNK_UNITS_PER_CHUNK", str(DEFAULT_UNITS_PER_CHUNK)).strip()
        warning_raw = source.get("DOCCHUNK_LARGE_FILE_WARNING_MB", str(DEFAULT_LARGE_FILE_WARNING_MB)).strip()

        if not units_raw:
            raise ValueError("DOCCHUNK_UNITS_PER_CHUNK cannot be empty")
        if not warning_raw:
            raise ValueError("DOCCHUNK_LARGE_FILE_WARNING_MB cannot be empty")

        return cls(
            units_per_chunk=_parse_positive_int(name="DOCCHUNK_UNITS_PER_CHUNK", raw_value=units_raw),
            large_file_warning_mb=_parse_positive_float(
                name="DOCCHUNK_LARGE_FILE_WARNING_MB",
                raw_value=warning_raw,
            ),
        )
