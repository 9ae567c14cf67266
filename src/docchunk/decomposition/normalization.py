"""Text normalization helpers used for extracted section text."""

from __future__ import annotations

import re
from typing import TypeVar

T = TypeVar("T")

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str | None) -> str:
    """Unify line endings, trim lines and collapse blank runs."""

    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\u00a0", " ")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    return _BLANK_RUN_RE.sub("\n\n", text).strip()


def to_array(value: T | list[T] | tuple[T, ...] | None) -> list[T]:
    """Return *value* as a list: ``None`` is empty, scalars become singletons."""

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
