"""Markup-to-text conversion and reading-order section extraction."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable
from zipfile import ZipFile

from bs4 import BeautifulSoup

from docchunk.decomposition.archive import read_entry_text
from docchunk.decomposition.errors import EmptyDocumentError
from docchunk.decomposition.models import PackageResource, Section
from docchunk.decomposition.normalization import normalize_text

logger = logging.getLogger(__name__)

_SKIPPED_TAGS = ["img", "svg", "script", "style"]
_BLOCK_TAGS = [
    "address",
    "article",
    "aside",
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "figcaption",
    "figure",
    "footer",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
    "hr",
    "li",
    "nav",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "tr",
    "ul",
]
_INLINE_SPACE_RE = re.compile(r"[ \t\f\v]+")
_PRE_TOKEN = "\ue000pre{}\ue000"


def html_to_text(markup: str) -> str:
    """Render markup as plain text without wrapping.

    Source newlines survive, ``<br>`` becomes a newline, block elements are
    separated by a blank line and images/vector graphics contribute nothing.
    XHTML goes through the HTML parser too so named entities such as
    ``&nbsp;`` decode and unclosed void tags keep the text after them.
    """

    soup = BeautifulSoup(markup, "lxml")
    for tag in soup.find_all(_SKIPPED_TAGS):
        tag.decompose()

    root = soup.body or soup
    for br in root.find_all("br"):
        br.replace_with("\n")

    preformatted: list[str] = []
    for pre in root.find_all("pre"):
        if pre.find_parent("pre") is not None:
            continue
        preformatted.append(pre.get_text())
        pre.replace_with(f"\n\n{_PRE_TOKEN.format(len(preformatted) - 1)}\n\n")

    for block in root.find_all(_BLOCK_TAGS):
        block.insert_before("\n\n")
        block.insert_after("\n\n")

    text = _INLINE_SPACE_RE.sub(" ", root.get_text())
    text = "\n".join(line.strip() for line in text.split("\n"))
    for index, block_text in enumerate(preformatted):
        text = text.replace(_PRE_TOKEN.format(index), block_text)
    return text


def extract_sections(
    archive: ZipFile,
    resources: Iterable[PackageResource],
    source: Path,
) -> list[Section]:
    """Convert markup resources to normalized sections, dropping empty ones."""

    sections: list[Section] = []
    for resource in resources:
        if not resource.is_markup:
            logger.debug("Skipping non-markup resource %s (%s)", resource.path, resource.media_type)
            continue

        markup = read_entry_text(archive, resource.path)
        if markup is None:
            logger.debug("Skipping unreadable resource %s", resource.path)
            continue

        text = normalize_text(html_to_text(markup))
        if not text:
            logger.debug("Skipping resource without text %s", resource.path)
            continue

        sections.append(Section(source_path=resource.path, text=text))

    if not sections:
        raise EmptyDocumentError(source, "No readable spine text sections found in EPUB")
    return sections
