"""Resolve the container descriptor and package document of an EPUB."""

from __future__ import annotations

import logging
import posixpath
import re
from pathlib import Path
from zipfile import ZipFile

from lxml import etree

from docchunk.decomposition.archive import read_entry_text
from docchunk.decomposition.errors import InvalidArchiveError
from docchunk.decomposition.models import PackageResource
from docchunk.decomposition.normalization import to_array

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"

_MARKUP_SUFFIX_RE = re.compile(r"\.(xhtml|html|htm)$", re.IGNORECASE)


def _parse_markup(text: str, *, source: Path, entry: str) -> etree._Element:
    parser = etree.XMLParser(
        encoding="utf-8", resolve_entities=False, no_network=True, load_dtd=False, recover=True
    )
    try:
        root = etree.fromstring(text.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise InvalidArchiveError(source, f"Invalid EPUB: malformed {entry}: {exc}") from exc
    if root is None:
        raise InvalidArchiveError(source, f"Invalid EPUB: malformed {entry}")
    return root


def _attr(node: etree._Element, name: str) -> str:
    return (node.get(name) or "").strip()


def is_markup_resource(path: str, media_type: str) -> bool:
    return "html" in media_type.lower() or bool(_MARKUP_SUFFIX_RE.search(path))


def resolve_entry_path(package_dir: str, href: str) -> str:
    """Join *href* onto the package directory with archive (POSIX) semantics."""

    joined = posixpath.join(package_dir, href) if package_dir else href
    return posixpath.normpath(joined)


def find_package_path(archive: ZipFile, source: Path) -> str:
    container_xml = read_entry_text(archive, CONTAINER_PATH)
    if container_xml is None:
        raise InvalidArchiveError(source, f"Invalid EPUB: {CONTAINER_PATH} not found")

    root = _parse_markup(container_xml, source=source, entry=CONTAINER_PATH)
    rootfiles = to_array(
        root.xpath(
            "/*[local-name()='container']/*[local-name()='rootfiles']/*[local-name()='rootfile']"
        )
    )
    package_path = _attr(rootfiles[0], "full-path") if rootfiles else ""
    if not package_path:
        raise InvalidArchiveError(source, "Invalid EPUB: package rootfile path missing")
    return package_path


def resolve_reading_order(archive: ZipFile, source: Path) -> list[PackageResource]:
    """Return spine resources in reading order, resolved to archive paths.

    Spine entries without an idref, with an idref missing from the manifest,
    or whose manifest item has no href are skipped.
    """

    package_path = find_package_path(archive, source)
    package_xml = read_entry_text(archive, package_path)
    if package_xml is None:
        raise InvalidArchiveError(source, f"Invalid EPUB: package file not found: {package_path}")

    root = _parse_markup(package_xml, source=source, entry=package_path)
    items = to_array(root.xpath("/*[local-name()='package']/*[local-name()='manifest']/*[local-name()='item']"))
    itemrefs = to_array(root.xpath("/*[local-name()='package']/*[local-name()='spine']/*[local-name()='itemref']"))

    manifest_by_id: dict[str, etree._Element] = {}
    for item in items:
        item_id = _attr(item, "id")
        if item_id and _attr(item, "href"):
            manifest_by_id[item_id] = item

    package_dir = posixpath.dirname(package_path)
    if package_dir == ".":
        package_dir = ""

    resources: list[PackageResource] = []
    for itemref in itemrefs:
        idref = _attr(itemref, "idref")
        if not idref:
            logger.debug("Skipping spine itemref without idref")
            continue

        item = manifest_by_id.get(idref)
        if item is None:
            logger.debug("Skipping spine itemref %s: no manifest item with an href", idref)
            continue

        entry_path = resolve_entry_path(package_dir, _attr(item, "href"))
        media_type = _attr(item, "media-type")
        resources.append(
            PackageResource(
                id=idref,
                path=entry_path,
                media_type=media_type,
                is_markup=is_markup_resource(entry_path, media_type),
            )
        )

    return resources
