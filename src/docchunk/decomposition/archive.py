"""Text lookup for entries of a packaged (ZIP) archive."""

from __future__ import annotations

import logging
from urllib.parse import unquote
from zipfile import ZipFile

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)


def _decode_entry(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    best = from_bytes(raw).best()
    if best and best.encoding:
        return raw.decode(best.encoding, errors="replace")
    return raw.decode("utf-8", errors="replace")


def _read_member(archive: ZipFile, name: str) -> bytes | None:
    try:
        return archive.read(name)
    except KeyError:
        return None


def read_entry_text(archive: ZipFile, entry_path: str) -> str | None:
    """Return decoded text for *entry_path*, or None when no entry matches.

    Archives sometimes declare percent-encoded names (``my%20file.xhtml``)
    while storing the decoded name, so a second lookup is made with the
    percent-decoded path when the first one misses.
    """

    raw = _read_member(archive, entry_path)
    if raw is None and "%" in entry_path:
        decoded_path = unquote(entry_path)
        raw = _read_member(archive, decoded_path)
        if raw is not None:
            logger.debug("Resolved %s via decoded entry name %s", entry_path, decoded_path)
    if raw is None:
        return None
    return _decode_entry(raw)
