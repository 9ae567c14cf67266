from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

from docchunk.decomposition.archive import read_entry_text


def _archive(entries: dict[str, bytes]) -> ZipFile:
    buffer = BytesIO()
    with ZipFile(buffer, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    buffer.seek(0)
    return ZipFile(buffer, "r")


def test_exact_entry_path_is_read_as_text() -> None:
    with _archive({"OEBPS/ch1.xhtml": "<p>Привет</p>".encode("utf-8")}) as archive:
        assert read_entry_text(archive, "OEBPS/ch1.xhtml") == "<p>Привет</p>"


def test_percent_encoded_path_resolves_to_decoded_entry() -> None:
    with _archive({"OEBPS/chapter one.xhtml": b"<p>spaced</p>"}) as archive:
        encoded = read_entry_text(archive, "OEBPS/chapter%20one.xhtml")
        decoded = read_entry_text(archive, "OEBPS/chapter one.xhtml")

    assert encoded == "<p>spaced</p>"
    assert encoded == decoded


def test_exact_match_wins_over_decoded_variant() -> None:
    entries = {"a%20b.xhtml": b"literal", "a b.xhtml": b"decoded"}
    with _archive(entries) as archive:
        assert read_entry_text(archive, "a%20b.xhtml") == "literal"


def test_missing_entry_reports_not_found() -> None:
    with _archive({"present.xhtml": b"x"}) as archive:
        assert read_entry_text(archive, "absent.xhtml") is None
        assert read_entry_text(archive, "absent%20file.xhtml") is None


def test_byte_order_mark_is_dropped() -> None:
    with _archive({"bom.xml": b"\xef\xbb\xbf<container/>"}) as archive:
        assert read_entry_text(archive, "bom.xml") == "<container/>"
