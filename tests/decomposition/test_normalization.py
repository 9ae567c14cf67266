from __future__ import annotations

import pytest

from docchunk.decomposition.normalization import normalize_text, to_array


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a\r\nb", "a\nb"),
        ("a\u00a0b", "a b"),
        ("a   \nb  ", "a\nb"),
        ("a\n\n\n\nb", "a\n\nb"),
        ("a\n\n\n\n\n\nb", "a\n\nb"),
        ("a\n\nb", "a\n\nb"),
        ("  a  ", "a"),
    ],
)
def test_normalize_text_canonicalizes_whitespace(raw: str, expected: str) -> None:
    assert normalize_text(raw) == expected


def test_normalize_text_treats_absent_input_as_empty() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("") == ""
    assert normalize_text(" \r\n \n ") == ""


def test_normalize_text_is_idempotent() -> None:
    samples = [
        "hello\n\nworld",
        "  Title\r\n\r\n\r\n\r\nBody line   \n indented \n\n\n",
        "a \n \n \n b",
        "\t\tx\t\n\n\n\t\ty",
        "line\rwith\rcarriage returns",
    ]

    for sample in samples:
        once = normalize_text(sample)
        assert normalize_text(once) == once


def test_to_array_normalizes_single_and_repeated_values() -> None:
    assert to_array(None) == []
    assert to_array([]) == []
    assert to_array(0) == [0]
    assert to_array("") == [""]
    assert to_array(False) == [False]
    assert to_array({"id": 1}) == [{"id": 1}]
    assert to_array([1, 2, 3]) == [1, 2, 3]
    assert to_array(("a", "b")) == ["a", "b"]
