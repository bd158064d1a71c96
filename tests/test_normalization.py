from __future__ import annotations

import pytest

from pythinq.ingestion.normalize import as_text, byte_at, safe_int


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, 3),
        ("3", 3),
        ("3.0", 3),
        (3.5, None),
        ("", None),
        (None, None),
        (True, None),
        ("nan", None),
        ("inf", None),
        ("abc", None),
    ],
)
def test_safe_int(raw: object, expected: int | None) -> None:
    assert safe_int(raw) == expected


def test_as_text() -> None:
    assert as_text("abc") == "abc"
    assert as_text(b"abc") == "abc"
    assert as_text(memoryview(b"abc")) == "abc"
    assert as_text(b"\xff") is None
    assert as_text(42) is None


def test_byte_at() -> None:
    frame = bytes([0x00, 0x7F, 0xFF])
    assert byte_at(frame, 0) == 0
    assert byte_at(frame, 2) == 255
    assert byte_at(frame, 3) is None
    assert byte_at(frame, -1) is None
    assert byte_at([1, None, -4, True], 1) is None
    assert byte_at([1, None, -4, True], 2) is None
    assert byte_at([1, None, -4, True], 3) is None
    assert byte_at("ab", 0) is None
