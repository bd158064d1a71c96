"""Normalization helpers.

Centralizes tolerant parsing of raw telemetry and device-model fragments.
"""

from __future__ import annotations

import math
from typing import Any


def safe_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool) or value == "":
        return None
    if isinstance(value, int):
        return value
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result) or not result.is_integer():
        return None
    return int(result)


def as_text(raw: Any) -> str | None:
    """Return *raw* as text when it is a text or byte buffer, else ``None``.

    Byte buffers are decoded as UTF-8; undecodable buffers yield ``None``.
    """

    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def byte_at(raw: Any, index: int) -> int | None:
    """Read one element of a byte sequence as a non-negative integer.

    Returns ``None`` for out-of-range (including negative) indices and for
    elements that are not integers.
    """

    if index < 0:
        return None
    try:
        value = raw[index]
    except (IndexError, KeyError, TypeError):
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value
