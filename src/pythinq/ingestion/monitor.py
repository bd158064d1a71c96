"""Monitor telemetry decoding.

Appliances report state in one of three encodings, chosen by the device
model's ``Monitoring.type``:

* ``BINARY(BYTE)`` - a byte frame; every field is a big-endian integer
  spanning ``length`` bytes from ``startByte``.
* ``BINARY(HEX)`` - the same layout, but each element carries 16 bits.
* anything else - UTF-8 JSON text.

Decoding never raises.  Text that is not JSON is handed back untouched,
and a binary field that cannot be read decodes to ``None`` without
affecting its neighbours.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Final

from pythinq._constants import (
    BYTE_SHIFT_WIDTH,
    HEX_SHIFT_WIDTH,
    MONITORING_BINARY_BYTE,
    MONITORING_BINARY_HEX,
)
from pythinq.ingestion.normalize import as_text, byte_at
from pythinq.models.monitoring import ByteFieldSpec, MonitoringDeclaration

_logger = logging.getLogger(__name__)

MISSING: Final = None
"""Decoded value of a binary field that could not be read."""


def decode_monitor(declaration: MonitoringDeclaration | None, raw: Any) -> Any:
    """Decode *raw* telemetry according to *declaration*.

    Returns a ``{field: value}`` mapping for binary encodings, the parsed
    JSON value for JSON telemetry, or *raw* itself when it is not JSON.
    """
    if declaration is not None:
        if declaration.type == MONITORING_BINARY_BYTE:
            return decode_monitor_binary(declaration, raw, shift_width=BYTE_SHIFT_WIDTH)
        if declaration.type == MONITORING_BINARY_HEX:
            return decode_monitor_binary(declaration, raw, shift_width=HEX_SHIFT_WIDTH)

    return decode_monitor_json(raw)


def decode_monitor_json(raw: Any) -> Any:
    """Parse UTF-8 JSON telemetry; return *raw* unchanged when it is not JSON."""
    text = as_text(raw)
    if text is None:
        _logger.debug("Monitor payload of type %s is not text; passing through", type(raw).__name__)
        return raw
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        _logger.debug("Monitor payload is not JSON; passing through")
        return raw


def decode_monitor_binary(
    declaration: MonitoringDeclaration,
    raw: Any,
    *,
    shift_width: int = BYTE_SHIFT_WIDTH,
) -> dict[str, str | None]:
    """Decode a binary frame into ``{field: decimal string}``.

    Fields appear in declaration order.  A field whose bytes cannot all be
    read maps to :data:`MISSING`.
    """
    decoded: dict[str, str | None] = {}
    for field in declaration.byte_fields():
        decoded[field.value] = _decode_field(field, raw, shift_width)
    return decoded


def _decode_field(field: ByteFieldSpec, raw: Any, shift_width: int) -> str | None:
    if field.start_byte is None or field.length is None or field.length < 0:
        _logger.debug("Binary field %r has no usable byte range", field.value)
        return MISSING

    acc = 0
    for index in range(field.start_byte, field.start_byte + field.length):
        byte = byte_at(raw, index)
        if byte is None:
            _logger.debug("Binary field %r: byte %d unreadable", field.value, index)
            return MISSING
        acc = (acc << shift_width) + byte
    return str(acc)
