"""Log-safe renditions of monitoring payloads.

JSON telemetry can carry appliance identifiers and account tokens; binary
frames are unreadable when dumped whole.  :func:`redact_for_log` masks the
former and condenses the latter to a length plus a short hex preview.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_IDENTIFIER_KEYS: frozenset[str] = frozenset(
    {
        "deviceid",
        "userno",
        "macaddress",
        "mac",
        "ssid",
        "token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "password",
    }
)

_FRAME_PREVIEW = 8
_MAX_DEPTH = 20


def redact_for_log(payload: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a monitoring *payload* that is safe to log."""
    frame = _frame_elements(payload)
    if frame is not None:
        return _describe_frame(frame)
    return _scrub(payload, max_string, 0)


def _frame_elements(payload: Any) -> list[int] | None:
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return list(bytes(payload))
    if isinstance(payload, (list, tuple)) and payload:
        if all(isinstance(b, int) and not isinstance(b, bool) and b >= 0 for b in payload):
            return list(payload)
    return None


def _describe_frame(elements: list[int]) -> str:
    preview = " ".join(f"{b:02x}" for b in elements[:_FRAME_PREVIEW])
    if len(elements) > _FRAME_PREVIEW:
        preview += " ..."
    return f"<frame:{len(elements)} [{preview}]>"


def _normalize_key(key: Any) -> str:
    return str(key).lower().replace("_", "")


def _scrub(value: Any, max_string: int, depth: int) -> Any:
    if depth > _MAX_DEPTH:
        return "<max-depth>"
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value
    if value is None or isinstance(value, (int, float, bool)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _describe_frame(list(bytes(value)))
    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if _normalize_key(k) in _IDENTIFIER_KEYS else _scrub(v, max_string, depth + 1)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_scrub(v, max_string, depth + 1) for v in value]
    return repr(value)
