"""Custom exception hierarchy for pythinq."""

from __future__ import annotations


class ThinqError(Exception):
    """Base exception for all pythinq errors."""


class DeviceModelError(ThinqError):
    """The device-model document is structurally invalid."""


class UnsupportedValueTypeError(DeviceModelError):
    """A value definition declares a type tag the resolver does not know.

    Raised instead of returning ``None`` because the control layer picks
    its encoding from the resolved type.  ``raw_type`` is the tag exactly as
    it appears in the document (``None`` when the definition has no tag).
    """

    def __init__(
        self,
        raw_type: object,
        *,
        name: str = "",
    ) -> None:
        self.raw_type = raw_type
        self.name = name
        if raw_type is None:
            message = f"Missing value type for {name!r}" if name else "Missing value type"
        else:
            message = f"Unsupported value type: {raw_type}"
            if name:
                message = f"{message} (property {name!r})"
        super().__init__(message)
