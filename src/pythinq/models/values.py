"""Value descriptors and raw value definitions.

A device model's ``Value`` section describes each property with one of
two field-naming dialects::

    {"type": "Enum", "option": {"0": "OFF", "1": "ON"}, "default": "0"}
    {"data_type": "enum", "value_mapping": {"0": "OFF", "1": "ON"}}

:class:`RawValueDefinition` folds both dialects onto one canonical shape
at validation time, so the resolver never has to sniff field names.
The resolver then turns a definition into exactly one of the
:data:`ValueDescriptor` variants.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from pythinq.models._base import ThinqBaseModel, first_present


class ValueType(enum.StrEnum):
    """Discriminator of a resolved :data:`ValueDescriptor`."""

    BIT = "Bit"
    ENUM = "Enum"
    RANGE = "Range"
    REFERENCE = "Reference"
    STRING_COMMENT = "StringComment"


class RawType(enum.StrEnum):
    """Lower-cased type tags accepted in raw value definitions."""

    BIT = "bit"
    ENUM = "enum"
    RANGE = "range"
    REFERENCE = "reference"
    STRING = "string"


# ------------------------------------------------------------------
# Resolved descriptors
# ------------------------------------------------------------------


class BitValue(ThinqBaseModel):
    """Bit-field property; ``options`` maps start-bit offset to its label set."""

    type: Literal[ValueType.BIT] = ValueType.BIT
    options: dict[str, Any] = Field(default_factory=dict)


class EnumValue(ThinqBaseModel):
    """Enumerated property; ``options`` maps raw code to label."""

    type: Literal[ValueType.ENUM] = ValueType.ENUM
    options: dict[str, Any] = Field(default_factory=dict)

    def label_for(self, code: Any) -> Any:
        return self.options.get(str(code))

    def code_for(self, label: Any) -> str | None:
        # Duplicate labels: the last code wins.
        inverted = {v: k for k, v in self.options.items() if _hashable(v)}
        if not _hashable(label):
            return None
        return inverted.get(label)


class RangeValue(ThinqBaseModel):
    """Numeric property bounded by ``min``/``max`` and advancing by ``step``.

    Bounds are kept as written, so a model that declares ``"min": "LOW"``
    yields exactly that.
    """

    type: Literal[ValueType.RANGE] = ValueType.RANGE
    min: Any = None
    max: Any = None
    step: Any = 1


class ReferenceValue(ThinqBaseModel):
    """Property whose options live in another top-level section of the document.

    ``reference`` holds the referenced section itself, looked up when the
    property is resolved; ``None`` when the section does not exist.
    """

    type: Literal[ValueType.REFERENCE] = ValueType.REFERENCE
    reference: Any = None


class StringCommentValue(ThinqBaseModel):
    """Free-form string property documented only by its ``_comment``."""

    type: Literal[ValueType.STRING_COMMENT] = ValueType.STRING_COMMENT
    comment: str


ValueDescriptor = Annotated[
    BitValue | EnumValue | RangeValue | ReferenceValue | StringCommentValue,
    Field(discriminator="type"),
]
"""Tagged union of the five resolved value kinds."""


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


# ------------------------------------------------------------------
# Raw definitions
# ------------------------------------------------------------------


class RawValueDefinition(ThinqBaseModel):
    """One ``Value[name]`` entry, normalized across both naming dialects.

    Parameters
    ----------
    value_type : Any
        ``type`` or ``data_type``, exactly as written in the document.
    option : Any
        ``option`` as written; used by ``bit`` and ``reference`` definitions.
    enum_options : Any
        ``option`` or ``value_mapping``, whichever is set first.
    range_options : Any
        ``option`` or ``value_validation``, whichever is set first.
    comment : Any
        The ``_comment`` field.
    default : Any
        The ``default`` field.
    raw : Any
        The entry as written.  An entry that is not a mapping keeps every
        other field ``None`` and so has no type tag.
    """

    value_type: Any = None
    option: Any = None
    enum_options: Any = None
    range_options: Any = None
    comment: Any = None
    default: Any = None
    raw: Any = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_dialects(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return {"raw": values}
        if "raw" in values and "value_type" in values:
            return values
        return {
            "value_type": first_present(values, "type", "data_type"),
            "option": values.get("option"),
            "enum_options": first_present(values, "option", "value_mapping"),
            "range_options": first_present(values, "option", "value_validation"),
            "comment": values.get("_comment"),
            "default": values.get("default"),
            "raw": values,
        }

    @property
    def normalized_type(self) -> RawType | None:
        """Lower-cased type tag, or ``None`` when missing or unknown."""
        if not isinstance(self.value_type, str):
            return None
        try:
            return RawType(self.value_type.lower())
        except ValueError:
            return None
