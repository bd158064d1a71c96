"""Model resolver.

Maps a property name onto a typed :data:`~pythinq.models.ValueDescriptor`.
A name is looked up directly in ``Value`` first; ThinQ2 models may instead
route it through their monitoring protocol, either a flat alias mapping::

    "protocol": {"state": "State", "remainTimeHour": "Remain_Time_H"}

or a list of entries matched on ``superSet``::

    "protocol": [{"superSet": "hoodState.ventLevel", "value": "VentLevel"}]
"""

from __future__ import annotations

import logging
from typing import Any

from pythinq._constants import DEFAULT_RANGE_STEP
from pythinq.exceptions import UnsupportedValueTypeError
from pythinq.models.document import DeviceModelDocument
from pythinq.models.values import (
    BitValue,
    EnumValue,
    RangeValue,
    RawType,
    RawValueDefinition,
    ReferenceValue,
    StringCommentValue,
    ValueDescriptor,
)

_logger = logging.getLogger(__name__)


class ModelResolver:
    """Resolve property names of one device-model document.

    Stateless apart from the (frozen) document; every call derives its
    result afresh, so a resolver may be shared between threads.
    """

    def __init__(self, document: DeviceModelDocument) -> None:
        self._document = document

    @property
    def document(self) -> DeviceModelDocument:
        return self._document

    def definition(self, name: str) -> RawValueDefinition | None:
        """Find the raw definition for *name*, following ThinQ2 aliases."""
        definition = self._document.definition(name)
        if definition is not None:
            return definition

        monitoring = self._document.monitoring
        if monitoring is None or not monitoring.is_thinq2:
            return None

        target = monitoring.alias_for(name)
        if target is None:
            return None
        _logger.debug("Resolved %r through ThinQ2 protocol alias %r", name, target)
        return self._document.definition(target)

    def resolve(self, name: str) -> ValueDescriptor | None:
        """Resolve *name* to a value descriptor.

        Returns ``None`` when the property is not modelled, or when it is a
        ``string`` definition without a ``_comment``.

        Options that do not fit a known kind never raise: enum options
        that are not a mapping resolve to an empty table and range bounds
        are passed through as written.

        Raises
        ------
        UnsupportedValueTypeError
            The definition's type tag is missing or not a known kind.
        """
        definition = self.definition(name)
        if definition is None:
            _logger.debug("No value definition for %r", name)
            return None
        return self._build(name, definition)

    def _build(self, name: str, definition: RawValueDefinition) -> ValueDescriptor | None:
        raw_type = definition.normalized_type

        if raw_type is RawType.ENUM:
            return EnumValue(options=_enum_options(name, definition.enum_options))

        if raw_type is RawType.RANGE:
            bounds = definition.range_options if isinstance(definition.range_options, dict) else {}
            return RangeValue(
                min=bounds.get("min"),
                max=bounds.get("max"),
                step=bounds.get("step") or DEFAULT_RANGE_STEP,
            )

        if raw_type is RawType.BIT:
            return BitValue(options=_bit_options(definition.option))

        if raw_type is RawType.REFERENCE:
            option = definition.option
            ref = option[0] if isinstance(option, (list, tuple)) and option else None
            return ReferenceValue(reference=self._document.section(ref))

        if raw_type is RawType.STRING:
            if isinstance(definition.comment, str):
                return StringCommentValue(comment=definition.comment)
            return None

        raise UnsupportedValueTypeError(definition.value_type, name=name)


def _enum_options(name: str, options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, dict):
        _logger.debug("Enum options of %r are not a mapping: %r", name, options)
        return {}
    return {str(code): label for code, label in options.items()}


def _bit_options(option: Any) -> dict[str, Any]:
    """Key every bit entry's ``values`` by its ``startbit``.

    Entries sharing a ``startbit`` overwrite each other; the last one wins.
    """
    if isinstance(option, dict):
        entries = list(option.values())
    elif isinstance(option, list):
        entries = option
    else:
        entries = []

    options: dict[str, Any] = {}
    for entry in entries:
        if not isinstance(entry, dict) or entry.get("startbit") is None:
            continue
        options[str(entry["startbit"])] = entry.get("values")
    return options
