"""Monitoring declarations.

``Monitoring`` tells how an appliance encodes its telemetry and, for
ThinQ2 models, how logical monitoring names map onto ``Value`` keys.
``MonitoringValue`` is the legacy per-property label table.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator

from pythinq._constants import MONITORING_BINARY_BYTE, MONITORING_BINARY_HEX, MONITORING_THINQ2
from pythinq.ingestion.normalize import safe_int
from pythinq.models._base import ThinqBaseModel

_logger = logging.getLogger(__name__)


class ProtocolAlias(ThinqBaseModel):
    """List-form ThinQ2 protocol entry mapping ``super_set`` onto a ``Value`` key."""

    super_set: str | None = None
    value: str | None = None
    comment: str | None = Field(default=None, validation_alias="_comment")


class ByteFieldSpec(ThinqBaseModel):
    """Byte range of one field in a binary telemetry frame.

    ``start_byte`` and ``length`` are ``None`` when the document carries
    something that is not an integer; such fields decode to the missing
    marker.
    """

    value: str
    start_byte: int | None = None
    length: int | None = None

    @field_validator("start_byte", "length", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return safe_int(value)


class MonitoringDeclaration(ThinqBaseModel):
    """The ``Monitoring`` section: telemetry encoding plus its protocol table.

    ``protocol`` is kept as written because its shape depends on ``type``:
    a flat alias mapping or a list of :class:`ProtocolAlias` for ThinQ2,
    a list of :class:`ByteFieldSpec` for the binary encodings.  Any other
    shape yields neither aliases nor fields.
    """

    type: Any = None
    protocol: Any = None

    @property
    def is_thinq2(self) -> bool:
        return self.type == MONITORING_THINQ2

    @property
    def is_binary(self) -> bool:
        return self.type in (MONITORING_BINARY_BYTE, MONITORING_BINARY_HEX)

    def aliases(self) -> list[ProtocolAlias]:
        """List-form protocol entries; empty for a flat or missing protocol."""
        if not isinstance(self.protocol, list):
            return []
        entries: list[ProtocolAlias] = []
        for entry in self.protocol:
            if not isinstance(entry, dict):
                continue
            try:
                entries.append(ProtocolAlias.model_validate(entry))
            except ValidationError:
                _logger.debug("Skipping malformed protocol alias %r", entry)
        return entries

    def alias_for(self, name: str) -> str | None:
        """Return the ``Value`` key the protocol maps *name* onto, if any."""
        if isinstance(self.protocol, dict):
            target = self.protocol.get(name)
            return target if isinstance(target, str) else None
        for entry in self.aliases():
            if entry.super_set == name:
                return entry.value
        return None

    def byte_fields(self) -> list[ByteFieldSpec]:
        """Binary field layout in declaration order.

        Entries without a field name cannot be reported and are skipped.
        """
        if not isinstance(self.protocol, list):
            return []
        fields: list[ByteFieldSpec] = []
        for entry in self.protocol:
            if not isinstance(entry, dict):
                _logger.debug("Skipping non-mapping binary protocol entry %r", entry)
                continue
            try:
                fields.append(ByteFieldSpec.model_validate(entry))
            except ValidationError:
                _logger.debug("Skipping binary protocol entry without field name: %r", entry)
        return fields


class MonitoringValueDefinition(ThinqBaseModel):
    """Legacy ``MonitoringValue[name]`` entry.

    ``value_mapping`` maps a raw code onto ``{"index": ..., "label": ...}``;
    when it is not a mapping nothing translates.
    """

    data_type: Any = None
    value_mapping: Any = None

    def label_for(self, code: Any) -> Any:
        if not isinstance(self.value_mapping, dict):
            return None
        entry = self.value_mapping.get(str(code))
        if not isinstance(entry, dict):
            return None
        return entry.get("label")

    def code_for(self, label: Any) -> str | None:
        if not isinstance(self.value_mapping, dict):
            return None
        for code, entry in self.value_mapping.items():
            if isinstance(entry, dict) and entry.get("label") == label:
                return code
        return None
