"""Device model facade.

:class:`DeviceModel` wraps one vendor device-model document and answers
the questions a device-control client asks of it: what kind of value a
property holds, how enum labels translate to raw codes and back, and how
to decode monitoring telemetry.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pythinq._constants import BYTE_SHIFT_WIDTH
from pythinq._redact import redact_for_log
from pythinq.config import ModelConfig
from pythinq.exceptions import DeviceModelError
from pythinq.ingestion.monitor import decode_monitor, decode_monitor_binary
from pythinq.models.document import DeviceModelDocument, ModelInfo
from pythinq.models.values import EnumValue, ValueDescriptor
from pythinq.resolver import ModelResolver

_logger = logging.getLogger(__name__)


class DeviceModel:
    """Metadata, value definitions and monitoring layout of one appliance model.

    Parameters
    ----------
    data : Mapping or DeviceModelDocument
        The device-model document, either as loaded from JSON or already
        validated.
    config : ModelConfig or None
        Library behaviour knobs.  Defaults to ``ModelConfig()``.

    Raises
    ------
    DeviceModelError
        *data* is not a mapping of top-level sections.  Malformed
        content inside a section never fails construction.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | DeviceModelDocument,
        *,
        config: ModelConfig | None = None,
    ) -> None:
        if isinstance(data, DeviceModelDocument):
            document = data
        else:
            try:
                document = DeviceModelDocument.model_validate(data)
            except ValidationError as exc:
                raise DeviceModelError(f"Invalid device model: {exc}") from exc
        self._document = document
        self._config = config or ModelConfig()
        self._resolver = ModelResolver(document)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, config: ModelConfig | None = None) -> DeviceModel:
        """Build a model from a parsed JSON document."""
        return cls(data, config=config)

    @property
    def document(self) -> DeviceModelDocument:
        return self._document

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def info(self) -> ModelInfo | None:
        return copy.deepcopy(self._document.info)

    @property
    def monitoring_value(self) -> dict[str, Any]:
        """A copy of the legacy ``MonitoringValue`` section (empty when absent)."""
        return copy.deepcopy(self._document.monitoring_value or {})

    # ------------------------------------------------------------------
    # Value resolution
    # ------------------------------------------------------------------

    def value(self, name: str) -> ValueDescriptor | None:
        """Resolve *name* to a value descriptor; see :meth:`ModelResolver.resolve`."""
        return self._resolver.resolve(name)

    def default(self, name: str) -> Any:
        """Return the ``default`` of ``Value[name]``, or ``None``."""
        definition = self._document.definition(name)
        if definition is None:
            return None
        return definition.default

    def _enum(self, key: str) -> EnumValue | None:
        try:
            descriptor = self._resolver.resolve(key)
        except DeviceModelError as exc:
            _logger.debug("Treating %r as non-enum: %s", key, exc)
            return None
        return descriptor if isinstance(descriptor, EnumValue) else None

    def enum_value(self, key: str, label: Any) -> str | None:
        """Translate an enum *label* of *key* back to its raw code."""
        descriptor = self._enum(key)
        if descriptor is None:
            return None
        return descriptor.code_for(label)

    def enum_name(self, key: str, raw_code: Any) -> Any:
        """Translate a raw enum code of *key* to its label."""
        descriptor = self._enum(key)
        if descriptor is None:
            return None
        return descriptor.label_for(raw_code)

    # ------------------------------------------------------------------
    # Monitoring lookups
    # ------------------------------------------------------------------

    def monitoring_value_mapping(self, key: str) -> dict[str, Any] | None:
        """Return the code table of *key*.

        Enum options from ``Value`` take precedence; the legacy
        ``MonitoringValue[key].valueMapping`` is the fallback.  The result
        is a copy and may be modified freely.
        """
        if self._document.value is not None:
            descriptor = self._enum(key)
            if descriptor is not None:
                return descriptor.options

        legacy = self._document.monitoring_definition(key)
        if legacy is None or not isinstance(legacy.value_mapping, dict):
            return None
        return legacy.value_mapping

    def lookup_monitor_value(self, key: str, raw_code: Any, default: Any = None) -> Any:
        """Translate a monitored raw code of *key* to its label, or *default*."""
        if self._document.value is not None:
            return self.enum_name(key, raw_code) or default

        legacy = self._document.monitoring_definition(key)
        if legacy is None:
            return default
        return legacy.label_for(raw_code) or default

    def lookup_monitor_name(self, key: str, label: Any) -> str | None:
        """Translate a monitored *label* of *key* back to its raw code."""
        if self._document.value is not None:
            return self.enum_value(key, label)

        legacy = self._document.monitoring_definition(key)
        if legacy is None:
            return None
        return legacy.code_for(label)

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    def decode_monitor(self, raw: Any) -> Any:
        """Decode raw monitoring telemetry; see :func:`pythinq.ingestion.monitor.decode_monitor`."""
        if self._config.trace_enabled:
            _logger.debug(
                "Monitor payload: %s",
                redact_for_log(raw, max_string=self._config.trace_max_string),
            )
        return decode_monitor(self._document.monitoring, raw)

    def decode_monitor_binary(self, raw: Any, shift_width: int = BYTE_SHIFT_WIDTH) -> dict[str, str | None]:
        """Decode *raw* as a binary frame regardless of the declared encoding."""
        monitoring = self._document.monitoring
        if monitoring is None:
            return {}
        return decode_monitor_binary(monitoring, raw, shift_width=shift_width)
