"""Device-model document."""

from __future__ import annotations

import copy
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_pascal

from pythinq.models._base import ThinqBaseModel
from pythinq.models.monitoring import MonitoringDeclaration, MonitoringValueDefinition
from pythinq.models.values import RawValueDefinition

_logger = logging.getLogger(__name__)


class ModelInfo(ThinqBaseModel):
    """Product metadata from the ``Info`` section.

    Opaque to the resolver: values are kept exactly as written and unknown
    keys are preserved in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    product_type: Any = None
    product_code: Any = None
    country: Any = None
    model_type: Any = None
    model: Any = None
    model_name: Any = None
    network_type: Any = None
    version: Any = None


class DeviceModelDocument(BaseModel):
    """A vendor device model.

    Top-level keys are PascalCase (``Info``, ``Value``, ``MonitoringValue``,
    ``Monitoring``).  Any other top-level section is kept verbatim and is
    reachable through :meth:`section`, which is how ``Reference`` values
    are resolved.

    ``Value`` and ``MonitoringValue`` entries stay as written and are
    validated one at a time when they are looked up, so a malformed entry
    only affects its own property.  Section contents are shared with the
    caller's input and must not be mutated; :meth:`section` and
    :meth:`definition` hand out copies.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_pascal,
    )

    info: ModelInfo | None = None
    value: dict[str, Any] | None = None
    monitoring_value: dict[str, Any] | None = None
    monitoring: MonitoringDeclaration | None = None

    @field_validator("info", "value", "monitoring_value", "monitoring", mode="before")
    @classmethod
    def _drop_non_mapping_sections(cls, section: Any) -> Any:
        if section is not None and not isinstance(section, (dict, BaseModel)):
            _logger.debug("Ignoring non-mapping section of type %s", type(section).__name__)
            return None
        return section

    def section(self, name: Any) -> Any:
        """Return a copy of the top-level section called *name*, or ``None``.

        Typed sections are returned as their parsed models; every other
        section is returned as supplied.
        """
        if not isinstance(name, str):
            return None
        field_name = _TYPED_SECTIONS.get(name)
        if field_name is not None:
            return copy.deepcopy(getattr(self, field_name))
        extra = self.model_extra or {}
        return copy.deepcopy(extra.get(name))

    def definition(self, name: str) -> RawValueDefinition | None:
        """Return ``Value[name]`` without any alias handling."""
        if self.value is None or name not in self.value:
            return None
        return RawValueDefinition.model_validate(copy.deepcopy(self.value[name]))

    def monitoring_definition(self, name: str) -> MonitoringValueDefinition | None:
        """Return ``MonitoringValue[name]``, or ``None`` when absent or not a mapping."""
        if self.monitoring_value is None:
            return None
        entry = self.monitoring_value.get(name)
        if not isinstance(entry, dict):
            return None
        return MonitoringValueDefinition.model_validate(copy.deepcopy(entry))


_TYPED_SECTIONS: dict[str, str] = {
    "Info": "info",
    "Value": "value",
    "MonitoringValue": "monitoring_value",
    "Monitoring": "monitoring",
}
