"""Data models for device-model documents and resolved values."""

from pythinq.models._base import ThinqBaseModel
from pythinq.models.document import DeviceModelDocument, ModelInfo
from pythinq.models.monitoring import (
    ByteFieldSpec,
    MonitoringDeclaration,
    MonitoringValueDefinition,
    ProtocolAlias,
)
from pythinq.models.values import (
    BitValue,
    EnumValue,
    RangeValue,
    RawType,
    RawValueDefinition,
    ReferenceValue,
    StringCommentValue,
    ValueDescriptor,
    ValueType,
)

__all__ = [
    "BitValue",
    "ByteFieldSpec",
    "DeviceModelDocument",
    "EnumValue",
    "ModelInfo",
    "MonitoringDeclaration",
    "MonitoringValueDefinition",
    "ProtocolAlias",
    "RangeValue",
    "RawType",
    "RawValueDefinition",
    "ReferenceValue",
    "StringCommentValue",
    "ThinqBaseModel",
    "ValueDescriptor",
    "ValueType",
]
