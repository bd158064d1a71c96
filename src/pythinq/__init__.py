"""pythinq - Device-model resolution and telemetry decoding for ThinQ appliances."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pythinq")
except PackageNotFoundError:
    __version__ = "0+local"
from pythinq.config import ModelConfig
from pythinq.device_model import DeviceModel
from pythinq.exceptions import DeviceModelError, ThinqError, UnsupportedValueTypeError
from pythinq.ingestion.monitor import MISSING, decode_monitor, decode_monitor_binary, decode_monitor_json
from pythinq.models import (
    BitValue,
    ByteFieldSpec,
    DeviceModelDocument,
    EnumValue,
    ModelInfo,
    MonitoringDeclaration,
    MonitoringValueDefinition,
    ProtocolAlias,
    RangeValue,
    RawValueDefinition,
    ReferenceValue,
    StringCommentValue,
    ValueDescriptor,
    ValueType,
)
from pythinq.resolver import ModelResolver

__all__ = [
    "__version__",
    "BitValue",
    "ByteFieldSpec",
    "DeviceModel",
    "DeviceModelDocument",
    "DeviceModelError",
    "EnumValue",
    "MISSING",
    "ModelConfig",
    "ModelInfo",
    "ModelResolver",
    "MonitoringDeclaration",
    "MonitoringValueDefinition",
    "ProtocolAlias",
    "RangeValue",
    "RawValueDefinition",
    "ReferenceValue",
    "StringCommentValue",
    "ThinqError",
    "UnsupportedValueTypeError",
    "ValueDescriptor",
    "ValueType",
    "decode_monitor",
    "decode_monitor_binary",
    "decode_monitor_json",
]
