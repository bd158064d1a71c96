"""Library configuration for pythinq."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ModelConfig:
    """Behaviour knobs for :class:`~pythinq.device_model.DeviceModel`.

    Parameters
    ----------
    trace_enabled : bool
        Log every telemetry payload handed to ``decode_monitor`` at DEBUG
        level.  Payloads are redacted and truncated before logging.
    trace_max_string : int
        Strings longer than this are truncated in traced payloads.
    """

    trace_enabled: bool = False
    trace_max_string: int = 512

    @classmethod
    def from_env(cls, **overrides: Any) -> ModelConfig:
        """Create configuration from ``PYTHINQ_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("PYTHINQ_TRACE_ENABLED"), False)

        max_string_env = env.get("PYTHINQ_TRACE_MAX_STRING")
        if max_string_env is not None and "trace_max_string" not in overrides:
            config_kwargs["trace_max_string"] = int(max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
