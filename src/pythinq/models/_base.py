"""Base model for device-model fragments.

Every pythinq model inherits from :class:`ThinqBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys used by device
  models (``startByte``, ``superSet``, ``valueMapping``) map onto
  snake_case fields.
* ``frozen=True`` because a device model is read-only for its lifetime.
* ``coerce_numbers_to_str`` so numeric codes and labels compare as the
  strings the JSON object keys already are.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ThinqBaseModel(BaseModel):
    """Base for device-model fragments."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        coerce_numbers_to_str=True,
    )


def first_present(values: dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key in *keys* whose value is not ``None``."""
    for key in keys:
        value = values.get(key)
        if value is not None:
            return value
    return None
