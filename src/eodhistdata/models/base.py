"""Shared pydantic configuration for response models."""

from __future__ import annotations

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel, to_pascal

# Validate from the service's JSON keys, construct from attribute names
RECORD_CONFIG = ConfigDict(validate_by_name=True, validate_by_alias=True)

CAMEL_CONFIG = ConfigDict(
    validate_by_name=True, validate_by_alias=True, alias_generator=to_camel,
)

PASCAL_CONFIG = ConfigDict(
    validate_by_name=True, validate_by_alias=True, alias_generator=to_pascal,
)
