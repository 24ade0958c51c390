from __future__ import annotations

import os
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from numrange.exceptions import ConfigError
from numrange.numeric import NumericRegistry


class RangeOptions(BaseModel):
    """Separators and numeric kind for parsing range expressions.

    Equal separators are accepted here; parse_with reports them as
    SeparatorsMustBeDifferent.
    """

    value_separator: str = ","
    range_separator: str = "-"
    kind: str = "int"

    @field_validator("value_separator", "range_separator")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("separator cannot be empty")
        return value

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, value: str) -> str:
        NumericRegistry.get(value)
        return value


def load_options(
    file_path: str, overrides: dict[str, Any] | None = None
) -> RangeOptions:
    """Load RangeOptions from a YAML file.

    Options may sit at the top level or under a `range:` key:

        range:
          value_separator: ";"
          range_separator: ".."
          kind: i32
    """

    if not os.path.exists(file_path):
        raise ConfigError(f"Config file not found: {file_path}")

    with open(file_path, "r") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must be a mapping (dict) at the top level")

    section = raw.get("range", raw)
    if not isinstance(section, dict):
        raise ConfigError("'range' must be a mapping")

    values = {k: _expand_env(v) for k, v in section.items()}
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    return build_options(values)


def build_options(values: dict[str, Any]) -> RangeOptions:
    """Validate a plain mapping into RangeOptions."""
    try:
        return RangeOptions(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid range options: {e}")


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    return value
