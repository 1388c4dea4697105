from __future__ import annotations

from pydantic import ValidationError

from schema_builder.config.models import BuilderConfig


class ConfigError(ValueError):
    # Raised for invalid builder config (fail fast).
    pass


def validate_builder_config(raw: object) -> BuilderConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return BuilderConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid builder config: {exc}") from exc
