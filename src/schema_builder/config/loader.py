from __future__ import annotations

import importlib
from pathlib import Path

import yaml

from schema_builder.config.models import BuilderConfig
from schema_builder.config.validator import ConfigError, validate_builder_config


def load_yaml_config(path: Path) -> dict[str, object]:
    # Returns a raw mapping for validation.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Config file cannot be read: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_builder_config(path: Path) -> BuilderConfig:
    config = validate_builder_config(load_yaml_config(path))
    # Relative schema paths are relative to the config file, not the working directory.
    base = path.parent
    resolved = [str(p if Path(p).is_absolute() else base / p) for p in config.schema_paths]
    return config.model_copy(update={"schema_paths": resolved})


def resolve_class(import_string: str) -> type:
    module_name, _, class_name = import_string.partition(":")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001 - wrap with explicit error
        raise ConfigError(f"Failed to import module for additional class: {import_string}") from exc
    value = getattr(module, class_name, None)
    if not isinstance(value, type):
        raise ConfigError(f"Additional class not found or not a class: {import_string}")
    return value
