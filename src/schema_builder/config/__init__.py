from .loader import load_builder_config, load_yaml_config, resolve_class
from .models import BuilderConfig, ExclusionConfig, LoggingConfig
from .validator import ConfigError, validate_builder_config

__all__ = [
    "BuilderConfig",
    "ConfigError",
    "ExclusionConfig",
    "LoggingConfig",
    "load_builder_config",
    "load_yaml_config",
    "resolve_class",
    "validate_builder_config",
]
