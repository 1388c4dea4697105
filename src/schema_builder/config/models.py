from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map the builder YAML file to typed structures; defaults match the fluent builder.


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _jsonl_requires_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is 'jsonl'")
        return self


class ExclusionConfig(BaseModel):
    # One entity exclusion rule: representations of type_name with a string `key` resolve to null.
    model_config = ConfigDict(extra="forbid")
    type_name: str = Field(min_length=1)
    key: str = Field(min_length=1)


def _default_exclusions() -> list[ExclusionConfig]:
    return [ExclusionConfig(type_name="Product", key="upc")]


class BuilderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    base_package: str = ""
    additional_classes: list[str] = Field(default_factory=list)
    schema_paths: list[str] = Field(default_factory=list)
    schema_file_extension: str = "graphqls"
    max_query_cost: int = Field(default=100, ge=0)
    federated: bool = False
    exclusions: list[ExclusionConfig] = Field(default_factory=_default_exclusions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_file_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        normalized = value.strip().lstrip(".")
        if not normalized:
            raise ValueError("schema_file_extension must be a non-empty string")
        return normalized

    @field_validator("additional_classes")
    @classmethod
    def _import_strings(cls, value: list[str]) -> list[str]:
        for item in value:
            module_name, sep, class_name = item.partition(":")
            if not sep or not module_name or not class_name:
                raise ValueError(f"additional class '{item}' must look like 'package.module:ClassName'")
        return value
