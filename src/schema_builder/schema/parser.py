from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ariadne import gql
from graphql import GraphQLSyntaxError

from schema_builder.errors import SchemaBuildError

DEFAULT_SCHEMA_FILE_EXTENSION = "graphqls"


def normalize_extension(extension: str) -> str:
    normalized = extension.strip().lstrip(".")
    if not normalized:
        raise ValueError("schema file extension must be a non-empty string")
    return normalized


class SchemaParser:
    # Static IDL source: every *.<extension> file below the configured directories.
    def __init__(
        self,
        schema_file_extension: str = DEFAULT_SCHEMA_FILE_EXTENSION,
        paths: Iterable[str | Path] = (),
    ) -> None:
        self.schema_file_extension = normalize_extension(schema_file_extension)
        self.paths = [Path(path) for path in paths]

    def files(self) -> list[Path]:
        found: list[Path] = []
        for root in self.paths:
            if root.is_file():
                if root.suffix == f".{self.schema_file_extension}":
                    found.append(root)
                continue
            if not root.is_dir():
                raise SchemaBuildError(f"Schema path does not exist: {root}")
            # Sorted so the joined SDL is identical between runs.
            found.extend(sorted(root.rglob(f"*.{self.schema_file_extension}")))
        return found

    def type_defs(self) -> list[str]:
        files = self.files()
        if not files:
            searched = ", ".join(str(path) for path in self.paths) or "<no paths>"
            raise SchemaBuildError(
                f"No *.{self.schema_file_extension} schema files found under: {searched}"
            )
        type_defs: list[str] = []
        for path in files:
            try:
                type_defs.append(gql(path.read_text(encoding="utf-8")))
            except GraphQLSyntaxError as exc:
                raise SchemaBuildError(f"Invalid schema file {path}: {exc.message}") from exc
        return type_defs
