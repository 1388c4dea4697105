from __future__ import annotations

from pathlib import Path

import pytest

from schema_builder.errors import SchemaBuildError
from schema_builder.schema.parser import SchemaParser, normalize_extension


def test_files_are_collected_recursively_and_sorted(tmp_path: Path) -> None:
    (tmp_path / "nested").mkdir()
    (tmp_path / "b.graphqls").write_text("type B { id: ID }", encoding="utf-8")
    (tmp_path / "nested" / "a.graphqls").write_text("type A { id: ID }", encoding="utf-8")
    (tmp_path / "ignored.graphql").write_text("type C { id: ID }", encoding="utf-8")

    files = SchemaParser(paths=[tmp_path]).files()

    assert files == [tmp_path / "b.graphqls", tmp_path / "nested" / "a.graphqls"]


def test_custom_extension_is_normalized(tmp_path: Path) -> None:
    (tmp_path / "schema.graphql").write_text("type Query { ok: Boolean }", encoding="utf-8")

    parser = SchemaParser(".graphql", [tmp_path])

    assert parser.schema_file_extension == "graphql"
    assert parser.type_defs() == ["type Query { ok: Boolean }"]
    with pytest.raises(ValueError):
        normalize_extension(" . ")


def test_single_file_path_is_accepted(tmp_path: Path) -> None:
    schema_file = tmp_path / "schema.graphqls"
    schema_file.write_text("type Query { ok: Boolean }", encoding="utf-8")

    assert SchemaParser(paths=[schema_file]).files() == [schema_file]


def test_no_schema_files_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(SchemaBuildError, match="No \\*.graphqls schema files"):
        SchemaParser(paths=[tmp_path]).type_defs()


def test_missing_directory_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(SchemaBuildError):
        SchemaParser(paths=[tmp_path / "missing"]).files()


def test_syntax_errors_name_the_file(tmp_path: Path) -> None:
    broken = tmp_path / "broken.graphqls"
    broken.write_text("type Query {", encoding="utf-8")

    with pytest.raises(SchemaBuildError, match="broken.graphqls"):
        SchemaParser(paths=[tmp_path]).type_defs()
