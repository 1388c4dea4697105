from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from graphql import print_schema

from schema_builder.builder import GraphQLBuilder
from schema_builder.config.loader import load_builder_config
from schema_builder.config.validator import ConfigError
from schema_builder.errors import SchemaBuildError
from schema_builder.observability.logging import StdoutLogSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schema-builder")
    commands = parser.add_subparsers(dest="command", required=True)

    print_cmd = commands.add_parser("print-schema", help="build the schema and print its SDL")
    print_cmd.add_argument("--config", required=True)
    print_cmd.add_argument("--federated", action="store_true", default=None)

    scan_cmd = commands.add_parser("scan", help="scan handler classes and report every member")
    scan_cmd.add_argument("--config", required=True)
    return parser


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    return build_parser().parse_args(list(argv))


def run(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    stream = out if out is not None else sys.stdout
    try:
        config = load_builder_config(Path(args.config))
        builder = GraphQLBuilder.from_config(config)
        if config.logging.sink == "stdout":
            # stdout carries the command output; logs go to stderr.
            builder.set_log_sink(StdoutLogSink(sys.stderr))
        if getattr(args, "federated", None):
            builder.set_is_federated(True)
        graphql_builder = builder.build()
        if args.command == "scan":
            return _scan(graphql_builder, stream)
        schema = graphql_builder.generate_schema()
    except (ConfigError, SchemaBuildError) as exc:
        print(f"schema-builder: {exc}", file=sys.stderr)
        return 2
    stream.write(print_schema(schema) + "\n")
    return 0


def _scan(graphql_builder: GraphQLBuilder, stream: TextIO) -> int:
    report = graphql_builder.scan()
    for item in report.results:
        line = f"{item.status:<10} {item.strategy:<18} {item.class_name}.{item.member}"
        if item.registered_as:
            line += f" -> {item.registered_as}"
        if item.error:
            line += f" ({item.error})"
        stream.write(line + "\n")
    stream.write(
        f"{len(report.registered)} registered, {len(report.failures)} failed, "
        f"{len(report.results)} members scanned\n"
    )
    return 0 if report.ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    return run(list(argv) if argv is not None else None)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
