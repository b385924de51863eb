#!/usr/bin/env python3
"""
CLI tool for inspecting a schema catalog.

Usage:
    schema-catalog --ddl schema.sql tables
    schema-catalog --ddl schema.sql columns Singers
    schema-catalog --ddl schema.sql indexes Albums
    schema-catalog --ddl schema.sql index-columns Albums PRIMARY_KEY
    schema-catalog --ddl schema.sql describe --format json
    schema-catalog --config config.yaml serve
"""

from __future__ import annotations

import argparse
import logging
import sys

from colorama import Fore, Style, init as colorama_init

from .config import Config
from .ddl import DdlParseError
from .errors import CatalogError
from .loaders import SchemaLoader, open_loader
from .serializer import dump_json, dump_yaml

colorama_init()


def colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Style.RESET_ALL}"


def print_error(message: str) -> None:
    print(colorize(f"Error: {message}", Fore.RED), file=sys.stderr)


def cmd_tables(loader: SchemaLoader, args) -> int:
    for table in loader.table_list():
        print(colorize(table.table_name, Fore.CYAN))
    return 0


def cmd_columns(loader: SchemaLoader, args) -> int:
    columns = loader.column_list(args.table)
    if not columns:
        print(colorize(f"No columns for {args.table}", Style.DIM))
        return 0

    width = max(len(c.column_name) for c in columns)
    for c in columns:
        flags = []
        if c.not_null:
            flags.append("NOT NULL")
        if c.is_primary_key:
            flags.append(colorize("PK", Fore.YELLOW))
        if c.is_generated:
            flags.append(colorize("GENERATED", Fore.MAGENTA))
        print(f"{c.field_ordinal:>3} {c.column_name:<{width}} {colorize(c.data_type, Fore.GREEN)} {' '.join(flags)}".rstrip())
    return 0


def cmd_indexes(loader: SchemaLoader, args) -> int:
    for index in loader.index_list(args.table):
        suffix = colorize(" UNIQUE", Fore.YELLOW) if index.is_unique else ""
        print(f"{colorize(index.index_name, Fore.CYAN)}{suffix}")
    return 0


def cmd_index_columns(loader: SchemaLoader, args) -> int:
    for c in loader.index_column_list(args.table, args.index):
        if c.storing:
            print(f"  - {c.column_name} {colorize('(storing)', Style.DIM)}")
        else:
            print(f"{c.seq_no:>3} {c.column_name}")
    return 0


def cmd_describe(loader: SchemaLoader, args) -> int:
    if args.format == "json":
        print(dump_json(loader))
    else:
        print(dump_yaml(loader), end="")
    return 0


def cmd_serve(config: Config) -> int:
    from .app import run

    run(config)
    return 0


COMMANDS = {
    "tables": cmd_tables,
    "columns": cmd_columns,
    "indexes": cmd_indexes,
    "index-columns": cmd_index_columns,
    "describe": cmd_describe,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schema-catalog",
        description="Inspect a database schema built from DDL or INFORMATION_SCHEMA",
    )
    parser.add_argument(
        "--config",
        help="Config file (YAML or JSON)",
    )
    parser.add_argument(
        "--ddl",
        help="DDL file to load (overrides the configured source)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: from config, INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("tables", help="List tables")

    columns_parser = subparsers.add_parser("columns", help="List a table's columns")
    columns_parser.add_argument("table", help="Table name")

    indexes_parser = subparsers.add_parser("indexes", help="List a table's indexes")
    indexes_parser.add_argument("table", help="Table name")

    index_columns_parser = subparsers.add_parser("index-columns", help="List an index's columns")
    index_columns_parser.add_argument("table", help="Table or view name")
    index_columns_parser.add_argument("index", help="Index name, or PRIMARY_KEY")

    describe_parser = subparsers.add_parser("describe", help="Dump the whole schema")
    describe_parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )

    subparsers.add_parser("serve", help="Serve the schema over HTTP")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = Config.from_file(args.config) if args.config else Config()
        if args.ddl:
            config.source.ddl_file = args.ddl
            config.source.driver = None
        if args.log_level:
            config.logging.level = args.log_level

        if args.command == "serve":
            return cmd_serve(config)

        logging.basicConfig(
            level=config.logging.level.upper(),
            format=config.logging.format,
            stream=sys.stderr,
        )
        loader = open_loader(config.source)
        return COMMANDS[args.command](loader, args)
    except (CatalogError, DdlParseError, FileNotFoundError) as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
