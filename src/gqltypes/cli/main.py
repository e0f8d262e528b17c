# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the gqltypes command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from gqltypes.algebra.predicates import has_fields
from gqltypes.algebra.wrappers import named_type
from gqltypes.model.kinds import CATEGORIES, kind_of
from gqltypes.model.types import ListType, NonNullType
from gqltypes.schema.assembly import Schema, display
from gqltypes.schema.loader import SchemaLoadError, load_schema

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the gqltypes CLI."""
    parser = argparse.ArgumentParser(
        prog="gqltypes",
        description="gqltypes: classify and validate GraphQL-style schema types",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a schema document",
        description="Load a YAML schema document and report structural problems.",
    )
    check_parser.add_argument("schema", help="Path to the YAML schema document")

    # describe subcommand
    describe_parser = subparsers.add_parser(
        "describe",
        help="Show the kind and categories of a named type",
        description="Print the kind of a named type and the categories it belongs to.",
    )
    describe_parser.add_argument("schema", help="Path to the YAML schema document")
    describe_parser.add_argument("name", help="Name of the type to describe")

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check an input value against a type",
        description="Check whether a JSON value is valid input for a named type.",
    )
    validate_parser.add_argument("schema", help="Path to the YAML schema document")
    validate_parser.add_argument("name", help="Name of the type to validate against")
    validate_parser.add_argument("value", help="The input value, encoded as JSON")
    validate_parser.add_argument(
        "--list",
        action="store_true",
        help="Wrap the type in a list",
    )
    validate_parser.add_argument(
        "--non-null",
        action="store_true",
        help="Wrap the type (after --list) in a non-null",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "describe":
        return _cmd_describe(args)
    if args.command == "validate":
        return _cmd_validate(args)
    return 0


def _load(path_arg: str) -> Schema | None:
    """Load the schema at *path_arg*, printing the error and returning None on failure."""
    try:
        return load_schema(Path(path_arg))
    except SchemaLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    schema = _load(args.schema)
    if schema is None:
        return 1
    print(f"Schema is valid: {len(schema.types)} named type(s).")
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    """Handle the describe subcommand."""
    schema = _load(args.schema)
    if schema is None:
        return 1

    type_ = schema.lookup(args.name)
    if type_ is None:
        print(f"Error: unknown type '{args.name}'.", file=sys.stderr)
        return 1

    kind = kind_of(type_)
    print(f"{type_.name}: {kind.value}")
    for category, kinds in CATEGORIES.items():
        print(f"  {category:<10} {'yes' if kind in kinds else 'no'}")
    if has_fields(type_):
        for field_name, field_def in type_.fields.items():
            print(f"  .{field_name}: {display(field_def.type)}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    schema = _load(args.schema)
    if schema is None:
        return 1

    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as exc:
        print(f"Error: value is not valid JSON: {exc}", file=sys.stderr)
        return 1

    ref = schema.resolve(args.name)
    if named_type(ref) is None:
        print(f"Error: unknown type '{args.name}'.", file=sys.stderr)
        return 1
    if args.list:
        ref = ListType(of_type=ref)
    if args.non_null:
        ref = NonNullType(of_type=ref)

    if schema.is_valid_input(ref, value):
        print(f"Valid input for {display(ref)}.")
        return 0
    print(f"Invalid input for {display(ref)}.")
    return 1
