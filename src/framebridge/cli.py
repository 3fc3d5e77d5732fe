"""Command-line interface for framebridge.

Usage::

    framebridge types
    framebridge resolve --storage NUM
    framebridge resolve --schema string
    framebridge resolve --name "Option[Double]"
    framebridge schema trades.yaml
    python -m framebridge ...
"""

from __future__ import annotations

import argparse
import logging
import sys

from .constants import StorageTag
from .exc import FramebridgeError
from .registry import TypeRegistry, get_registry
from .types.base import SupportedType


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framebridge",
        description="framebridge CLI: inspect the supported type registry.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("types", help="List every supported type.")

    res = sub.add_parser(
        "resolve",
        help="Resolve a storage tag, schema type, or display name.",
    )
    key = res.add_mutually_exclusive_group(required=True)
    key.add_argument("--storage", help="Storage tag name (NUM) or number (3).")
    key.add_argument("--schema", help="Schema type name (e.g. double).")
    key.add_argument("--name", help="Display name (e.g. 'Option[Double]').")

    sch = sub.add_parser("schema", help="Resolve the columns of a schema file.")
    sch.add_argument("path", help="Schema file (.json, .toml, .yaml, .yml).")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    registry = get_registry()

    if args.command == "types":
        return _cmd_types(registry)
    if args.command == "resolve":
        return _cmd_resolve(registry, args)
    if args.command == "schema":
        return _cmd_schema(registry, args)

    return 0


def _describe(t: SupportedType) -> str:
    return (
        f"{t.name:<18} {t.storage_tag.name:<5} "
        f"{t.schema_type.value:<10} {t.runtime_class.__name__}"
    )


def _cmd_types(registry: TypeRegistry) -> int:
    for t in registry:
        print(_describe(t))
    return 0


def _parse_storage_tag(text: str) -> StorageTag | int | None:
    if text.isdigit():
        return int(text)
    return StorageTag.__members__.get(text.upper())


def _cmd_resolve(registry: TypeRegistry, args: argparse.Namespace) -> int:
    if args.storage is not None:
        tag = _parse_storage_tag(args.storage)
        found = None if tag is None else registry.get_by_storage_tag(tag)
        candidates = () if tag is None else registry.candidates_by_storage_tag(tag)
        what = f"storage tag {args.storage!r}"
    elif args.schema is not None:
        found = registry.get_by_schema_type(args.schema.lower())
        candidates = registry.candidates_by_schema_type(args.schema.lower())
        what = f"schema type {args.schema!r}"
    else:
        found = registry.get_by_name(args.name)
        candidates = ()
        what = f"name {args.name!r}"

    if found is None:
        print(f"error: no supported type for {what}", file=sys.stderr)
        return 1

    print(_describe(found))
    if len(candidates) > 1:
        print(f"candidates: {', '.join(t.name for t in candidates)}")
    return 0


def _cmd_schema(registry: TypeRegistry, args: argparse.Namespace) -> int:
    from .config import schema_from_config

    try:
        schema = schema_from_config(args.path, registry)
    except (FramebridgeError, FileNotFoundError, ValueError, ImportError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for col in schema:
        null = "nullable" if col.nullable else "not null"
        print(
            f"{col.name:<18} {col.type.name:<18} "
            f"{col.storage_tag.name:<5} {col.schema_type.value:<10} {null}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
