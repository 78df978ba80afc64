#!/usr/bin/env python3

import argparse
import sys

from vcschema.core.app_context import build_context
from vcschema.cli import compile as compile_cmd, config, describe, import_schema, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vcschema", description="Credential schema / JSON-LD context compiler")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept ctx)
    compile_cmd.register(subparsers)
    import_schema.register(subparsers)
    validate.register(subparsers)
    describe.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = build_context()  # built once, passed down
        sys.exit(args.func(args, ctx))
    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
