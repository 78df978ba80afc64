#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from vcschema.core.app_context import AppContext
from vcschema.core.formatting import format_error
from vcschema.core.importer import import_json_schema_file


def register(subparsers):
    parser = subparsers.add_parser("import", help="Import a JSON Schema into an editable project file.")
    parser.add_argument("schema", help="JSON Schema file to import.")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Project file to write (.yaml, .yml or .json). Defaults to <schema stem>.project.yaml.",
    )
    parser.add_argument("--name", default=None, help="Project name (defaults to the file stem).")
    parser.set_defaults(func=import_command)


def import_command(args, ctx: AppContext) -> int:
    src = Path(args.schema)
    out = Path(args.output) if args.output else src.with_name(f"{src.stem}.project.yaml")
    try:
        project = import_json_schema_file(src, name=args.name)
        project.to_file(out)
    except (OSError, ValueError, ValidationError) as e:
        print(f"{src}: import failed")
        for line in format_error(e):
            print(f"  - {line}")
        return 1

    print(f"Imported {len(project.properties)} properties from {src} -> {out}")
    return 0
