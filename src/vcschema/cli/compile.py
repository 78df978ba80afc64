#!/usr/bin/env python3
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from vcschema.core.app_context import AppContext
from vcschema.core.compiler import compile_project, dumps
from vcschema.core.constants import DEFAULT_TEXT_ENCODING
from vcschema.core.errors import SchemaCompilerError
from vcschema.core.formatting import format_error
from vcschema.core.schema.project import SchemaProject
from vcschema.core.schema.property_type import SchemaMode

logger = logging.getLogger(__name__)


def register(subparsers):
    parser = subparsers.add_parser("compile", help="Compile a schema project to JSON Schema or a JSON-LD context.")
    parser.add_argument("project", help="Project file (.json, .yaml, .yml).")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SchemaMode],
        default=None,
        help="Override the mode stored in the project metadata.",
    )
    parser.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout.")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent (default from config).")
    parser.set_defaults(func=compile_command)


def compile_command(args, ctx: AppContext) -> int:
    try:
        project = SchemaProject.from_file(args.project)
        document = compile_project(project, ctx.settings, mode=args.mode)
    except (OSError, ValueError, ValidationError, SchemaCompilerError) as e:
        print(f"{args.project}: compilation failed")
        for line in format_error(e):
            print(f"  - {line}")
        return 1

    indent = ctx.indent if args.indent is None else args.indent
    text = dumps(document, indent=indent)

    if args.output:
        out = Path(args.output)
        out.write_text(text + "\n", encoding=DEFAULT_TEXT_ENCODING)
        logger.debug("Compiled %s -> %s", args.project, out)
        print(f"Wrote {out}")
    else:
        print(text)
    return 0
