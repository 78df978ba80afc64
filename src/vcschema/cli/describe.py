#!/usr/bin/env python3
from __future__ import annotations

from jinja2 import TemplateError
from pydantic import ValidationError

from vcschema.core.app_context import AppContext
from vcschema.core.errors import SchemaCompilerError
from vcschema.core.formatting import format_error
from vcschema.core.render.engine import render_project
from vcschema.core.schema.project import SchemaProject


def register(subparsers):
    parser = subparsers.add_parser("describe", help="Render a Markdown description of a schema project.")
    parser.add_argument("project", help="Project file (.json, .yaml, .yml).")
    parser.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout.")
    parser.add_argument("--template", default=None, help="Custom Jinja2 template file.")
    parser.set_defaults(func=describe_command)


def describe_command(args, ctx: AppContext) -> int:
    try:
        project = SchemaProject.from_file(args.project)
        text = render_project(
            project,
            output_path=args.output,
            template_path=args.template,
            settings=ctx.settings,
        )
    except (OSError, ValueError, ValidationError, SchemaCompilerError, TemplateError) as e:
        print(f"{args.project}: describe failed")
        for line in format_error(e):
            print(f"  - {line}")
        return 1

    if args.output:
        print(f"Wrote {args.output}")
    else:
        print(text)
    return 0
