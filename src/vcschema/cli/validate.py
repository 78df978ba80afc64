#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import ValidationError

from vcschema.core.app_context import AppContext
from vcschema.core.compiler import compile_project
from vcschema.core.compiler.settings import CompilerSettings
from vcschema.core.constants import SUPPORTED_PROJECT_EXT
from vcschema.core.errors import SchemaCompilerError
from vcschema.core.formatting import format_error
from vcschema.core.schema.project import SchemaProject
from vcschema.core.schema.property_type import SchemaMode


def _is_project_file(p: Path) -> bool:
    return p.is_file() and p.suffix.lower() in SUPPORTED_PROJECT_EXT


def find_all_files(paths: Iterable[str | Path], recursive: bool = False) -> List[Path]:
    files: List[Path] = []
    for raw in paths:
        p = Path(raw)
        if _is_project_file(p):
            files.append(p)
        elif p.is_dir():
            candidates = p.rglob("*") if recursive else p.glob("*")
            files.extend(c for c in candidates if _is_project_file(c))
        else:
            # keep missing/odd paths so they are reported
            files.append(p)
    # stable, de-duplicated order
    return sorted(set(files))


def validate_project(path: Path, settings: CompilerSettings) -> Tuple[bool, str, List[str]]:
    """
    Load a project and compile it in every mode.

    Returns: (is_valid, summary_message, error_list)
    """
    try:
        project = SchemaProject.from_file(path)
    except (OSError, ValueError, ValidationError) as e:
        return False, f"{path}: Invalid project", format_error(e)

    errors: List[str] = []
    for mode in SchemaMode:
        try:
            compile_project(project, settings, mode=mode)
        except SchemaCompilerError as e:
            errors.extend(f"[{mode.value}] {line}" for line in format_error(e))

    if errors:
        return False, f"{path}: Compilation Failed", errors
    if not project.metadata.title and not project.metadata.schema_id:
        return True, f"{path}: Validation Passed (warning: no title or schemaId; $id will be empty)", []
    return True, f"{path}: Validation Passed", []


def validate(args, ctx: AppContext) -> int:
    files = find_all_files(args.files, recursive=args.recursive)
    if not files:
        print("No project files found.")
        return 1

    success = 0
    for fp in files:
        ok, msg, errs = validate_project(fp, ctx.settings)
        print(f"\n{msg}")
        for e in errs:
            print(f"  - {e}")
        if ok:
            success += 1

    total = len(files)
    print(f"\nValidation complete: {success}/{total} passed.")
    return 0 if success == total else 1


def register(subparsers):
    parser = subparsers.add_parser("validate", help="Check that project files load and compile in both modes.")
    parser.add_argument("files", nargs="+", help="Files or directories to validate.")
    parser.add_argument("--recursive", "-r", action="store_true", help="Recursively scan directories.")
    parser.set_defaults(func=validate)
