#!/usr/bin/env python3
"""
Purpose:
    Renders a human-readable description of a schema project (property
    table, constraints and JSON-LD terms) through Jinja2 templates.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from vcschema.core.compiler.settings import CompilerSettings, DEFAULT_SETTINGS
from vcschema.core.compiler.json_schema import resolve_schema_id
from vcschema.core.compiler.jsonld_context import build_term_context, term_id, type_name
from vcschema.core.compiler.tree import Ancestry, descend, named
from vcschema.core.constants import DEFAULT_TEXT_ENCODING
from vcschema.core.schema.project import SchemaProject
from vcschema.core.schema.property_node import PropertyNode

BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "schema.md.j2"


@dataclass
class PropertyRow:
    """One line of the rendered property table."""
    path: str
    depth: int
    node: PropertyNode
    term: str
    type_name: Optional[str] = None
    constraints: Dict[str, Any] = field(default_factory=dict)


def _format_constraints(constraints: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in constraints.items())


def _md_cell(value: Any) -> str:
    """Escape a value for a Markdown table cell (pipes would split the cell)."""
    return str(value).replace("|", "\\|")


def _build_env(templates_roots: Iterable[Path]) -> Environment:
    loader = FileSystemLoader([str(Path(p).resolve()) for p in templates_roots])
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["constraints"] = _format_constraints
    env.filters["md_cell"] = _md_cell
    return env


def property_rows(project: SchemaProject, settings: CompilerSettings = DEFAULT_SETTINGS) -> List[PropertyRow]:
    """
    Flatten the named nodes of a project into table rows, parents first.

    Raises:
        CyclicPropertyTreeError: if the tree references one of its own ancestors.
    """
    ctx = build_term_context(project.metadata, settings, project.properties)
    rows: List[PropertyRow] = []

    def _walk(nodes: Iterable[PropertyNode], parent: str, ancestors: Ancestry) -> None:
        for node in named(nodes):
            node_ancestors = descend(node, ancestors)
            path = f"{parent}.{node.name}" if parent else node.name
            rows.append(PropertyRow(
                path=path,
                depth=len(ancestors),
                node=node,
                term=term_id(node, ctx),
                type_name=type_name(node, ctx),
                constraints=node.constraints(),
            ))
            _walk(node.nested_properties, path, node_ancestors)

    _walk(project.properties, "", ())
    return rows


class RenderEngine:
    """
    Engine object holding a Jinja Environment. Built-in templates are always
    searched after any caller-supplied roots.
    """

    def __init__(self, templates_roots: Optional[Iterable[Path]] = None):
        roots = [Path(p) for p in (templates_roots or [])] + [BUILTIN_TEMPLATES_DIR]
        self.env = _build_env(roots)

    def render(
        self,
        project: SchemaProject,
        template_name: str = DEFAULT_TEMPLATE,
        settings: CompilerSettings = DEFAULT_SETTINGS,
    ) -> str:
        template = self.env.get_template(template_name)
        return template.render(
            project=project,
            metadata=project.metadata,
            schema_id=resolve_schema_id(project.metadata, settings),
            rows=property_rows(project, settings),
        )


def render_project(
    project: SchemaProject,
    *,
    output_path: Optional[Union[str, Path]] = None,
    template_path: Optional[Union[str, Path]] = None,
    settings: CompilerSettings = DEFAULT_SETTINGS,
) -> str:
    """
    One-shot convenience API: render `project` and optionally write it to `output_path`.

    Raises:
      - jinja2.TemplateNotFound for a missing template.
      - OSError for I/O failures.
    """
    if template_path is not None:
        tp = Path(template_path).resolve()
        engine = RenderEngine([tp.parent])
        text = engine.render(project, tp.name, settings)
    else:
        text = RenderEngine().render(project, settings=settings)

    if output_path is not None:
        Path(output_path).write_text(text, encoding=DEFAULT_TEXT_ENCODING)
    return text
