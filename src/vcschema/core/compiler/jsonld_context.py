#!/usr/bin/env python3
"""
Purpose:
    Compiles a property tree into a JSON-LD `@context` document mapping
    property names to vocabulary terms, with one scoped-context block per
    nested type.

Layout of the emitted document:

    {
      "@context": {
        "@version": 1.1,
        "@protected": true,
        "<prefix>": "<vocab namespace>",
        "<NestedType>": {"@id": "<contextUrl>#<NestedType>", "@context": {...}},
        "<TitleType>": {"@id": "<contextUrl>#<TitleType>", "@context": {<root terms>}}
      }
    }

Without a title the root terms sit directly in the top-level `@context`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Union

from vcschema.core.compiler.settings import CompilerSettings, DEFAULT_SETTINGS
from vcschema.core.compiler.tree import Ancestry, descend, named
from vcschema.core.errors import DuplicateTypeIdError
from vcschema.core.schema.metadata import SchemaMetadata
from vcschema.core.schema.property_node import PropertyNode
from vcschema.core.utils import generate_context_url, to_pascal_case, vocab_namespace

logger = logging.getLogger(__name__)

TermMapping = Union[str, Dict[str, str]]

# Keys of the top-level `@context` that precede the type blocks.
HEADER_KEYS = ("@version", "@protected")

# Type-name segment for a property whose name has no usable characters.
IMPLICIT_TYPE_FALLBACK = "Type"


@dataclass(frozen=True)
class TermContext:
    """Resolved, per-document inputs of the term mapping rules."""
    prefix: str
    context_url: str
    vocab_url: str
    type_prefix: str
    # id(node) -> implicit type name, see `assign_type_names`
    type_names: Mapping[int, str] = field(default_factory=dict)

    def type_iri(self, type_name: str) -> str:
        return f"{self.context_url}#{type_name}"


# --- URL resolution --- #

def resolve_context_url(metadata: SchemaMetadata, settings: CompilerSettings = DEFAULT_SETTINGS) -> str:
    """Explicit `contextUrl`, else derived from category/credential name or title, else the default."""
    if metadata.context_url:
        return metadata.context_url
    derived = generate_context_url(
        metadata.title,
        metadata.category,
        metadata.credential_name,
        base_url=settings.context_base_url,
    )
    return derived or settings.default_context_url


def resolve_vocab_url(metadata: SchemaMetadata, settings: CompilerSettings = DEFAULT_SETTINGS) -> str:
    return metadata.vocab_url or settings.default_vocab_url


def build_term_context(
    metadata: SchemaMetadata,
    settings: CompilerSettings = DEFAULT_SETTINGS,
    properties: Sequence[PropertyNode] = (),
) -> TermContext:
    """
    Resolve the term context of a document. When `properties` is given, the
    implicit type names of the tree are assigned up front.
    """
    ctx = TermContext(
        prefix=metadata.vocab_prefix,
        context_url=resolve_context_url(metadata, settings),
        vocab_url=resolve_vocab_url(metadata, settings),
        type_prefix=to_pascal_case(metadata.title),
    )
    if not properties:
        return ctx
    return replace(ctx, type_names=assign_type_names(properties, ctx))


# --- Type naming --- #

def _explicit_type_name(node: PropertyNode) -> Optional[str]:
    ext = node.json_ld
    return ext.complex_type_id if ext is not None else None


def _name_segment(node: PropertyNode) -> str:
    return to_pascal_case(node.name) or IMPLICIT_TYPE_FALLBACK


def _typed_nodes(nodes: Sequence[PropertyNode], ancestors: Ancestry = ()) -> Iterator[PropertyNode]:
    """Named nodes with nested properties, parents before children."""
    for node in named(nodes):
        node_ancestors = descend(node, ancestors)
        nested = node.nested_properties
        if nested:
            yield node
            yield from _typed_nodes(nested, node_ancestors)


def assign_type_names(nodes: Sequence[PropertyNode], ctx: TermContext) -> Dict[int, str]:
    """
    Pick a unique name for every implicit type in the tree, keyed by `id(node)`.

    The first choice is `PascalCase(title) + PascalCase(name)`. When that is
    taken (header key, prefix, root block or root term, any `complexTypeId`,
    or an earlier implicit type) the name is qualified with the parent's type
    name instead, and numbered from 2 if that is taken as well.

    Raises:
        CyclicPropertyTreeError: if the tree references one of its own ancestors.
    """
    taken = set(HEADER_KEYS) | {ctx.prefix}
    taken.update(filter(None, (_explicit_type_name(n) for n in _typed_nodes(nodes))))
    if ctx.type_prefix:
        taken.add(ctx.type_prefix)
    else:
        taken.update(n.name for n in named(nodes))

    assigned: Dict[int, str] = {}

    def _claim(node: PropertyNode, parent_type: str) -> str:
        segment = _name_segment(node)
        qualified = f"{parent_type}{segment}"
        for candidate in (f"{ctx.type_prefix}{segment}", qualified):
            if candidate not in taken:
                taken.add(candidate)
                return candidate
        n = 2
        while f"{qualified}{n}" in taken:
            n += 1
        taken.add(f"{qualified}{n}")
        logger.debug("Implicit type for %r numbered as %r", node.name, f"{qualified}{n}")
        return f"{qualified}{n}"

    def _walk(siblings: Sequence[PropertyNode], parent_type: str) -> None:
        for node in named(siblings):
            nested = node.nested_properties
            if not nested:
                continue
            tname = _explicit_type_name(node) or assigned.get(id(node))
            if tname is None:
                tname = assigned[id(node)] = _claim(node, parent_type)
            _walk(nested, tname)

    _walk(nodes, ctx.type_prefix)
    return assigned


# --- Term mapping rules --- #

def term_id(node: PropertyNode, ctx: TermContext) -> str:
    """`customId` when set, else `<prefix>:<vocabTermId or name>`."""
    ext = node.json_ld
    if ext is not None and ext.custom_id:
        return ext.custom_id
    term = (ext.vocab_term_id if ext is not None else None) or node.name
    return f"{ctx.prefix}:{term}"


def type_name(node: PropertyNode, ctx: TermContext) -> Optional[str]:
    """
    Name of the nested type a node introduces, or None.

    Only nodes with nested properties introduce a type: the explicit
    `complexTypeId` when set, else the name chosen by `assign_type_names`
    (`PascalCase(title) + PascalCase(name)` unless that collides).
    """
    explicit = _explicit_type_name(node)
    if not node.nested_properties:
        if explicit:
            logger.debug("complexTypeId %r on %r ignored: no nested properties", explicit, node.name)
        return None
    if explicit:
        return explicit
    return ctx.type_names.get(id(node)) or f"{ctx.type_prefix}{_name_segment(node)}"


def term_mapping(node: PropertyNode, ctx: TermContext) -> TermMapping:
    """Plain compact IRI for leaves; `{"@id", "@type"}` for nodes introducing a type."""
    tid = term_id(node, ctx)
    tname = type_name(node, ctx)
    if tname is None:
        return tid
    return {"@id": tid, "@type": ctx.type_iri(tname)}


def term_mappings(nodes: Sequence[PropertyNode], ctx: TermContext) -> Dict[str, TermMapping]:
    """Mappings for a sibling list, keyed by name, in caller order."""
    return {n.name: term_mapping(n, ctx) for n in named(nodes)}


# --- Type definitions (pure fold) --- #

def merge_definitions(base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a new dict holding `base` followed by `incoming`.

    Equal entries under the same key collapse into one; differing entries
    raise `DuplicateTypeIdError`.
    """
    merged = dict(base)
    for key, block in incoming.items():
        if key in merged and merged[key] != block:
            raise DuplicateTypeIdError(key, _terms_of(merged[key]), _terms_of(block))
        merged[key] = block
    return merged


def collect_type_definitions(
    nodes: Sequence[PropertyNode],
    ctx: TermContext,
    ancestors: Ancestry = (),
) -> Dict[str, Any]:
    """
    Fold a sibling list into its type-definition blocks: each node introducing
    a type contributes its own block, followed by the blocks of its subtree.
    """
    definitions: Dict[str, Any] = {}
    for node in named(nodes):
        node_ancestors = descend(node, ancestors)
        tname = type_name(node, ctx)
        if tname is None:
            continue
        nested = node.nested_properties
        block = {"@id": ctx.type_iri(tname), "@context": term_mappings(nested, ctx)}
        definitions = merge_definitions(definitions, {tname: block})
        definitions = merge_definitions(definitions, collect_type_definitions(nested, ctx, node_ancestors))
    return definitions


# --- Document --- #

def to_jsonld_context(
    metadata: SchemaMetadata,
    properties: Sequence[PropertyNode],
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, Any]:
    """Compile `properties` into a JSON-LD context document."""
    settings = settings or DEFAULT_SETTINGS
    ctx = build_term_context(metadata, settings, properties)

    context: Dict[str, Any] = {
        "@version": metadata.context_version,
        "@protected": metadata.protected,
        ctx.prefix: vocab_namespace(ctx.vocab_url),
    }
    context = merge_definitions(context, collect_type_definitions(properties, ctx))

    root_terms = term_mappings(properties, ctx)
    if ctx.type_prefix:
        root_block = {"@id": ctx.type_iri(ctx.type_prefix), "@context": root_terms}
        context = merge_definitions(context, {ctx.type_prefix: root_block})
    else:
        context = merge_definitions(context, root_terms)

    return {"@context": context}


def _terms_of(block: Any) -> Dict[str, Any]:
    if isinstance(block, dict):
        return block.get("@context", block)
    return {"@id": block}
