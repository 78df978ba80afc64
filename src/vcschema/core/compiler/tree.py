#!/usr/bin/env python3
"""
Purpose:
    Tree-walking helpers shared by both compiler branches: the cycle guard,
    named-node filtering and the `required` aggregation rule.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from vcschema.core.errors import CyclicPropertyTreeError
from vcschema.core.schema.property_node import PropertyNode

# Ancestry of the node being compiled: (id(node), name) pairs, root first.
Ancestry = Tuple[Tuple[int, str], ...]


def descend(node: PropertyNode, ancestors: Ancestry) -> Ancestry:
    """
    Return the ancestry for `node`'s children.

    Raises:
        CyclicPropertyTreeError: if `node` is already one of its own ancestors.
    """
    key = id(node)
    if any(k == key for k, _ in ancestors):
        raise CyclicPropertyTreeError([name for _, name in ancestors] + [node.name])
    return ancestors + ((key, node.name),)


def named(nodes: Iterable[PropertyNode]) -> List[PropertyNode]:
    """Nodes that appear in output (non-empty name), in caller order."""
    return [n for n in nodes if n.is_emitted]


def required_names(nodes: Iterable[PropertyNode]) -> List[str]:
    """Names of required, named nodes, in caller order; a repeated name is listed once."""
    return list(dict.fromkeys(n.name for n in nodes if n.is_emitted and n.required))
