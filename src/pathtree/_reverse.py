"""Reverser — rebuild a literal path from a leaf and variable bindings.

Walks the non-owning parent references from the leaf up to the root,
then renders each edge from the root down: the first alternative of each
padding run interleaved with the bound variable values.

Missing or out-of-bounds variables are reported as data, never raised,
so a partial path is always produced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pathtree._types import Edge, Leaf, Wildcard

logger = logging.getLogger(__name__)


def reverse(
    leaf: Leaf | None,
    variables: Mapping[str, str],
) -> tuple[str, dict[str, str], list[str]]:
    """Reconstruct the path for ``leaf``.

    Returns ``(path, unused, missing)``: the rebuilt path, a copy of
    ``variables`` with every consumed name removed, and the descriptors
    (``[min,max]name``) of variables that were absent or out of bounds.
    """
    unused = dict(variables)
    if leaf is None or leaf.parent is None:
        return "", unused, []

    edges: list[Edge] = []
    node = leaf.parent
    while node.parent_edge is not None:
        edges.append(node.parent_edge)
        node = node.parent_edge.parent

    missing: list[str] = []
    parts: list[str] = []
    for edge in reversed(edges):
        parts.append("/")
        for index, wildcard in enumerate(edge.wildcards):
            parts.append(edge.padding[index][0])
            parts.append(_substitute(wildcard, unused, missing))
        if not edge.ends_in_wildcard:
            parts.append(edge.padding[-1][0])

    if leaf.star:
        parts.append("/")
        parts.append(_substitute(leaf.wildcards[-1], unused, missing))

    if leaf.trailing_slash or not parts:
        parts.append("/")

    if missing:
        logger.debug("reverse of %r is missing %s", leaf.pattern, ", ".join(missing))
    return "".join(parts), unused, missing


def _substitute(wildcard: Wildcard, unused: dict[str, str], missing: list[str]) -> str:
    value = unused.get(wildcard.name)
    if value is None or not wildcard.accepts(value) or (wildcard.rest and not value):
        missing.append(wildcard.descriptor)
        return ""
    del unused[wildcard.name]
    return value
