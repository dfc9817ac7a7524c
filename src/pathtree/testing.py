"""Test utilities for pathtree.

Shortcuts for building trees in tests and examples. Real applications
register patterns through PathTree.add() or a TreeConfig.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pathtree._tree import PathTree


def tree_from_routes[V](
    routes: Mapping[str, V] | Iterable[tuple[str, V]],
    *,
    strict_star: bool = False,
) -> PathTree[V]:
    """Build a tree from ``(pattern, value)`` pairs, registered in order.

    >>> from pathtree.testing import tree_from_routes
    >>> tree = tree_from_routes({"/users/:id": "user", "/*rest": "fallback"})
    >>> leaf, expansions = tree.find("/users/42")
    >>> leaf.value, expansions
    ('user', ['42'])
    """
    items = routes.items() if isinstance(routes, Mapping) else routes
    tree: PathTree[V] = PathTree(strict_star=strict_star)
    for pattern, value in items:
        tree.add(pattern, value)
    return tree
