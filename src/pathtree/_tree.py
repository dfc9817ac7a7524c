"""PathTree — trie builder plus the find/reverse entry points.

Build-then-freeze: call add() during single-threaded setup, after which
find() and reverse() are read-only and safe to call concurrently. There is
no internal locking; interleaving add() with lookups needs external
synchronization.

Example::

    tree = PathTree()
    users = tree.add("/users/:id", "user")
    tree.add("/static/*path", "static")

    leaf, expansions = tree.find("/users/42")      # users, ["42"]
    path, unused, missing = tree.reverse(users, {"id": "7"})  # "/users/7"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathtree import _match, _reverse
from pathtree._pattern import RestSegment, Segment, compile_pattern
from pathtree._types import Edge, Leaf, Node

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pathtree._pattern import PatternSegment
    from pathtree._types import Wildcard

logger = logging.getLogger(__name__)

MAX_PATTERN_LENGTH = 8192

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class PathTreeError(Exception):
    """Base for all pathtree errors."""


class InvalidPatternError(PathTreeError):
    """A pattern is malformed and was not registered."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class PatternTooLongError(InvalidPatternError):
    """A pattern exceeds the length limit."""

    def __init__(self, pattern: str, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(pattern, f"length {length} exceeds maximum {max_}")


class DuplicatePathError(PathTreeError):
    """The same pattern shape was already terminated with a leaf."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"duplicate path: {pattern!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Tree
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Match[V]:
    """Result of a successful lookup."""

    leaf: Leaf[V]
    expansions: list[str]
    params: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", self.leaf.bind(self.expansions))

    @property
    def value(self) -> V:
        return self.leaf.value


class PathTree[V]:
    """Trie mapping runtime paths to the best registered pattern.

    Insertion order is stamped per tree and decides priority: when several
    patterns can match an input, the one registered first wins.

    A failed add() is not rolled back. Edges created before the failure
    stay in the trie, which remains valid to use.
    """

    __slots__ = ("_count", "_max_pattern_length", "_order", "_root", "_strict_star")

    def __init__(
        self,
        *,
        strict_star: bool = False,
        max_pattern_length: int = MAX_PATTERN_LENGTH,
    ) -> None:
        self._root = Node()
        self._order = 0
        self._count = 0
        self._strict_star = strict_star
        self._max_pattern_length = max_pattern_length

    @property
    def root(self) -> Node:
        return self._root

    def __len__(self) -> int:
        return self._count

    def add(self, pattern: str, value: V) -> Leaf[V]:
        """Register a pattern and return its leaf.

        Raises:
            InvalidPatternError: pattern does not start with "/", or has
                segments after a "*name" segment while strict_star is set
            PatternTooLongError: pattern exceeds the length limit
            DuplicatePathError: the same pattern is already registered
        """
        if not pattern.startswith("/"):
            raise InvalidPatternError(pattern, "must begin with '/'")
        if len(pattern) > self._max_pattern_length:
            raise PatternTooLongError(pattern, len(pattern), self._max_pattern_length)

        compiled = compile_pattern(pattern)
        segments = self._check_star(pattern, compiled.segments)
        self._order += 1
        order = self._order

        node = self._root
        wildcards: list[Wildcard] = []
        for segment in segments:
            match segment:
                case RestSegment():
                    if node.star is not None:
                        raise DuplicatePathError(pattern)
                    wildcards.append(segment.wildcard)
                    node.star = self._leaf(
                        pattern, value, wildcards, order, node, compiled.trailing_slash, star=True
                    )
                    return node.star
                case Segment():
                    node = self._edge(node, segment, order).child
                    wildcards.extend(segment.wildcards)

        if node.leaf is not None:
            raise DuplicatePathError(pattern)
        node.leaf = self._leaf(pattern, value, wildcards, order, node, compiled.trailing_slash)
        return node.leaf

    def find(self, path: str) -> tuple[Leaf[V] | None, list[str]]:
        """Resolve a path to its leaf and the ordered wildcard expansions.

        Never raises; unmatched or malformed paths return ``(None, [])``.
        """
        return _match.find(self._root, path)

    def match(self, path: str) -> Match[V] | None:
        """Like find(), but returns a Match with named params, or None."""
        leaf, expansions = self.find(path)
        if leaf is None:
            return None
        return Match(leaf=leaf, expansions=expansions)

    def reverse(
        self,
        leaf: Leaf[V] | None,
        variables: Mapping[str, str],
    ) -> tuple[str, dict[str, str], list[str]]:
        """Rebuild a path from a leaf and variable bindings.

        Returns ``(path, unused, missing)``. See pathtree._reverse.
        """
        return _reverse.reverse(leaf, variables)

    def leaves(self) -> list[Leaf[V]]:
        """Return every registered leaf in insertion order."""
        result: list[Leaf[V]] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.leaf is not None:
                result.append(node.leaf)
            if node.star is not None:
                result.append(node.star)
            stack.extend(edge.child for edge in node.edges.values())
        result.sort(key=lambda leaf: leaf.order)
        return result

    # ── Private building methods ───────────────────────────────────────────

    def _check_star(
        self, pattern: str, segments: tuple[PatternSegment, ...]
    ) -> tuple[PatternSegment, ...]:
        """Cut everything after the first "*name" segment."""
        for index, segment in enumerate(segments):
            if isinstance(segment, RestSegment) and index != len(segments) - 1:
                if self._strict_star:
                    raise InvalidPatternError(pattern, "segments after a '*' wildcard")
                logger.warning(
                    "pattern %r has segments after '*%s'; they are ignored",
                    pattern,
                    segment.name,
                )
                return segments[: index + 1]
        return segments

    def _edge(self, node: Node, segment: Segment, order: int) -> Edge:
        # Keyed by source text: ":a;" and ":[1,2]a;" are distinct edges,
        # ":a" and ":a;" too.
        edge = node.edges.get(segment.text)
        if edge is not None:
            edge.min_order = min(edge.min_order, order)
            return edge

        child = Node()
        edge = Edge(segment=segment, child=child, parent=node, min_order=order)
        child.parent_edge = edge
        node.edges[segment.text] = edge
        return edge

    def _leaf(
        self,
        pattern: str,
        value: V,
        wildcards: list[Wildcard],
        order: int,
        node: Node,
        trailing_slash: bool,
        *,
        star: bool = False,
    ) -> Leaf[V]:
        self._count += 1
        logger.debug("registered %r with order %d", pattern, order)
        return Leaf(
            value=value,
            wildcards=tuple(wildcards),
            order=order,
            pattern=pattern,
            trailing_slash=trailing_slash,
            star=star,
            parent=node,
        )
