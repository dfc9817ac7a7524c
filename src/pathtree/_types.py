"""Core data model for pathtree.

The trie is made of three mutable-at-build-time entities:
- Node is one path depth level; it owns its outgoing edges and up to two leaves
- Edge is a transition for one segment pattern (literal or wildcard-bearing)
- Leaf is the terminal for one registered pattern

Ownership is top-down (tree -> node -> edge -> node). The ``parent``
references pointing back up are non-owning and exist only for reversal,
so they are excluded from repr and equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathtree._pattern import Segment


@dataclass(frozen=True, slots=True)
class Wildcard:
    """A named variable inside a pattern.

    ``min``/``max`` bound the length of the bound value; 0 means
    unconstrained. ``rest`` marks a rest-of-path (``*name``) capture.
    """

    name: str
    min: int = 0
    max: int = 0
    rest: bool = False

    def accepts(self, value: str) -> bool:
        """Check the value against the length bounds."""
        if self.min and len(value) < self.min:
            return False
        if self.max and len(value) > self.max:
            return False
        return True

    @property
    def descriptor(self) -> str:
        """Render as ``[min,max]name`` (or ``*name`` for a rest capture)."""
        if self.rest:
            return f"*{self.name}"
        return f"[{self.min},{self.max}]{self.name}"


@dataclass(slots=True, eq=False)
class Leaf[V]:
    """Terminal value for one registered pattern.

    ``wildcards`` lists every variable in the order it appears along the
    path from the root; ``find`` returns expansions in the same order.
    """

    value: V
    wildcards: tuple[Wildcard, ...]
    order: int
    pattern: str
    trailing_slash: bool = False
    star: bool = False
    parent: Node | None = field(default=None, repr=False)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(w.name for w in self.wildcards)

    def bind(self, expansions: list[str]) -> dict[str, str]:
        """Pair wildcard names with the expansions returned by ``find``."""
        return dict(zip(self.names, expansions, strict=False))


@dataclass(slots=True, eq=False)
class Edge:
    """Transition out of a node for one segment pattern.

    INV: len(padding) == len(wildcards) + (0 if ends_in_wildcard else 1)
    """

    segment: Segment
    child: Node = field(repr=False)
    parent: Node = field(repr=False)
    min_order: int

    @property
    def padding(self) -> tuple[tuple[str, ...], ...]:
        return self.segment.padding

    @property
    def wildcards(self) -> tuple[Wildcard, ...]:
        return self.segment.wildcards

    @property
    def ends_in_wildcard(self) -> bool:
        return self.segment.ends_in_wildcard


@dataclass(slots=True, eq=False)
class Node:
    """One depth level of the trie.

    Edges are keyed by the segment's source text. At most one leaf and at
    most one star leaf may be attached.
    """

    edges: dict[str, Edge] = field(default_factory=dict)
    leaf: Leaf | None = None
    star: Leaf | None = None
    parent_edge: Edge | None = field(default=None, repr=False)
