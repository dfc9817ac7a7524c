"""Matcher — resolve an input path to the best registered leaf.

Every outgoing edge of a node is a candidate for the next segment; the
star leaf of the node is the initial fallback. Among all leaves able to
match the input, the one with the lowest insertion order wins, no matter
whether it was reached through a literal edge, a padded wildcard edge,
or a star.

INV: first-registered-pattern-wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathtree._pattern import split_path

if TYPE_CHECKING:
    from pathtree._pattern import Segment
    from pathtree._types import Leaf, Node


def match_segment(segment: Segment, text: str) -> list[str] | None:
    """Consume one path element against a compiled segment.

    Returns the values bound to the segment's wildcards (in order), or
    None if the element does not fit the padding/wildcard template.

    The first padding run is anchored at the start of the element. A
    trailing padding run (segment not ending in a wildcard) is anchored at
    the end. Interior runs match at their first occurrence.
    """
    values: list[str] = []
    rest = text
    last = len(segment.padding) - 1

    for index, alternatives in enumerate(segment.padding):
        anchored_end = index == last and not segment.ends_in_wildcard
        found = _locate(alternatives, rest, anchored_start=index == 0, anchored_end=anchored_end)
        if found is None:
            return None
        pos, pad = found

        if index != 0:
            value = rest[:pos]
            if not segment.wildcards[index - 1].accepts(value):
                return None
            values.append(value)
        rest = rest[pos + len(pad) :]

    if segment.ends_in_wildcard:
        if not segment.wildcards[-1].accepts(rest):
            return None
        values.append(rest)
    return values


def find[V](root: Node, path: str) -> tuple[Leaf[V] | None, list[str]]:
    """Find the leaf for a path along with its wildcard expansions.

    Malformed paths (empty, or not starting with ``/``) yield no match.
    A trailing slash on the input is ignored.

    The walk is depth-first over an explicit stack of frames.
    """
    if not path or path[0] != "/":
        return None, []
    elements, _ = split_path(path)

    best: Leaf[V] | None = None
    best_expansions: list[str] = []

    # (node, next element index, expansions so far, min order below node)
    stack: list[tuple[Node, int, list[str], int]] = [(root, 0, [], 0)]
    while stack:
        node, index, expansions, floor = stack.pop()
        # Nothing below this node can beat the current best.
        if best is not None and best.order < floor:
            continue

        if index == len(elements):
            if node.leaf is not None and (best is None or node.leaf.order < best.order):
                best, best_expansions = node.leaf, expansions
            continue

        if node.star is not None and (best is None or node.star.order < best.order):
            best = node.star
            best_expansions = [*expansions, "/".join(elements[index:])]

        text = elements[index]
        frames: list[tuple[Node, int, list[str], int]] = []
        for edge in node.edges.values():
            if best is not None and best.order < edge.min_order:
                continue
            values = match_segment(edge.segment, text)
            if values is None:
                continue
            frames.append((edge.child, index + 1, [*expansions, *values], edge.min_order))
        # Reversed so the first edge is explored first.
        stack.extend(reversed(frames))

    if best is None:
        return None, []
    return best, best_expansions


def _locate(
    alternatives: tuple[str, ...],
    text: str,
    *,
    anchored_start: bool,
    anchored_end: bool,
) -> tuple[int, str] | None:
    """Find the first alternative satisfying the anchoring rules."""
    for pad in alternatives:
        if anchored_start and anchored_end:
            if text == pad:
                return 0, pad
        elif anchored_start:
            if text.startswith(pad):
                return 0, pad
        elif anchored_end:
            if text.endswith(pad):
                return len(text) - len(pad), pad
        else:
            pos = text.find(pad)
            if pos != -1:
                return pos, pad
    return None
