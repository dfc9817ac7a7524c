"""Pattern compiler — pattern string -> ordered segment descriptors.

Pattern grammar, per ``/``-separated segment:
- ``*name``                  rest-of-path capture (must be the last segment)
- ``text:name;text``         single-segment variable between padding runs
- ``:[N]name;``              variable of exactly N characters
- ``:[Min,Max]name;``        variable of Min..Max characters
- ``a|b``                    padding alternatives, tried in order

The closing ``;`` may be omitted when the variable ends the segment.
A segment without any ``:`` is a literal and compiles to one padding run
and no wildcards, so the matcher handles literals and wildcards alike.

Bounds are decoded with ``google-re2`` for linear-time matching on
arbitrary pattern text.
"""

from __future__ import annotations

from dataclasses import dataclass

import re2

from pathtree._types import Wildcard

_BOUNDS = re2.compile(r"(?s)\[(\d+)((?:,\d+)?)\](.*)")


@dataclass(frozen=True, slots=True)
class Segment:
    """One compiled path segment.

    ``text`` is the segment's source text and doubles as the edge key.
    ``padding`` holds one tuple of alternatives per padding run.
    """

    text: str
    padding: tuple[tuple[str, ...], ...]
    wildcards: tuple[Wildcard, ...] = ()
    ends_in_wildcard: bool = False

    @property
    def is_literal(self) -> bool:
        return not self.wildcards


@dataclass(frozen=True, slots=True)
class RestSegment:
    """A ``*name`` segment that captures every remaining path segment."""

    name: str

    @property
    def wildcard(self) -> Wildcard:
        return Wildcard(self.name, rest=True)


type PatternSegment = Segment | RestSegment


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A pattern split into segment descriptors."""

    segments: tuple[PatternSegment, ...]
    trailing_slash: bool = False


def split_path(path: str) -> tuple[list[str], bool]:
    """Split a path on ``/``.

    Drops the empty element produced by the leading slash and, when the
    path ends in a slash, the trailing empty element. Returns the elements
    and whether a trailing slash was dropped.

        "/a/b/"  -> (["a", "b"], True)
        "/"      -> ([], True)
        "//now"  -> (["", "now"], False)
    """
    elements = path.split("/")
    if elements[0] == "":
        elements = elements[1:]
    if elements and elements[-1] == "":
        return elements[:-1], True
    return elements, False


def parse_variable(spec: str) -> Wildcard:
    """Decode the text between ``:`` and ``;``.

    Undecodable bounds fall back to an unconstrained variable named by
    the raw text.
    """
    m = _BOUNDS.fullmatch(spec)
    if m is None:
        return Wildcard(spec)
    low = int(m.group(1))
    high = int(m.group(2)[1:]) if m.group(2) else low
    return Wildcard(m.group(3), min=low, max=high)


def parse_segment(text: str) -> PatternSegment:
    """Compile one segment of a pattern."""
    if text.startswith("*"):
        return RestSegment(text[1:])

    padding: list[tuple[str, ...]] = []
    wildcards: list[Wildcard] = []
    pos = 0
    while True:
        colon = text.find(":", pos)
        if colon == -1:
            padding.append(_alternatives(text[pos:]))
            ends_in_wildcard = False
            break
        padding.append(_alternatives(text[pos:colon]))
        semi = text.find(";", colon + 1)
        if semi == -1:
            wildcards.append(parse_variable(text[colon + 1 :]))
            ends_in_wildcard = True
            break
        wildcards.append(parse_variable(text[colon + 1 : semi]))
        pos = semi + 1
        if pos == len(text):
            ends_in_wildcard = True
            break

    return Segment(
        text=text,
        padding=tuple(padding),
        wildcards=tuple(wildcards),
        ends_in_wildcard=ends_in_wildcard,
    )


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a full pattern. The caller checks the leading ``/``."""
    elements, trailing_slash = split_path(pattern)
    return CompiledPattern(
        segments=tuple(parse_segment(el) for el in elements),
        trailing_slash=trailing_slash,
    )


def _alternatives(run: str) -> tuple[str, ...]:
    return tuple(run.split("|"))
