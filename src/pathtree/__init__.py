"""pathtree — Trie-based path matching with wildcards and reversal.

All public types are exported from this module for flat imports:

    from pathtree import PathTree, Leaf, DuplicatePathError
"""

__version__ = "0.1.0"

# Config types — see pathtree._config for details
from pathtree._config import (
    ConfigParseError,
    RouteConfig,
    TreeConfig,
    load_tree,
    parse_tree_config,
)

# Matcher
from pathtree._match import find, match_segment

# Pattern compiler
from pathtree._pattern import (
    CompiledPattern,
    PatternSegment,
    RestSegment,
    Segment,
    compile_pattern,
    parse_segment,
    parse_variable,
    split_path,
)

# Reverser
from pathtree._reverse import reverse

# Tree
from pathtree._tree import (
    MAX_PATTERN_LENGTH,
    DuplicatePathError,
    InvalidPatternError,
    Match,
    PathTree,
    PathTreeError,
    PatternTooLongError,
)
from pathtree._types import Edge, Leaf, Node, Wildcard

__all__ = [
    # Data model
    "Wildcard",
    "Node",
    "Edge",
    "Leaf",
    # Pattern compiler
    "Segment",
    "RestSegment",
    "PatternSegment",
    "CompiledPattern",
    "split_path",
    "parse_variable",
    "parse_segment",
    "compile_pattern",
    # Tree
    "PathTree",
    "Match",
    "MAX_PATTERN_LENGTH",
    # Matcher / reverser
    "find",
    "match_segment",
    "reverse",
    # Errors
    "PathTreeError",
    "InvalidPatternError",
    "PatternTooLongError",
    "DuplicatePathError",
    # Config types
    "RouteConfig",
    "TreeConfig",
    "ConfigParseError",
    "parse_tree_config",
    "load_tree",
]
