"""Config types for building a PathTree from data.

The same dict shape loads from YAML or JSON:

    strict_star: false
    routes:
      - pattern: /users/:id
        value: user
      - pattern: /static/*path
        value: static

Config-driven construction path:
  dict → parse_tree_config() → TreeConfig → load_tree() → PathTree

Routes are registered in list order, so list order is priority order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pathtree._tree import MAX_PATTERN_LENGTH, PathTree


@dataclass(frozen=True, slots=True)
class RouteConfig[V]:
    """One pattern and the value stored on its leaf."""

    pattern: str
    value: V


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Tree options plus the routes to register, in priority order."""

    routes: tuple[RouteConfig[Any], ...]
    strict_star: bool = False
    max_pattern_length: int = MAX_PATTERN_LENGTH


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_tree_config(data: dict[str, Any]) -> TreeConfig:
    """Parse a dict into a TreeConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    strict_star = data.get("strict_star", False)
    if not isinstance(strict_star, bool):
        msg = f"'strict_star' must be a bool, got {type(strict_star).__name__}"
        raise ConfigParseError(msg)

    max_pattern_length = data.get("max_pattern_length", MAX_PATTERN_LENGTH)
    if isinstance(max_pattern_length, bool) or not isinstance(max_pattern_length, int):
        msg = f"'max_pattern_length' must be an int, got {type(max_pattern_length).__name__}"
        raise ConfigParseError(msg)
    if max_pattern_length < 1:
        msg = f"'max_pattern_length' must be positive, got {max_pattern_length}"
        raise ConfigParseError(msg)

    return TreeConfig(
        routes=tuple(_parse_route(r) for r in raw_routes),
        strict_star=strict_star,
        max_pattern_length=max_pattern_length,
    )


def load_tree(config: TreeConfig) -> PathTree[Any]:
    """Build a PathTree from configuration.

    Raises:
        InvalidPatternError: a route pattern is malformed
        DuplicatePathError: two routes share the same pattern
    """
    tree: PathTree[Any] = PathTree(
        strict_star=config.strict_star,
        max_pattern_length=config.max_pattern_length,
    )
    for route in config.routes:
        tree.add(route.pattern, route.value)
    return tree


def _parse_route(data: dict[str, Any]) -> RouteConfig[Any]:
    """Parse a route dict."""
    if not isinstance(data, dict):
        msg = f"route must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "pattern" not in data:
        msg = "route missing required field 'pattern'"
        raise ConfigParseError(msg)
    pattern = data["pattern"]
    if not isinstance(pattern, str):
        msg = f"pattern must be a string, got {type(pattern).__name__}"
        raise ConfigParseError(msg)

    if "value" not in data:
        msg = f"route {pattern!r} missing required field 'value'"
        raise ConfigParseError(msg)

    return RouteConfig(pattern=pattern, value=data["value"])
