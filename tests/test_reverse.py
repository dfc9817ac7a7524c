"""Tests for the reverser (PathTree.reverse)."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from pathtree import PathTree, reverse
from pathtree.testing import tree_from_routes


class TestReverse:
    def test_bounds_violation_reported(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/Archive_:[2,4]year;", "x")
        path, unused, missing = tree.reverse(leaf, {"year": "1"})
        assert path == "/Archive_"
        assert unused == {"year": "1"}
        assert missing == ["[2,4]year"]

    def test_literal_pattern(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/path/to/nowhere/", 1)
        assert tree.reverse(leaf, {}) == ("/path/to/nowhere/", {}, [])

    def test_first_alternative_used(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/img|image/:name;.png|.jpg", 1)
        assert tree.reverse(leaf, {"name": "cat"}) == ("/img/cat.png", {}, [])

    def test_missing_in_path_order(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/:a/x:b;y/:c", 1)
        path, unused, missing = tree.reverse(leaf, {})
        assert path == "//xy/"
        assert missing == ["[0,0]a", "[0,0]b", "[0,0]c"]

    def test_does_not_mutate_variables(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/:id", 1)
        variables = {"id": "7", "extra": "1"}
        _, unused, _ = tree.reverse(leaf, variables)
        assert unused == {"extra": "1"}
        assert variables == {"id": "7", "extra": "1"}

    def test_repeated_name_consumed_once(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/:id/:id", 1)
        path, unused, missing = tree.reverse(leaf, {"id": "7"})
        assert path == "/7/"
        assert unused == {}
        assert missing == ["[0,0]id"]


class TestReverseStar:
    def test_star_value_appended(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/static/*path", 1)
        assert tree.reverse(leaf, {"path": "css/site.css"}) == ("/static/css/site.css", {}, [])

    def test_star_missing(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/static/*path", 1)
        path, unused, missing = tree.reverse(leaf, {})
        assert path == "/static/"
        assert missing == ["*path"]

    def test_empty_star_value_is_missing(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/*rest", 1)
        path, unused, missing = tree.reverse(leaf, {"rest": ""})
        assert missing == ["*rest"]
        assert unused == {"rest": ""}

    def test_star_with_trailing_slash(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/:first/*star/", 1)
        path, _, missing = tree.reverse(leaf, {"first": "a", "star": "b/c"})
        assert path == "/a/b/c/"
        assert missing == []


class TestReverseSoftFailures:
    def test_none_leaf(self, tree: PathTree[Any]) -> None:
        assert tree.reverse(None, {"a": "1"}) == ("", {"a": "1"}, [])

    def test_detached_leaf(self, tree: PathTree[Any]) -> None:
        leaf = tree.add("/a", 1)
        leaf.parent = None
        assert reverse(leaf, {"a": "1"}) == ("", {"a": "1"}, [])


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("pattern", "variables"),
        [
            ("/users/:id", {"id": "42"}),
            ("/P:first;/U:[4,10]second", {"first": "a", "second": "abcd"}),
            ("/Archive_:first;_:[2,4]year;", {"first": "March", "year": "2013"}),
            ("/User_:first;//:second;.:third;", {"first": "Freddy", "second": "index", "third": "html"}),
            ("/:first/*star/", {"first": "a", "star": "b/c"}),
            ("/is:id;really/found/now", {"id": "here"}),
        ],
    )
    def test_reverse_then_find(self, pattern: str, variables: dict[str, str]) -> None:
        tree = tree_from_routes([(pattern, "target"), ("/*fallback", "fallback")])
        leaf = tree.leaves()[0]

        path, unused, missing = tree.reverse(leaf, variables)
        assert unused == {}
        assert missing == []

        found, expansions = tree.find(path)
        assert found is leaf
        assert leaf.bind(expansions) == variables


class TestReverseLogging:
    def test_missing_logged(self, tree: PathTree[Any], caplog: pytest.LogCaptureFixture) -> None:
        leaf = tree.add("/:id", 1)
        with caplog.at_level(logging.DEBUG, logger="pathtree"):
            tree.reverse(leaf, {})
        assert "[0,0]id" in caplog.text
