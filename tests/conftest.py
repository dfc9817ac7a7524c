"""Conformance fixture loader for pathtree.

Loads YAML fixtures from tests/fixtures/ and turns them into lookup and
reversal cases for parametrized testing. Each document registers its
routes in order, then lists lookup ``cases`` and/or ``reversals``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from pathtree import Leaf, PathTree

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FindCase:
    """A single lookup case from a fixture."""

    fixture_name: str
    case_name: str
    tree: PathTree[Any]
    path: str
    expect: Any
    expansions: list[str]


@dataclass
class ReverseCase:
    """A single reversal case from a fixture."""

    fixture_name: str
    case_name: str
    tree: PathTree[Any]
    leaf: Leaf[Any]
    variables: dict[str, str]
    path: str
    unused: dict[str, str]
    missing: list[str]


# ─── Fixture loading ────────────────────────────────────────────────────────


def _load_documents() -> list[dict[str, Any]]:
    docs: list[dict[str, Any]] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        with yaml_file.open() as f:
            docs.extend(doc for doc in yaml.safe_load_all(f) if doc is not None)
    return docs


def _build(doc: dict[str, Any]) -> tuple[PathTree[Any], dict[Any, Leaf[Any]]]:
    tree: PathTree[Any] = PathTree()
    leaves = {}
    for route in doc["routes"]:
        leaves[route["value"]] = tree.add(str(route["pattern"]), route["value"])
    return tree, leaves


def _strings(values: dict[str, Any] | None) -> dict[str, str]:
    return {str(k): str(v) for k, v in (values or {}).items()}


def load_find_cases() -> list[FindCase]:
    """Load every lookup case across all fixture files."""
    cases: list[FindCase] = []
    for doc in _load_documents():
        if "cases" not in doc:
            continue
        tree, _ = _build(doc)
        for case in doc["cases"]:
            cases.append(
                FindCase(
                    fixture_name=doc["name"],
                    case_name=case["name"],
                    tree=tree,
                    path=str(case["path"]),
                    expect=case["expect"],
                    expansions=[str(e) for e in case.get("expansions", [])],
                )
            )
    return cases


def load_reverse_cases() -> list[ReverseCase]:
    """Load every reversal case across all fixture files."""
    cases: list[ReverseCase] = []
    for doc in _load_documents():
        if "reversals" not in doc:
            continue
        tree, leaves = _build(doc)
        for case in doc["reversals"]:
            cases.append(
                ReverseCase(
                    fixture_name=doc["name"],
                    case_name=case["name"],
                    tree=tree,
                    leaf=leaves[case["leaf"]],
                    variables=_strings(case["variables"]),
                    path=str(case["path"]),
                    unused=_strings(case["unused"]),
                    missing=[str(m) for m in case["missing"]],
                )
            )
    return cases


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def tree() -> PathTree[Any]:
    """An empty tree."""
    return PathTree()
