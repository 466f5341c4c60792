"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field
from typing import Any

from deepclone import CopyContext


@pytest.fixture
def context():
    """Fresh strict CopyContext."""
    return CopyContext()


@pytest.fixture
def lenient_context():
    """Fresh lenient CopyContext."""
    return CopyContext(skip_unsupported=True)


@dataclass
class FixtureNode:
    value: int
    next: "FixtureNode | None" = None


@dataclass
class FixtureAccount:
    balance: int
    _label: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class FixtureHolder:
    left: Any = None
    right: Any = None


@pytest.fixture
def node_cls():
    return FixtureNode


@pytest.fixture
def account_cls():
    return FixtureAccount


@pytest.fixture
def holder_cls():
    return FixtureHolder
