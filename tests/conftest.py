"""Shared pytest fixtures for the create-regolith-addon test suite.

Provides reusable fixtures for:
- Answer sets covering every scaffolding branch
- A deterministic identifier source
- Planners wired to that source
"""

from __future__ import annotations

import itertools
import uuid
from typing import Any, Callable

import pytest

from regolith_addon.config import Config
from regolith_addon.scaffolder.answers import Answers
from regolith_addon.scaffolder.planner import ProjectPlanner


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def make_sequential_uuids() -> Callable[[], uuid.UUID]:
    """Return a factory yielding UUIDs 00..01, 00..02, ... in order."""
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def make_uuid_factory() -> Callable[[], Callable[[], uuid.UUID]]:
    """Each call returns a new factory starting again from 1."""
    return make_sequential_uuids


@pytest.fixture
def uuid_factory() -> Callable[[], uuid.UUID]:
    return make_sequential_uuids()


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------


@pytest.fixture
def make_answers() -> Callable[..., Answers]:
    """Build ``Answers`` from the minimal no-scripting defaults plus overrides."""

    def _make(**overrides: Any) -> Answers:
        values: dict[str, Any] = {
            "project_name": "My Addon",
            "include_resource_pack": False,
            "target_version": "1.20.0",
            "scripting_language": "none",
            "include_local_filters": False,
            "include_eslint": False,
            "include_prettier": False,
        }
        values.update(overrides)
        return Answers(**values)

    return _make


@pytest.fixture
def minimal_answers(make_answers) -> Answers:
    """No resource pack, no scripting, no tooling."""
    return make_answers()


@pytest.fixture
def full_ts_answers(make_answers) -> Answers:
    """Every option enabled with TypeScript."""
    return make_answers(
        include_resource_pack=True,
        scripting_language="ts",
        include_local_filters=True,
        include_eslint=True,
        include_prettier=True,
    )


@pytest.fixture
def full_js_answers(make_answers) -> Answers:
    """Every option enabled with JavaScript."""
    return make_answers(
        include_resource_pack=True,
        scripting_language="js",
        include_local_filters=True,
        include_eslint=True,
        include_prettier=True,
    )


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------


@pytest.fixture
def planner(uuid_factory) -> ProjectPlanner:
    """Planner with default config and sequential identifiers."""
    return ProjectPlanner(config=Config(), uuid_factory=uuid_factory)
