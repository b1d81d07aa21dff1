"""Pytest configuration for the cyclefinder test suite.

Hypothesis profiles:
- dev: local development, 200 examples
- ci: CI runs (CI=true), 50 examples

Override manually: HYPOTHESIS_PROFILE=ci pytest tests/
"""

import os

import pytest
from hypothesis import HealthCheck, settings

from cyclefinder.graph.graph_store import GraphStore

settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile(
    "ci",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

_profile = os.getenv("HYPOTHESIS_PROFILE") or ("ci" if os.getenv("CI") else "dev")
settings.load_profile(_profile)


@pytest.fixture
def triangle() -> GraphStore:
    """A-B(1), B-C(2), C-A(3)."""
    return GraphStore.from_edges("ABC", [("A", "B", 1), ("B", "C", 2), ("C", "A", 3)])


@pytest.fixture
def square_with_chord() -> GraphStore:
    """Square A-B-C-D-A plus chord A-C, all weights 1."""
    return GraphStore.from_edges(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1), ("A", "C", 1)],
    )
