"""Shared fixtures for the MatrixGraph test suite."""

import pytest

from matrixgraph.core.graph import GraphModel


@pytest.fixture
def path_model():
    """A - B - C with weights 3 and 1 (A and C not adjacent)."""
    return GraphModel(3, [[0, 3, ""], [3, 0, 1], ["", 1, 0]])


@pytest.fixture
def triangle_model():
    """Complete symmetric triangle with distinct weights."""
    return GraphModel(3, [[0, 2, 3], [2, 0, 1], [3, 1, 0]])


@pytest.fixture
def directed_cycle_model():
    """A -> B -> C -> A."""
    return GraphModel(3, [[0, 4, ""], ["", 0, 2], [7, "", 0]])


@pytest.fixture
def disconnected_model():
    """A - B plus an isolated vertex C."""
    return GraphModel(3, [[0, 5, ""], [5, 0, ""], ["", "", 0]])
