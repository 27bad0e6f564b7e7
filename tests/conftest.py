# tests/conftest.py
import pytest

from maze_solver.core.graph import Graph, build_graph


def parse_layout(rows):
    """Turn ``["..#", ...]`` into a wall grid; ``#`` marks a wall.

    Each string is one outer row, so character ``y`` of string ``x`` is the
    cell ``(x, y)``.
    """
    return [[ch == "#" for ch in row] for row in rows]


@pytest.fixture
def make_graph():
    def _make(rows) -> Graph:
        return build_graph(parse_layout(rows))

    return _make


@pytest.fixture
def open_3x3(make_graph):
    return make_graph(["...", "...", "..."])
