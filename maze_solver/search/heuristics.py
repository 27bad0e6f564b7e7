"""Distance heuristics for grid search."""

from __future__ import annotations

from typing import Tuple, Union

from ..core.graph import Cell

Point = Union[Cell, Tuple[int, int]]


def _xy(p: Point) -> Tuple[int, int]:
    if isinstance(p, Cell):
        return p.x, p.y
    return p[0], p[1]


def manhattan_distance(a: Point, b: Point) -> int:
    """Return the Manhattan distance between ``a`` and ``b``, ignoring walls.

    Admissible and consistent for a 4-neighbour grid with unit step cost.
    """

    ax, ay = _xy(a)
    bx, by = _xy(b)
    return abs(ax - bx) + abs(ay - by)


__all__ = ["manhattan_distance"]
