"""A* shortest path search over a :class:`~maze_solver.core.graph.Graph`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import CONFIG
from ..core.errors import OutOfBoundsError
from ..core.graph import Cell, Coord, Graph
from .heuristics import manhattan_distance
from .policy import FScorePolicy
from .priority_queue import MinPriorityQueue

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of a single search.

    ``path`` runs from the cell after ``start`` up to and including ``end``.
    It is empty when no path exists or when ``start == end``.
    """

    path: List[Coord] = field(default_factory=list)
    found: bool = False
    expanded: int = 0
    pushed: int = 0


def _check_bounds(graph: Graph, pos: Coord, label: str) -> None:
    if not graph.in_bounds(pos):
        raise OutOfBoundsError(
            f"{label} {pos} is outside the {graph.width}x{graph.height} grid"
        )


def _reconstruct(graph: Graph, cell: Cell) -> List[Coord]:
    """Follow parent links from ``cell`` back to the start, excluding it."""

    path: List[Coord] = []
    while cell.parent is not None:
        path.append(cell.coord)
        cell = graph.cells[cell.parent]
    path.reverse()
    return path


def search(
    graph: Graph,
    start: Coord,
    end: Coord,
    policy: Optional[FScorePolicy] = None,
) -> SearchResult:
    """Run A* from ``start`` to ``end`` and return a :class:`SearchResult`.

    The graph is reset before searching, so the same instance can serve
    consecutive queries. It must not be shared by concurrent searches.

    Raises :class:`OutOfBoundsError` if either coordinate is off the grid.
    A wall at ``start`` or ``end`` yields an empty result.
    """

    _check_bounds(graph, start, "start")
    _check_bounds(graph, end, "end")
    if policy is None:
        policy = CONFIG.search.f_score_policy
    policy = FScorePolicy(policy)

    graph.reset()
    result = SearchResult()

    start_cell = graph.cell(*start)
    end_cell = graph.cell(*end)
    if start_cell.is_wall or end_cell.is_wall:
        logger.debug("Search %s -> %s skipped: endpoint is a wall", start, end)
        return result

    open_set = MinPriorityQueue()
    start_cell.h = manhattan_distance(start_cell, end_cell)
    start_cell.g = 0
    start_cell.f = 0
    start_cell.visited = True
    open_set.push(start_cell.f, graph.index_of(*start))
    result.pushed += 1

    while open_set:
        index = open_set.pop()
        current = graph.cells[index]
        # Superseded heap entry for a cell that was already expanded.
        if current.closed:
            continue

        if current is end_cell:
            result.path = _reconstruct(graph, current)
            result.found = True
            break

        current.closed = True
        result.expanded += 1

        for neighbor in graph.neighbors(current):
            if neighbor.closed or neighbor.is_wall:
                continue

            g = current.g + 1
            if not neighbor.visited:
                neighbor.visited = True
                neighbor.h = manhattan_distance(neighbor, end_cell)
            elif g >= neighbor.g:
                continue

            neighbor.parent = index
            if policy is FScorePolicy.LAGGED:
                neighbor.f = neighbor.g + neighbor.h
                neighbor.g = g
            else:
                neighbor.g = g
                neighbor.f = g + neighbor.h
            open_set.push(neighbor.f, graph.index_of(neighbor.x, neighbor.y))
            result.pushed += 1

    logger.debug(
        "Search %s -> %s (%s): %s, %d steps, %d expanded, %d pushed",
        start,
        end,
        policy.value,
        "found" if result.found else "no path",
        len(result.path),
        result.expanded,
        result.pushed,
    )
    return result


def find_path(
    graph: Graph,
    start: Coord,
    end: Coord,
    policy: Optional[FScorePolicy] = None,
) -> List[Coord]:
    """Return the shortest path from ``start`` to ``end`` as coordinates.

    The start cell is excluded and the end cell included. An empty list
    means there is no path (or ``start == end``).
    """

    return search(graph, start, end, policy).path


__all__ = ["SearchResult", "find_path", "search"]
