"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path

from ..core.graph import Coord, Graph
from ..search.astar import find_path


def profile_searches(
    n: int,
    graph: Graph,
    start: Coord,
    end: Coord,
    out_path: str | Path = "search.prof",
) -> pstats.Stats:
    """Profile ``n`` calls of :func:`find_path` and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to run.
    graph:
        Graph searched on every iteration. It is reset by each search.
    start, end:
        Endpoints passed to :func:`find_path`.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        find_path(graph, start, end)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
