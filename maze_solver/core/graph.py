"""Grid graph of wall/open cells with per-search bookkeeping.

Cells live in a flat arena indexed by ``x * height + y``. Parent links are
stored as arena indices rather than object references, which keeps
:meth:`Graph.reset` a single sweep over the list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidGridError, OutOfBoundsError

logger = logging.getLogger(__name__)


Coord = Tuple[int, int]


@dataclass
class Cell:
    """A single grid position and its search state."""

    x: int
    y: int
    is_wall: bool = False
    g: int = 0
    h: int = 0
    f: int = 0
    visited: bool = False
    closed: bool = False
    parent: Optional[int] = None

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def clear(self) -> None:
        """Reset the per-search fields."""

        self.g = 0
        self.h = 0
        self.f = 0
        self.visited = False
        self.closed = False
        self.parent = None

    def __str__(self) -> str:
        return f"[{self.x} {self.y}]"


class Graph:
    """Fixed-size 4-connected grid built from a 2D wall layout.

    ``walls[x][y]`` is ``True`` where the cell is a wall. ``width`` is the
    number of outer rows and ``height`` the length of each row.
    """

    def __init__(self, walls: Sequence[Sequence[bool]]) -> None:
        if not walls:
            raise InvalidGridError("wall grid has no rows")
        height = len(walls[0])
        if height == 0:
            raise InvalidGridError("wall grid rows are empty")
        for x, row in enumerate(walls):
            if len(row) != height:
                raise InvalidGridError(
                    f"row {x} has length {len(row)}, expected {height}"
                )

        self.width: int = len(walls)
        self.height: int = height
        self.cells: List[Cell] = [
            Cell(x, y, bool(walls[x][y]))
            for x in range(self.width)
            for y in range(self.height)
        ]
        logger.debug("Built %dx%d graph", self.width, self.height)

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        return x * self.height + y

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)`` or raise :class:`OutOfBoundsError`."""

        if not self.in_bounds((x, y)):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside the {self.width}x{self.height} grid"
            )
        return self.cells[self.index_of(x, y)]

    def cell_at(self, index: int) -> Cell:
        return self.cells[index]

    def is_wall(self, pos: Coord) -> bool:
        return self.cell(*pos).is_wall

    def parent_of(self, cell: Cell) -> Optional[Cell]:
        """Return the predecessor of ``cell`` on its best known path."""

        if cell.parent is None:
            return None
        return self.cells[cell.parent]

    # ------------------------------------------------------------------
    # Search support
    # ------------------------------------------------------------------
    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return in-bounds cells west, east, north and south of ``cell``.

        The order is fixed since it decides tie-breaks in the open set.
        Walls are included; callers filter them.
        """

        x, y = cell.x, cell.y
        result: List[Cell] = []
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if 0 <= nx < self.width and 0 <= ny < self.height:
                result.append(self.cells[nx * self.height + ny])
        return result

    def reset(self) -> None:
        """Clear search state on every cell so the graph can be searched again."""

        for cell in self.cells:
            cell.clear()

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)


def build_graph(walls: Sequence[Sequence[bool]]) -> Graph:
    """Build a :class:`Graph` from a rectangular wall layout."""

    return Graph(walls)


__all__ = ["Cell", "Coord", "Graph", "build_graph"]
