"""How the A* search derives a cell's ``f`` score on relaxation."""

from __future__ import annotations

from enum import Enum


class FScorePolicy(str, Enum):
    """``CORRECTED`` uses ``f = g' + h`` with the new cost.

    ``LAGGED`` computes ``f`` from the cell's previous ``g`` before
    overwriting it, so ``f`` trails one relaxation behind. A freshly
    discovered cell then gets ``f = h`` and the search behaves close to
    greedy best-first, which can return longer paths around walls.
    """

    CORRECTED = "corrected"
    LAGGED = "lagged"


__all__ = ["FScorePolicy"]
