"""Exceptions raised by the grid and search layers."""

from __future__ import annotations


class MazeSolverError(Exception):
    """Base error for maze_solver."""


class InvalidGridError(MazeSolverError, ValueError):
    """Raised when a wall grid is empty or its rows differ in length."""


class OutOfBoundsError(MazeSolverError, IndexError):
    """Raised when a coordinate lies outside the grid."""


__all__ = ["MazeSolverError", "InvalidGridError", "OutOfBoundsError"]
