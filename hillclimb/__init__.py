"""Fewest-step routes over a letter heightmap under a climb-at-most-one rule."""

from hillclimb.errors import FormatError, HeightmapError, UnreachableError
from hillclimb.solver import Solution, solve

__all__ = [
    "FormatError",
    "HeightmapError",
    "Solution",
    "UnreachableError",
    "solve",
]
