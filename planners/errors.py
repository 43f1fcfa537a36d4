# -*- coding: utf-8 -*-
"""
Input-shape errors raised while building a grid or a PathSearch.
A blocked start/goal or an unreachable goal is *not* an error: it is a
valid grid with no path.
"""

from __future__ import annotations


class GridError(ValueError):
    """Base class for malformed grid input."""


class InvalidDimensions(GridError):
    """Cell count does not match n*n (or n is negative)."""

    def __init__(self, length: int, n: int):
        self.length = int(length)
        self.n = int(n)
        super().__init__(f"grid has {self.length} cells, expected n*n with n={self.n}")


class DegenerateGrid(GridError):
    """n == 0: there is no start or goal cell."""

    def __init__(self, n: int = 0):
        self.n = int(n)
        super().__init__(f"grid side length must be positive, got n={self.n}")
