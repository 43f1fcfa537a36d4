# -*- coding: utf-8 -*-
"""
Shortest-path search on square flat grids:
PathSearch(cells: flat bytes/ints of length n*n, n)
  -> has_path() -> bool
  -> path()     -> [r1, c1, r2, c2, ...]
"""

from __future__ import annotations

from .bfs import PathSearch, shortest_path, flat_free_mask, solve, DELTAS_4
from .errors import GridError, InvalidDimensions, DegenerateGrid

__version__ = "0.1.0"

__all__ = [
    "PathSearch",
    "shortest_path",
    "flat_free_mask",
    "solve",
    "DELTAS_4",
    "GridError",
    "InvalidDimensions",
    "DegenerateGrid",
    "__version__",
]
