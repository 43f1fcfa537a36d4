#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search on a square, flattened grid.
- Start is always (0, 0), goal is always (n-1, n-1).
- 4-connected, unit cost; returns a minimum-cell path.
- Cell value 1 is free, anything else is blocked.

Neighbour order is up, down, left, right. When several shortest paths
exist, this order decides which one is returned.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from collections import deque
import numpy as np

from .errors import DegenerateGrid, InvalidDimensions

Coord = Tuple[int, int]

# up, down, left, right
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


def flat_free_mask(cells, n: int) -> np.ndarray:
    """
    Validate a row-major flat grid and return its (n, n) bool free mask.

    `cells` may be bytes/bytearray/memoryview, a sequence of ints or a
    NumPy array (flattened in C order).
    """
    if isinstance(cells, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(bytes(cells), dtype=np.uint8)
    else:
        arr = np.asarray(cells).reshape(-1)
    n = int(n)
    if n < 0 or arr.size != n * n:
        raise InvalidDimensions(arr.size, n)
    if n == 0:
        raise DegenerateGrid(n)
    return (arr == 1).reshape(n, n)


def _reconstruct(came_from: Dict[Coord, Coord], goal: Coord) -> List[Coord]:
    path = [goal]
    cur = goal
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path


def shortest_path(free: np.ndarray, n: int) -> List[Coord]:
    """
    BFS from (0,0) to (n-1,n-1) over a validated (n, n) free mask.
    Returns the path as (row, col) tuples, or [] if the goal is unreachable.
    """
    start, goal = (0, 0), (n - 1, n - 1)
    if not free[start] or not free[goal]:
        return []
    if start == goal:
        return [start]

    visited = np.zeros((n, n), dtype=bool)
    came_from: Dict[Coord, Coord] = {}

    dq = deque([start])
    visited[start] = True

    while dq:
        r, c = dq.popleft()
        if (r, c) == goal:
            return _reconstruct(came_from, goal)
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if nr < 0 or nr >= n or nc < 0 or nc >= n:
                continue
            if visited[nr, nc] or not free[nr, nc]:
                continue
            visited[nr, nc] = True
            came_from[(nr, nc)] = (r, c)
            dq.append((nr, nc))

    return []


class PathSearch:
    """
    Solves the grid once, at construction. Afterwards every query is a
    read of the stored path; no working state is kept.

    >>> ps = PathSearch([1, 1, 0, 0, 1, 1, 0, 1, 1], 3)
    >>> ps.has_path()
    True
    >>> ps.path()
    [0, 0, 0, 1, 1, 1, 2, 1, 2, 2]
    """

    __slots__ = ("_n", "_path")

    def __init__(self, cells, n: int):
        free = flat_free_mask(cells, n)
        self._n = int(n)
        self._path: Tuple[Coord, ...] = tuple(shortest_path(free, self._n))

    @classmethod
    def from_grid(cls, grid) -> "PathSearch":
        """Build from any object exposing flat `cells` and side length `n`."""
        return cls(grid.cells, grid.n)

    @property
    def n(self) -> int:
        return self._n

    def has_path(self) -> bool:
        return len(self._path) > 0

    def path(self) -> List[int]:
        """Flat [r1, c1, r2, c2, ...] from start to goal; [] if no path."""
        return [int(v) for rc in self._path for v in rc]

    def coords(self) -> List[Coord]:
        return list(self._path)

    def as_result(self) -> Dict:
        """Planner-style result: {'success': bool, 'path': [(r,c), ...] or None}."""
        if not self._path:
            return {'success': False, 'path': None}
        return {'success': True, 'path': list(self._path)}

    def __len__(self) -> int:
        return len(self._path)

    def __repr__(self) -> str:
        return f"PathSearch(n={self._n}, cells_on_path={len(self._path)})"


def solve(cells: Sequence[int], n: int) -> Optional[List[Coord]]:
    """Functional shortcut: the shortest path as coordinates, or None."""
    coords = PathSearch(cells, n).coords()
    return coords or None
