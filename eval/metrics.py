#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Checks and summaries for returned paths.

What's inside
-------------
- unflatten(): [r1, c1, r2, c2, ...] -> [(r1, c1), (r2, c2), ...]
- path_is_valid(): corners, 4-adjacency, free cells, no revisits
- path_hops(): number of moves
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from envs.grid import FlatGrid

Coord = Tuple[int, int]


def unflatten(flat: Sequence[int]) -> List[Coord]:
    if len(flat) % 2:
        raise ValueError(f"flat path must have even length, got {len(flat)}")
    return [(int(flat[i]), int(flat[i + 1])) for i in range(0, len(flat), 2)]


def path_hops(coords: Sequence[Coord]) -> int:
    return max(len(coords) - 1, 0)


def path_is_valid(grid: FlatGrid, coords: Sequence[Coord]) -> bool:
    """
    True if `coords` is a start->goal walk through free cells where every
    step moves exactly one unit along one axis and no cell repeats.
    An empty path is not valid (callers check has_path first).
    """
    if not coords:
        return False
    if tuple(coords[0]) != grid.start or tuple(coords[-1]) != grid.goal:
        return False
    free = grid.free
    n = grid.n
    for r, c in coords:
        if not (0 <= r < n and 0 <= c < n) or not free[r, c]:
            return False
    for (r0, c0), (r1, c1) in zip(coords[:-1], coords[1:]):
        if abs(r1 - r0) + abs(c1 - c0) != 1:
            return False
    return len(set(map(tuple, coords))) == len(coords)
