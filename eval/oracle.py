#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
oracle.py
---------
Independent shortest-path lengths used to check the BFS search.

- exhaustive_shortest_length(): enumerates simple 4-connected paths from
  start to goal by DFS, skipping only branches that provably cannot beat
  the best length found. Exponential; only for small grids (n <= 6).
- graph_shortest_length(): builds the free-cell adjacency as a sparse matrix
  and runs scipy.sparse.csgraph.shortest_path (unweighted). Any size.

Both return the path length in *cells* (hops + 1), or None if unreachable.
"""

from __future__ import annotations
from typing import Dict, List, Optional
import numpy as np

try:
    from scipy.sparse import coo_matrix
    from scipy.sparse.csgraph import shortest_path as cs_shortest_path
except Exception as e:
    raise ImportError("scipy is required for eval.oracle. Install with: pip install scipy") from e

from envs.grid import FlatGrid
from planners.bfs import PathSearch
from .metrics import path_is_valid


def exhaustive_shortest_length(grid: FlatGrid, limit_n: int = 6) -> Optional[int]:
    n = grid.n
    if n > limit_n:
        raise ValueError(f"exhaustive oracle limited to n <= {limit_n}, got n={n}")
    free = grid.free
    goal = grid.goal
    if not free[0, 0] or not free[goal]:
        return None

    best = [None]
    on_path = np.zeros((n, n), dtype=bool)

    def dfs(r: int, c: int, length: int) -> None:
        # prune: even a straight Manhattan finish cannot beat the best so far
        if best[0] is not None and length + (goal[0] - r) + (goal[1] - c) >= best[0]:
            return
        if (r, c) == goal:
            if best[0] is None or length < best[0]:
                best[0] = length
            return
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and free[nr, nc] and not on_path[nr, nc]:
                on_path[nr, nc] = True
                dfs(nr, nc, length + 1)
                on_path[nr, nc] = False

    on_path[0, 0] = True
    dfs(0, 0, 1)
    return best[0]


def _adjacency(free: np.ndarray) -> coo_matrix:
    n = free.shape[0]
    idx = np.arange(n * n).reshape(n, n)
    rows: List[np.ndarray] = []
    cols: List[np.ndarray] = []
    # right and down edges, both directions
    h = free[:, :-1] & free[:, 1:]
    v = free[:-1, :] & free[1:, :]
    for a, b in ((idx[:, :-1][h], idx[:, 1:][h]), (idx[:-1, :][v], idx[1:, :][v])):
        rows += [a, b]
        cols += [b, a]
    r = np.concatenate(rows)
    c = np.concatenate(cols)
    data = np.ones(r.size, dtype=np.float64)
    return coo_matrix((data, (r, c)), shape=(n * n, n * n))


def graph_shortest_length(grid: FlatGrid) -> Optional[int]:
    free = grid.free
    n = grid.n
    if not free[0, 0] or not free[grid.goal]:
        return None
    if n == 1:
        return 1
    dist = cs_shortest_path(_adjacency(free).tocsr(), method="D",
                            unweighted=True, indices=0)
    d = dist[n * n - 1]
    if not np.isfinite(d):
        return None
    return int(d) + 1


def check_against_oracle(grid: FlatGrid, exhaustive_limit: int = 6) -> Dict:
    """Run PathSearch on `grid` and compare with the oracle length."""
    ps = PathSearch.from_grid(grid)
    coords = ps.coords()
    if grid.n <= exhaustive_limit:
        oracle = exhaustive_shortest_length(grid, limit_n=exhaustive_limit)
        kind = "exhaustive"
    else:
        oracle = graph_shortest_length(grid)
        kind = "csgraph"
    bfs_len = len(coords) if coords else None
    valid = path_is_valid(grid, coords) if coords else True
    return {
        "n": grid.n,
        "oracle": kind,
        "has_path": ps.has_path(),
        "bfs_length": bfs_len,
        "oracle_length": oracle,
        "valid": bool(valid),
        "agree": bool(valid and bfs_len == oracle),
    }
