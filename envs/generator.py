#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random square grids for exercising the BFS search.

- Each cell is blocked independently with probability `density`.
- Start (0,0) and goal (n-1,n-1) are always left free.
- `ensure_status` resamples until the grid is solvable ("success"),
  unsolvable ("failure"), or accepts anything ("any").
- Reachability is decided by 4-connected component labeling
  (scipy.ndimage), independent of the BFS planner it is used to test.
- Reproducibility: explicit np.random.Generator.

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .grid import FlatGrid

ENSURE_CHOICES = ("any", "success", "failure")

# 4-connected structuring element for cc_label
CROSS = np.array([[0, 1, 0],
                  [1, 1, 1],
                  [0, 1, 0]], dtype=bool)


@dataclass
class GeneratedGrid:
    grid: FlatGrid
    settings: Dict      # generator settings actually used (for provenance)


def is_reachable(grid: FlatGrid) -> bool:
    """True if start and goal lie in the same 4-connected free component."""
    free = grid.free
    if not free[grid.start] or not free[grid.goal]:
        return False
    labels, _ = cc_label(free, structure=CROSS)
    return bool(labels[grid.start] == labels[grid.goal])


def generate_grid(n: int,
                  density: float = 0.3,
                  ensure_status: str = "any",
                  rng: Optional[np.random.Generator] = None,
                  max_tries: int = 200) -> GeneratedGrid:
    """
    Sample an n x n grid.

    ensure_status:
        "any"     : first sample is returned
        "success" : resample until a start->goal path exists
        "failure" : resample until no path exists (impossible for n == 1)
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"density must be in [0, 1], got {density}")
    if ensure_status not in ENSURE_CHOICES:
        raise ValueError(f"Unknown ensure_status '{ensure_status}'. Available: {list(ENSURE_CHOICES)}")
    if ensure_status == "failure" and n == 1:
        raise ValueError("a 1x1 grid with a free start always has a path")
    if rng is None:
        rng = np.random.default_rng()

    settings = dict(n=int(n), density=float(density), ensure_status=ensure_status)

    for attempt in range(1, max_tries + 1):
        free = rng.random((n, n)) >= density
        free[0, 0] = True
        free[n - 1, n - 1] = True
        grid = FlatGrid.from_cells(free.reshape(-1).astype(np.uint8), n)

        if ensure_status == "any":
            ok = True
        elif ensure_status == "success":
            ok = is_reachable(grid)
        else:
            ok = not is_reachable(grid)

        if ok:
            settings["attempts"] = attempt
            return GeneratedGrid(grid=grid, settings=settings)

    raise RuntimeError(
        f"Could not generate a '{ensure_status}' grid (n={n}, density={density}) "
        f"in {max_tries} tries; adjust density"
    )


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    rng = np.random.default_rng(123)
    out = generate_grid(12, density=0.35, ensure_status="success", rng=rng)
    print("Settings:", out.settings)
    print(out.grid.to_text())
    print("#Blocked cells:", int(out.grid.occupancy.sum()))
    print("Path exists?", is_reachable(out.grid))
