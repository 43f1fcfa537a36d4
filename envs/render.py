import os
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .grid import FlatGrid


def format_ascii(grid: FlatGrid, coords: Optional[Sequence[Tuple[int, int]]] = None) -> str:
    """'#' blocked, '.' free, '*' on the path."""
    rows = [["." if f else "#" for f in row] for row in grid.free]
    for r, c in coords or ():
        rows[r][c] = "*"
    return "\n".join("".join(row) for row in rows)


def render_grid(grid: FlatGrid, coords: Optional[List[Tuple[int, int]]] = None,
                ax=None, title=None):
    """
    Render a FlatGrid.

    Layers:
      - free cells (white), blocked cells (dark gray)
      - path polyline (lime)
      - start (green star), goal (red star)
    """
    n = grid.n
    if ax is None:
        _, ax = plt.subplots(figsize=(max(2, n / 5), max(2, n / 5)), dpi=120)

    rgb = np.ones((n, n, 3), dtype=float)
    rgb[grid.occupancy] = 0.2

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if coords:
        rr, cc = zip(*coords)
        ax.plot(cc, rr, color="lime", lw=2, alpha=0.8)

    ax.plot(grid.start[1], grid.start[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.text(grid.start[1]+0.2, grid.start[0]-0.2, "S", color="k", fontsize=8)
    ax.plot(grid.goal[1], grid.goal[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
    ax.text(grid.goal[1]+0.2, grid.goal[0]-0.2, "G", color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=10)

    return ax


def save_rendering(grid: FlatGrid, coords, path: str, title=None) -> str:
    fig, ax = plt.subplots(figsize=(max(2, grid.n / 5), max(2, grid.n / 5)), dpi=120)
    render_grid(grid, coords, ax=ax, title=title)
    fig.tight_layout()
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path
