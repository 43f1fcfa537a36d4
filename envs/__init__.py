# -*- coding: utf-8 -*-
"""
Grid containers, file I/O, random generation and rendering.
Exposes:
- FlatGrid, load_grid, save_grid          (grid.py)
- GeneratedGrid, generate_grid, is_reachable  (generator.py)

Rendering lives in envs.render and is imported on demand (pulls in matplotlib).
"""

from __future__ import annotations

from .grid import FlatGrid, load_grid, save_grid
from .generator import GeneratedGrid, generate_grid, is_reachable

__all__ = [
    "FlatGrid",
    "load_grid",
    "save_grid",
    "GeneratedGrid",
    "generate_grid",
    "is_reachable",
]
