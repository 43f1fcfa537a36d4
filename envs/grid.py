#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Square flat-grid container plus file I/O.

Cells are stored row-major as uint8, 1 = free, 0 = blocked. Any input value
other than 1 is read as blocked (lenient, same as PathSearch).

Supported files:
    .txt   rows of 0/1 digits (whitespace/comma separated or packed), '#' comments
    .json  {"n": 3, "cells": [1, 1, 0, ...]}
    .npy   2-D square array, or flat array of square length
    .npz   arrays 'cells' and 'n' (what save_grid writes)
"""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from planners.bfs import flat_free_mask
from planners.errors import GridError, InvalidDimensions


@dataclass(frozen=True, eq=False)
class FlatGrid:
    """Validated n x n grid kept in flat row-major form."""
    cells: np.ndarray   # (n*n,) uint8, 1 = free
    n: int

    # ------------------------------ builders ------------------------------ #

    @classmethod
    def from_cells(cls, cells, n: int) -> "FlatGrid":
        free = flat_free_mask(cells, n)
        flat = free.reshape(-1).astype(np.uint8)
        flat.setflags(write=False)
        return cls(cells=flat, n=int(n))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "FlatGrid":
        rows = [list(r) for r in rows]
        n = len(rows)
        for r in rows:
            if len(r) != n:
                raise InvalidDimensions(sum(len(x) for x in rows), n)
        return cls.from_cells([v for r in rows for v in r], n)

    @classmethod
    def from_text(cls, text: str) -> "FlatGrid":
        rows: List[List[int]] = []
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            tokens = line.replace(",", " ").split()
            if len(tokens) == 1 and len(tokens[0]) > 1:
                tokens = list(tokens[0])  # packed "1101"
            rows.append([int(t) for t in tokens])
        return cls.from_rows(rows)

    # ------------------------------ views --------------------------------- #

    @property
    def free(self) -> np.ndarray:
        return self.cells.reshape(self.n, self.n) == 1

    @property
    def occupancy(self) -> np.ndarray:
        """(n, n) bool, True = blocked."""
        return ~self.free

    @property
    def start(self) -> Tuple[int, int]:
        return (0, 0)

    @property
    def goal(self) -> Tuple[int, int]:
        return (self.n - 1, self.n - 1)

    def to_text(self) -> str:
        return "\n".join(" ".join(str(int(v)) for v in row)
                         for row in self.cells.reshape(self.n, self.n)) + "\n"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FlatGrid):
            return NotImplemented
        return self.n == other.n and bool(np.array_equal(self.cells, other.cells))


# ---------------------------------- I/O ------------------------------------ #

def _side_from_length(length: int) -> int:
    n = math.isqrt(length)
    if n * n != length:
        raise InvalidDimensions(length, n)
    return n


def load_grid(path: str) -> FlatGrid:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".txt":
        with open(path, "r", encoding="utf-8") as f:
            return FlatGrid.from_text(f.read())
    if ext == ".json":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict) or "cells" not in data:
            raise GridError(f"{path}: expected an object with 'cells'")
        cells = data["cells"]
        n = int(data["n"]) if "n" in data else _side_from_length(len(cells))
        return FlatGrid.from_cells(cells, n)
    if ext == ".npy":
        arr = np.load(path)
        if arr.ndim == 2:
            return FlatGrid.from_rows(arr.tolist())
        return FlatGrid.from_cells(arr, _side_from_length(arr.size))
    if ext == ".npz":
        with np.load(path) as data:
            if "cells" not in data or "n" not in data:
                raise GridError(f"{path}: expected arrays 'cells' and 'n'")
            return FlatGrid.from_cells(data["cells"], int(data["n"]))
    raise ValueError(f"Unknown grid format '{ext}' (expected .txt, .json, .npy, .npz)")


def save_grid(path: str, grid: FlatGrid) -> None:
    ext = os.path.splitext(path)[1].lower()
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    if ext == ".txt":
        with open(path, "w", encoding="utf-8") as f:
            f.write(grid.to_text())
    elif ext == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"n": grid.n, "cells": [int(v) for v in grid.cells]}, f)
    elif ext == ".npy":
        np.save(path, grid.cells.reshape(grid.n, grid.n))
    elif ext == ".npz":
        np.savez_compressed(path, cells=grid.cells, n=grid.n)
    else:
        raise ValueError(f"Unknown grid format '{ext}' (expected .txt, .json, .npy, .npz)")

