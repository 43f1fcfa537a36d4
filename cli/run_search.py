#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Solve one grid with BFS and print the path.

The grid comes either from a file (--grid: .txt, .json, .npy, .npz) or is
sampled at random (--size/--density/--seed).

Examples:
  python -m cli.run_search --grid maps/demo.txt --format ascii
  python -m cli.run_search --size 12 --density 25% --seed 3 \
      --ensure success --format json --plot runs/demo.png
"""

from __future__ import annotations
import argparse, json, sys
import numpy as np

from envs.grid import load_grid, save_grid
from envs.generator import generate_grid, ENSURE_CHOICES
from planners.bfs import PathSearch
from planners.errors import GridError


def _parse_density(s: str) -> float:
    s = s.strip()
    return float(s[:-1]) / 100.0 if s.endswith("%") else float(s)


def format_result(ps: PathSearch, fmt: str, grid=None) -> str:
    if fmt == "flat":
        return " ".join(str(v) for v in ps.path()) if ps.has_path() else "no path"
    if fmt == "json":
        return json.dumps({"n": ps.n, "has_path": ps.has_path(), "path": ps.path()})
    if fmt == "ascii":
        from envs.render import format_ascii
        return format_ascii(grid, ps.coords())
    raise ValueError(f"Unknown format '{fmt}'")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="BFS shortest path from (0,0) to (n-1,n-1) on a square grid.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--grid", type=str, help="Grid file (.txt, .json, .npy, .npz)")
    src.add_argument("--size", type=int, help="Side length n of a random grid")
    ap.add_argument("--density", type=str, default="0.30", help="Blocked-cell probability (0–1 or %%, e.g., 30%%)")
    ap.add_argument("--ensure", type=str, default="any", choices=list(ENSURE_CHOICES),
                    help="Resample random grids until solvable/unsolvable")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for random grids")
    ap.add_argument("--format", type=str, default="flat", choices=["flat", "json", "ascii"], help="Output format")
    ap.add_argument("--plot", type=str, default=None, help="Save a PNG rendering to this path")
    ap.add_argument("--save-grid", type=str, default=None, help="Write the grid used to this file")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.grid:
            grid = load_grid(args.grid)
        else:
            rng = np.random.default_rng(args.seed)
            grid = generate_grid(args.size, density=_parse_density(args.density),
                                 ensure_status=args.ensure, rng=rng).grid
        ps = PathSearch.from_grid(grid)
    except (GridError, ValueError, RuntimeError) as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    print(format_result(ps, args.format, grid))

    if args.save_grid:
        save_grid(args.save_grid, grid)
        print(f"[OK] Wrote: {args.save_grid}", file=sys.stderr)
    if args.plot:
        from envs.render import save_rendering
        title = f"BFS: {'success' if ps.has_path() else 'fail'} ({len(ps)} cells)"
        save_rendering(grid, ps.coords(), args.plot, title=title)
        print(f"Saved: {args.plot}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
