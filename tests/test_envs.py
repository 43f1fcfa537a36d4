#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import json
import numpy as np
import pytest

from envs.grid import FlatGrid, load_grid, save_grid
from envs.generator import generate_grid, is_reachable
from envs.render import format_ascii, save_rendering
from planners import PathSearch, InvalidDimensions, GridError

DEMO_TEXT = """
# demo grid
1 1 0
0 1 1
0 1 1
"""

def test_from_text_spaced_packed_and_commas_agree():
    a = FlatGrid.from_text(DEMO_TEXT)
    b = FlatGrid.from_text("110\n011\n011\n")
    c = FlatGrid.from_text("1,1,0\n0,1,1\n0,1,1")
    assert a == b == c
    assert a.n == 3
    assert a.cells.tolist() == [1, 1, 0, 0, 1, 1, 0, 1, 1]

def test_non_square_rows_are_rejected():
    with pytest.raises(InvalidDimensions):
        FlatGrid.from_rows([[1, 1, 1], [1, 1, 1]])
    with pytest.raises(InvalidDimensions):
        FlatGrid.from_text("11\n1\n")

def test_cells_are_normalised_and_read_only():
    g = FlatGrid.from_cells([1, 9, 0, 1], 2)
    assert g.cells.tolist() == [1, 0, 0, 1]
    assert g.occupancy.tolist() == [[False, True], [True, False]]
    assert g.start == (0, 0) and g.goal == (1, 1)
    with pytest.raises(ValueError):
        g.cells[0] = 0

def test_to_text_reads_back():
    g = FlatGrid.from_text(DEMO_TEXT)
    assert FlatGrid.from_text(g.to_text()) == g

@pytest.mark.parametrize("ext", [".txt", ".json", ".npy", ".npz"])
def test_save_and_load_each_format(tmp_path, ext):
    g = FlatGrid.from_text(DEMO_TEXT)
    p = str(tmp_path / f"grid{ext}")
    save_grid(p, g)
    assert load_grid(p) == g

def test_json_without_n_infers_side(tmp_path):
    p = tmp_path / "g.json"
    p.write_text(json.dumps({"cells": [1, 1, 1, 1]}))
    assert load_grid(str(p)).n == 2

def test_flat_npy_must_have_square_length(tmp_path):
    p = str(tmp_path / "g.npy")
    np.save(p, np.ones(5, dtype=np.uint8))
    with pytest.raises(InvalidDimensions):
        load_grid(p)

def test_npz_missing_keys(tmp_path):
    p = str(tmp_path / "g.npz")
    np.savez_compressed(p, grid=np.ones(4))
    with pytest.raises(GridError):
        load_grid(p)

def test_json_without_cells_or_object(tmp_path):
    for i, payload in enumerate(({"n": 2}, [1, 1, 1, 1])):
        p = tmp_path / f"g{i}.json"
        p.write_text(json.dumps(payload))
        with pytest.raises(GridError):
            load_grid(str(p))

def test_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        load_grid(str(tmp_path / "g.csv"))
    with pytest.raises(ValueError):
        save_grid(str(tmp_path / "g.csv"), FlatGrid.from_text("1"))

# --- Generator ----------------------------------------------------------------
def test_generate_keeps_corners_free_and_records_settings():
    out = generate_grid(15, density=0.5, rng=np.random.default_rng(0))
    assert out.grid.free[0, 0] and out.grid.free[14, 14]
    assert out.settings["n"] == 15
    assert out.settings["density"] == 0.5
    assert out.settings["attempts"] == 1

def test_generate_is_reproducible():
    a = generate_grid(10, density=0.3, rng=np.random.default_rng(42)).grid
    b = generate_grid(10, density=0.3, rng=np.random.default_rng(42)).grid
    assert a == b

@pytest.mark.parametrize("status,expected", [("success", True), ("failure", False)])
def test_ensure_status(status, expected):
    rng = np.random.default_rng(7)
    for _ in range(5):
        grid = generate_grid(12, density=0.4, ensure_status=status, rng=rng).grid
        assert is_reachable(grid) is expected
        assert PathSearch.from_grid(grid).has_path() is expected

def test_generate_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_grid(0)
    with pytest.raises(ValueError):
        generate_grid(5, density=1.5)
    with pytest.raises(ValueError):
        generate_grid(5, ensure_status="near-failure")
    with pytest.raises(ValueError):
        generate_grid(1, ensure_status="failure")

def test_generate_gives_up_after_max_tries():
    # only the corners are free, so a 3x3 grid can never be solvable
    with pytest.raises(RuntimeError):
        generate_grid(3, density=1.0, ensure_status="success",
                      rng=np.random.default_rng(0), max_tries=5)

# --- Rendering ----------------------------------------------------------------
def test_format_ascii_marks_path():
    g = FlatGrid.from_text(DEMO_TEXT)
    coords = PathSearch.from_grid(g).coords()
    assert format_ascii(g, coords) == "**#\n#*.\n#**"
    assert format_ascii(g) == "..#\n#..\n#.."

def test_save_rendering_writes_png(tmp_path):
    g = FlatGrid.from_text(DEMO_TEXT)
    coords = PathSearch.from_grid(g).coords()
    out = save_rendering(g, coords, str(tmp_path / "figs" / "demo.png"), title="demo")
    assert os.path.getsize(out) > 0
