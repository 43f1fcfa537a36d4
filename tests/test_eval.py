import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs.grid import FlatGrid
from envs.generator import generate_grid
from eval.metrics import unflatten, path_hops, path_is_valid
from eval.oracle import exhaustive_shortest_length, graph_shortest_length, check_against_oracle

OPEN3 = FlatGrid.from_cells([1] * 9, 3)

def test_unflatten():
    assert unflatten([0, 0, 1, 0, 1, 1]) == [(0, 0), (1, 0), (1, 1)]
    assert unflatten([]) == []
    with pytest.raises(ValueError):
        unflatten([0, 0, 1])

def test_path_hops():
    assert path_hops([]) == 0
    assert path_hops([(0, 0)]) == 0
    assert path_hops([(0, 0), (0, 1), (1, 1)]) == 2

def test_path_is_valid_rejects_bad_walks():
    good = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert path_is_valid(OPEN3, good)
    assert not path_is_valid(OPEN3, [])
    assert not path_is_valid(OPEN3, [(0, 0), (1, 1), (2, 2)])             # diagonal
    assert not path_is_valid(OPEN3, [(0, 1), (0, 2), (1, 2), (2, 2)])     # wrong start
    assert not path_is_valid(OPEN3, [(0, 0), (0, 1), (0, 2), (1, 2)])     # wrong end
    assert not path_is_valid(OPEN3, [(0, 0), (0, 1), (0, 0), (1, 0), (2, 0), (2, 1), (2, 2)])
    walled = FlatGrid.from_cells([1, 0, 1,
                                  1, 1, 1,
                                  1, 1, 1], 3)
    assert not path_is_valid(walled, good)                                # crosses (0,1)

def test_oracles_on_known_grids():
    assert exhaustive_shortest_length(OPEN3) == 5
    assert graph_shortest_length(OPEN3) == 5
    one = FlatGrid.from_cells([1], 1)
    assert exhaustive_shortest_length(one) == 1
    assert graph_shortest_length(one) == 1
    blocked = FlatGrid.from_cells([1, 0, 0, 1], 2)
    assert exhaustive_shortest_length(blocked) is None
    assert graph_shortest_length(blocked) is None
    no_start = FlatGrid.from_cells([0, 1, 1, 1], 2)
    assert exhaustive_shortest_length(no_start) is None
    assert graph_shortest_length(no_start) is None

def test_exhaustive_oracle_is_size_limited():
    with pytest.raises(ValueError):
        exhaustive_shortest_length(FlatGrid.from_cells([1] * 49, 7))
    assert exhaustive_shortest_length(FlatGrid.from_cells([1] * 49, 7), limit_n=7) == 13

def test_oracles_agree_on_random_small_grids():
    rng = np.random.default_rng(0)
    for n in range(1, 7):
        for _ in range(25):
            grid = generate_grid(n, density=0.35, rng=rng).grid
            assert exhaustive_shortest_length(grid) == graph_shortest_length(grid)

def test_check_against_oracle_small_and_large():
    rng = np.random.default_rng(9)
    small = generate_grid(5, density=0.3, ensure_status="success", rng=rng).grid
    row = check_against_oracle(small)
    assert row["oracle"] == "exhaustive"
    assert row["has_path"] and row["agree"] and row["valid"]
    assert row["bfs_length"] == row["oracle_length"]

    large = generate_grid(40, density=0.3, ensure_status="failure", rng=rng).grid
    row = check_against_oracle(large)
    assert row["oracle"] == "csgraph"
    assert not row["has_path"]
    assert row["oracle_length"] is None
    assert row["agree"]
