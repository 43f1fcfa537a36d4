#!/usr/bin/env python3
import importlib, sys, traceback, numpy as np
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_envs():
    gen = importlib.import_module("envs.generator")
    out = gen.generate_grid(20, density=0.30, rng=np.random.default_rng(0))
    assert out.grid.free.shape == (20, 20)
    assert out.grid.free[0, 0] and out.grid.free[19, 19]

def test_planner():
    PathSearch = importlib.import_module("planners.bfs").PathSearch
    ps = PathSearch(bytes([1, 1, 0, 0, 1, 1, 0, 1, 1]), 3)
    assert ps.has_path() and ps.path() == [0, 0, 0, 1, 1, 1, 2, 1, 2, 2]

def test_oracle():
    from envs.generator import generate_grid
    oracle = importlib.import_module("eval.oracle")
    rng = np.random.default_rng(1)
    for _ in range(20):
        grid = generate_grid(5, density=0.3, rng=rng).grid
        row = oracle.check_against_oracle(grid)
        assert row["agree"], row

def test_cli_help():
    import subprocess
    for mod in ["cli.run_search", "cli.run_check"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], cwd=str(ROOT),
                           stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("envs", test_envs)
    check("planners", test_planner)
    check("eval.oracle", test_oracle)
    check("cli --help", test_cli_help)
