# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search : solve one grid (file or random) and print/plot the path
- run_check  : oracle sweep over random small grids, CSV + summary
"""
__all__ = [
    "run_search",
    "run_check",
]
