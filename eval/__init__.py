# -*- coding: utf-8 -*-
"""
Evaluation utilities: path metrics and shortest-length oracles.
"""

from __future__ import annotations

from .metrics import unflatten, path_hops, path_is_valid
from .oracle import exhaustive_shortest_length, graph_shortest_length, check_against_oracle

__all__ = [
    "unflatten", "path_hops", "path_is_valid",
    "exhaustive_shortest_length", "graph_shortest_length", "check_against_oracle",
]
