# -*- coding: utf-8 -*-
"""
A* shortest paths on 2D occupancy grids.
"""

from gridpath.core.astar import AStarAlgo, find_path, manhattan
from gridpath.core.types import Grid, PathResult, StepResult, Cell
from gridpath.core.reconstruct import reconstruct

__all__ = [
    "__version__",
    "AStarAlgo",
    "Cell",
    "Grid",
    "PathResult",
    "StepResult",
    "find_path",
    "manhattan",
    "reconstruct",
]

__version__ = "0.1.0"
