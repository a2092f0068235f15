# gridpath/core/maze.py
"""
Random maze: walled border, open start at (1, 1) and open goal at
(width - 2, height - 2), every other cell a wall with probability
wall_chance / 100. Same seed, same maze.
"""

from typing import List
import random

from gridpath.core.types import Grid
from gridpath.core.errors import InvalidInput


def generate_maze(width: int = 30, height: int = 15, seed: int = 4, wall_chance: int = 25) -> Grid:
    if width < 3 or height < 3:
        raise InvalidInput(f"maze must be at least 3x3, got {width}x{height}")
    if not 0 <= wall_chance <= 100:
        raise InvalidInput(f"wall_chance must be within 0..100, got {wall_chance}")

    rng = random.Random(seed)
    start = (1, 1)
    goal = (width - 2, height - 2)

    cells: List[List[int]] = []
    for y in range(height):
        row: List[int] = []
        for x in range(width):
            if x in (0, width - 1) or y in (0, height - 1):
                row.append(1)
            elif (x, y) in (start, goal):
                row.append(0)
            else:
                row.append(0 if rng.randrange(100) >= wall_chance else 1)
        cells.append(row)
    return Grid.from_cells(cells, start, goal)
