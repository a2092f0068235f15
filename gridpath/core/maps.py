# gridpath/core/maps.py
#!/usr/bin/env python3
"""
Map sources:
- JSON files in the viewer format (width, height, start, goal, cells[row][col])
- text rows, handy in tests:  X or # wall, S start, G goal, anything else free
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from gridpath.core.types import Grid
from gridpath.core.errors import InvalidInput

Cell = Tuple[int, int]  # (col, row)

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_FILES: Dict[str, Path] = {
    "01_gap_wall":    MAP_DIR / "01_gap_wall.json",
    "02_sealed_wall": MAP_DIR / "02_sealed_wall.json",
    "03_corridors":   MAP_DIR / "03_corridors.json",
}


def load_map(path: Union[str, Path]) -> Grid:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise InvalidInput(f"{path}: not valid JSON ({ex})") from ex
    try:
        width  = int(data["width"])
        height = int(data["height"])
        start  = tuple(data["start"])
        goal   = tuple(data["goal"])
        cells  = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise InvalidInput(f"{path}: missing or malformed field ({ex})") from ex
    if int(data.get("move", 4)) != 4:
        raise InvalidInput(f"{path}: only 4-connected maps are supported")
    if len(cells) != height or not all(len(r) == width for r in cells):
        raise InvalidInput(f"{path}: cells size mismatch")
    grid = Grid.from_cells(cells, start, goal)
    if not grid.in_bounds(start):
        raise InvalidInput(f"{path}: start out of bounds")
    if not grid.in_bounds(goal):
        raise InvalidInput(f"{path}: goal out of bounds")
    return grid


def parse_rows(rows: Sequence[str]) -> Grid:
    if not rows or len({len(r) for r in rows}) != 1:
        raise InvalidInput("rows must be non-empty and of equal length")
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    cells: List[List[int]] = []
    for y, line in enumerate(rows):
        row: List[int] = []
        for x, ch in enumerate(line):
            if ch == "S":
                start = (x, y)
            elif ch == "G":
                goal = (x, y)
            row.append(1 if ch in "X#" else 0)
        cells.append(row)
    return Grid.from_cells(cells, start, goal)
