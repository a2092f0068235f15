# gridpath/core/render.py
from typing import Iterable, List, Optional, Tuple
import logging

from gridpath.core.types import Grid

Cell = Tuple[int, int]  # (col, row)

WALL = "X"
FREE = " "
PATH = "."

log = logging.getLogger(__name__)


def render_text(grid: Grid, path: Optional[Iterable[Cell]] = None) -> str:
    """One text line per row: X for walls, blank for free cells, '.' on the
    path (the start cell keeps its tile)."""
    rows: List[List[str]] = [
        [WALL if grid.is_block((x, y)) else FREE for x in range(grid.width)]
        for y in range(grid.height)
    ]
    if path:
        for x, y in list(path)[1:]:
            if grid.is_block((x, y)):
                log.warning("Overriding obstacle at (%d, %d)", x, y)
            rows[y][x] = PATH
    return "\n".join("".join(r) for r in rows)
