# gridpath/core/reconstruct.py
from typing import List, Tuple

from gridpath.core.cost_table import CostTable
from gridpath.core.errors import BrokenChain

Cell = Tuple[int, int]  # (col, row)


def reconstruct(costs: CostTable, start: Cell, goal: Cell) -> List[Cell]:
    """Follow predecessor links from goal back to start.

    Returns the route start..goal inclusive. Read-only on `costs`, so calling
    it twice on the same table gives the same list. Raises BrokenChain when a
    missing predecessor (or a loop) is hit before reaching start.
    """
    path: List[Cell] = [goal]
    cur = goal
    while cur != start:
        prev = costs.predecessor(cur)
        if prev is None or len(path) > len(costs):
            raise BrokenChain(cur, start)
        path.append(prev)
        cur = prev
    path.reverse()
    return path
