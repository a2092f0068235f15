# gridpath/core/cost_table.py
#!/usr/bin/env python3
"""
Per-search cost bookkeeping: g, f and predecessor for every cell.

Cells never touched by the search read back as g = f = inf with no
predecessor, so the table behaves as if fully initialised without
allocating W*H records up front.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Optional, Iterator
from math import inf

Cell = Tuple[int, int]  # (col, row)


@dataclass(frozen=True)
class NodeCost:
    g: float = inf
    f: float = inf
    predecessor: Optional[Cell] = None


class CostTable:
    def __init__(self) -> None:
        self._g: Dict[Cell, int] = {}
        self._f: Dict[Cell, int] = {}
        self._parent: Dict[Cell, Cell] = {}

    def __len__(self) -> int:
        return len(self._g)

    def __contains__(self, c: Cell) -> bool:
        return c in self._g

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._g)

    def g(self, c: Cell) -> float:
        return self._g.get(c, inf)

    def f(self, c: Cell) -> float:
        return self._f.get(c, inf)

    def predecessor(self, c: Cell) -> Optional[Cell]:
        return self._parent.get(c)

    def record(self, c: Cell) -> NodeCost:
        return NodeCost(self.g(c), self.f(c), self.predecessor(c))

    def seed(self, start: Cell, h: int) -> None:
        """Start cell: g = 0, f = h, no predecessor."""
        self._g[start] = 0
        self._f[start] = h

    def relax(self, c: Cell, via: Cell, g: int, h: int) -> bool:
        """Lower g(c) to g through `via`. Returns False (and changes nothing)
        unless g is strictly better than the known cost."""
        if g >= self.g(c):
            return False
        self._parent[c] = via
        self._g[c] = g
        self._f[c] = g + h
        return True
