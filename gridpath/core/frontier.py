# gridpath/core/frontier.py
#!/usr/bin/env python3
"""
Open set implementations with a shared contract:

- insert_if_absent(cell)  add cell unless already a member
- extract_min()           member with the lowest f (stays in the set)
- remove(cell)            drop a member, NotFound if absent
- is_empty() / size()

Both read f (and g, for tie-breaking) from the CostTable they were built
with, so the caller writes costs first and inserts second.

HeapFrontier (default) is a heapq priority queue with lazy invalidation,
O(log n) per operation. LinearFrontier scans a plain list and swap-removes,
O(n), fine for grids of a few hundred cells. Tie-breaking differs between
the two and is not part of the contract.
"""

from typing import Dict, Tuple, List, Type
import heapq
from math import inf

from gridpath.core.cost_table import CostTable
from gridpath.core.errors import EmptyFrontier, NotFound, InvalidInput

Cell = Tuple[int, int]  # (col, row)


class HeapFrontier:
    name = "heap"

    def __init__(self, costs: CostTable) -> None:
        self.costs = costs
        self._pq: List[Tuple[float, float, int, Cell]] = []  # (f, h, seq, cell)
        self._members: Dict[Cell, float] = {}               # cell -> f of its live entry
        self._seq = 0  # monotonic counter for PQ stability

    def _bump(self) -> int:
        self._seq += 1
        return self._seq

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, c: Cell) -> bool:
        return c in self._members

    def size(self) -> int:
        return len(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def members(self) -> List[Cell]:
        return list(self._members)

    def insert_if_absent(self, c: Cell) -> None:
        f = self.costs.f(c)
        known = self._members.get(c)
        if known is not None and known <= f:
            return
        # new member, or a member whose f dropped since it was queued
        self._members[c] = f
        h = f - self.costs.g(c)
        heapq.heappush(self._pq, (f, h, self._bump(), c))

    def _drop_stale(self) -> None:
        while self._pq:
            f, _, _, c = self._pq[0]
            if self._members.get(c) == f:
                return
            heapq.heappop(self._pq)

    def extract_min(self) -> Cell:
        self._drop_stale()
        if not self._pq:
            raise EmptyFrontier("extract_min() on an empty open set")
        return self._pq[0][3]

    def remove(self, c: Cell) -> None:
        if c not in self._members:
            raise NotFound(c)
        del self._members[c]


class LinearFrontier:
    name = "linear"

    def __init__(self, costs: CostTable) -> None:
        self.costs = costs
        self._cells: List[Cell] = []

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, c: Cell) -> bool:
        return c in self._cells

    def size(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def members(self) -> List[Cell]:
        return list(self._cells)

    def insert_if_absent(self, c: Cell) -> None:
        if c not in self._cells:
            self._cells.append(c)

    def extract_min(self) -> Cell:
        lowest = inf
        best = None
        for q in self._cells:
            f = self.costs.f(q)
            if f < lowest:
                lowest = f
                best = q
        if best is None:
            raise EmptyFrontier("extract_min() on an empty open set")
        return best

    def remove(self, c: Cell) -> None:
        for i, q in enumerate(self._cells):
            if q == c:
                # replace with the last item
                self._cells[i] = self._cells[-1]
                self._cells.pop()
                return
        raise NotFound(c)


FRONTIERS: Dict[str, Type] = {
    "heap": HeapFrontier,
    "linear": LinearFrontier,
}


def make_frontier(kind: str, costs: CostTable):
    kind = kind.strip().lower()
    if kind not in FRONTIERS:
        raise InvalidInput(f"Unknown frontier '{kind}'. Available: {sorted(FRONTIERS)}")
    return FRONTIERS[kind](costs)
