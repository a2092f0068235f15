# gridpath/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-First Search baseline (unweighted shortest hops, 4-connected).
Used as the reference answer when checking A* optimality.
"""

from typing import List, Tuple, Optional, Dict
from collections import deque

from gridpath.core.types import Grid

Cell = Tuple[int, int]  # (col, row)


def bfs_distances(grid: Grid, source: Cell) -> Dict[Cell, int]:
    """Hop count from source to every walkable cell it can reach."""
    dist: Dict[Cell, int] = {source: 0}
    dq = deque([source])
    while dq:
        u = dq.popleft()
        for v in grid.neighbors4(u):
            if v not in dist:
                dist[v] = dist[u] + 1
                dq.append(v)
    return dist


def bfs_path(grid: Grid, start: Cell, goal: Cell) -> Optional[List[Cell]]:
    if grid.is_block(start):
        return None
    if start == goal:
        return [start]

    parent: Dict[Cell, Cell] = {}
    visited = {start}
    dq = deque([start])
    while dq:
        u = dq.popleft()
        if u == goal:
            path = [u]
            while u != start:
                u = parent[u]
                path.append(u)
            path.reverse()
            return path
        for v in grid.neighbors4(u):
            if v in visited:
                continue
            visited.add(v)
            parent[v] = u
            dq.append(v)
    return None
