# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* on a 4-connected occupancy grid with unit edge cost.

Two ways in:
- find_path(grid, start, goal, step_budget) runs a whole search and returns
  a PathResult.
- AStarAlgo exposes init(grid, ...) - reset() - step() -> StepResult, one
  expansion per step(), which is what the viewer animates.

Heuristic: Manhattan distance (admissible and consistent for unit-cost
4-neighbour moves, so the first time goal is extracted its g is optimal).

Each step():
  - extract the lowest-f open cell; if it is the goal, finish
  - otherwise remove it from the open set and relax its neighbours
  - spend one unit of step budget
An empty open set means no path; a spent budget with cells still open means
the search was cut short, which proves nothing about reachability.
"""

from dataclasses import dataclass, field
from typing import Tuple, List, Optional, Any
import logging

from gridpath.core.types import (
    Grid, StepResult, PathResult,
    SUCCESS, NO_PATH, BUDGET_EXCEEDED, INVALID_INPUT,
)
from gridpath.core.cost_table import CostTable
from gridpath.core.frontier import FRONTIERS, make_frontier
from gridpath.core.reconstruct import reconstruct
from gridpath.core.errors import InvalidInput, InvalidBudget

Cell = Tuple[int, int]  # (col, row)

DEFAULT_STEP_BUDGET = 9999

log = logging.getLogger(__name__)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _as_cell(label: str, c: Any, grid: Grid) -> Cell:
    if c is None:
        raise InvalidInput(f"{label} is not set")
    try:
        cell = tuple(c)
    except TypeError:
        raise InvalidInput(f"{label} must be an (x, y) pair, got {c!r}") from None
    if len(cell) != 2 or not all(_is_int(v) for v in cell):
        raise InvalidInput(f"{label} must be a pair of integers, got {c!r}")
    if not grid.in_bounds(cell):
        raise InvalidInput(f"{label} {cell} out of bounds for {grid.width}x{grid.height} grid")
    return cell


def validate_request(grid: Grid, start: Any, goal: Any, step_budget: Any) -> Tuple[Cell, Cell]:
    """Raise InvalidInput / InvalidBudget for anything the engine must not search.

    Returns start and goal as (x, y) tuples.
    """
    if not _is_int(step_budget) or step_budget <= 0:
        raise InvalidBudget(f"step budget must be a positive integer, got {step_budget!r}")
    start = _as_cell("start", start, grid)
    goal = _as_cell("goal", goal, grid)
    if grid.is_block(start):
        raise InvalidInput(f"start {start} is not walkable")
    return start, goal


@dataclass
class AStarAlgo:
    name: str = "A*"
    frontier_kind: str = "heap"

    # Internal state, rebuilt by reset()
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    step_budget: int = DEFAULT_STEP_BUDGET
    costs: CostTable = field(default_factory=CostTable)
    frontier: Any = None
    closed_set: set = field(default_factory=set)   # for overlay
    remaining: int = 0
    expanded: int = 0
    status: str = "idle"
    path: Optional[List[Cell]] = None

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, goal: Optional[Cell] = None,
             step_budget: int = DEFAULT_STEP_BUDGET) -> None:
        """Bind to a grid; start/goal default to the ones the grid carries.

        On InvalidInput the engine keeps its previous grid and search state.
        """
        start, goal = validate_request(
            grid,
            start if start is not None else grid.start,
            goal if goal is not None else grid.goal,
            step_budget,
        )
        if self.frontier_kind.strip().lower() not in FRONTIERS:
            raise InvalidInput(f"Unknown frontier '{self.frontier_kind}'. Available: {sorted(FRONTIERS)}")
        self.grid = grid
        self.start = start
        self.goal = goal
        self.step_budget = step_budget
        self.reset()

    def reset(self) -> None:
        """Fresh cost table and open set, seeded with the start cell."""
        if self.grid is None:
            return
        self.costs = CostTable()
        self.frontier = make_frontier(self.frontier_kind, self.costs)
        self.closed_set = set()
        self.remaining = self.step_budget
        self.expanded = 0
        self.path = None
        self.status = "running"

        self.costs.seed(self.start, manhattan(self.start, self.goal))
        self.frontier.insert_if_absent(self.start)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.status != "running":
            return StepResult(status=self.status, path=self.path, metrics=self.metrics())

        if self.frontier.is_empty():
            self.status = NO_PATH
            log.info("No path from %s to %s after %d expansions", self.start, self.goal, self.expanded)
            return StepResult(status=NO_PATH, metrics=self.metrics())

        if self.remaining <= 0:
            self.status = BUDGET_EXCEEDED
            log.info("Bailed out after %d steps, %d cells still open", self.expanded, self.frontier.size())
            return StepResult(status=BUDGET_EXCEEDED, metrics=self.metrics())

        u = self.frontier.extract_min()
        if u == self.goal:
            self.status = SUCCESS
            self.path = reconstruct(self.costs, self.start, self.goal)
            log.debug("Found a path to the goal: cost %s", self.costs.g(u))
            return StepResult(status=SUCCESS, closed=[u], current=u, path=self.path,
                              metrics=self.metrics())

        self.frontier.remove(u)
        self.closed_set.add(u)
        self.expanded += 1

        # Relax neighbors
        opened_now: List[Cell] = []
        g_u = self.costs.g(u)
        for v in self.grid.neighbors4(u):
            alt = g_u + 1
            if self.costs.relax(v, u, alt, manhattan(v, self.goal)):
                if v not in self.frontier:
                    opened_now.append(v)
                self.frontier.insert_if_absent(v)

        self.remaining -= 1
        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self.metrics())

    def run(self) -> PathResult:
        """Step until the search leaves the running state."""
        while self.status == "running":
            self.step()
        return self.result()

    def result(self) -> PathResult:
        if self.status == SUCCESS:
            return PathResult(status=SUCCESS, path=list(self.path), cost=int(self.costs.g(self.goal)),
                              expanded=self.expanded, costs=self.costs)
        return PathResult(status=self.status, expanded=self.expanded)

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.expanded,
            "open_size": self.frontier.size() if self.frontier is not None else 0,
            "closed_count": len(self.closed_set),
            "budget_left": self.remaining,
            "path_len": len(self.path) if self.path else 0,
            "total_cost": int(self.costs.g(self.goal)) if self.status == SUCCESS else None,
        }


def find_path(grid: Grid, start: Cell, goal: Cell, step_budget: int = DEFAULT_STEP_BUDGET,
              frontier: str = "heap") -> PathResult:
    """Shortest 4-connected path from start to goal.

    Bad input comes back as an "invalid_input" result with the reason set.
    Engine invariant violations (EmptyFrontier, NotFound, BrokenChain) are
    raised, never reported as a result.
    """
    algo = AStarAlgo(frontier_kind=frontier)
    try:
        algo.init(grid, start, goal, step_budget)
    except InvalidInput as ex:
        log.warning("Rejected search request: %s", ex)
        return PathResult(status=INVALID_INPUT, reason=str(ex))
    return algo.run()
