# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.core.cost_table import CostTable

Cell = Tuple[int, int]  # (col, row)

# PathResult / StepResult statuses
SUCCESS = "success"
NO_PATH = "no_path"
BUDGET_EXCEEDED = "budget_exceeded"
INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]    # [row][col], 1 = wall
    start: Optional[Cell] = None
    goal: Optional[Cell] = None

    @classmethod
    def from_cells(cls, cells: List[List[int]], start: Optional[Cell] = None,
                   goal: Optional[Cell] = None) -> "Grid":
        height = len(cells)
        width = len(cells[0]) if height else 0
        frozen = tuple(tuple(int(v) for v in row) for row in cells)
        return cls(width, height, frozen, start, goal)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        """False for walls and for anything off the grid."""
        if not self.in_bounds((x, y)):
            return False
        return self.cells[y][x] != 1

    def is_block(self, c: Cell) -> bool:
        x, y = c
        return not self.is_walkable(x, y)

    def neighbors4(self, c: Cell) -> List[Cell]:
        """In-bounds walkable orthogonal neighbours of c (left, up, right, down)."""
        x, y = c
        out: List[Cell] = []
        for n in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
            if self.in_bounds(n) and not self.is_block(n):
                out.append(n)
        return out

    def walkable_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_walkable(x, y):
                    yield (x, y)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "success" | "no_path" | "budget_exceeded"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PathResult:
    status: str                   # SUCCESS | NO_PATH | BUDGET_EXCEEDED | INVALID_INPUT
    path: Optional[List[Cell]] = None
    cost: Optional[int] = None
    expanded: int = 0
    reason: Optional[str] = None
    costs: Optional["CostTable"] = None   # final cost table, kept on success

    @property
    def found(self) -> bool:
        return self.status == SUCCESS

    def __str__(self) -> str:
        if self.found:
            return f"success: cost {self.cost}, {len(self.path)} cells, {self.expanded} expanded"
        if self.reason:
            return f"{self.status}: {self.reason}"
        return f"{self.status} after {self.expanded} expansions"
