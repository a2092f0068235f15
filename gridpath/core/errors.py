# gridpath/core/errors.py
"""
Error taxonomy.

InvalidInput and InvalidBudget describe bad caller input; find_path turns them
into an "invalid_input" result. SearchInvariantError and its subclasses mean
the engine state is corrupt and always propagate.
"""


class GridPathError(Exception):
    pass


class InvalidInput(GridPathError, ValueError):
    """Out-of-bounds coordinates, malformed maps or bad settings."""


class InvalidBudget(InvalidInput):
    """Step budget that is not a positive integer."""


class SearchInvariantError(GridPathError, RuntimeError):
    pass


class EmptyFrontier(SearchInvariantError):
    pass


class NotFound(SearchInvariantError):
    def __init__(self, cell):
        super().__init__(f"Failed to remove point {cell} from open set")
        self.cell = cell


class BrokenChain(SearchInvariantError):
    def __init__(self, cell, start):
        super().__init__(f"Predecessor chain from {cell} never reaches start {start}")
        self.cell = cell
        self.start = start
