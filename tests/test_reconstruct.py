import pytest

from gridpath.core.cost_table import CostTable
from gridpath.core.errors import BrokenChain
from gridpath.core.reconstruct import reconstruct


def _chain(cells):
    costs = CostTable()
    costs.seed(cells[0], 0)
    for g, (prev, cur) in enumerate(zip(cells, cells[1:]), start=1):
        costs.relax(cur, prev, g, 0)
    return costs


def test_walks_back_to_start():
    cells = [(0, 0), (1, 0), (1, 1), (2, 1)]
    assert reconstruct(_chain(cells), (0, 0), (2, 1)) == cells


def test_start_equals_goal():
    costs = CostTable()
    costs.seed((2, 2), 0)
    assert reconstruct(costs, (2, 2), (2, 2)) == [(2, 2)]


def test_is_repeatable_and_read_only():
    cells = [(0, 0), (0, 1), (0, 2)]
    costs = _chain(cells)
    before = [costs.record(c) for c in cells]
    assert reconstruct(costs, (0, 0), (0, 2)) == reconstruct(costs, (0, 0), (0, 2))
    assert [costs.record(c) for c in cells] == before


def test_missing_predecessor_is_a_broken_chain():
    costs = _chain([(0, 0), (1, 0)])
    costs.relax((5, 5), (4, 5), 3, 0)
    with pytest.raises(BrokenChain):
        reconstruct(costs, (0, 0), (5, 5))


def test_loop_is_a_broken_chain():
    costs = CostTable()
    costs.relax((1, 0), (2, 0), 2, 0)
    costs.relax((2, 0), (1, 0), 1, 0)
    with pytest.raises(BrokenChain):
        reconstruct(costs, (0, 0), (1, 0))
