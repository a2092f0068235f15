from math import inf

from gridpath.core.cost_table import CostTable, NodeCost


def test_untouched_cell_reads_infinite_without_predecessor():
    costs = CostTable()
    assert costs.record((3, 4)) == NodeCost(inf, inf, None)
    assert (3, 4) not in costs


def test_seed_start():
    costs = CostTable()
    costs.seed((0, 0), 8)
    assert costs.g((0, 0)) == 0
    assert costs.f((0, 0)) == 8
    assert costs.predecessor((0, 0)) is None


def test_relax_only_on_strict_improvement():
    costs = CostTable()
    assert costs.relax((1, 0), (0, 0), 5, 3)
    assert costs.record((1, 0)) == NodeCost(5, 8, (0, 0))
    assert not costs.relax((1, 0), (2, 0), 5, 3)
    assert not costs.relax((1, 0), (2, 0), 6, 3)
    assert costs.predecessor((1, 0)) == (0, 0)
    assert costs.relax((1, 0), (1, 1), 4, 3)
    assert costs.record((1, 0)) == NodeCost(4, 7, (1, 1))
    assert len(costs) == 1
