import pytest

from gridpath.core.cost_table import CostTable
from gridpath.core.errors import EmptyFrontier, NotFound, InvalidInput
from gridpath.core.frontier import HeapFrontier, LinearFrontier, make_frontier

KINDS = [HeapFrontier, LinearFrontier]


def _table(**f_by_name):
    """Cost table where cell (i, 0) gets the i-th f value, h = 0."""
    costs = CostTable()
    cells = []
    for i, f in enumerate(f_by_name.values()):
        c = (i, 0)
        costs.relax(c, (99, 99), f, 0)
        cells.append(c)
    return costs, cells


@pytest.mark.parametrize("kind", KINDS)
def test_extract_min_returns_lowest_f_without_removing(kind):
    costs, (a, b, c) = _table(a=7, b=3, c=5)
    fr = kind(costs)
    for cell in (a, b, c):
        fr.insert_if_absent(cell)
    assert fr.extract_min() == b
    assert fr.size() == 3
    fr.remove(b)
    assert fr.extract_min() == c
    fr.remove(c)
    assert fr.extract_min() == a


@pytest.mark.parametrize("kind", KINDS)
def test_insert_if_absent_keeps_single_membership(kind):
    costs, (a,) = _table(a=4)
    fr = kind(costs)
    fr.insert_if_absent(a)
    fr.insert_if_absent(a)
    assert len(fr) == 1
    fr.remove(a)
    assert fr.is_empty()


@pytest.mark.parametrize("kind", KINDS)
def test_lowered_f_of_a_member_is_seen(kind):
    costs, (a, b) = _table(a=6, b=4)
    fr = kind(costs)
    fr.insert_if_absent(a)
    fr.insert_if_absent(b)
    costs.relax(a, (98, 98), 2, 0)
    fr.insert_if_absent(a)
    assert len(fr) == 2
    assert fr.extract_min() == a


@pytest.mark.parametrize("kind", KINDS)
def test_empty_extract_raises(kind):
    fr = kind(CostTable())
    assert fr.is_empty()
    with pytest.raises(EmptyFrontier):
        fr.extract_min()


@pytest.mark.parametrize("kind", KINDS)
def test_remove_missing_raises(kind):
    costs, (a,) = _table(a=1)
    fr = kind(costs)
    with pytest.raises(NotFound):
        fr.remove(a)
    fr.insert_if_absent(a)
    fr.remove(a)
    with pytest.raises(NotFound):
        fr.remove(a)


def test_linear_frontier_first_encountered_minimum_wins():
    costs, (a, b, c) = _table(a=5, b=2, c=2)
    fr = LinearFrontier(costs)
    for cell in (a, b, c):
        fr.insert_if_absent(cell)
    assert fr.extract_min() == b


def test_make_frontier():
    costs = CostTable()
    assert isinstance(make_frontier("heap", costs), HeapFrontier)
    assert isinstance(make_frontier(" Linear ", costs), LinearFrontier)
    with pytest.raises(InvalidInput):
        make_frontier("fibonacci", costs)
