import pytest

from algobox.disjoint_set import DisjointSet


def test_initially_every_element_is_alone():
    dsu = DisjointSet(5)
    for x in range(5):
        assert dsu.find(x) == x
        assert dsu.size_of(x) == 1
    assert not dsu.connected(0, 1)


def test_union_reports_whether_sets_merged():
    dsu = DisjointSet(4)
    assert dsu.union(0, 1) is True
    assert dsu.union(1, 0) is False
    assert dsu.connected(0, 1)


def test_sizes_follow_groups():
    dsu = DisjointSet(8)
    groups = [[0, 1, 2], [3, 4], [5, 6, 7]]
    for group in groups:
        for a, b in zip(group, group[1:]):
            dsu.union(a, b)
    for group in groups:
        for x in group:
            assert dsu.size_of(x) == len(group)
            assert all(dsu.connected(x, y) for y in group)
    assert not dsu.connected(0, 3)
    assert not dsu.connected(4, 5)


def test_merging_groups_adds_sizes():
    dsu = DisjointSet(6)
    dsu.union(0, 1)
    dsu.union(2, 3)
    dsu.union(3, 4)
    before = dsu.size_of(0) + dsu.size_of(2)
    dsu.union(1, 4)
    assert dsu.size_of(0) == before
    assert dsu.find(0) == dsu.find(4)


def test_long_chain_keeps_single_root():
    n = 2000
    dsu = DisjointSet(n)
    for x in range(n - 1):
        dsu.union(x, x + 1)
    roots = {dsu.find(x) for x in range(n)}
    assert len(roots) == 1
    assert dsu.size_of(n - 1) == n


@pytest.mark.parametrize("bad", [-1, 3, 10])
def test_out_of_range_element_raises(bad):
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(bad)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-2)