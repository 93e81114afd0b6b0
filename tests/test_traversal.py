import random

import pytest

from algobox.traversal import UndirectedGraph, has_directed_cycle, topological_sort


@pytest.fixture
def sample_graph():
    graph = UndirectedGraph(4)
    for src, dest in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        graph.add_edge(src, dest)
    return graph


def _random_dag(seed, n=12, edge_count=25):
    rng = random.Random(seed)
    edges = set()
    while len(edges) < edge_count:
        u, v = rng.sample(range(n), 2)
        edges.add((min(u, v), max(u, v)))
    return n, sorted(edges)


def test_neighbours_newest_first(sample_graph):
    assert sample_graph.neighbours(0) == [2, 1]


def test_bfs_order(sample_graph):
    assert sample_graph.bfs(0) == [0, 2, 1, 3]


def test_dfs_order_matches_example(sample_graph):
    assert sample_graph.dfs(0) == [0, 2, 3, 1]


def test_traversals_are_repeatable(sample_graph):
    first = sample_graph.bfs(0)
    assert sample_graph.bfs(0) == first
    assert sorted(sample_graph.dfs(3)) == [0, 1, 2, 3]


def test_traversals_stay_in_component():
    graph = UndirectedGraph(5)
    graph.add_edge(0, 1)
    graph.add_edge(3, 4)
    assert sorted(graph.bfs(0)) == [0, 1]
    assert sorted(graph.dfs(4)) == [3, 4]
    assert graph.bfs(2) == [2]


def test_traversals_visit_each_vertex_once():
    rng = random.Random(7)
    graph = UndirectedGraph(20)
    for _ in range(40):
        graph.add_edge(rng.randrange(20), rng.randrange(20))
    for start in (0, 5, 19):
        for order in (graph.bfs(start), graph.dfs(start)):
            assert order[0] == start
            assert len(order) == len(set(order))
        assert set(graph.bfs(start)) == set(graph.dfs(start))


def test_dfs_steps_to_neighbour_of_an_earlier_vertex():
    rng = random.Random(3)
    graph = UndirectedGraph(15)
    for _ in range(25):
        graph.add_edge(rng.randrange(15), rng.randrange(15))
    order = graph.dfs(0)
    for position, vertex in enumerate(order[1:], start=1):
        assert any(vertex in graph.neighbours(prev) for prev in order[:position])


def test_invalid_vertices_rejected(sample_graph):
    with pytest.raises(ValueError):
        sample_graph.add_edge(0, 4)
    with pytest.raises(ValueError):
        sample_graph.bfs(-1)
    with pytest.raises(ValueError):
        sample_graph.dfs(10)
    with pytest.raises(ValueError):
        UndirectedGraph(-1)


def test_cycle_example_detected():
    assert has_directed_cycle(4, [(0, 1), (1, 2), (2, 3), (3, 1)]) is True


def test_self_loop_is_a_cycle():
    assert has_directed_cycle(3, [(0, 1), (2, 2)]) is True


@pytest.mark.parametrize("seed", range(5))
def test_dags_have_no_cycle_until_back_edge_added(seed):
    n, edges = _random_dag(seed)
    assert has_directed_cycle(n, edges) is False
    u, v = edges[0]
    assert has_directed_cycle(n, edges + [(v, u)]) is True


def test_topological_sort_example():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    assert topological_sort(6, edges) == [5, 4, 2, 3, 1, 0]


@pytest.mark.parametrize("seed", range(5))
def test_topological_order_respects_edges(seed):
    n, edges = _random_dag(seed)
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(n))
    position = {vertex: index for index, vertex in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_directed_edge_out_of_range():
    with pytest.raises(ValueError):
        topological_sort(3, [(0, 3)])
    with pytest.raises(ValueError):
        has_directed_cycle(2, [(-1, 0)])