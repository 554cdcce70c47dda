import random
from collections import Counter

import pytest

from cpalgo.traversal import (
    SubtreeSums,
    bfs_distances,
    eulerian_circuit,
    euler_tour,
    has_cycle,
    topological_sort,
)


def _random_tree_parents(n, seed):
    rng = random.Random(seed)
    return [None] + [rng.randrange(i) for i in range(1, n)]


def _adjacency_from_parents(parents):
    adjacency = [[] for _ in parents]
    for child, parent in enumerate(parents):
        if parent is not None:
            adjacency[child].append(parent)
            adjacency[parent].append(child)
    return adjacency


def test_bfs_on_a_path_counts_steps():
    n = 6
    edges = [(i, i + 1) for i in range(n - 1)]
    assert bfs_distances(n, edges) == list(range(n))


def test_bfs_distances_differ_by_at_most_one_along_edges():
    rng = random.Random(3)
    n = 30
    edges = [(i, rng.randrange(i)) for i in range(1, n)]
    edges += [(rng.randrange(n), rng.randrange(n)) for _ in range(20)]
    dist = bfs_distances(n, edges)
    assert dist[0] == 0
    for u, v in edges:
        assert abs(dist[u] - dist[v]) <= 1


def test_bfs_unreachable_vertex_keeps_zero():
    dist = bfs_distances(3, [(0, 1)])
    assert dist[1] == 1
    assert dist[2] == 0


def test_bfs_rejects_bad_edge():
    with pytest.raises(ValueError):
        bfs_distances(2, [(0, 2)])


def test_cycle_detected_in_triangle():
    assert has_cycle(3, [(0, 1), (1, 2), (2, 0)])


def test_no_cycle_in_dag():
    assert not has_cycle(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


def test_self_loop_is_a_cycle():
    assert has_cycle(2, [(0, 1), (1, 1)])


def test_topological_order_respects_edges():
    rng = random.Random(5)
    n = 25
    labels = list(range(n))
    rng.shuffle(labels)
    edges = []
    for _ in range(60):
        a, b = sorted(rng.sample(range(n), 2))
        edges.append((labels[a], labels[b]))
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(n))
    position = {v: i for i, v in enumerate(order)}
    assert len(edges) == 60
    assert all(position[u] < position[v] for u, v in edges)


def _edge_multiset(pairs):
    return Counter(tuple(sorted(p)) for p in pairs)


@pytest.mark.parametrize(
    "n, edges",
    [
        (5, [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)]),
        (3, [(0, 1), (1, 2), (2, 0), (1, 1)]),
        (2, [(0, 1), (0, 1)]),
    ],
)
def test_eulerian_circuit_uses_every_edge_once(n, edges):
    circuit = eulerian_circuit(n, edges)
    assert circuit[0] == 0
    assert circuit[-1] == 0
    assert len(circuit) == len(edges) + 1
    assert _edge_multiset(zip(circuit, circuit[1:])) == _edge_multiset(edges)


def test_eulerian_circuit_rejects_odd_degree():
    with pytest.raises(ValueError):
        eulerian_circuit(3, [(0, 1), (1, 2)])


def test_eulerian_circuit_rejects_disconnected_edges():
    with pytest.raises(ValueError):
        eulerian_circuit(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])


def test_euler_tour_nests_subtrees():
    n = 40
    parents = _random_tree_parents(n, 9)
    tin, tout = euler_tour(_adjacency_from_parents(parents), 0)
    assert sorted(tin) == list(range(n))
    assert tout[0] == n - 1
    for child, parent in enumerate(parents):
        assert tin[child] <= tout[child]
        if parent is not None:
            assert tin[parent] < tin[child]
            assert tout[child] <= tout[parent]


def test_euler_tour_rejects_bad_root():
    with pytest.raises(ValueError):
        euler_tour([[1], [0]], 2)


def test_subtree_sums_on_a_path():
    values = [4, -2, 7, 1, 3]
    edges = [(i, i + 1) for i in range(len(values) - 1)]
    sums = SubtreeSums(values, edges)
    for node in range(len(values)):
        assert sums.subtree_sum(node) == sum(values[node:])
    values[2] = 10
    sums.update(2, 10)
    for node in range(len(values)):
        assert sums.subtree_sum(node) == sum(values[node:])


def test_subtree_sum_of_root_is_total():
    n = 30
    rng = random.Random(13)
    parents = _random_tree_parents(n, 13)
    values = [rng.randint(-20, 20) for _ in range(n)]
    edges = [(c, p) for c, p in enumerate(parents) if p is not None]
    sums = SubtreeSums(values, edges)
    assert sums.subtree_sum(0) == sum(values)
    leaf = next(v for v in range(n) if v not in parents)
    assert sums.subtree_sum(leaf) == values[leaf]


def test_subtree_sums_needs_nodes():
    with pytest.raises(ValueError):
        SubtreeSums([], [])