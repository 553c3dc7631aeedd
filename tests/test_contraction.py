import numpy as np
import pytest

from mincut.contraction import contract, contract_once, crossing_edges, merge_leftover_components
from mincut.cut import Cut
from mincut.errors import PreconditionViolation
from mincut.union_find import DisjointSet


def test_contract_stops_at_target(two_cliques, rng):
    edges = two_cliques.edges.copy()
    uf = DisjointSet(two_cliques.n)
    start = contract(edges, uf, 3, rng)
    assert uf.num_components == 3
    assert 5 <= start <= two_cliques.m


def test_contract_only_permutes_edges(two_cliques, rng):
    edges = two_cliques.edges.copy()
    contract(edges, DisjointSet(two_cliques.n), 2, rng)
    assert sorted(map(tuple, edges.tolist())) == sorted(map(tuple, two_cliques.edges.tolist()))


def test_crossing_edges_drop_self_loops():
    edges = np.array([[0, 1], [1, 2], [2, 3]])
    uf = DisjointSet(4)
    uf.union(0, 1)
    uf.union(2, 3)
    assert crossing_edges(edges, uf).tolist() == [[1, 2]]


def test_single_edge_cut(single_edge, rng):
    cut = contract_once(single_edge, rng)
    assert cut.cut_size == 1
    assert cut.partitions() == (frozenset({0}), frozenset({1}))


def test_cut_size_bounds(two_cliques, rng):
    for _ in range(50):
        cut = contract_once(two_cliques, rng)
        assert 2 <= cut.cut_size <= two_cliques.m
        assert cut.disjoint_set.num_components == 2


def test_source_graph_is_untouched(two_cliques, rng):
    before = two_cliques.edge_multiset()
    order = two_cliques.edges.tolist()
    for _ in range(20):
        contract_once(two_cliques, rng)
    assert two_cliques.edge_multiset() == before
    assert two_cliques.edges.tolist() == order


def test_disconnected_graph_gives_zero_cut(disconnected, rng):
    for _ in range(20):
        cut = contract_once(disconnected, rng)
        assert cut.cut_size == 0
        P, Q = cut.partitions()
        assert P == {0, 1, 2}
        assert Q == {3, 4, 5}


def test_merge_leftover_components():
    uf = DisjointSet(5)
    uf.union(0, 1)
    merge_leftover_components(uf)
    assert uf.num_components == 2
    assert uf.connected(2, 4)
    assert not uf.connected(0, 2)


def test_partitions_need_two_components():
    with pytest.raises(PreconditionViolation):
        Cut(0, DisjointSet(3)).partitions()
