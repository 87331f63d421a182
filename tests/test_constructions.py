from math import comb

import pytest

from zeroforce.constructions import (
    cart_prod,
    complete_graph,
    corona_prod,
    cycle_graph,
    edge_sum,
    hypercube_graph,
    k_subsets,
    kneser_graph,
    nsun_graph,
    path_graph,
    petersen,
    sun_link_graph,
    vert_del,
    vert_sum,
)


def edge_set(g):
    return {frozenset((u, w)) for u in range(g.order) for w in g.neighbors(u)}


def degrees(g):
    return sorted(g.degree(u) for u in range(g.order))


@pytest.mark.parametrize("n", [2, 3, 6])
def test_path_graph(n):
    p = path_graph(n)
    assert p.order == n
    assert p.size == n - 1
    assert p.is_connected()
    assert p.tree_diameter() == n - 1


@pytest.mark.parametrize("n", [3, 4, 7])
def test_cycle_graph(n):
    c = cycle_graph(n)
    p = path_graph(n)
    p.add_edge(0, n - 1)
    assert c == p
    assert all(c.degree(u) == 2 for u in range(n))


@pytest.mark.parametrize("n", [1, 4, 5])
def test_complete_graph(n):
    k = complete_graph(n)
    for u in range(n):
        assert k.neighbors(u) == frozenset(range(n)) - {u}


def test_cart_prod_of_two_edges_is_square():
    sq = cart_prod(path_graph(2), path_graph(2))
    assert edge_set(sq) == {
        frozenset((0, 1)),
        frozenset((2, 3)),
        frozenset((0, 2)),
        frozenset((1, 3)),
    }


def test_cart_prod_counts():
    g, h = cycle_graph(4), path_graph(3)
    cp = cart_prod(g, h)
    assert cp.order == g.order * h.order
    assert cp.size == g.order * h.size + h.order * g.size


@pytest.mark.parametrize("d", [2, 3, 4])
def test_hypercube(d):
    q = hypercube_graph(d)
    assert q == cart_prod(hypercube_graph(d - 1), path_graph(2))
    assert all(q.degree(u) == d for u in range(q.order))
    assert q.is_connected()


def test_hypercube_low_dimensions_are_an_edge():
    assert hypercube_graph(1) == path_graph(2)
    assert hypercube_graph(0) == path_graph(2)


def test_corona_counts_and_pendants():
    g, h = cycle_graph(4), path_graph(2)
    cp = corona_prod(g, h)
    assert cp.order == g.order + g.order * h.order
    assert cp.size == g.size + g.order * (h.order + h.size)
    for u in range(g.order):
        assert cp.degree(u) == g.degree(u) + h.order


@pytest.mark.parametrize("u", [0, 4])
def test_vert_del_of_cycle_is_path(u):
    assert vert_del(cycle_graph(5), u) == path_graph(4)


def test_vert_del_out_of_range():
    with pytest.raises(IndexError):
        vert_del(path_graph(3), 3)


def test_vert_sum_of_paths():
    assert vert_sum(path_graph(3), path_graph(3), 2, 0) == path_graph(5)


def test_vert_sum_counts():
    g, h = petersen(), cycle_graph(5)
    vs = vert_sum(g, h, 3, 2)
    assert vs.order == g.order + h.order - 1
    assert vs.size == g.size + h.size
    assert vs.degree(3) == g.degree(3) + h.degree(2)


def test_edge_sum_of_edges_is_path():
    assert edge_sum(path_graph(2), path_graph(2), 1, 0) == path_graph(4)


def test_edge_sum_counts():
    g, h = cycle_graph(5), complete_graph(4)
    es = edge_sum(g, h, 0, 3)
    assert es.order == g.order + h.order
    assert es.size == g.size + h.size + 1
    assert g.order + 3 in es.neighbors(0)


def test_k_subsets_order():
    assert k_subsets(3, 1) == [frozenset({2}), frozenset({1}), frozenset({0})]


@pytest.mark.parametrize("n,k", [(5, 2), (6, 3), (4, 0), (4, 4)])
def test_k_subsets_counts(n, k):
    subsets = k_subsets(n, k)
    assert len(subsets) == comb(n, k)
    assert len(set(subsets)) == len(subsets)
    assert all(len(s) == k and s <= set(range(n)) for s in subsets)


def test_k_subsets_invalid():
    with pytest.raises(ValueError):
        k_subsets(3, 4)


def test_kneser_adjacency_is_disjointness():
    subsets = k_subsets(6, 2)
    g = kneser_graph(6, 2)
    for i, a in enumerate(subsets):
        for j, b in enumerate(subsets):
            if i != j:
                assert (j in g.neighbors(i)) == a.isdisjoint(b)


def test_kneser_with_singletons_is_complete():
    assert kneser_graph(4, 1) == complete_graph(4)


def test_petersen_matches_kneser():
    p = petersen()
    k = kneser_graph(5, 2)
    assert p.order == k.order == 10
    assert p.size == k.size
    assert degrees(p) == degrees(k)
    assert p.is_connected()


@pytest.mark.parametrize("n", [3, 5])
def test_nsun(n):
    assert nsun_graph(n) == corona_prod(cycle_graph(n), complete_graph(1))


def test_sun_link():
    assert sun_link_graph(1) == nsun_graph(5)
    assert sun_link_graph(2) == vert_sum(nsun_graph(5), nsun_graph(5), 6, 9)
    three = sun_link_graph(3)
    assert three.order == 3 * nsun_graph(5).order - 2
    assert three.is_connected()