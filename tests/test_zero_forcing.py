from itertools import combinations

import pytest

from zeroforce.constructions import (
    complete_graph,
    cycle_graph,
    hypercube_graph,
    nsun_graph,
    path_graph,
    petersen,
)
from zeroforce.graph import Graph
from zeroforce.zero_forcing import wavefront, zf_closure


def brute_force_zf(g):
    for k in range(g.order + 1):
        for subset in combinations(range(g.order), k):
            if zf_closure(g, subset).propagation_time is not None:
                return k
    raise AssertionError("no zero forcing set found")


def star(leaves):
    g = Graph(leaves + 1)
    for leaf in range(1, leaves + 1):
        g.add_edge(0, leaf)
    return g


def test_closure_from_path_endpoint():
    p = path_graph(5)
    result = zf_closure(p, {0})
    assert result.filled == frozenset(range(5))
    assert result.propagation_time == p.order - 1


def test_closure_from_path_middle_is_stuck():
    result = zf_closure(path_graph(3), {1})
    assert result.filled == frozenset({1})
    assert result.propagation_time is None


def test_closure_of_everything_takes_no_time():
    g = petersen()
    result = zf_closure(g, range(g.order))
    assert result.filled == frozenset(range(g.order))
    assert result.propagation_time == 0


def test_closure_of_empty_set():
    result = zf_closure(cycle_graph(4), [])
    assert result.filled == frozenset()
    assert result.propagation_time is None


def test_closure_does_not_mutate_input():
    start = {0}
    zf_closure(path_graph(4), start)
    assert start == {0}


def test_closure_is_idempotent():
    g = nsun_graph(4)
    first = zf_closure(g, {4, 5})
    again = zf_closure(g, first.filled)
    assert again.filled == first.filled
    assert first.filled >= {4, 5}


def test_closure_rejects_unknown_vertex():
    with pytest.raises(IndexError):
        zf_closure(path_graph(3), {3})


def test_wavefront_path_is_one():
    assert wavefront(path_graph(6)) == 1


def test_wavefront_empty_graph():
    assert wavefront(Graph(0)) == 0


def test_wavefront_complete_graph():
    k = complete_graph(5)
    assert wavefront(k) == k.order - 1


@pytest.mark.parametrize(
    "g",
    [
        path_graph(4),
        cycle_graph(5),
        complete_graph(4),
        star(4),
        petersen(),
        hypercube_graph(3),
        nsun_graph(4),
        Graph(3),
    ],
)
def test_wavefront_matches_brute_force(g):
    assert wavefront(g) == brute_force_zf(g)