import pytest

from zeroforce.graph import Graph


def edge_set(g):
    return {frozenset((u, w)) for u in range(g.order) for w in g.neighbors(u)}


def make_path(n):
    g = Graph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    return g


def test_graph6_format_example():
    g = Graph.from_graph6("DQc")
    assert g.order == 5
    assert edge_set(g) == {
        frozenset((0, 2)),
        frozenset((0, 4)),
        frozenset((1, 3)),
        frozenset((3, 4)),
    }
    assert g.size == 4


def test_graph6_long_order_prefix():
    g = Graph.from_graph6("~??~" + "?" * 326)
    assert g.order == 63
    assert g.size == 0


def test_graph6_rejects_short_body():
    with pytest.raises(ValueError):
        Graph.from_graph6("D")


def test_graph6_rejects_bad_character():
    with pytest.raises(ValueError):
        Graph.from_graph6("D\x01")


def test_sparse6_format_example():
    g = Graph.from_sparse6(":Fa@x^\n")
    assert g.order == 7
    assert edge_set(g) == {
        frozenset((0, 1)),
        frozenset((0, 2)),
        frozenset((1, 2)),
        frozenset((5, 6)),
    }


def test_sparse6_requires_colon():
    with pytest.raises(ValueError):
        Graph.from_sparse6("Fa@x^")


def test_edge_file(tmp_path):
    path = tmp_path / "g.edg"
    path.write_text("3 2\n0 1\n1 2\n")
    g = Graph.from_edge_file(path)
    assert g == make_path(3)


def test_edge_file_truncated(tmp_path):
    path = tmp_path / "g.edg"
    path.write_text("3 2\n0 1\n")
    with pytest.raises(ValueError):
        Graph.from_edge_file(path)


def test_add_edge_is_idempotent_and_symmetric():
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    assert g.size == 1
    assert 0 in g.neighbors(1)
    assert 1 in g.neighbors(0)


def test_remove_edge():
    g = make_path(3)
    g.remove_edge(1, 0)
    g.remove_edge(1, 0)
    assert g.size == 1
    assert g.neighbors(0) == frozenset()
    assert g.degree(1) == 1


def test_vertex_out_of_range():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)
    with pytest.raises(IndexError):
        g.neighbors(-1)


def test_negative_order():
    with pytest.raises(ValueError):
        Graph(-1)


def test_is_connected():
    g = make_path(4)
    assert g.is_connected()
    g.remove_edge(1, 2)
    assert not g.is_connected()


def test_tree_diameter_of_path():
    for n in range(2, 7):
        assert make_path(n).tree_diameter() == n - 1


def test_tree_diameter_of_star():
    star = Graph(5)
    for leaf in range(1, 5):
        star.add_edge(0, leaf)
    assert star.tree_diameter() == 2
    assert star.max_degree() == star.order - 1


def test_tree_diameter_empty_graph():
    with pytest.raises(ValueError):
        Graph(0).tree_diameter()


def test_copy_is_independent():
    g = make_path(4)
    c = g.copy()
    assert c == g
    c.remove_edge(0, 1)
    assert c != g
    assert g.size == 3


def test_describe():
    g = make_path(2)
    assert g.describe() == "order: 2, size: 1\n0: 1 \n1: 0 "