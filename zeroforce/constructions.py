"""Graph families and graph operations."""

from __future__ import annotations

from itertools import combinations

from .graph import Graph


def _edges(g: Graph):
    for u in range(g.order):
        for w in g.neighbors(u):
            if u <= w:
                yield u, w


def corona_prod(g: Graph, h: Graph) -> Graph:
    """Corona product: one copy of h per vertex of g, joined to that vertex."""
    cp = Graph(g.order + g.order * h.order)
    for u, w in _edges(g):
        cp.add_edge(u, w)
    for u in range(g.order):
        base = g.order + u * h.order
        for v in range(h.order):
            cp.add_edge(u, base + v)
        for v, w in _edges(h):
            cp.add_edge(base + v, base + w)
    return cp


def cart_prod(g: Graph, h: Graph) -> Graph:
    """Cartesian product; vertex (u, v) is numbered u * h.order + v."""
    cp = Graph(g.order * h.order)
    for u in range(g.order):
        for v, w in _edges(h):
            cp.add_edge(u * h.order + v, u * h.order + w)
    for v in range(h.order):
        for u, w in _edges(g):
            cp.add_edge(u * h.order + v, w * h.order + v)
    return cp


def vert_del(g: Graph, u: int) -> Graph:
    """Delete vertex u, shifting the higher labels down by one."""
    if not 0 <= u < g.order:
        raise IndexError(f"vertex {u} is not in a graph of order {g.order}")

    def label(w: int) -> int:
        return w if w < u else w - 1

    vd = Graph(g.order - 1)
    for a, b in _edges(g):
        if a != u and b != u:
            vd.add_edge(label(a), label(b))
    return vd


def vert_sum(g: Graph, h: Graph, u: int, v: int) -> Graph:
    """Identify vertex u of g with vertex v of h."""
    if not 0 <= u < g.order:
        raise IndexError(f"vertex {u} is not in g")
    if not 0 <= v < h.order:
        raise IndexError(f"vertex {v} is not in h")

    def label(w: int) -> int:
        if w == v:
            return u
        return g.order + w if w < v else g.order + w - 1

    vs = Graph(g.order + h.order - 1)
    for a, b in _edges(g):
        vs.add_edge(a, b)
    for a, b in _edges(h):
        if a == v and b == v:
            continue
        vs.add_edge(label(a), label(b))
    return vs


def edge_sum(g: Graph, h: Graph, u: int, v: int) -> Graph:
    """Disjoint union of g and h plus an edge from u in g to v in h."""
    if not 0 <= u < g.order:
        raise IndexError(f"vertex {u} is not in g")
    if not 0 <= v < h.order:
        raise IndexError(f"vertex {v} is not in h")
    es = Graph(g.order + h.order)
    for a, b in _edges(g):
        es.add_edge(a, b)
    for a, b in _edges(h):
        es.add_edge(g.order + a, g.order + b)
    es.add_edge(u, g.order + v)
    return es


def path_graph(n: int) -> Graph:
    p = Graph(n)
    for i in range(n - 1):
        p.add_edge(i, i + 1)
    return p


def cycle_graph(n: int) -> Graph:
    c = path_graph(n)
    c.add_edge(0, n - 1)
    return c


def complete_graph(n: int) -> Graph:
    k = Graph(n)
    for i, j in combinations(range(n), 2):
        k.add_edge(i, j)
    return k


def hypercube_graph(d: int) -> Graph:
    """Hypercube of dimension d, built as repeated products with P2 (at least P2)."""
    p = path_graph(2)
    q = p.copy()
    for _ in range(2, d + 1):
        q = cart_prod(q, p)
    return q


def k_subsets(n: int, k: int) -> list[frozenset[int]]:
    """All k-subsets of range(n), ordered by their indicator vectors ascending."""
    if not 0 <= k <= n:
        raise ValueError(f"cannot choose {k} elements from {n}")
    universe = frozenset(range(n))
    return [universe.difference(outside) for outside in combinations(range(n), n - k)]


def kneser_graph(n: int, k: int) -> Graph:
    """Kneser graph K(n, k): k-subsets adjacent when disjoint."""
    subsets = k_subsets(n, k)
    g = Graph(len(subsets))
    for (i, a), (j, b) in combinations(enumerate(subsets), 2):
        if a.isdisjoint(b):
            g.add_edge(i, j)
    return g


def petersen() -> Graph:
    g = Graph(10)
    for i in range(5):
        g.add_edge(i, (i + 1) % 5)
        g.add_edge(i, i + 5)
    for a, b in ((5, 7), (5, 8), (6, 8), (6, 9), (7, 9)):
        g.add_edge(a, b)
    return g


def nsun_graph(n: int) -> Graph:
    """The n-sun: the cycle Cn with a pendant vertex on each vertex."""
    return corona_prod(cycle_graph(n), complete_graph(1))


def sun_link_graph(k: int) -> Graph:
    """A chain of k 5-suns joined by vertex sums."""
    g = nsun_graph(5)
    h = g.copy()
    v = 9
    u = 6
    for _ in range(1, k):
        linked = vert_sum(g, h, u, v)
        u = g.order + 6
        g = linked
    return g