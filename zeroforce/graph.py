"""Simple undirected graphs on the vertices 0, 1, ..., order - 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

_OFFSET = 63
_SMALL_LIMIT = 62


def _decode_chars(text: str) -> list[int]:
    values = [ord(ch) - _OFFSET for ch in text]
    if any(not 0 <= value <= _OFFSET for value in values):
        raise ValueError(f"invalid character in graph string: {text!r}")
    return values


def _decode_order(data: list[int]) -> tuple[int, list[int]]:
    """Split the order prefix off graph6/sparse6 data."""
    if not data:
        raise ValueError("graph string is empty")
    if data[0] <= _SMALL_LIMIT:
        return data[0], data[1:]
    if len(data) < 4:
        raise ValueError("graph string is too short for its order prefix")
    if data[1] <= _SMALL_LIMIT:
        return (data[1] << 12) + (data[2] << 6) + data[3], data[4:]
    if len(data) < 8:
        raise ValueError("graph string is too short for its order prefix")
    order = 0
    for value in data[2:8]:
        order = (order << 6) + value
    return order, data[8:]


def _bits(chunks: Iterable[int]) -> Iterator[bool]:
    for chunk in chunks:
        for shift in range(5, -1, -1):
            yield bool((chunk >> shift) & 1)


def _sparse6_items(chunks: list[int], k: int) -> Iterator[tuple[int, int]]:
    """Yield the (b, x) pairs of a sparse6 body, k bits per x."""
    queue = deque(chunks)
    d = 0
    d_len = 0
    while True:
        if d_len < 1:
            if not queue:
                return
            d = queue.popleft()
            d_len = 6
        d_len -= 1
        top_bit = (d >> d_len) & 1
        x = d & ((1 << d_len) - 1)
        x_len = d_len
        while x_len < k:
            if not queue:
                return
            d = queue.popleft()
            d_len = 6
            x = (x << 6) + d
            x_len += 6
        x >>= x_len - k
        d_len = x_len - k
        yield top_bit, x


class Graph:
    """An undirected graph stored as adjacency sets."""

    def __init__(self, order: int = 0) -> None:
        if order < 0:
            raise ValueError("graph order must be non-negative")
        self.order = order
        self._adj: list[set[int]] = [set() for _ in range(order)]
        self._size = 0

    @classmethod
    def from_graph6(cls, line: str) -> Graph:
        """Build a graph from a graph6 string."""
        order, body = _decode_order(_decode_chars(line.strip()))
        graph = cls(order)
        bits = _bits(body)
        for j in range(order):
            for i in range(j):
                try:
                    present = next(bits)
                except StopIteration:
                    raise ValueError("graph6 string has too few edge bits") from None
                if present:
                    graph.add_edge(i, j)
        return graph

    @classmethod
    def from_sparse6(cls, line: str) -> Graph:
        """Build a graph from a sparse6 string (starting with ':')."""
        text = line.strip()
        if not text.startswith(":"):
            raise ValueError("sparse6 string must start with ':'")
        order, body = _decode_order(_decode_chars(text[1:]))
        graph = cls(order)
        k = 1
        while (1 << k) < order:
            k += 1
        j = 0
        for bit, x in _sparse6_items(body, k):
            if bit:
                j += 1
            # padding with ones can produce an out-of-range value here
            if x >= order or j >= order:
                break
            if x > j:
                j = x
            else:
                graph.add_edge(x, j)
        return graph

    @classmethod
    def from_edge_file(cls, path: str | PathLike[str]) -> Graph:
        """Read a file holding the order, the number of edges, then the edge pairs."""
        try:
            numbers = [int(token) for token in Path(path).read_text().split()]
        except ValueError as exc:
            raise ValueError(f"malformed edge file {path}: {exc}") from exc
        if len(numbers) < 2:
            raise ValueError(f"edge file {path} lacks its order and size")
        order, size = numbers[0], numbers[1]
        endpoints = numbers[2:]
        if len(endpoints) < 2 * size:
            raise ValueError(f"edge file {path} lists fewer than {size} edges")
        graph = cls(order)
        pairs = iter(endpoints[: 2 * size])
        for u, v in zip(pairs, pairs):
            graph.add_edge(u, v)
        return graph

    @property
    def size(self) -> int:
        """Number of edges."""
        return self._size

    def _check(self, u: int) -> None:
        if not 0 <= u < self.order:
            raise IndexError(f"vertex {u} is not in a graph of order {self.order}")

    def neighbors(self, u: int) -> frozenset[int]:
        """The vertices adjacent to u."""
        self._check(u)
        return frozenset(self._adj[u])

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge uv unless it is already present."""
        self._check(u)
        self._check(v)
        if v not in self._adj[u]:
            self._adj[u].add(v)
            self._adj[v].add(u)
            self._size += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge uv if it is present."""
        self._check(u)
        self._check(v)
        if v in self._adj[u]:
            self._adj[u].discard(v)
            self._adj[v].discard(u)
            self._size -= 1

    def degree(self, u: int) -> int:
        self._check(u)
        return len(self._adj[u])

    def is_connected(self) -> bool:
        """Whether every vertex can be reached from vertex 0."""
        if self.order == 0:
            return True
        visited: set[int] = set()
        stack = [0]
        while stack:
            v = stack.pop()
            if v not in visited:
                visited.add(v)
                stack.extend(self._adj[v])
        return len(visited) == self.order

    def _farthest(self, start: int) -> tuple[int, int]:
        depth = {start: 0}
        stack = [start]
        farthest, best = start, 0
        while stack:
            u = stack.pop()
            for w in self._adj[u]:
                if w not in depth:
                    depth[w] = depth[u] + 1
                    if depth[w] >= best:
                        best, farthest = depth[w], w
                    stack.append(w)
        return farthest, best

    def tree_diameter(self) -> int:
        """Diameter of the graph, assuming it is a tree."""
        if self.order == 0:
            raise ValueError("the empty graph has no diameter")
        end, _ = self._farthest(0)
        _, diameter = self._farthest(end)
        return diameter

    def max_degree(self) -> int:
        return max((len(nbrs) for nbrs in self._adj), default=0)

    def copy(self) -> Graph:
        clone = Graph(self.order)
        for u, nbrs in enumerate(self._adj):
            for v in nbrs:
                clone.add_edge(u, v)
        return clone

    def describe(self) -> str:
        """Order, size and adjacency lists as text."""
        lines = [f"order: {self.order}, size: {self._size}"]
        for u, nbrs in enumerate(self._adj):
            lines.append(f"{u}: " + "".join(f"{v} " for v in sorted(nbrs)))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.order == other.order and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(order={self.order}, size={self._size})"