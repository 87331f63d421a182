"""Zero forcing closure and the wavefront zero forcing number."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple, Optional

from .graph import Graph


class Closure(NamedTuple):
    """Filled vertices after forcing, and the propagation time if all are filled."""

    filled: frozenset
    propagation_time: Optional[int]


def zf_closure(g: Graph, filled: Iterable[int]) -> Closure:
    """Apply the zero forcing rule until no vertex can force."""
    current = set(filled)
    for u in current:
        if not 0 <= u < g.order:
            raise IndexError(f"vertex {u} is not in a graph of order {g.order}")
    for step in range(g.order):
        active = set()
        for u in current:
            unfilled = [w for w in g.neighbors(u) if w not in current]
            if len(unfilled) == 1:
                active.add(unfilled[0])
        if not active:
            break
        current |= active
    else:
        step = g.order
    time = step if len(current) == g.order else None
    return Closure(frozenset(current), time)


def wavefront(g: Graph) -> int:
    """Zero forcing number of g by the wavefront algorithm."""
    if g.order == 0:
        return 0
    pairs: list[tuple[frozenset, int]] = [(frozenset(), 0)]
    for bound in range(1, g.order + 1):
        # pairs appended during the scan are visited in the same pass
        for closed_set, cost in pairs:
            for v in range(g.order):
                nbrs = g.neighbors(v)
                grown = zf_closure(g, closed_set | {v} | nbrs).filled
                new_cost = cost + (v not in closed_set)
                extra = sum(w not in closed_set for w in nbrs) - 1
                if extra > 0:
                    new_cost += extra
                if new_cost > bound:
                    continue
                if any(known == grown and c <= bound for known, c in pairs):
                    continue
                if len(grown) == g.order:
                    return new_cost
                pairs.append((grown, new_cost))
    raise RuntimeError("wavefront search ended without filling the graph")