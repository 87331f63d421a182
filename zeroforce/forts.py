"""Fort-based integer programs for zero forcing parameters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from .graph import Graph
from .milp import LinearModel, Solution, Status

IP_MAX_TIME = 7200.0
"""Time limit in seconds given to each solve."""

_TOLERANCE = 1e-6


@dataclass(frozen=True)
class FortCoverResult:
    status: Status
    value: int
    zf_set: frozenset


@dataclass(frozen=True)
class FractionalResult:
    status: Status
    value: float
    weights: tuple[float, ...]


@dataclass(frozen=True)
class MinimalFortsResult:
    status: Status
    forts: list[frozenset]


@dataclass(frozen=True)
class FortNumberResult:
    status: Status
    value: int
    forts: list[frozenset]


def is_fort(g: Graph, vertices: Iterable[int]) -> bool:
    """Whether the set is non-empty and no outside vertex has exactly one neighbour in it."""
    fort = set(vertices)
    for v in fort:
        if not 0 <= v < g.order:
            raise IndexError(f"vertex {v} is not in a graph of order {g.order}")
    if not fort:
        return False
    return all(
        len(g.neighbors(v) & fort) != 1 for v in range(g.order) if v not in fort
    )


def _fort_rows(g: Graph, columns: Sequence[int]) -> Iterator[dict[int, float]]:
    """Left sides of the constraints (each >= 0) making a 0/1 vector a fort or empty."""
    for i in range(g.order):
        for j in g.neighbors(i):
            row = {columns[j]: 1.0, columns[i]: -1.0}
            for k in g.neighbors(j):
                if k != i:
                    row[columns[k]] = row.get(columns[k], 0.0) + 1.0
            yield row


def _require_point(solution: Solution, what: str) -> tuple[float, ...]:
    if solution.values is None:
        raise RuntimeError(f"{what} ended with status {solution.status.value} and no solution")
    return solution.values


def _minimum_fort(
    g: Graph, weights: Sequence[float], excluded: Iterable[int]
) -> Optional[tuple[float, frozenset]]:
    """A fort of least weight avoiding the excluded vertices, or None if there is none."""
    banned = set(excluded)
    model = LinearModel("min", IP_MAX_TIME)
    columns = [
        model.add_var(0, 0 if v in banned else 1, weights[v], integer=True)
        for v in range(g.order)
    ]
    model.add_constraint({c: 1.0 for c in columns}, lower=1)
    for row in _fort_rows(g, columns):
        model.add_constraint(row, lower=0)
    solution = model.solve()
    if solution.status is not Status.OPTIMAL or solution.values is None:
        return None
    fort = frozenset(v for v, c in enumerate(columns) if solution.values[c] > 0.5)
    return solution.objective, fort


def fort_cover_ip(g: Graph) -> FortCoverResult:
    """Zero forcing number: a least set meeting every fort, forts added as violated."""
    master = LinearModel("min", IP_MAX_TIME)
    columns = [master.add_var(0, 1, 1, integer=True) for _ in range(g.order)]
    unit = [1.0] * g.order
    while True:
        solution = master.solve()
        values = _require_point(solution, "fort cover model")
        chosen = frozenset(v for v, c in enumerate(columns) if values[c] > 0.5)
        value = round(solution.objective)
        if solution.status is not Status.OPTIMAL:
            return FortCoverResult(solution.status, value, chosen)
        violated = _minimum_fort(g, unit, chosen)
        if violated is None:
            return FortCoverResult(Status.OPTIMAL, value, chosen)
        _, fort = violated
        master.add_constraint({columns[v]: 1.0 for v in fort}, lower=1)


def fzf_ip(g: Graph) -> FractionalResult:
    """Fractional zero forcing number: the LP relaxation of the fort cover model."""
    master = LinearModel("min", IP_MAX_TIME)
    columns = [master.add_var(0, 1, 1) for _ in range(g.order)]
    while True:
        solution = master.solve()
        values = _require_point(solution, "fractional model")
        weights = tuple(values[c] for c in columns)
        if solution.status is not Status.OPTIMAL:
            return FractionalResult(solution.status, solution.objective, weights)
        lightest = _minimum_fort(g, weights, ())
        if lightest is None or lightest[0] >= 1.0 - _TOLERANCE:
            return FractionalResult(Status.OPTIMAL, solution.objective, weights)
        _, fort = lightest
        master.add_constraint({columns[v]: 1.0 for v in fort}, lower=1)


def all_minimal_forts(g: Graph) -> MinimalFortsResult:
    """Every minimal fort, found in order of size by excluding each one found."""
    model = LinearModel("min", IP_MAX_TIME)
    columns = [model.add_var(0, 1, 1, integer=True) for _ in range(g.order)]
    model.add_constraint({c: 1.0 for c in columns}, lower=1)
    for row in _fort_rows(g, columns):
        model.add_constraint(row, lower=0)
    forts: list[frozenset] = []
    while True:
        solution = model.solve()
        if solution.status is not Status.OPTIMAL or solution.values is None:
            return MinimalFortsResult(solution.status, forts)
        fort = frozenset(v for v, c in enumerate(columns) if solution.values[c] > 0.5)
        forts.append(fort)
        model.add_constraint({columns[v]: 1.0 for v in fort}, upper=len(fort) - 1)


def ft_num_ip(g: Graph) -> FortNumberResult:
    """Fort number: the largest collection of pairwise disjoint forts."""
    n = g.order
    model = LinearModel("max", IP_MAX_TIME)
    used: list[int] = []
    members: list[list[int]] = []
    for _ in range(n):
        used.append(model.add_var(0, 1, 1, integer=True))
        members.append([model.add_var(0, 1, 0, integer=True) for _ in range(n)])
    for z, row_vars in zip(used, members):
        row = {z: 1.0}
        row.update({c: -1.0 for c in row_vars})
        model.add_constraint(row, upper=0)
        for fort_row in _fort_rows(g, row_vars):
            model.add_constraint(fort_row, lower=0)
    for u in range(n):
        model.add_constraint({row_vars[u]: 1.0 for row_vars in members}, upper=1)
    solution = model.solve()
    values = _require_point(solution, "fort number model")
    forts = [
        frozenset(u for u, c in enumerate(row_vars) if values[c] > 0.5)
        for z, row_vars in zip(used, members)
        if values[z] > 0.5
    ]
    return FortNumberResult(solution.status, round(solution.objective), forts)