"""Integer programs for forcing chronologies: propagation time and throttling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .forts import IP_MAX_TIME
from .graph import Graph
from .milp import LinearModel, Solution, Status


class Objective(Enum):
    """What a forcing model minimises or maximises beside the zero forcing set."""

    ZERO_FORCING = "Z"
    MIN_PROPAGATION = "p"
    MAX_PROPAGATION = "P"
    THROTTLING = "T"


@dataclass(frozen=True)
class ForcingResult:
    """Value found, the initial set and each forcing arc with its time step."""

    status: Status
    value: int
    zf_set: frozenset
    forcings: dict = field(default_factory=dict)


@dataclass(frozen=True)
class PTIntervalResult:
    """Each achievable propagation time mapped to a least set achieving it."""

    status: Status
    intervals: dict = field(default_factory=dict)


def _objective(kind: Union[Objective, str]) -> Objective:
    try:
        return Objective(kind)
    except ValueError:
        raise ValueError(f"invalid objective type: {kind!r}") from None


def _check_steps(t: int) -> None:
    if t < 0:
        raise ValueError("the number of time steps must be non-negative")


def _arcs(g: Graph) -> list[tuple[int, int]]:
    return [(u, w) for u in range(g.order) for w in sorted(g.neighbors(u))]


def _point(solution: Solution, what: str) -> tuple[float, ...]:
    if solution.values is None:
        raise RuntimeError(f"{what} ended with status {solution.status.value} and no solution")
    return solution.values


def _add(row: dict[int, float], index: int, value: float) -> None:
    row[index] = row.get(index, 0.0) + value


def infection_ip(g: Graph, t: int, kind: Union[Objective, str]) -> ForcingResult:
    """Infection model with integer fill times bounded by t."""
    objective = _objective(kind)
    if objective is Objective.MAX_PROPAGATION:
        raise ValueError("the infection model does not support maximum propagation time")
    _check_steps(t)
    model = LinearModel("min", IP_MAX_TIME)
    s = [model.add_var(0, 1, 1, integer=True) for _ in range(g.order)]
    x = [model.add_var(0, t, 0, integer=True) for _ in range(g.order)]
    arcs = _arcs(g)
    y = {arc: model.add_var(0, 1, 0, integer=True) for arc in arcs}
    z_cost = {
        Objective.ZERO_FORCING: 0.0,
        Objective.MIN_PROPAGATION: 1.0 / (2.0 * t) if t else 0.0,
        Objective.THROTTLING: 1.0,
    }[objective]
    z = model.add_var(0, t, z_cost, integer=True)

    for i in range(g.order):
        row = {s[i]: 1.0}
        for w in g.neighbors(i):
            row[y[(w, i)]] = 1.0
        model.add_constraint(row, lower=1, upper=1)
    for u, v in arcs:
        for w in g.neighbors(u):
            if w == v:
                continue
            model.add_constraint({x[w]: 1.0, x[v]: -1.0, y[(u, v)]: t + 1.0}, upper=t)
        model.add_constraint({x[u]: 1.0, x[v]: -1.0, y[(u, v)]: t + 1.0}, upper=t)
    for i in range(g.order):
        model.add_constraint({x[i]: 1.0, z: -1.0}, upper=0)

    solution = model.solve()
    values = _point(solution, "infection model")
    if objective is Objective.MIN_PROPAGATION:
        value = round(values[z])
    else:
        value = round(solution.objective)
    zf_set = frozenset(i for i in range(g.order) if values[s[i]] > 0.5)
    forcings = {
        (u, v): round(values[x[v]]) for (u, v) in arcs if values[y[(u, v)]] > 0.5
    }
    return ForcingResult(solution.status, value, zf_set, forcings)


@dataclass
class _TimeStepModel:
    model: LinearModel
    arcs: list[tuple[int, int]]
    x: list[list[int]]
    y: list[dict[tuple[int, int], int]]
    z: list[int]


def _time_step_model(g: Graph, t: int, objective: Objective) -> _TimeStepModel:
    model = LinearModel("min", IP_MAX_TIME)
    arcs = _arcs(g)
    x = [[model.add_var(0, 1, 0, integer=True) for _ in range(g.order)] for _ in range(t + 1)]
    y = [{arc: model.add_var(0, 1, 0, integer=True) for arc in arcs} for _ in range(t)]
    z = [model.add_var(0, 1, 0, integer=True) for _ in range(t)]

    eps = 1.0 / (2.0 * t) if t else 0.0
    z_weight = {
        Objective.ZERO_FORCING: 0.0,
        Objective.MIN_PROPAGATION: eps,
        Objective.MAX_PROPAGATION: -eps,
        Objective.THROTTLING: 1.0,
    }[objective]
    goal = {column: 1.0 for column in x[0]}
    if z_weight:
        goal.update({column: z_weight for column in z})
    model.set_objective(goal)

    # every vertex is filled initially or forced exactly once
    for v in range(g.order):
        row = {x[0][v]: 1.0}
        for step in y:
            for w in g.neighbors(v):
                row[step[(w, v)]] = 1.0
        model.add_constraint(row, lower=1, upper=1)
    # a force needs the forcing vertex and its other neighbours filled
    for u, v in arcs:
        for i in range(t):
            model.add_constraint({y[i][(u, v)]: 1.0, x[i][u]: -1.0}, upper=0)
        for w in g.neighbors(u):
            if w != v:
                for i in range(t):
                    model.add_constraint({y[i][(u, v)]: 1.0, x[i][w]: -1.0}, upper=0)
    # filled vertices carry over and grow by the forces of each step
    for v in range(g.order):
        for i in range(t):
            row = {x[i + 1][v]: 1.0, x[i][v]: -1.0}
            for w in g.neighbors(v):
                row[y[i][(w, v)]] = -1.0
            model.add_constraint(row, lower=0, upper=0)
    # every force that can happen does happen
    for i in range(t):
        for u, v in arcs:
            row = {x[i][u]: 1.0, x[i][v]: -1.0}
            for w in g.neighbors(u):
                if w != v:
                    _add(row, x[i][w], 1.0)
            for w in g.neighbors(v):
                _add(row, y[i][(w, v)], -1.0)
            model.add_constraint(row, upper=g.degree(u) - 1)
    # z marks exactly the steps in which something is forced
    inverse = 1.0 / g.order if g.order else 0.0
    for i in range(1, t + 1):
        row: dict[int, float] = {}
        for j in range(g.order):
            _add(row, x[i][j], inverse)
            _add(row, x[i - 1][j], -inverse)
        _add(row, z[i - 1], -1.0)
        model.add_constraint(row, upper=0)
    for i in range(1, t + 1):
        row = {z[i - 1]: 1.0}
        for j in range(g.order):
            _add(row, x[i][j], -1.0)
            _add(row, x[i - 1][j], 1.0)
        model.add_constraint(row, upper=0)
    return _TimeStepModel(model, arcs, x, y, z)


def time_step_ip(g: Graph, t: int, kind: Union[Objective, str]) -> ForcingResult:
    """Time step model with t forcing rounds."""
    objective = _objective(kind)
    _check_steps(t)
    built = _time_step_model(g, t, objective)
    solution = built.model.solve()
    values = _point(solution, "time step model")
    if objective in (Objective.ZERO_FORCING, Objective.THROTTLING):
        value = round(solution.objective)
    else:
        value = sum(round(values[column]) for column in built.z)
    zf_set = frozenset(j for j in range(g.order) if values[built.x[0][j]] > 0.5)
    forcings: dict[tuple[int, int], int] = {}
    for arc in built.arcs:
        for i, step in enumerate(built.y):
            if values[step[arc]] > 0.5:
                forcings[arc] = i
                break
    return ForcingResult(solution.status, value, zf_set, forcings)


def pt_interval(g: Graph, t: int) -> PTIntervalResult:
    """Every propagation time reachable within t rounds, each with a least set."""
    _check_steps(t)
    built = _time_step_model(g, t, Objective.MIN_PROPAGATION)
    steps = {column: 1.0 for column in built.z}
    built.model.add_constraint(steps, lower=0)
    intervals: dict[int, frozenset] = {}
    solution = built.model.solve()
    while solution.status is Status.OPTIMAL and solution.values is not None:
        values = solution.values
        k = sum(1 for column in built.z if values[column] > 0.5)
        zf_set = frozenset(j for j in range(g.order) if values[built.x[0][j]] > 0.5)
        intervals.setdefault(k, zf_set)
        built.model.add_constraint(steps, lower=k + 1)
        solution = built.model.solve()
    return PTIntervalResult(solution.status, intervals)