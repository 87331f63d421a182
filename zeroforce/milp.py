"""A small mixed-integer linear programming model solved with HiGHS."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp


class Status(Enum):
    """How a solve ended."""

    OPTIMAL = "optimal"
    TIME_LIMIT = "time_limit"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    ERROR = "error"


_SCIPY_STATUS = {
    0: Status.OPTIMAL,
    1: Status.TIME_LIMIT,
    2: Status.INFEASIBLE,
    3: Status.UNBOUNDED,
}

_SENSES = ("min", "max")


@dataclass(frozen=True)
class Solution:
    """Outcome of a solve; objective and values are None when no point was found."""

    status: Status
    objective: Optional[float]
    values: Optional[tuple[float, ...]]


@dataclass
class _Row:
    coefficients: dict[int, float]
    lower: float
    upper: float


class LinearModel:
    """Variables, linear constraints and a linear objective to minimise or maximise."""

    def __init__(self, sense: str = "min", time_limit: Optional[float] = None) -> None:
        if sense not in _SENSES:
            raise ValueError(f"sense must be one of {_SENSES}, not {sense!r}")
        if time_limit is not None and time_limit <= 0:
            raise ValueError("time limit must be positive")
        self.sense = sense
        self.time_limit = time_limit
        self._lower: list[float] = []
        self._upper: list[float] = []
        self._cost: list[float] = []
        self._integer: list[bool] = []
        self._rows: list[_Row] = []

    @property
    def num_vars(self) -> int:
        return len(self._cost)

    @property
    def num_constraints(self) -> int:
        return len(self._rows)

    def add_var(
        self,
        lower: Optional[float] = 0.0,
        upper: Optional[float] = 1.0,
        objective: float = 0.0,
        integer: bool = False,
    ) -> int:
        """Add a variable and return its index."""
        lo = -math.inf if lower is None else float(lower)
        hi = math.inf if upper is None else float(upper)
        if lo > hi:
            raise ValueError(f"variable bounds are empty: [{lo}, {hi}]")
        self._lower.append(lo)
        self._upper.append(hi)
        self._cost.append(float(objective))
        self._integer.append(bool(integer))
        return len(self._cost) - 1

    def _checked(self, coefficients: Mapping[int, float]) -> dict[int, float]:
        checked: dict[int, float] = {}
        for index, value in coefficients.items():
            if not 0 <= index < self.num_vars:
                raise IndexError(f"no variable with index {index}")
            checked[index] = checked.get(index, 0.0) + float(value)
        return checked

    def add_constraint(
        self,
        coefficients: Mapping[int, float],
        lower: Optional[float] = None,
        upper: Optional[float] = None,
    ) -> int:
        """Add lower <= sum(coefficient * variable) <= upper; None means unbounded."""
        lo = -math.inf if lower is None else float(lower)
        hi = math.inf if upper is None else float(upper)
        if lo > hi:
            raise ValueError(f"constraint bounds are empty: [{lo}, {hi}]")
        self._rows.append(_Row(self._checked(coefficients), lo, hi))
        return len(self._rows) - 1

    def set_objective(self, coefficients: Mapping[int, float]) -> None:
        """Replace the objective; variables not named get coefficient zero."""
        checked = self._checked(coefficients)
        self._cost = [checked.get(index, 0.0) for index in range(self.num_vars)]

    def solve(self) -> Solution:
        """Solve the model as it stands."""
        if not self._cost:
            if all(row.lower <= 0.0 <= row.upper for row in self._rows):
                return Solution(Status.OPTIMAL, 0.0, ())
            return Solution(Status.INFEASIBLE, None, None)

        sign = -1.0 if self.sense == "max" else 1.0
        cost = sign * np.array(self._cost)
        kwargs = {}
        if self._rows:
            matrix = np.zeros((len(self._rows), self.num_vars))
            for r, row in enumerate(self._rows):
                for index, value in row.coefficients.items():
                    matrix[r, index] = value
            kwargs["constraints"] = LinearConstraint(
                matrix,
                np.array([row.lower for row in self._rows]),
                np.array([row.upper for row in self._rows]),
            )
        options: dict[str, float] = {"mip_rel_gap": 0.0}
        if self.time_limit is not None:
            options["time_limit"] = self.time_limit

        result = milp(
            cost,
            integrality=np.array(self._integer, dtype=int),
            bounds=Bounds(np.array(self._lower), np.array(self._upper)),
            options=options,
            **kwargs,
        )
        status = _SCIPY_STATUS.get(result.status, Status.ERROR)
        if result.x is None:
            return Solution(status, None, None)
        return Solution(status, sign * float(result.fun), tuple(float(x) for x in result.x))