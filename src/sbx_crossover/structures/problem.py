"""
Problem Module

Defines the bound lookup contract consumed by the operators and a
box-bounded implementation backed by NumPy arrays.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..config.settings import ProblemConfig
from ..exceptions import InvalidArgumentError


class Problem(ABC):
    """
    Bound information of a real-valued optimisation problem.

    Implementations must satisfy lower_bound(i) <= upper_bound(i) for every
    index in [0, number_of_variables).
    """

    @property
    @abstractmethod
    def number_of_variables(self) -> int:
        """Dimensionality of the decision vector."""

    @abstractmethod
    def lower_bound(self, index: int) -> float:
        """Lower bound of variable ``index``."""

    @abstractmethod
    def upper_bound(self, index: int) -> float:
        """Upper bound of variable ``index``."""


class BoundedProblem(Problem):
    """
    Problem with fixed per-variable box bounds.

    Attributes:
        lower_bounds: float64 array of lower bounds
        upper_bounds: float64 array of upper bounds
    """

    def __init__(self, lower_bounds: Sequence[float], upper_bounds: Sequence[float]):
        lower = np.asarray(lower_bounds, dtype=float)
        upper = np.asarray(upper_bounds, dtype=float)
        if lower.ndim != 1 or upper.ndim != 1:
            raise InvalidArgumentError("Bounds must be one-dimensional sequences.")
        if lower.shape != upper.shape:
            raise InvalidArgumentError(
                f"Bounds length mismatch: {lower.size} lower vs {upper.size} upper values."
            )
        if np.any(lower > upper):
            bad = int(np.argmax(lower > upper))
            raise InvalidArgumentError(
                f"Lower bound {lower[bad]} exceeds upper bound {upper[bad]} at index {bad}."
            )
        self.lower_bounds = lower
        self.upper_bounds = upper

    @classmethod
    def from_config(cls, config: ProblemConfig) -> 'BoundedProblem':
        return cls(config.lower_bounds, config.upper_bounds)

    @property
    def number_of_variables(self) -> int:
        return int(self.lower_bounds.size)

    def lower_bound(self, index: int) -> float:
        return float(self.lower_bounds[index])

    def upper_bound(self, index: int) -> float:
        return float(self.upper_bounds[index])

    def __repr__(self) -> str:
        return f"BoundedProblem(n={self.number_of_variables})"
