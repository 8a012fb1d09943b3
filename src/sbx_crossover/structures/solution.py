"""
Solution Module

Defines the Solution class for real-valued encodings:
- Solution representation (decision values + objectives)
- Population initialization
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .problem import Problem
from ..exceptions import InvalidArgumentError
from ..rng import RandomSource


class Solution:
    """
    Candidate solution: a vector of real-valued decision variables.

    Attributes:
        values: float64 array of decision values, one per variable
        objectives: Objective values, None until evaluated
    """

    def __init__(self, values: Sequence[float],
                 objectives: Optional[Sequence[float]] = None):
        self.values = np.array(values, dtype=float)
        if self.values.ndim != 1:
            raise InvalidArgumentError("Solution values must be one-dimensional.")
        self.objectives = tuple(objectives) if objectives is not None else None

    def __len__(self) -> int:
        return int(self.values.size)

    def __getitem__(self, index: int) -> float:
        return float(self.values[index])

    def __setitem__(self, index: int, value: float):
        self.values[index] = value

    def clone(self) -> 'Solution':
        """Return an independent copy with the same values and objectives."""
        return Solution(self.values, self.objectives)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return (np.array_equal(self.values, other.values)
                and self.objectives == other.objectives)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Solution(values={self.values.tolist()}, objectives={self.objectives})"


# =============================================================================
# Population Initialization
# =============================================================================

def initialize_population(problem: Problem, pop_size: int,
                          random_source: RandomSource) -> List[Solution]:
    """
    Initialize population with values drawn uniformly inside the bounds.

    Args:
        problem: Problem supplying the bounds
        pop_size: Population size
        random_source: Source of uniform draws

    Returns:
        List of Solution objects
    """
    n = problem.number_of_variables
    bounds: List[Tuple[float, float]] = [
        (problem.lower_bound(i), problem.upper_bound(i)) for i in range(n)
    ]

    population = []
    for _ in range(pop_size):
        values = [lo + random_source.next_double() * (hi - lo) for lo, hi in bounds]
        population.append(Solution(values))

    return population
