"""Data structures for the SBX crossover package."""

from .problem import Problem, BoundedProblem
from .solution import Solution, initialize_population

__all__ = [
    "Problem",
    "BoundedProblem",
    "Solution",
    "initialize_population",
]
