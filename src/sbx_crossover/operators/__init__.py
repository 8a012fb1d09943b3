"""Genetic operators for evolutionary algorithms."""

from .crossover import CrossoverOperator, check_probability
from .sbx import SBXCrossover

__all__ = [
    "CrossoverOperator",
    "check_probability",
    "SBXCrossover",
]
