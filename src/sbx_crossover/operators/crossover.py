"""
Crossover operators for genetic algorithms.

This module defines the interface shared by recombination operators used
inside evolutionary algorithms such as NSGA-II.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..exceptions import InvalidArgumentError
from ..rng import RandomSource
from ..structures.solution import Solution


def check_probability(probability: float) -> float:
    """Return ``probability`` as float, raising InvalidArgumentError outside [0, 1]."""
    try:
        value = float(probability)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid probability: {probability!r}") from None
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"Invalid probability: {value}. Must be between 0 and 1")
    return value


class CrossoverOperator(ABC):
    """
    Two-parent, two-offspring recombination operator.

    Operators are interchangeable: every implementation consumes two parents
    and returns ``(child1, child2)``, child1 derived from parent1.
    """

    def __init__(self, probability: float, random_source: RandomSource):
        self._probability = check_probability(probability)
        self._random_source = random_source

    @property
    def probability(self) -> float:
        """Probability that crossover is applied to a parent pair."""
        return self._probability

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    def crossover(self, parent1: Solution, parent2: Solution,
                  random_source: Optional[RandomSource] = None) -> Tuple[Solution, Solution]:
        """
        Recombine two parents with the operator's probability.

        Args:
            parent1: First parent
            parent2: Second parent
            random_source: Overrides the operator's source for this call

        Returns:
            (child1, child2) tuple
        """
        return self.do_crossover(self._probability, parent1, parent2, random_source)

    __call__ = crossover

    @abstractmethod
    def do_crossover(self, probability: float, parent1: Solution, parent2: Solution,
                     random_source: Optional[RandomSource] = None) -> Tuple[Solution, Solution]:
        """
        Recombine two parents with an explicit crossover probability.

        Args:
            probability: Probability of applying crossover to this pair
            parent1: First parent
            parent2: Second parent
            random_source: Overrides the operator's source for this call

        Returns:
            (child1, child2) tuple
        """
