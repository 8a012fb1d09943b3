"""
Simulated Binary Crossover (SBX) operator.

Based on: Kalyanmoy Deb, Ram Bhushan Agrawal - Simulated Binary Crossover
for Continuous Search Space (1995), with the bounded variant used in NSGA-II.
"""

import logging
import math
from contextlib import nullcontext
from typing import Optional, Tuple

import numpy as np

from .crossover import CrossoverOperator, check_probability
from ..config.defaults import DEFAULT_ETA_C, DEFAULT_CROSSOVER_PROBABILITY, EPS, SWAP_PROBABILITY
from ..config.settings import CrossoverConfig
from ..exceptions import ContractViolationError, InvalidArgumentError
from ..rng import NumpyRandomSource, RandomSource
from ..structures.problem import Problem
from ..structures.solution import Solution

logger = logging.getLogger(__name__)


def _spread_factor(beta: np.float64, rand: float, eta_c: float) -> np.float64:
    """Inverse CDF of the bounded SBX distribution for one tail.

    Scalar float64 ``**`` goes through the C library ``pow``; ``np.power``
    may take a vectorised path that differs in the last bit.
    """
    beta = np.float64(beta)
    exponent = 1.0 / (eta_c + 1.0)
    alpha = 2.0 - beta ** -(eta_c + 1.0)
    if rand <= 1.0 / alpha:
        return (rand * alpha) ** exponent
    return (1.0 / (2.0 - rand * alpha)) ** exponent


def _clip(value: np.float64, lower: float, upper: float) -> float:
    """Clip into [lower, upper]; NaN goes to the lower bound."""
    if np.isnan(value) or value < lower:
        return lower
    if value > upper:
        return upper
    return float(value)


class SBXCrossover(CrossoverOperator):
    """
    Simulated binary crossover for bounded real-valued variables.

    The operator is stateless between calls: eta_c, probability and the
    problem are fixed at construction. Randomness comes from the injected
    RandomSource, drawn in this order per call:

        1. one gate draw (crossover fires when it is <= probability)
        2. per variable, one swap draw (> 0.5 swaps the parent values)
        3. on the recombination branch only, one spread draw shared by both
           tails and one tie-break draw deciding which child gets which tail

    Attributes:
        problem: Problem supplying lower/upper bounds per variable
    """

    def __init__(self, problem: Problem, eta_c: float = DEFAULT_ETA_C,
                 probability: float = DEFAULT_CROSSOVER_PROBABILITY,
                 random_source: Optional[RandomSource] = None):
        try:
            eta_c = float(eta_c)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid eta_c: {eta_c!r}") from None
        if not math.isfinite(eta_c) or eta_c < 0:
            raise InvalidArgumentError(f"Invalid eta_c: {eta_c}. Must be a finite number >= 0")

        super().__init__(probability,
                         random_source if random_source is not None else NumpyRandomSource())
        self.problem = problem
        self._eta_c = eta_c
        logger.debug("SBXCrossover created: eta_c=%s, probability=%s, n=%d",
                     self._eta_c, self.probability, problem.number_of_variables)

    @classmethod
    def from_config(cls, problem: Problem, config: CrossoverConfig,
                    random_source: Optional[RandomSource] = None) -> 'SBXCrossover':
        """
        Build an operator from the crossover section of the settings.

        Args:
            problem: Problem supplying the bounds
            config: CrossoverConfig with eta_c and probability
            random_source: Optional source, a fresh unseeded one if None

        Returns:
            SBXCrossover object
        """
        return cls(problem, eta_c=config.eta_c, probability=config.probability,
                   random_source=random_source)

    @property
    def eta_c(self) -> float:
        """Distribution index; larger values keep offspring closer to the parents."""
        return self._eta_c

    def do_crossover(self, probability: float, parent1: Solution, parent2: Solution,
                     random_source: Optional[RandomSource] = None) -> Tuple[Solution, Solution]:
        probability = check_probability(probability)
        n = len(parent1)
        if n != len(parent2):
            raise InvalidArgumentError(
                f"Parent length mismatch: {n} vs {len(parent2)} variables."
            )
        if n != self.problem.number_of_variables:
            raise InvalidArgumentError(
                f"Parents have {n} variables, problem defines "
                f"{self.problem.number_of_variables}."
            )

        rng = random_source if random_source is not None else self._random_source
        hold = getattr(rng, "hold", None)
        with hold() if hold is not None else nullcontext():
            return self._recombine(probability, parent1, parent2, rng)

    def _recombine(self, probability: float, parent1: Solution, parent2: Solution,
                   rng: RandomSource) -> Tuple[Solution, Solution]:
        if rng.next_double() > probability:
            logger.debug("Crossover gate closed, returning parent copies")
            return parent1.clone(), parent2.clone()

        n = len(parent1)
        x1_values, x2_values = parent1.values, parent2.values
        child1 = np.empty(n, dtype=float)
        child2 = np.empty(n, dtype=float)
        eta_c = self._eta_c

        with np.errstate(all='ignore'):
            for i in range(n):
                x1 = x1_values[i]
                x2 = x2_values[i]

                if rng.next_double() > SWAP_PROBABILITY:
                    child1[i], child2[i] = x2, x1
                    continue

                if abs(x1 - x2) <= EPS:
                    child1[i], child2[i] = x1, x2
                    continue

                y1, y2 = (x1, x2) if x1 < x2 else (x2, x1)
                y_lower = self.problem.lower_bound(i)
                y_upper = self.problem.upper_bound(i)
                if y_lower > y_upper:
                    raise ContractViolationError(
                        f"Problem bounds inverted at index {i}: "
                        f"lower {y_lower} > upper {y_upper}"
                    )

                rand = rng.next_double()
                span = y2 - y1

                beta = 1.0 + (2.0 * (y1 - y_lower) / span)
                betaq = _spread_factor(beta, rand, eta_c)
                c1 = 0.5 * ((y1 + y2) - betaq * span)

                beta = 1.0 + (2.0 * (y_upper - y2) / span)
                betaq = _spread_factor(beta, rand, eta_c)
                c2 = 0.5 * ((y1 + y2) + betaq * span)

                c1 = _clip(c1, y_lower, y_upper)
                c2 = _clip(c2, y_lower, y_upper)

                if rng.next_double() <= SWAP_PROBABILITY:
                    child1[i], child2[i] = c2, c1
                else:
                    child1[i], child2[i] = c1, c2

        return Solution(child1), Solution(child2)

    def __repr__(self) -> str:
        return f"SBXCrossover(eta_c={self._eta_c}, probability={self.probability})"
