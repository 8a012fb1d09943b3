"""
SBX Crossover

Simulated Binary Crossover for bounded real-valued encodings in evolutionary algorithms.
"""

__version__ = "1.0.0"

from .config import Settings, load_config, configure_logging
from .exceptions import SBXError, InvalidArgumentError, ContractViolationError
from .operators import CrossoverOperator, SBXCrossover
from .rng import RandomSource, NumpyRandomSource, SynchronizedRandomSource, make_random_source
from .structures import Problem, BoundedProblem, Solution, initialize_population

__all__ = [
    "Settings",
    "load_config",
    "configure_logging",
    "SBXError",
    "InvalidArgumentError",
    "ContractViolationError",
    "CrossoverOperator",
    "SBXCrossover",
    "RandomSource",
    "NumpyRandomSource",
    "SynchronizedRandomSource",
    "make_random_source",
    "Problem",
    "BoundedProblem",
    "Solution",
    "initialize_population",
]
