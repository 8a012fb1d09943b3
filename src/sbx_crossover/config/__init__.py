"""Configuration management for the SBX crossover package."""

from .settings import (
    Settings,
    CrossoverConfig,
    ProblemConfig,
    RandomConfig,
    SamplingConfig,
    DebugConfig,
    load_config,
    configure_logging,
)
from .defaults import *

__all__ = [
    "Settings",
    "CrossoverConfig",
    "ProblemConfig",
    "RandomConfig",
    "SamplingConfig",
    "DebugConfig",
    "load_config",
    "configure_logging",
]
