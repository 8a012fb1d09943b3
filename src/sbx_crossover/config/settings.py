"""Configuration settings management for the SBX crossover package."""

import logging
import math
import os
import yaml
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from typing import List, Optional, Dict, Any

from .defaults import *


@dataclass
class CrossoverConfig:
    """SBX operator parameters."""
    eta_c: float = DEFAULT_ETA_C
    probability: float = DEFAULT_CROSSOVER_PROBABILITY


@dataclass
class ProblemConfig:
    """Box bounds of the decision variables."""
    lower_bounds: List[float] = field(default_factory=lambda: DEFAULT_LOWER_BOUNDS.copy())
    upper_bounds: List[float] = field(default_factory=lambda: DEFAULT_UPPER_BOUNDS.copy())

    @property
    def number_of_variables(self) -> int:
        return len(self.lower_bounds)


@dataclass
class RandomConfig:
    """Random source configuration."""
    seed: Optional[int] = DEFAULT_RANDOM_SEED
    thread_safe: bool = DEFAULT_THREAD_SAFE


@dataclass
class SamplingConfig:
    """Offspring distribution sampling configuration."""
    samples: int = DEFAULT_SAMPLES
    eta_values: List[float] = field(default_factory=lambda: DEFAULT_ETA_VALUES.copy())


@dataclass
class DebugConfig:
    """Debug configuration."""
    verbose: bool = DEFAULT_VERBOSE
    log_level: str = DEFAULT_LOG_LEVEL


@dataclass
class Settings:
    """Main configuration settings class."""
    crossover: CrossoverConfig = field(default_factory=CrossoverConfig)
    problem: ProblemConfig = field(default_factory=ProblemConfig)
    random: RandomConfig = field(default_factory=RandomConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'Settings':
        """Load settings from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Settings object
        """
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'Settings':
        """Create settings from dictionary.

        Unknown keys are ignored; missing keys keep their defaults.

        Args:
            config_dict: Configuration dictionary

        Returns:
            Settings object
        """
        return _build_section(cls, config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary.

        Returns:
            Configuration dictionary
        """
        return asdict(self)

    def to_yaml(self, output_path: str):
        """Save settings to YAML file.

        Args:
            output_path: Path to save YAML file
        """
        with open(output_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        """Validate configuration settings.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate crossover parameters
        if not _is_valid_eta(self.crossover.eta_c):
            errors.append(f"Invalid eta_c: {self.crossover.eta_c}. Must be a finite number >= 0")

        if not 0 <= self.crossover.probability <= 1:
            errors.append(f"Invalid probability: {self.crossover.probability}. "
                          f"Must be between 0 and 1")

        # Validate problem bounds
        lower, upper = self.problem.lower_bounds, self.problem.upper_bounds
        if len(lower) != len(upper):
            errors.append(f"Invalid bounds: {len(lower)} lower vs {len(upper)} upper values")
        else:
            for i, (lo, hi) in enumerate(zip(lower, upper)):
                if lo > hi:
                    errors.append(f"Invalid bounds at index {i}: lower {lo} > upper {hi}")

        # Validate sampling
        if self.sampling.samples < 1:
            errors.append(f"Invalid samples: {self.sampling.samples}. Must be >= 1")

        for eta in self.sampling.eta_values:
            if not _is_valid_eta(eta):
                errors.append(f"Invalid eta value in sweep: {eta}. Must be a finite number >= 0")

        # Validate log level
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.debug.log_level not in valid_log_levels:
            errors.append(f"Invalid log_level: {self.debug.log_level}. "
                          f"Must be one of {valid_log_levels}")

        return errors


def _is_valid_eta(eta) -> bool:
    """Distribution indices must be finite numbers >= 0."""
    if isinstance(eta, bool) or not isinstance(eta, (int, float)):
        return False
    return math.isfinite(eta) and eta >= 0


def _build_section(config_class, data):
    """Build ``config_class`` from a mapping, recursing into nested sections."""
    if data is None:
        return config_class()
    if not isinstance(data, dict):
        return data
    kwargs = {}
    for section_field in fields(config_class):
        if section_field.name not in data:
            continue
        value = data[section_field.name]
        if is_dataclass(section_field.type):
            value = _build_section(section_field.type, value)
        kwargs[section_field.name] = value
    return config_class(**kwargs)


def load_config(config_path: Optional[str] = None) -> Settings:
    """Load configuration from file or use defaults.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        Settings object
    """
    if config_path is None or not os.path.exists(config_path):
        return Settings()

    return Settings.from_yaml(config_path)


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply the debug section of ``settings`` to the package logger.

    Args:
        settings: Loaded settings

    Returns:
        The configured ``sbx_crossover`` logger
    """
    level = getattr(logging, settings.debug.log_level, logging.WARNING)
    if settings.debug.verbose:
        logging.basicConfig(level=level)

    package_logger = logging.getLogger("sbx_crossover")
    package_logger.setLevel(level)
    return package_logger
