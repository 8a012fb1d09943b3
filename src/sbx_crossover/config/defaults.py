"""
Default configuration values.

Contains the constants used as dataclass defaults in settings.py.
"""

# =============================================================================
# Crossover Parameters
# =============================================================================

DEFAULT_ETA_C = 20.0
DEFAULT_CROSSOVER_PROBABILITY = 0.9

# Minimum difference between two parent values for recombination
EPS = 1.0e-14

# Probability of the per-variable swap gate and of the tail tie-break
SWAP_PROBABILITY = 0.5

# =============================================================================
# Problem Parameters
# =============================================================================

DEFAULT_LOWER_BOUNDS = [0.0]
DEFAULT_UPPER_BOUNDS = [1.0]

# =============================================================================
# Randomness
# =============================================================================

DEFAULT_RANDOM_SEED = None
DEFAULT_THREAD_SAFE = False

# =============================================================================
# Distribution Sampling
# =============================================================================

DEFAULT_SAMPLES = 1000
DEFAULT_ETA_VALUES = [2.0, 5.0, 20.0]

# =============================================================================
# Debug
# =============================================================================

DEFAULT_VERBOSE = False
DEFAULT_LOG_LEVEL = "WARNING"
