"""Exception types raised by the SBX crossover package."""


class SBXError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(SBXError, ValueError):
    """Raised when a caller passes parameters or parents that cannot be used.

    Covers parent length mismatches, out-of-range distribution index or
    crossover probability, and malformed problem bounds.
    """


class ContractViolationError(SBXError, RuntimeError):
    """Raised when an external collaborator breaks its contract.

    The only case today is a Problem reporting ``lower_bound(i) > upper_bound(i)``.
    Bounds are never swapped or repaired.
    """
