"""
Random Source Module

Injected randomness for the genetic operators:
- RandomSource interface (one uniform draw in [0, 1))
- NumPy-backed generator with seeding and spawning
- Lock-guarded wrapper for sources shared between threads
"""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager, nullcontext
from typing import Iterator, List, Optional

import numpy as np

from .config.settings import RandomConfig


class RandomSource(ABC):
    """Supplier of uniform random numbers in [0, 1)."""

    @abstractmethod
    def next_double(self) -> float:
        """Return the next uniform value in [0, 1)."""

    def hold(self):
        """Context manager reserving the source for a sequence of draws.

        Plain sources are not shared, so there is nothing to reserve.
        """
        return nullcontext(self)


class NumpyRandomSource(RandomSource):
    """
    RandomSource backed by a ``numpy.random.Generator``.

    Not thread-safe. Share it between threads only through
    SynchronizedRandomSource, or give every thread its own child from spawn().

    Attributes:
        seed_sequence: SeedSequence the generator was built from
    """

    def __init__(self, seed: Optional[int] = None,
                 seed_sequence: Optional[np.random.SeedSequence] = None):
        if seed_sequence is None:
            seed_sequence = np.random.SeedSequence(seed)
        self.seed_sequence = seed_sequence
        self._generator = np.random.default_rng(seed_sequence)

    def next_double(self) -> float:
        return float(self._generator.random())

    def spawn(self, n: int) -> List['NumpyRandomSource']:
        """
        Create independent child sources, e.g. one per worker thread.

        Args:
            n: Number of children

        Returns:
            List of NumpyRandomSource objects
        """
        return [NumpyRandomSource(seed_sequence=child)
                for child in self.seed_sequence.spawn(n)]


class SynchronizedRandomSource(RandomSource):
    """
    Wraps a RandomSource so concurrent callers draw one at a time.

    Single draws are serialized with a re-entrant lock. hold() keeps the lock
    for a whole block so that one caller's draws stay contiguous in the
    underlying sequence.
    """

    def __init__(self, source: RandomSource):
        self._source = source
        self._lock = threading.RLock()

    def next_double(self) -> float:
        with self._lock:
            return self._source.next_double()

    @contextmanager
    def hold(self) -> Iterator['SynchronizedRandomSource']:
        with self._lock:
            yield self


def make_random_source(config: RandomConfig) -> RandomSource:
    """
    Build the random source described by ``config``.

    Args:
        config: Random section of the settings

    Returns:
        RandomSource object
    """
    source = NumpyRandomSource(config.seed)
    if config.thread_safe:
        return SynchronizedRandomSource(source)
    return source
