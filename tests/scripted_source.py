"""RandomSource test double replaying a fixed sequence of draws."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sbx_crossover.rng import RandomSource


class ScriptedRandomSource(RandomSource):
    """Returns ``values`` in order; repeats the last one if ``repeat_last``."""

    def __init__(self, values, repeat_last=False):
        self.values = list(values)
        self.repeat_last = repeat_last
        self.draws = 0

    @classmethod
    def constant(cls, value):
        return cls([value], repeat_last=True)

    def next_double(self):
        if self.draws < len(self.values):
            value = self.values[self.draws]
        elif self.repeat_last and self.values:
            value = self.values[-1]
        else:
            raise AssertionError(f"Unexpected draw #{self.draws + 1}")
        self.draws += 1
        return value
