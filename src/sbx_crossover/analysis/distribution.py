"""
Empirical offspring distribution of crossover operators.

Repeats a crossover on a fixed parent pair and tabulates the offspring so
that spread and bound behaviour can be inspected per variable.
"""

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from ..operators.crossover import CrossoverOperator
from ..operators.sbx import SBXCrossover
from ..config.settings import RandomConfig
from ..rng import RandomSource, make_random_source
from ..structures.problem import Problem
from ..structures.solution import Solution


def sample_offspring(operator: CrossoverOperator, parent1: Solution, parent2: Solution,
                     samples: int,
                     random_source: Optional[RandomSource] = None) -> pd.DataFrame:
    """
    Apply ``operator`` to the same parents ``samples`` times.

    Args:
        operator: Crossover operator to sample
        parent1: First parent
        parent2: Second parent
        samples: Number of crossover calls
        random_source: Optional override of the operator's source

    Returns:
        DataFrame with columns sample, child, variable, value
        (one row per sample, child and variable)
    """
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")

    n = len(parent1)
    blocks = []
    for _ in range(samples):
        child1, child2 = operator.crossover(parent1, parent2, random_source)
        blocks.append(np.stack([child1.values, child2.values]))

    values = np.asarray(blocks).reshape(samples * 2 * n)
    return pd.DataFrame({
        'sample': np.repeat(np.arange(samples), 2 * n),
        'child': np.tile(np.repeat([1, 2], n), samples),
        'variable': np.tile(np.arange(n), 2 * samples),
        'value': values,
    })


def summarize_spread(df: pd.DataFrame, parent1: Solution, parent2: Solution) -> pd.DataFrame:
    """
    Per-variable statistics of sampled offspring.

    Args:
        df: Output of sample_offspring
        parent1: First parent used for sampling
        parent2: Second parent used for sampling

    Returns:
        DataFrame indexed by variable with mean, std, min, max, parent_low,
        parent_high and inside_share (fraction of offspring values lying
        between the two parent values)
    """
    low = np.minimum(parent1.values, parent2.values)
    high = np.maximum(parent1.values, parent2.values)

    stats = df.groupby('variable')['value'].agg(['mean', 'std', 'min', 'max'])
    stats['parent_low'] = low[stats.index.to_numpy()]
    stats['parent_high'] = high[stats.index.to_numpy()]

    variable = df['variable'].to_numpy()
    inside = (df['value'] >= low[variable]) & (df['value'] <= high[variable])
    stats['inside_share'] = inside.groupby(df['variable']).mean()
    return stats


def sweep_eta(problem: Problem, parent1: Solution, parent2: Solution,
              eta_values: Iterable[float], samples: int,
              seed: Optional[int] = None, probability: float = 1.0,
              thread_safe: bool = False) -> pd.DataFrame:
    """
    Summarize offspring spread for several distribution indices.

    Every eta_c value gets its own source seeded with ``seed`` so the runs
    consume identical draw sequences.

    Args:
        problem: Problem supplying the bounds
        parent1: First parent
        parent2: Second parent
        eta_values: Distribution indices to compare
        samples: Crossover calls per eta_c value
        seed: Seed shared by all runs
        probability: Crossover probability of each operator
        thread_safe: Wrap each source in a SynchronizedRandomSource

    Returns:
        Concatenated summaries with an eta_c column
    """
    random_config = RandomConfig(seed=seed, thread_safe=thread_safe)
    frames = []
    for eta_c in eta_values:
        operator = SBXCrossover(problem, eta_c=eta_c, probability=probability,
                                random_source=make_random_source(random_config))
        summary = summarize_spread(sample_offspring(operator, parent1, parent2, samples),
                                   parent1, parent2).reset_index()
        summary.insert(0, 'eta_c', float(eta_c))
        frames.append(summary)

    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)
