"""Tests for offspring distribution sampling."""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sbx_crossover.analysis import sample_offspring, summarize_spread, sweep_eta
from sbx_crossover.operators import SBXCrossover
from sbx_crossover.rng import NumpyRandomSource
from sbx_crossover.structures import BoundedProblem, Solution


@pytest.fixture
def problem():
    return BoundedProblem([0.0, -5.0], [10.0, 5.0])


@pytest.fixture
def parents():
    return Solution([2.0, -1.0]), Solution([8.0, 1.0])


def test_sample_offspring_layout(problem, parents):
    operator = SBXCrossover(problem, probability=1.0, random_source=NumpyRandomSource(1))
    df = sample_offspring(operator, *parents, samples=10)

    assert list(df.columns) == ['sample', 'child', 'variable', 'value']
    assert len(df) == 10 * 2 * 2
    assert set(df['child']) == {1, 2}
    assert df.groupby(['sample', 'child']).size().eq(2).all()


def test_sample_offspring_rows_match_direct_calls(problem, parents):
    df = sample_offspring(
        SBXCrossover(problem, probability=1.0, random_source=NumpyRandomSource(4)),
        *parents, samples=3)
    operator = SBXCrossover(problem, probability=1.0, random_source=NumpyRandomSource(4))

    for sample in range(3):
        child1, child2 = operator.crossover(*parents)
        rows = df[df['sample'] == sample]
        assert rows[rows['child'] == 1]['value'].tolist() == child1.values.tolist()
        assert rows[rows['child'] == 2]['value'].tolist() == child2.values.tolist()


def test_sample_offspring_rejects_zero_samples(problem, parents):
    operator = SBXCrossover(problem)

    with pytest.raises(ValueError):
        sample_offspring(operator, *parents, samples=0)


def test_summary_respects_bounds(problem, parents):
    operator = SBXCrossover(problem, eta_c=1.0, probability=1.0,
                            random_source=NumpyRandomSource(2))
    df = sample_offspring(operator, *parents, samples=500)
    stats = summarize_spread(df, *parents)

    assert list(stats.index) == [0, 1]
    assert (stats['min'] >= np.array([0.0, -5.0])).all()
    assert (stats['max'] <= np.array([10.0, 5.0])).all()
    assert stats.loc[0, 'parent_low'] == 2.0
    assert stats.loc[1, 'parent_high'] == 1.0
    assert ((stats['inside_share'] >= 0.0) & (stats['inside_share'] <= 1.0)).all()


def test_offspring_mean_is_centred_for_symmetric_bounds(problem, parents):
    operator = SBXCrossover(problem, eta_c=2.0, probability=1.0,
                            random_source=NumpyRandomSource(8))
    stats = summarize_spread(sample_offspring(operator, *parents, samples=4000), *parents)

    # both variables sit symmetrically inside their bounds
    assert stats.loc[0, 'mean'] == pytest.approx(5.0, abs=0.2)
    assert stats.loc[1, 'mean'] == pytest.approx(0.0, abs=0.1)


def test_higher_eta_keeps_offspring_closer(problem, parents):
    sweep = sweep_eta(problem, *parents, eta_values=[0.0, 50.0], samples=3000, seed=3)

    assert list(sweep.columns[:2]) == ['eta_c', 'variable']
    assert len(sweep) == 4

    wide = sweep[sweep['eta_c'] == 0.0].set_index('variable')
    narrow = sweep[sweep['eta_c'] == 50.0].set_index('variable')
    for variable in (0, 1):
        spread_wide = wide.loc[variable, 'max'] - wide.loc[variable, 'min']
        spread_narrow = narrow.loc[variable, 'max'] - narrow.loc[variable, 'min']
        assert spread_narrow < spread_wide


def test_sweep_with_no_values_is_empty(problem, parents):
    assert sweep_eta(problem, *parents, eta_values=[], samples=5).empty


def test_thread_safe_sweep_matches_plain_sweep(problem, parents):
    plain = sweep_eta(problem, *parents, eta_values=[2.0, 20.0], samples=50, seed=9)
    synchronized = sweep_eta(problem, *parents, eta_values=[2.0, 20.0], samples=50,
                             seed=9, thread_safe=True)

    pd.testing.assert_frame_equal(plain, synchronized)
