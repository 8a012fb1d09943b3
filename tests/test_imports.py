"""Test that all imports work correctly."""

import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def test_config_imports():
    """Test configuration module imports."""
    from sbx_crossover.config import Settings, load_config, defaults
    assert Settings is not None
    assert load_config is not None
    assert defaults.EPS == 1e-14


def test_structures_imports():
    """Test structures module imports."""
    from sbx_crossover.structures import (
        Problem,
        BoundedProblem,
        Solution,
        initialize_population,
    )
    assert Problem is not None
    assert BoundedProblem is not None
    assert Solution is not None
    assert initialize_population is not None


def test_operators_imports():
    """Test that operators are accessible."""
    from sbx_crossover.operators import CrossoverOperator, SBXCrossover
    assert issubclass(SBXCrossover, CrossoverOperator)


def test_package_imports():
    """Test main package imports."""
    import sbx_crossover
    from sbx_crossover import (
        SBXCrossover,
        Settings,
        load_config,
        Solution,
        NumpyRandomSource,
        InvalidArgumentError,
    )
    assert sbx_crossover.__version__ == "1.0.0"
    assert SBXCrossover is not None
    assert Settings is not None
    assert issubclass(InvalidArgumentError, ValueError)


def test_analysis_imports():
    """Test analysis module imports."""
    from sbx_crossover.analysis import sample_offspring, summarize_spread, sweep_eta
    assert sample_offspring is not None
    assert summarize_spread is not None
    assert sweep_eta is not None


if __name__ == "__main__":
    print("Running import tests...")

    test_config_imports()
    print("✓ Config imports")

    test_structures_imports()
    print("✓ Structure imports")

    test_operators_imports()
    print("✓ Operator imports")

    test_package_imports()
    print("✓ Package imports")

    test_analysis_imports()
    print("✓ Analysis imports")

    print("\n✅ All import tests passed!")
