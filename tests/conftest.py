"""Root-level pytest fixtures for the axisframe test suite.

Provides shared configuration fixtures (Pydantic-based) and the standard
two-dimensional test variable:

    abscissa: ["a", "c", "d"]
    ordinate: [1, 2, 4]
    values:   v(i, j) = 10 * i + j (float64)
"""

import numpy as np
import pytest

from axisframe import Axis, Coordinate, DimensionMapping, Variable
from axisframe.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_outer_default(make_config):
    ...     config = make_config(DEFAULT_JOIN="outer")
    ...     assert config.selection.default_join == "outer"
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides))
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Coordinate / Variable Fixtures
# =============================================================================

@pytest.fixture
def test_coordinate():
    return Coordinate({"abscissa": Axis(["a", "c", "d"]), "ordinate": Axis([1, 2, 4])})


@pytest.fixture
def test_dims():
    return DimensionMapping(["abscissa", "ordinate"])


@pytest.fixture
def test_values():
    return np.array([[0.0, 1.0, 2.0], [10.0, 11.0, 12.0], [20.0, 21.0, 22.0]])


@pytest.fixture
def test_variable(test_values, test_coordinate, test_dims, internal_config):
    """3x3 float variable over (abscissa, ordinate)."""
    return Variable(test_values.copy(), test_coordinate, test_dims, config=internal_config)


@pytest.fixture
def int_variable(test_coordinate, test_dims):
    """3x3 int64 variable over (abscissa, ordinate)."""
    values = np.arange(9, dtype=np.int64).reshape(3, 3)
    return Variable(values, test_coordinate, test_dims)
