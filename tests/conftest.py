"""Pytest configuration and fixtures for curve3d tests."""

from __future__ import annotations

import math

import numpy as np
import pytest

from curve3d import Circle, Curve, Ellipse, Helix


# =============================================================================
# TOLERANCE SETTINGS
# =============================================================================

# Closed-form evaluation should agree with hand-computed values to this
ABS_TOL = 1e-12

# Central differences with eps=1e-6 have error around 1e-9 for |params| <= 10
DERIVATIVE_TOL = 1e-6


# =============================================================================
# TEST PARAMETERS
# =============================================================================

# Parameter values covering all quadrants, negatives and several turns
PARAMS = [0.0, math.pi / 4, math.pi / 2, 2.5, math.pi, -1.2, 7.0, 4 * math.pi + 0.3]

INVALID_VALUES = [0.0, -1.0, -1e-9, float("nan"), float("inf")]


def sample_curves() -> list[Curve]:
    """One of each variant, including a non-integer and a tiny parameter."""
    return [
        Circle(3.0),
        Circle(0.1),
        Ellipse(2.0, 4.0),
        Ellipse(9.5, 0.25),
        Helix(5.0, 2.0),
        Helix(0.7, 10.0),
    ]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for reproducible collections."""
    return np.random.default_rng(42)


@pytest.fixture
def mixed_curves() -> list[Curve]:
    """Circle(3), Ellipse(2,4), Circle(1), Helix(5,2), Circle(2)."""
    return [Circle(3), Ellipse(2, 4), Circle(1), Helix(5, 2), Circle(2)]


# =============================================================================
# ASSERTION HELPERS
# =============================================================================


def assert_close(actual, expected, tol: float = ABS_TOL, msg: str = "") -> None:
    """Assert component-wise closeness of array-likes."""
    actual = np.asarray(actual, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)
    diff = float(np.max(np.abs(actual - expected))) if actual.size else 0.0
    if diff > tol:
        raise AssertionError(
            f"Values {actual} differ from expected {expected} "
            f"by {diff:.3e} (tolerance: {tol}). {msg}"
        )
