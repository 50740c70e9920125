"""Numerical checks for curve derivatives."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ._curves import Curve
    from ._point import Point3D


def finite_difference_derivative(
    curve: "Curve", t: float | np.ndarray, eps: float = 1e-6
) -> np.ndarray:
    """Central-difference approximation of d(position)/dt.

    Args:
        curve: Curve to differentiate
        t: Parameter value(s)
        eps: Half-width of the difference stencil

    Returns:
        Array of shape (*t.shape, 3)
    """
    t = np.asarray(t, dtype=np.float64)
    return (curve.sample(t + eps) - curve.sample(t - eps)) / (2 * eps)


def derivative_error(curve: "Curve", t: float | np.ndarray, eps: float = 1e-6) -> float:
    """Max absolute difference between analytic and finite-difference derivatives."""
    approx = finite_difference_derivative(curve, t, eps)
    return float(np.max(np.abs(curve.sample_derivative(t) - approx)))


def planar_radius(point: "Point3D") -> float:
    """Distance from the z axis."""
    return float(np.hypot(point.x, point.y))
