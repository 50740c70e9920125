"""Parametric 3D curves with closed-form position and derivative.

Each curve is an immutable dataclass holding only its shape parameters. The
parameter ``t`` is an angle in radians and may be any real value; evaluation is
vectorized over numpy arrays via :meth:`Curve.sample`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum, auto

import numpy as np

from ._point import Point3D


class CurveKind(Enum):
    """Discriminant tag for the closed set of curve variants."""
    CIRCLE = auto()
    ELLIPSE = auto()
    HELIX = auto()


class InvalidParameter(ValueError):
    """Raised when a curve is constructed with a non-positive shape parameter."""


def _require_positive(curve_name: str, name: str, value: float) -> None:
    if not (math.isfinite(value) and value > 0):
        raise InvalidParameter(
            f"{curve_name} {name} must be a positive finite number, got {value!r}"
        )


class Curve(ABC):
    """Abstract parametric curve.

    Subclasses implement the vectorized :meth:`sample` and
    :meth:`sample_derivative`; the scalar :meth:`position` and
    :meth:`derivative` wrap them.
    """

    kind: CurveKind

    def __post_init__(self) -> None:
        for f in fields(self):  # type: ignore[arg-type]
            _require_positive(type(self).__name__, f.name, getattr(self, f.name))

    @abstractmethod
    def sample(self, t: float | np.ndarray) -> np.ndarray:
        """Evaluate position at ``t``. Returns an array of shape (*t.shape, 3)."""
        raise NotImplementedError

    @abstractmethod
    def sample_derivative(self, t: float | np.ndarray) -> np.ndarray:
        """Evaluate d(position)/dt at ``t``. Returns an array of shape (*t.shape, 3)."""
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        """Short label with the defining parameters, e.g. ``Circle (r=3.00)``."""
        raise NotImplementedError

    def position(self, t: float) -> Point3D:
        """Point on the curve at ``t``."""
        return Point3D.from_array(self.sample(t))

    def derivative(self, t: float) -> Point3D:
        """Unnormalized tangent vector at ``t``."""
        return Point3D.from_array(self.sample_derivative(t))


def _as_param(t: float | np.ndarray) -> np.ndarray:
    return np.asarray(t, dtype=np.float64)


@dataclass(frozen=True)
class Circle(Curve):
    """Circle of the given radius in the z=0 plane, centered at the origin."""

    radius: float

    kind = CurveKind.CIRCLE

    def sample(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        r = self.radius
        return np.stack([r * np.cos(t), r * np.sin(t), np.zeros_like(t)], axis=-1)

    def sample_derivative(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        r = self.radius
        return np.stack([-r * np.sin(t), r * np.cos(t), np.zeros_like(t)], axis=-1)

    def describe(self) -> str:
        return f"Circle (r={self.radius:.2f})"


@dataclass(frozen=True)
class Ellipse(Curve):
    """Axis-aligned ellipse in the z=0 plane, centered at the origin."""

    radius_x: float
    radius_y: float

    kind = CurveKind.ELLIPSE

    def sample(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        return np.stack(
            [self.radius_x * np.cos(t), self.radius_y * np.sin(t), np.zeros_like(t)],
            axis=-1,
        )

    def sample_derivative(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        return np.stack(
            [-self.radius_x * np.sin(t), self.radius_y * np.cos(t), np.zeros_like(t)],
            axis=-1,
        )

    def describe(self) -> str:
        return f"Ellipse (rx={self.radius_x:.2f}, ry={self.radius_y:.2f})"


@dataclass(frozen=True)
class Helix(Curve):
    """Helix around the z axis.

    ``step`` is the rise along z per full turn (t advancing by 2*pi).
    """

    radius: float
    step: float

    kind = CurveKind.HELIX

    def sample(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        r = self.radius
        z = self.step * t / (2 * np.pi)
        return np.stack([r * np.cos(t), r * np.sin(t), z], axis=-1)

    def sample_derivative(self, t: float | np.ndarray) -> np.ndarray:
        t = _as_param(t)
        r = self.radius
        dz = np.full_like(t, self.step / (2 * np.pi))
        return np.stack([-r * np.sin(t), r * np.cos(t), dz], axis=-1)

    def describe(self) -> str:
        return f"Helix (r={self.radius:.2f}, step={self.step:.2f})"
