"""Point3D dataclass for curve evaluation results."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point3D:
    """An immutable 3D coordinate triple."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point3D":
        """Build a point from a (3,) array."""
        x, y, z = np.asarray(arr, dtype=np.float64).reshape(3).tolist()
        return cls(x, y, z)

    def to_array(self) -> np.ndarray:
        """Return the coordinates as a (3,) float64 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
