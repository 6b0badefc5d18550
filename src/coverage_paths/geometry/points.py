"""Define a class to represent positions in 3D space."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


@dataclass(frozen=True)
class Point3D:
    """An (x,y,z) position in 3D space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the point's (x,y,z) coordinates."""
        yield from astuple(self)

    @classmethod
    def identity(cls) -> Point3D:
        """Construct a Point3D corresponding to the identity translation."""
        return Point3D(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Point3D:
        """Construct a Point3D from a NumPy array."""
        if arr.shape != (3,):
            raise ValueError(f"Cannot construct Point3D from an array of shape {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the 3D point to a NumPy array."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert the point into an (x,y,z) tuple of floats."""
        return (float(self.x), float(self.y), float(self.z))

    def squared_distance_to(self, other: Point3D) -> float:
        """Compute the squared Euclidean distance between this point and another."""
        diff = self.to_array() - other.to_array()
        return float(diff @ diff)

    def distance_to(self, other: Point3D) -> float:
        """Compute the Euclidean distance between this point and another."""
        return float(np.linalg.norm(self.to_array() - other.to_array()))

    def approx_equal(self, other: Point3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Point3D is approximately equal to this one."""
        return np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol)
