"""Define classes to represent 3D rotations and orientations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from pyquaternion import Quaternion as Q
from trimesh.transformations import (
    quaternion_from_euler,
    quaternion_from_matrix,
    quaternion_matrix,
)

from coverage_paths.geometry import Point3D

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass(frozen=True)
class EulerRPY:
    """A 3D rotation represented using three fixed-frame Euler angles."""

    roll_rad: float
    pitch_rad: float
    yaw_rad: float

    def to_quaternion(self) -> Quaternion:
        """Convert the Euler angles into an equivalent unit quaternion."""
        w, x, y, z = quaternion_from_euler(self.roll_rad, self.pitch_rad, self.yaw_rad, axes="sxyz")
        return Quaternion(x=x, y=y, z=z, w=w)


@dataclass(frozen=True)
class Quaternion:
    """A unit quaternion representing a 3D orientation.

    Coefficients are stored in (x, y, z, w) order and normalized on construction.
    """

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        """Normalize the quaternion after it is initialized."""
        norm = float(np.linalg.norm([self.x, self.y, self.z, self.w]))
        if norm == 0:
            raise ValueError(f"Cannot normalize a zero-valued quaternion: {self}")

        object.__setattr__(self, "x", float(self.x) / norm)
        object.__setattr__(self, "y", float(self.y) / norm)
        object.__setattr__(self, "z", float(self.z) / norm)
        object.__setattr__(self, "w", float(self.w) / norm)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Return the Hamilton product of this quaternion and another.

        Reference: https://kieranwynn.github.io/pyquaternion/#quaternion-operations
        """
        if not isinstance(other, Quaternion):
            raise TypeError(f"Cannot multiply a Quaternion with a {type(other)}: {other}.")
        product = self._to_pyquaternion() * other._to_pyquaternion()
        return Quaternion(product.x, product.y, product.z, product.w)

    def _to_pyquaternion(self) -> Q:
        return Q(self.w, self.x, self.y, self.z)

    def conjugate(self) -> Quaternion:
        """Compute the conjugate of this quaternion.

        For unit quaternions, the conjugate is also the inverse rotation.
        Reference: https://mathworld.wolfram.com/QuaternionConjugate.html
        """
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Compute the rotation that undoes this one."""
        return self.conjugate()

    @classmethod
    def identity(cls) -> Quaternion:
        """Construct a Quaternion corresponding to the identity rotation."""
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle_rad: float) -> Quaternion:
        """Construct the rotation of `angle_rad` radians about the given axis."""
        if np.linalg.norm(axis) == 0:
            raise ValueError(f"Cannot construct a rotation about a zero-length axis: {axis}")
        q = Q(axis=list(axis), angle=angle_rad)
        return Quaternion(q.x, q.y, q.z, q.w)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Quaternion:
        """Construct a quaternion from a NumPy array of the form [x,y,z,w]."""
        if arr.shape != (4,):
            raise ValueError(f"Quaternion expects a 4-vector, got {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the quaternion to a NumPy array of the form [x,y,z,w]."""
        return np.array([self.x, self.y, self.z, self.w])

    @classmethod
    def from_rotation_matrix(cls, r_matrix: NDArray[np.float64]) -> Quaternion:
        """Construct a quaternion from a 3x3 rotation matrix."""
        if r_matrix.shape != (3, 3):
            raise ValueError(f"Quaternion expects a 3x3 rotation matrix, got {r_matrix.shape}")

        matrix = np.eye(4)
        matrix[:3, :3] = r_matrix
        w, x, y, z = quaternion_from_matrix(matrix)  # Note: trimesh puts w (q's real value) first
        return Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))

    def to_rotation_matrix(self) -> NDArray[np.float64]:
        """Convert the quaternion to a 3x3 rotation matrix."""
        return quaternion_matrix(quaternion=[self.w, self.x, self.y, self.z])[:3, :3]

    def rotate(self, point: Point3D) -> Point3D:
        """Apply this rotation to a 3D point (or vector)."""
        rotated = self._to_pyquaternion().rotate(point.to_array())
        return Point3D.from_array(np.asarray(rotated, dtype=float))

    def approx_equal(self, other: Quaternion, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Quaternion is approximately equal to this one.

        Note: A quaternion is considered equal to its negation, as they express the same rotation.
        """
        self_array = self.to_array()
        other_array = other.to_array()

        return np.allclose(self_array, other_array, rtol=rtol, atol=atol) or np.allclose(
            -self_array,
            other_array,
            rtol=rtol,
            atol=atol,
        )


HALF_TURN_ABOUT_Z = Quaternion(0.0, 0.0, 1.0, 0.0)
"""Rotation of pi radians about the z-axis."""
