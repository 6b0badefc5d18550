"""Define a class to represent poses in 3D space."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

import numpy as np

from coverage_paths.geometry import Point3D
from coverage_paths.spatial.frames import DEFAULT_FRAME
from coverage_paths.spatial.rotations import EulerRPY, Quaternion

MultiplyT = TypeVar("MultiplyT", "Pose3D", Point3D)


@dataclass(frozen=True)
class Pose3D:
    """A position and orientation in 3D space."""

    position: Point3D
    orientation: Quaternion
    ref_frame: str = DEFAULT_FRAME

    def __matmul__(self, other: MultiplyT) -> MultiplyT:
        """Compose the homogeneous transformation matrix of this pose with another object.

        Consider: pose_A_B @ pose_B_C = pose_A_C, meaning the pose of 'C' relative to frame A.
            Therefore, we see that the resulting pose takes the "left-side" reference frame.

        :param other: 3D pose or 3D point right-multiplied with this pose
        :return: Result from the matrix multiplication
        """
        if isinstance(other, Pose3D):
            result_m = self.to_homogeneous_matrix() @ other.to_homogeneous_matrix()
            return Pose3D.from_homogeneous_matrix(result_m, self.ref_frame)
        if isinstance(other, Point3D):
            result = self.to_homogeneous_matrix() @ np.append(other.to_array(), 1.0)
            return Point3D.from_array(result[:3])

        raise NotImplementedError(f"Cannot matrix-multiply Pose3D with: {other}")

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D corresponding to the identity transformation."""
        return Pose3D(Point3D.identity(), Quaternion.identity(), ref_frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a Pose3D from the given XYZ coordinates and Euler RPY angles.

        :param x: Translation along the x-axis
        :param y: Translation along the y-axis
        :param z: Translation along the z-axis
        :param roll_rad: Fixed-frame roll angle (radians) about the x-axis
        :param pitch_rad: Fixed-frame pitch angle (radians) about the y-axis
        :param yaw_rad: Fixed-frame yaw angle (radians) about the z-axis
        :param ref_frame: Reference frame of the constructed pose
        :return: Constructed Pose3D instance
        """
        position = Point3D(x, y, z)
        orientation = EulerRPY(roll_rad, pitch_rad, yaw_rad).to_quaternion()

        return Pose3D(position, orientation, ref_frame)

    @classmethod
    def from_homogeneous_matrix(cls, matrix: np.ndarray, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from a 4x4 homogeneous transformation matrix."""
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix but received shape {matrix.shape}")

        position = Point3D(float(matrix[0, 3]), float(matrix[1, 3]), float(matrix[2, 3]))
        orientation = Quaternion.from_rotation_matrix(matrix[:3, :3])
        return Pose3D(position, orientation, ref_frame)

    def to_homogeneous_matrix(self) -> np.ndarray:
        """Convert the Pose3D into a 4x4 homogeneous transformation matrix."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.orientation.to_rotation_matrix()
        matrix[:3, 3] = self.position.to_array()
        return matrix

    def inverse(self, pose_frame: str) -> Pose3D:
        """Return a pose representing the inverse transformation of this pose.

        :param pose_frame: Name of the reference frame represented by this pose
        """
        inverse_matrix = np.linalg.inv(self.to_homogeneous_matrix())
        return Pose3D.from_homogeneous_matrix(inverse_matrix, pose_frame)

    def with_orientation(self, orientation: Quaternion) -> Pose3D:
        """Return a copy of this pose with its orientation replaced."""
        return replace(self, orientation=orientation)

    def approx_equal(self, other: Pose3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Pose3D is approximately equal to this one."""
        return (
            self.ref_frame == other.ref_frame
            and self.position.approx_equal(other.position, rtol=rtol, atol=atol)
            and self.orientation.approx_equal(other.orientation, rtol=rtol, atol=atol)
        )


def interpolate_position(start: Pose3D, end: Pose3D, distance_m: float) -> Pose3D:
    """Construct the pose `distance_m` meters from `start` along the line toward `end`.

    The result keeps the orientation and reference frame of `start`.

    :param start: Pose from which the distance is measured
    :param end: Pose defining the direction of travel
    :param distance_m: Distance (meters) traveled from `start` toward `end`
    :return: Interpolated pose
    """
    start_xyz = start.position.to_array()
    step = end.position.to_array() - start_xyz
    step_length_m = float(np.linalg.norm(step))
    if step_length_m == 0.0:
        raise ValueError(f"Cannot interpolate between coincident positions: {start.position}")

    new_xyz = start_xyz + step * (distance_m / step_length_m)
    return replace(start, position=Point3D.from_array(new_xyz))
