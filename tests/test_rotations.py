"""Unit tests for classes representing 3D rotations and orientations."""

import numpy as np
import pytest
from hypothesis import given

from coverage_paths.geometry import Point3D
from coverage_paths.spatial import HALF_TURN_ABOUT_Z, EulerRPY, Quaternion

from .strategies.spatial_strategies import positions, quaternions


@given(quaternions())
def test_quaternion_is_normalized(quat: Quaternion) -> None:
    """Verify that any constructed Quaternion has unit norm."""
    # Arrange/Act/Assert - Given a quaternion, expect that its coefficients have unit norm
    assert np.linalg.norm(quat.to_array()) == pytest.approx(1.0)


def test_zero_quaternion_raises_error() -> None:
    """Verify that attempting to construct an all-zero Quaternion raises a ValueError."""
    # Arrange/Act/Assert - Expect that constructing an all-zero Quaternion will raise an error
    with pytest.raises(ValueError, match="zero"):
        _ = Quaternion(0.0, 0.0, 0.0, 0.0)


@given(quaternions())
def test_quaternion_to_rotation_matrix_and_back(quat: Quaternion) -> None:
    """Verify that a Quaternion is unchanged after converting to and from a rotation matrix."""
    # Arrange/Act - Given a unit quaternion, convert to and from a rotation matrix
    result_quat = Quaternion.from_rotation_matrix(quat.to_rotation_matrix())

    # Assert - Expect that the resulting quaternion equals the original (modulo negation)
    assert quat.approx_equal(result_quat, atol=1e-07)


@given(quaternions(), positions())
def test_quaternion_rotate_matches_rotation_matrix(quat: Quaternion, point: Point3D) -> None:
    """Verify that rotating a point agrees with multiplying by the rotation matrix."""
    # Act - Rotate the point directly and using the equivalent rotation matrix
    rotated = quat.rotate(point)
    expected = quat.to_rotation_matrix() @ point.to_array()

    # Assert - Expect both results to agree
    assert np.allclose(rotated.to_array(), expected, atol=1e-06)


@given(quaternions())
def test_quaternion_inverse_multiplication(quat: Quaternion) -> None:
    """Verify that multiplying a Quaternion by its inverse gives the identity rotation."""
    # Act - Multiply the quaternion by its inverse on both sides
    left = quat.inverse() * quat
    right = quat * quat.inverse()

    # Assert - Expect both products to be the identity rotation
    assert left.approx_equal(Quaternion.identity(), atol=1e-07)
    assert right.approx_equal(Quaternion.identity(), atol=1e-07)


def test_half_turn_about_z_flips_x_and_y() -> None:
    """Verify that the half-turn about z negates the x and y coordinates of a vector."""
    # Act - Rotate a vector by pi about the z-axis
    rotated = HALF_TURN_ABOUT_Z.rotate(Point3D(1.0, 2.0, 3.0))

    # Assert - Expect x and y to be negated and z unchanged
    assert rotated.approx_equal(Point3D(-1.0, -2.0, 3.0))
    assert HALF_TURN_ABOUT_Z.approx_equal(Quaternion.from_axis_angle([0, 0, 1], np.pi))


def test_euler_rpy_yaw_to_quaternion() -> None:
    """Verify that a pure yaw rotation converts to a rotation about the z-axis."""
    # Act - Convert a yaw-only rotation into a quaternion
    quat = EulerRPY(0.0, 0.0, np.pi / 2).to_quaternion()

    # Assert - Expect the quaternion to map the x-axis onto the y-axis
    assert quat.rotate(Point3D(1.0, 0.0, 0.0)).approx_equal(Point3D(0.0, 1.0, 0.0), atol=1e-09)
