"""Unit tests for the weighted averaging of quaternions."""

from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import given

from coverage_paths.spatial import Quaternion, average_quaternions

from .strategies.spatial_strategies import quaternions


@given(quaternions(), st.integers(min_value=1, max_value=50))
def test_average_of_identical_quaternions(quat: Quaternion, n: int) -> None:
    """Verify that averaging N copies of a quaternion returns that quaternion (up to sign)."""
    # Arrange/Act - Average a list containing the same quaternion N times
    result = average_quaternions([quat] * n)

    # Assert - Expect the average to express the same rotation
    assert result.approx_equal(quat, atol=1e-07)


@given(quaternions())
def test_average_of_single_quaternion(quat: Quaternion) -> None:
    """Verify that averaging a single quaternion returns it unchanged (up to sign)."""
    assert average_quaternions([quat]).approx_equal(quat, atol=1e-07)


@given(quaternions())
def test_average_ignores_quaternion_sign(quat: Quaternion) -> None:
    """Verify that a quaternion and its negation average to the same rotation."""
    # Arrange - Construct the antipodal representation of the same rotation
    negated = Quaternion.from_array(-quat.to_array())

    # Act/Assert - Expect the average to express the original rotation
    assert average_quaternions([quat, negated]).approx_equal(quat, atol=1e-07)


@given(st.floats(min_value=0.0, max_value=1.5))
def test_average_of_symmetric_yaws_is_identity(yaw_rad: float) -> None:
    """Verify that rotations of +/- yaw about z average to the identity rotation."""
    # Arrange - Two rotations symmetric about the identity (less than 90 degrees each)
    left = Quaternion.from_axis_angle([0, 0, 1], yaw_rad)
    right = Quaternion.from_axis_angle([0, 0, 1], -yaw_rad)

    # Act/Assert - Expect their average to be the identity rotation
    assert average_quaternions([left, right]).approx_equal(Quaternion.identity(), atol=1e-07)


def test_weighted_average_favors_heavier_quaternion() -> None:
    """Verify that a quaternion with all of the weight dominates the average."""
    # Arrange - Two distinct rotations, with all weight on the second
    first = Quaternion.identity()
    second = Quaternion.from_axis_angle([1, 0, 0], 1.0)

    # Act/Assert - Expect the average to equal the heavily weighted rotation
    assert average_quaternions([first, second], weights=[0.0, 1.0]).approx_equal(second, atol=1e-07)


def test_average_of_zero_quaternions_raises_error() -> None:
    """Verify that averaging an empty collection of quaternions raises a ValueError."""
    with pytest.raises(ValueError, match="zero quaternions"):
        average_quaternions([])


def test_average_with_mismatched_weights_raises_error() -> None:
    """Verify that providing the wrong number of weights raises a ValueError."""
    with pytest.raises(ValueError, match="same length"):
        average_quaternions([Quaternion.identity()], weights=[1.0, 2.0])
