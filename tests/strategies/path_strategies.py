"""Define strategies for generating coverage path segments for property-based testing."""

from __future__ import annotations

import hypothesis.strategies as st
import numpy as np

from coverage_paths.geometry import Point3D
from coverage_paths.paths import PathSegment
from coverage_paths.spatial import Pose3D, Quaternion

from .spatial_strategies import poses_3d, positions, quaternions


@st.composite
def path_segments(draw: st.DrawFn, max_poses: int = 10) -> PathSegment:
    """Generate path segments of randomly placed and oriented poses."""
    return PathSegment(tuple(draw(st.lists(poses_3d(), min_size=1, max_size=max_poses))))


@st.composite
def polylines(draw: st.DrawFn, min_poses: int = 2, max_poses: int = 20) -> PathSegment:
    """Generate path segments whose consecutive poses are between 0.01 and 1 m apart."""
    start = draw(positions())
    n_steps = draw(st.integers(min_value=min_poses - 1, max_value=max_poses - 1))

    xyz = [start.to_array()]
    for _ in range(n_steps):
        direction = np.array([draw(st.floats(-1.0, 1.0)) for _ in range(3)])
        if np.linalg.norm(direction) < 1e-3:
            direction = np.array([1.0, 0.0, 0.0])
        step_m = draw(st.floats(min_value=0.01, max_value=1.0))
        xyz.append(xyz[-1] + step_m * direction / np.linalg.norm(direction))

    orientations = draw(st.lists(quaternions(), min_size=len(xyz), max_size=len(xyz)))
    return PathSegment(
        tuple(Pose3D(Point3D.from_array(p), q) for p, q in zip(xyz, orientations)),
    )


def straight_segment(
    xs: list[float],
    y: float = 0.0,
    orientation: Quaternion | None = None,
) -> PathSegment:
    """Construct a segment of poses along a line parallel to the x-axis."""
    q = Quaternion.identity() if orientation is None else orientation
    return PathSegment(tuple(Pose3D(Point3D(x, y, 0.0), q) for x in xs))
