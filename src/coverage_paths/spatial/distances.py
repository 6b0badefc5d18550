"""Define utility functions to compute various distance metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from coverage_paths.spatial.poses import Pose3D


def euclidean_distance_3d_m(pose_a: Pose3D, pose_b: Pose3D) -> float:
    """Compute the Euclidean distance (meters) between the positions of two 3D poses."""
    return float(np.linalg.norm(pose_a.position.to_array() - pose_b.position.to_array()))
