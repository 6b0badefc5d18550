"""Define a class to represent a directed path segment of oriented 3D poses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import numpy as np

from coverage_paths.spatial import HALF_TURN_ABOUT_Z, Pose3D

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


@dataclass(frozen=True)
class PathSegment:
    """A non-empty polyline of oriented 3D poses, directed from endpoint A to endpoint B.

    Endpoint A is the first pose of the segment; endpoint B is the last.
    """

    poses: tuple[Pose3D, ...]

    def __post_init__(self) -> None:
        """Verify that the segment contains at least one pose."""
        if not self.poses:
            raise ValueError("Cannot construct a PathSegment with zero poses.")

    @classmethod
    def from_poses(cls, poses: Iterable[Pose3D]) -> PathSegment:
        """Construct a PathSegment from an iterable of 3D poses."""
        return cls(tuple(poses))

    def __len__(self) -> int:
        """Return the number of poses in the segment."""
        return len(self.poses)

    def __iter__(self) -> Iterator[Pose3D]:
        """Provide an iterator over the poses of the segment, from A to B."""
        yield from self.poses

    def __getitem__(self, index: int) -> Pose3D:
        """Retrieve the pose at the given index."""
        return self.poses[index]

    @property
    def first(self) -> Pose3D:
        """Retrieve the pose at endpoint A."""
        return self.poses[0]

    @property
    def last(self) -> Pose3D:
        """Retrieve the pose at endpoint B."""
        return self.poses[-1]

    def positions_array(self) -> NDArray[np.float64]:
        """Return the (x,y,z) positions of the segment's poses as an (N, 3) array."""
        return np.vstack([pose.position.to_array() for pose in self.poses])

    def arclength_per_step_m(self) -> NDArray[np.float64]:
        """Compute the distance (m) between each pair of consecutive poses; shape (N-1,)."""
        diffs_m = np.diff(self.positions_array(), axis=0)  # (N-1, 3)
        return np.linalg.norm(diffs_m, axis=1)

    @property
    def total_arclength_m(self) -> float:
        """Compute the total arc length (m) of the segment."""
        if len(self) <= 1:
            return 0.0

        return float(np.sum(self.arclength_per_step_m()))

    @property
    def squared_displacement_m2(self) -> float:
        """Compute the squared straight-line distance (m^2) between endpoints A and B."""
        return self.first.position.squared_distance_to(self.last.position)

    def reversed(self) -> PathSegment:
        """Return the segment traversed from B to A.

        Each orientation is rotated by pi about its own z-axis so that the tool keeps a
        consistent approach direction relative to the new direction of travel.
        """
        return PathSegment(
            tuple(
                pose.with_orientation(pose.orientation * HALF_TURN_ABOUT_Z)
                for pose in reversed(self.poses)
            ),
        )
