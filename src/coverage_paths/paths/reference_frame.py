"""Select a reference orientation for a set of path segments and project their endpoints into it.

Paths produced by a raster planner run (approximately) along a common "cut" direction and are
spaced apart laterally. Averaging the orientation of the longest segment yields a frame in which
the cut direction is roughly the x-axis and the lanes are spaced out along the y-axis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from coverage_paths.geometry import Point3D
from coverage_paths.spatial import Quaternion, average_quaternions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coverage_paths.paths.segment import PathSegment


@dataclass(frozen=True)
class EndpointRecord:
    """Endpoint positions of one path segment, expressed in the reference frame."""

    a: Point3D
    b: Point3D
    source_index: int
    """Index of the segment in the input list from which the endpoints came."""


def longest_segment_index(segments: Sequence[PathSegment]) -> int:
    """Find the index of the segment with the largest endpoint-to-endpoint displacement.

    The first segment wins ties, including when every segment has zero displacement.

    :param segments: Path segments to be compared
    :return: Index of the longest segment (0 if `segments` is empty)
    """
    max_index = 0
    max_dist_m2 = 0.0

    for i, segment in enumerate(segments):
        dist_m2 = segment.squared_displacement_m2
        if dist_m2 > max_dist_m2:
            max_index = i
            max_dist_m2 = dist_m2

    return max_index


def reference_orientation(segments: Sequence[PathSegment]) -> Quaternion:
    """Compute the nominal cut-direction frame as the average orientation of the longest segment.

    :param segments: Non-empty collection of path segments, all in the same ambient frame
    :return: Orientation of the reference frame relative to the ambient frame
    """
    if not segments:
        raise ValueError("Cannot compute a reference orientation from zero path segments.")

    longest = segments[longest_segment_index(segments)]
    return average_quaternions([pose.orientation for pose in longest])


def project_endpoints(
    segments: Sequence[PathSegment],
    ref_rotation: Quaternion,
) -> list[EndpointRecord]:
    """Express the endpoint positions of every segment in the given reference frame.

    This is a pure change of basis: positions are rotated by the inverse reference rotation and
    pose orientations are not carried along.

    :param segments: Path segments whose positions are expressed in the ambient frame
    :param ref_rotation: Rotation of the reference frame relative to the ambient frame
    :return: One EndpointRecord per segment, in input order
    """
    if not segments:
        return []

    # Row vectors: (R^T p)^T = p^T R
    r_matrix = ref_rotation.to_rotation_matrix()
    endpoints = np.vstack(
        [[s.first.position.to_array(), s.last.position.to_array()] for s in segments],
    )
    projected = (endpoints @ r_matrix).reshape(len(segments), 2, 3)

    return [
        EndpointRecord(Point3D.from_array(a), Point3D.from_array(b), source_index=i)
        for i, (a, b) in enumerate(projected)
    ]
