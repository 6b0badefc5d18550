"""Order path segments left to right and choose the traversal direction of each one.

The ordering is a one-dimensional sort of the segments along the lateral axis of a reference
frame, followed by a single greedy pass that decides, for each segment in sorted order, whether
to enter it at endpoint A or endpoint B. It is not a nearest-neighbor search over all remaining
segments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from coverage_paths.paths.reference_frame import project_endpoints, reference_orientation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coverage_paths.geometry import Point3D
    from coverage_paths.paths.reference_frame import EndpointRecord
    from coverage_paths.paths.segment import PathSegment


@dataclass(frozen=True)
class SequenceStep:
    """One entry of the traversal: which (sorted) endpoint record to visit and from which end."""

    record_index: int
    """Index into the sorted list of endpoint records."""

    started_at_a: bool
    """True if the segment is traversed A to B, False if it is traversed B to A."""


def lateral_key(record: EndpointRecord) -> float:
    """Compute the sort key of a record: the smaller of its endpoints' lateral (y) coordinates."""
    return min(record.a.y, record.b.y)


def sort_endpoints(records: Sequence[EndpointRecord]) -> list[EndpointRecord]:
    """Sort endpoint records by ascending lateral position (stable for equal keys)."""
    return sorted(records, key=lateral_key)


def exit_position(step: SequenceStep, records: Sequence[EndpointRecord]) -> Point3D:
    """Find the position at which the traversal leaves the segment of the given step."""
    record = records[step.record_index]
    return record.b if step.started_at_a else record.a


def plan_sequence(sorted_records: Sequence[EndpointRecord]) -> list[SequenceStep]:
    """Greedily choose a traversal direction for each record, in the given order.

    The first segment is always entered at A. Each following segment is entered at whichever
    endpoint is closer to the exit of the previous one; equal distances favor B.

    :param sorted_records: Endpoint records, already sorted by lateral position
    :return: One SequenceStep per record, in the same order
    """
    if not sorted_records:
        return []

    steps = [SequenceStep(0, started_at_a=True)]

    for i in range(1, len(sorted_records)):
        current = exit_position(steps[-1], sorted_records)
        dist_a_m2 = current.squared_distance_to(sorted_records[i].a)
        dist_b_m2 = current.squared_distance_to(sorted_records[i].b)

        steps.append(SequenceStep(i, started_at_a=dist_a_m2 < dist_b_m2))

    return steps


def make_sequence(
    segments: Sequence[PathSegment],
    steps: Sequence[SequenceStep],
    sorted_records: Sequence[EndpointRecord],
) -> list[PathSegment]:
    """Rebuild the ordered list of segments described by the given sequence steps.

    :param segments: Original segments, each directed A to B
    :param steps: Sequence steps whose indices refer into `sorted_records`
    :param sorted_records: Endpoint records whose source indices refer into `segments`
    :return: Reordered segments, reversed wherever a step enters at B
    """
    if len(steps) != len(segments):
        msg = f"Expected one sequence step per segment, got {len(steps)} for {len(segments)}."
        raise ValueError(msg)

    result = []
    for step in steps:
        segment = segments[sorted_records[step.record_index].source_index]
        result.append(segment if step.started_at_a else segment.reversed())

    return result


def sequence(segments: Sequence[PathSegment]) -> list[PathSegment]:
    """Reorder path segments left to right relative to the nominal cut direction.

    :param segments: Unordered path segments in a common ambient frame
    :return: A permutation of the segments (each possibly reversed); empty for empty input
    """
    if not segments:
        return []

    ref_rotation = reference_orientation(segments)
    sorted_records = sort_endpoints(project_endpoints(segments, ref_rotation))
    steps = plan_sequence(sorted_records)

    return make_sequence(segments, steps, sorted_records)
