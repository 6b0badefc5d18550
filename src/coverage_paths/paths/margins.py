"""Trim a fixed arc-length margin from both ends of path segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from coverage_paths.io.logging import log_debug
from coverage_paths.paths.segment import PathSegment
from coverage_paths.spatial import interpolate_position

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_EXACT_TOLERANCE_M = 1e-3
"""Step lengths within this distance (m) of the remaining margin cut exactly at a sample."""


class MarginComputationError(RuntimeError):
    """An internal-consistency failure: no cut point was found on a sufficiently long segment."""


@dataclass(frozen=True)
class _Cut:
    """Where a scan from one end of a segment stopped.

    `index` is the first kept sample (in scan order). If `interpolated`, a new endpoint lies
    `distance_m` beyond sample `index - 1` toward sample `index`.
    """

    index: int
    distance_m: float
    interpolated: bool


def _find_cut(step_lengths_m: np.ndarray, offset_m: float, exact_tolerance_m: float) -> _Cut:
    """Walk the given step lengths (in scan order) until `offset_m` of arc length is consumed."""
    distance_to_go_m = offset_m

    for i, step_m in enumerate(step_lengths_m, start=1):
        if abs(step_m - distance_to_go_m) < exact_tolerance_m:
            log_debug(f"Margin cut falls on sample {i} (within {exact_tolerance_m} m).")
            return _Cut(i, 0.0, interpolated=False)
        if distance_to_go_m > step_m:
            distance_to_go_m -= step_m
        else:
            log_debug(f"Margin cut interpolated {distance_to_go_m:.6f} m past sample {i - 1}.")
            return _Cut(i, float(distance_to_go_m), interpolated=True)

    raise MarginComputationError(
        f"Found no cut point for a margin of {offset_m} m over steps totaling "
        f"{float(np.sum(step_lengths_m))} m.",
    )


def apply_margin(
    segment: PathSegment,
    offset_m: float,
    *,
    exact_tolerance_m: float = DEFAULT_EXACT_TOLERANCE_M,
) -> PathSegment:
    """Remove `offset_m` of arc length from the start and from the end of a path segment.

    Segments shorter than twice the offset are returned unchanged. Where a cut falls between
    samples, a new endpoint is linearly interpolated and keeps the orientation of the outer
    (removed) sample. The direction of the segment is preserved.

    :param segment: Path segment to be trimmed
    :param offset_m: Non-negative arc length (m) removed from each end
    :param exact_tolerance_m: Tolerance (m) within which a cut snaps onto an existing sample
        (capped at `offset_m`)
    :return: Trimmed path segment, or `segment` itself if it is too short to trim
    :raises ValueError: If the offset is negative
    :raises MarginComputationError: If no cut point is found despite sufficient length
    """
    if offset_m < 0.0:
        raise ValueError(f"Margin offset must be non-negative, got {offset_m}.")

    step_lengths_m = segment.arclength_per_step_m() if len(segment) > 1 else np.zeros(0)
    if offset_m == 0.0 or float(np.sum(step_lengths_m)) < 2.0 * offset_m:
        return segment

    # A snap wider than the offset could carry both cuts past each other
    snap_tolerance_m = min(exact_tolerance_m, offset_m)
    forward = _find_cut(step_lengths_m, offset_m, snap_tolerance_m)
    backward = _find_cut(step_lengths_m[::-1], offset_m, snap_tolerance_m)

    last = len(segment) - 1
    start_index = forward.index
    end_index = last - backward.index  # Convert from reverse-scan order back to segment order

    new_poses = []
    if forward.interpolated:
        outer, inner = segment[start_index - 1], segment[start_index]
        new_poses.append(interpolate_position(outer, inner, forward.distance_m))

    new_poses.extend(segment.poses[start_index : end_index + 1])

    if backward.interpolated:
        outer, inner = segment[end_index + 1], segment[end_index]
        new_poses.append(interpolate_position(outer, inner, backward.distance_m))

    if not new_poses:
        msg = f"Trimming {offset_m} m from each end left no poses in the segment."
        raise MarginComputationError(msg)

    return PathSegment(tuple(new_poses))


def apply_margins(
    segments: Sequence[PathSegment],
    offset_m: float,
    *,
    exact_tolerance_m: float = DEFAULT_EXACT_TOLERANCE_M,
) -> list[PathSegment]:
    """Trim `offset_m` of arc length from both ends of each segment independently.

    :param segments: Path segments to be trimmed
    :param offset_m: Non-negative arc length (m) removed from each end of each segment
    :param exact_tolerance_m: Tolerance (m) within which a cut snaps onto an existing sample
    :return: List of the same length as `segments`
    """
    return [apply_margin(s, offset_m, exact_tolerance_m=exact_tolerance_m) for s in segments]
