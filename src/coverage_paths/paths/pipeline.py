"""Post-process raw coverage path segments: trim their margins, then sequence them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from coverage_paths.io.logging import log_info
from coverage_paths.paths.margins import DEFAULT_EXACT_TOLERANCE_M, apply_margins
from coverage_paths.paths.sequencing import sequence
from coverage_paths.spatial.distances import euclidean_distance_3d_m

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coverage_paths.paths.segment import PathSegment

INCH_TO_M = 0.0254

DEFAULT_MARGIN_OFFSET_M = 0.25 * INCH_TO_M
"""Arc length trimmed from each end of every segment unless configured otherwise."""


@dataclass(frozen=True)
class PostprocessingConfig:
    """Parameters controlling how raw path segments are post-processed."""

    margin_offset_m: float = DEFAULT_MARGIN_OFFSET_M
    exact_tolerance_m: float = DEFAULT_EXACT_TOLERANCE_M
    apply_margins: bool = True

    def __post_init__(self) -> None:
        """Validate the configured values."""
        if self.margin_offset_m < 0.0:
            raise ValueError(f"Margin offset must be non-negative, got {self.margin_offset_m}.")
        if self.exact_tolerance_m <= 0.0:
            msg = f"Exact-match tolerance must be positive, got {self.exact_tolerance_m}."
            raise ValueError(msg)


def travel_distance_m(segments: Sequence[PathSegment]) -> float:
    """Compute the total straight-line distance (m) traveled between consecutive segments."""
    return float(
        sum(
            euclidean_distance_3d_m(prev.last, curr.first)
            for prev, curr in zip(segments[:-1], segments[1:])
        ),
    )


def postprocess_segments(
    segments: Sequence[PathSegment],
    config: PostprocessingConfig | None = None,
) -> list[PathSegment]:
    """Trim margins from raw path segments and order them into a single traversal.

    Margins are trimmed before sequencing, so direction decisions use the trimmed endpoints.

    :param segments: Unordered path segments from the upstream raster planner
    :param config: Post-processing parameters (defaults to `PostprocessingConfig()`)
    :return: Ordered, trimmed path segments
    """
    config = config or PostprocessingConfig()
    log_info(f"Post-processing {len(segments)} path segments...")

    trimmed = list(segments)
    if config.apply_margins:
        trimmed = apply_margins(
            segments,
            config.margin_offset_m,
            exact_tolerance_m=config.exact_tolerance_m,
        )
        unchanged = sum(t is s for t, s in zip(trimmed, segments))
        log_info(f"Trimmed {config.margin_offset_m} m margins; {unchanged} segments unchanged.")

    result = sequence(trimmed)
    log_info(
        f"Sequenced {len(result)} segments; travel distance {travel_distance_m(trimmed):.4f} m "
        f"-> {travel_distance_m(result):.4f} m.",
    )
    return result
