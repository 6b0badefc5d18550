"""Define the raster planner's process tool and derive it from process-planning parameters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from coverage_paths.io.logging import log_warning
from coverage_paths.paths.pipeline import PostprocessingConfig

if TYPE_CHECKING:
    from coverage_paths.io.pydantic_schemata import ProcessPlanningParamsSchema

MIN_LINE_SPACING_M = 0.01
"""Smallest spacing (m) allowed between adjacent raster lines."""


@dataclass(frozen=True)
class ProcessTool:
    """Raster planner tool parameters (all distances in meters)."""

    pt_spacing_m: float = 0.01
    """Spacing between consecutive points along a raster line."""

    line_spacing_m: float = 0.025
    """Spacing between adjacent raster lines."""

    tool_offset_m: float = 0.0
    intersecting_plane_height_m: float = 0.05
    nearest_neighbors: int = 5
    min_hole_size_m: float = 0.01

    def __str__(self) -> str:
        """Return a compact description of the tool's spacings."""
        return f"Tool:[line_spacing:={self.line_spacing_m}, pt_spacing:={self.pt_spacing_m}]"


def _with_discretization(tool: ProcessTool, params: ProcessPlanningParamsSchema) -> ProcessTool:
    if params.blend_params.discretization is None:
        return tool
    return replace(tool, pt_spacing_m=params.blend_params.discretization)


def blend_tool(params: ProcessPlanningParamsSchema) -> ProcessTool:
    """Derive the blending tool: adjacent passes overlap by the configured amount."""
    blend = params.blend_params
    line_spacing_m = max(MIN_LINE_SPACING_M, 2.0 * blend.tool_radius - blend.overlap)

    tool = _with_discretization(replace(ProcessTool(), line_spacing_m=line_spacing_m), params)
    log_warning(f"Blend path planning: {tool}")
    return tool


def scan_tool(params: ProcessPlanningParamsSchema) -> ProcessTool:
    """Derive the scanning tool: adjacent passes are one scan width apart, less the overlap."""
    scan = params.scan_params
    line_spacing_m = max(MIN_LINE_SPACING_M, scan.scan_width - scan.overlap)

    tool = _with_discretization(replace(ProcessTool(), line_spacing_m=line_spacing_m), params)
    log_warning(f"Scan path planning: {tool}")
    return tool


def postprocessing_config(params: ProcessPlanningParamsSchema) -> PostprocessingConfig:
    """Build the post-processing configuration, falling back to defaults for unset values."""
    pp = params.postprocessing
    default = PostprocessingConfig()
    return PostprocessingConfig(
        margin_offset_m=default.margin_offset_m if pp.margin_offset is None else pp.margin_offset,
        exact_tolerance_m=(
            default.exact_tolerance_m if pp.exact_tolerance is None else pp.exact_tolerance
        ),
        apply_margins=pp.apply_margins,
    )
