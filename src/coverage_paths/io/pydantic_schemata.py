"""Define Pydantic models for validating process-planning parameter YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from coverage_paths.io.logging import log_error
from coverage_paths.io.yaml_utils import load_yaml_data

PARAM_BASE = "process_planning_params"
"""Top-level key under which the process-planning parameters are stored."""


class BlendParamsSchema(BaseModel):
    """Schema for the blending tool parameters."""

    tool_radius: float = Field(default=0.025, gt=0, description="Tool radius (meters)")
    overlap: float = Field(default=0.0, ge=0, description="Overlap between passes (meters)")
    discretization: Optional[float] = Field(
        default=None,
        gt=0,
        description="Spacing between points along a path (meters)",
    )

    model_config = ConfigDict(extra="ignore")


class ScanParamsSchema(BaseModel):
    """Schema for the surface-scanning tool parameters."""

    scan_width: float = Field(default=0.025, gt=0, description="Width of a scan pass (meters)")
    overlap: float = Field(default=0.0, ge=0, description="Overlap between passes (meters)")

    model_config = ConfigDict(extra="ignore")


class PostprocessingSchema(BaseModel):
    """Schema for path post-processing parameters."""

    margin_offset: Optional[float] = Field(
        default=None,
        ge=0,
        description="Arc length trimmed from each end of a path segment (meters)",
    )
    exact_tolerance: Optional[float] = Field(
        default=None,
        gt=0,
        description="Distance within which a margin cut snaps onto an existing sample (meters)",
    )
    apply_margins: bool = True

    model_config = ConfigDict(extra="forbid")


class ProcessPlanningParamsSchema(BaseModel):
    """Schema for the full set of process-planning parameters."""

    blend_params: BlendParamsSchema = Field(default_factory=BlendParamsSchema)
    scan_params: ScanParamsSchema = Field(default_factory=ScanParamsSchema)
    postprocessing: PostprocessingSchema = Field(default_factory=PostprocessingSchema)

    model_config = ConfigDict(extra="ignore")


_EXPECTED_KEYS = {
    "blend_params": ("tool_radius", "overlap", "discretization"),
    "scan_params": ("scan_width", "overlap"),
}


def _report_missing_keys(data: dict) -> None:
    """Log an error for each expected parameter absent from the loaded data."""
    for section, keys in _EXPECTED_KEYS.items():
        section_data = data.get(section) or {}
        for key in keys:
            if key not in section_data:
                log_error(f"Could not load parameter: /{PARAM_BASE}/{section}/{key}")


def load_process_planning_params(yaml_path: Path) -> ProcessPlanningParamsSchema:
    """Load and validate process-planning parameters from a YAML file.

    Missing parameters are reported and replaced by their defaults.

    :param yaml_path: Path to a YAML file with a top-level `process_planning_params` key
    :return: Validated process-planning parameters
    :raises ValueError: If the file's parameters fail validation
    """
    yaml_data = load_yaml_data(yaml_path, required_keys={PARAM_BASE})
    params_data = yaml_data[PARAM_BASE] or {}
    if not isinstance(params_data, dict):
        got = type(params_data)
        raise TypeError(f"Expected a mapping under '{PARAM_BASE}' in {yaml_path}, got {got}")

    _report_missing_keys(params_data)

    try:
        return ProcessPlanningParamsSchema.model_validate(params_data)
    except ValidationError as e:
        raise ValueError(f"Invalid process-planning parameters in {yaml_path}:\n{e}") from e
