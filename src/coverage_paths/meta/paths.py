"""Define path constants allowing access to the project's root."""

from pathlib import Path

COVERAGE_PATHS_ROOT = Path(__file__).parent.parent.parent.parent
"""Path to the root directory of `coverage_paths`."""

DEFAULT_PARAMS_PATH = COVERAGE_PATHS_ROOT / "config" / "process_planning_params.yaml"
"""Path to the example process-planning parameters shipped with the repository."""
