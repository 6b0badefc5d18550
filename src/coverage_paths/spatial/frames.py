"""Define constants relating to named coordinate frames."""

DEFAULT_FRAME = "world"
"""Default reference frame for poses produced by the upstream path planner."""
