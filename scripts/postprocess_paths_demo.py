"""Demonstrate margin trimming and sequencing of raster coverage paths on an inclined plane.

The script synthesizes raster lanes the way an upstream planner would (lanes along the plane's
x-axis, spaced out along its y-axis), scrambles their order and direction, then post-processes
them and reports the resulting travel distance.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/postprocess_paths_demo.py --lanes 12

"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import numpy as np
from rich.table import Table

from coverage_paths.geometry import Point3D
from coverage_paths.io import configure_logging, console, load_process_planning_params
from coverage_paths.meta import DEFAULT_PARAMS_PATH
from coverage_paths.paths import PathSegment, postprocess_segments, travel_distance_m
from coverage_paths.planning import ProcessTool, blend_tool, postprocessing_config, scan_tool
from coverage_paths.spatial import Pose3D

# Inclined plane on which the raster is generated
PLANE_ROLL_RAD = 0.3
PLANE_PITCH_RAD = -0.2
PLANE_YAW_RAD = 0.7

LANE_LENGTH_M = 0.3
LANE_LENGTH_JITTER_M = 0.05


def make_raster(tool: ProcessTool, num_lanes: int, rng: np.random.Generator) -> list[PathSegment]:
    """Generate raster lanes over an inclined plane using the given tool spacings.

    :param tool: Tool defining the spacing between lanes and between points on a lane
    :param num_lanes: Number of lanes to generate
    :param rng: Random generator used to vary the lane lengths
    :return: Path segments, all directed along the plane's +x-axis and ordered by lane
    """
    plane_rpy = (PLANE_ROLL_RAD, PLANE_PITCH_RAD, PLANE_YAW_RAD)
    world_t_plane = Pose3D.from_xyz_rpy(0.5, 0.0, 0.2, *plane_rpy)

    segments = []
    for lane in range(num_lanes):
        length_m = LANE_LENGTH_M + rng.uniform(-LANE_LENGTH_JITTER_M, LANE_LENGTH_JITTER_M)
        xs = np.arange(0.0, length_m, tool.pt_spacing_m)
        y = lane * tool.line_spacing_m

        poses = [world_t_plane @ Pose3D.from_xyz_rpy(x=float(x), y=y) for x in xs]
        segments.append(PathSegment.from_poses(poses))

    return segments


def scramble(segments: list[PathSegment], rng: np.random.Generator) -> list[PathSegment]:
    """Shuffle the order of the segments and reverse a random subset of them."""
    order = rng.permutation(len(segments))
    return [segments[i].reversed() if rng.random() < 0.5 else segments[i] for i in order]


def summary_table(segments: list[PathSegment]) -> Table:
    """Render the sequenced segments as a table of endpoints and lengths."""
    table = Table(title="Sequenced Path Segments")
    table.add_column("#", justify="right")
    table.add_column("Poses", justify="right")
    table.add_column("Length (m)", justify="right")
    table.add_column("Start (x, y, z)")
    table.add_column("End (x, y, z)")

    def fmt(p: Point3D) -> str:
        return "({:.3f}, {:.3f}, {:.3f})".format(*p.to_tuple())

    for i, s in enumerate(segments):
        table.add_row(
            str(i),
            str(len(s)),
            f"{s.total_arclength_m:.4f}",
            fmt(s.first.position),
            fmt(s.last.position),
        )
    return table


@click.command()
@click.option(
    "--params",
    "params_path",
    type=click.Path(exists=True, path_type=Path),
    default=DEFAULT_PARAMS_PATH,
    show_default=True,
    help="YAML file of process-planning parameters.",
)
@click.option("--tool", type=click.Choice(["blend", "scan"]), default="blend", show_default=True)
@click.option("--lanes", type=click.IntRange(min=1), default=10, show_default=True)
@click.option("--seed", type=int, default=0, show_default=True)
@click.option("--verbose", is_flag=True, help="Log individual margin cut decisions.")
def main(params_path: Path, tool: str, lanes: int, seed: int, verbose: bool) -> None:
    """Post-process a scrambled synthetic raster and report the travel distance savings."""
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    console.print(f"[yellow]Loading process-planning parameters from {params_path}[/]...")
    params = load_process_planning_params(params_path)
    process_tool = blend_tool(params) if tool == "blend" else scan_tool(params)
    config = postprocessing_config(params)

    rng = np.random.default_rng(seed)
    raw = scramble(make_raster(process_tool, lanes, rng), rng)
    result = postprocess_segments(raw, config)

    console.print(summary_table(result))
    console.print(
        f"[green]Travel distance: {travel_distance_m(raw):.4f} m (scrambled) -> "
        f"{travel_distance_m(result):.4f} m (sequenced)[/]",
    )


if __name__ == "__main__":
    main()
