"""Define a command-line interface to plan grasps and list models using a file-backed database."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from grasp_database.database import ModelDescription, YamlGraspDatabase
from grasp_database.errors import PlanningErrorCode
from grasp_database.grasps.records import DatabaseModelPose, MappedGrasp
from grasp_database.hands import StaticHandDescription
from grasp_database.io.logging import console
from grasp_database.planning import (
    DatabaseGraspPlanner,
    GraspPlanningConfig,
    GraspPlanningPipeline,
    GraspPlanningRequest,
    ModelQueryHandler,
)
from grasp_database.spatial import Pose3D, StaticTransformLookup


def render_grasps_table(grasps: list[MappedGrasp]) -> Table:
    """Render a table summarizing the given mapped grasps."""
    table = Table(title="Planned Grasps", show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Success prob.", justify="right")
    table.add_column("Grasp pose", style="bold")
    table.add_column("Grasp positions", style="magenta")

    for idx, grasp in enumerate(grasps, start=1):
        positions = ", ".join(f"{p:.3f}" for p in grasp.grasp_posture.positions)
        table.add_row(str(idx), f"{grasp.success_probability:.3f}", str(grasp.grasp_pose), positions)
    return table


def render_models_table(descriptions: list[ModelDescription]) -> Table:
    """Render a table describing the given database models."""
    table = Table(title="Database Models", show_lines=False)
    table.add_column("Model ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Maker")
    table.add_column("Tags", style="magenta")

    for description in descriptions:
        tags = ", ".join(description.tags)
        table.add_row(str(description.model_id), description.name, description.maker, tags)
    return table


@click.group()
def cli() -> None:
    """Plan grasps for recognized objects and list models using a file-backed grasp database."""


@cli.command()
@click.argument("database_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("hands_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--model-id", type=int, required=True, help="Database ID of the recognized model.")
@click.option("--arm", "arm_name", required=True, help="Arm whose hand will execute the grasps.")
@click.option(
    "--detection-pose",
    type=float,
    nargs=6,
    default=(0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    help="Detected model pose as x y z roll pitch yaw.",
)
@click.option("--detection-frame", required=True, help="Frame in which the model was detected.")
@click.option("--reference-frame", help="Frame for output grasp poses (defaults to detection).")
@click.option(
    "--transforms",
    "transforms_yaml",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file of static transforms between named frames.",
)
@click.option(
    "--config",
    "config_yaml",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file overriding the grasp planner configuration.",
)
def plan(
    database_yaml: Path,
    hands_yaml: Path,
    model_id: int,
    arm_name: str,
    detection_pose: tuple[float, float, float, float, float, float],
    detection_frame: str,
    reference_frame: str | None,
    transforms_yaml: Path | None,
    config_yaml: Path | None,
) -> None:
    """Plan grasps for one recognized model and print them."""
    config = GraspPlanningConfig() if config_yaml is None else GraspPlanningConfig.from_yaml(config_yaml)
    lookup = StaticTransformLookup({})
    if transforms_yaml is not None:
        lookup = StaticTransformLookup.from_yaml(transforms_yaml)

    planner = DatabaseGraspPlanner(
        database=YamlGraspDatabase.from_yaml(database_yaml),
        hand_description=StaticHandDescription.from_yaml(hands_yaml),
        pipeline=GraspPlanningPipeline(config, lookup),
    )

    model_pose = Pose3D.from_sequence(list(detection_pose), ref_frame=detection_frame)
    request = GraspPlanningRequest(
        arm_name=arm_name,
        potential_models=[DatabaseModelPose(model_id=model_id, pose=model_pose)],
        reference_frame_id=reference_frame or detection_frame,
    )
    response = planner.plan_grasps(request)

    if not response.success:
        console.print(f"[red]Grasp planning failed: {response.error_code.value}[/]")
        raise SystemExit(1)

    stats = response.stats
    console.print(
        f"Retrieved {stats.num_retrieved}, pruned {stats.num_pruned}, "
        f"skipped {stats.num_skipped}, returned {stats.num_mapped} grasps.",
    )
    console.print(render_grasps_table(response.grasps))


@cli.command()
@click.argument("database_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--model-set", default="", help="Only list models in this set (defaults to all models).")
def models(database_yaml: Path, model_set: str) -> None:
    """List and describe the models stored in the database."""
    handler = ModelQueryHandler(YamlGraspDatabase.from_yaml(database_yaml))

    list_response = handler.get_models(model_set)
    if list_response.error_code != PlanningErrorCode.SUCCESS:
        console.print(f"[red]Model query failed: {list_response.error_code.value}[/]")
        raise SystemExit(1)

    descriptions: list[ModelDescription] = []
    for model_id in list_response.model_ids:
        description_response = handler.get_description(model_id)
        if description_response.description is None:
            console.print(f"[red]Model query failed: {description_response.error_code.value}[/]")
            raise SystemExit(1)
        descriptions.append(description_response.description)

    console.print(f"Found {len(descriptions)} models.")
    console.print(render_models_table(descriptions))
