"""Define the configuration of the database grasp planner and its YAML schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from grasp_database.grasps.hand_mappers import DEFAULT_GRASP_EFFORT, DEFAULT_PRE_GRASP_EFFORT
from grasp_database.io.yaml_utils import load_yaml_data

if TYPE_CHECKING:
    from pathlib import Path


class GraspPlanningConfigSchema(BaseModel):
    """Schema for the grasp planner's YAML configuration file."""

    quality_cutoff: float = Field(default=-40.0, description="Grasps with quality >= this are pruned")
    prune_gripper_opening: float = Field(default=0.5, description="Gripper opening threshold")
    prune_table_clearance: float = Field(default=0.0, description="Table clearance (meters)")
    desired_approach_distance_m: float = Field(default=0.15, gt=0)
    min_approach_distance_m: float = Field(default=0.07, gt=0)
    grasp_effort: float = Field(default=DEFAULT_GRASP_EFFORT, ge=0)
    pre_grasp_effort: float = Field(default=DEFAULT_PRE_GRASP_EFFORT, ge=0)

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class GraspPlanningConfig:
    """Thresholds and constants used when converting database grasps for a hand."""

    quality_cutoff: float = -40.0
    """Grasps whose database quality is at or above this value are pruned."""

    prune_gripper_opening: float = 0.5
    """Gripper-opening pruning threshold (accepted for compatibility, not applied)."""

    prune_table_clearance: float = 0.0
    """Table-clearance pruning threshold in meters (accepted for compatibility, not applied)."""

    desired_approach_distance_m: float = 0.15
    min_approach_distance_m: float = 0.07
    grasp_effort: float = DEFAULT_GRASP_EFFORT
    pre_grasp_effort: float = DEFAULT_PRE_GRASP_EFFORT

    @classmethod
    def from_schema(cls, schema: GraspPlanningConfigSchema) -> GraspPlanningConfig:
        """Construct a configuration from validated schema data."""
        return GraspPlanningConfig(**schema.model_dump())

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> GraspPlanningConfig:
        """Load the grasp planner configuration from a YAML file.

        :param yaml_path: Path to a YAML file whose keys match the configuration fields
        :return: Constructed GraspPlanningConfig instance
        :raises pydantic.ValidationError: If the YAML data doesn't match the expected schema
        """
        yaml_data = load_yaml_data(yaml_path) or {}
        return cls.from_schema(GraspPlanningConfigSchema.model_validate(yaml_data))
