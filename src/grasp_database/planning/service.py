"""Define the request handler that plans grasps for objects recognized from the database."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grasp_database.errors import (
    DatabaseNotConnectedError,
    GraspPlanningError,
    NoCandidatesError,
    PlanningErrorCode,
)
from grasp_database.io.logging import log_error, log_warning
from grasp_database.planning.pipeline import PlanningStats

if TYPE_CHECKING:
    from grasp_database.database import GraspDatabase
    from grasp_database.grasps.records import DatabaseModelPose, MappedGrasp
    from grasp_database.hands import HandDescription
    from grasp_database.planning.pipeline import GraspPlanningPipeline


@dataclass(frozen=True)
class GraspPlanningRequest:
    """A request to plan grasps with the hand of an arm for a recognized object."""

    arm_name: str
    potential_models: list[DatabaseModelPose]
    """Database models that may match the object (only the first is used)."""

    reference_frame_id: str
    """Frame in which the planned grasp poses should be expressed."""


@dataclass(frozen=True)
class GraspPlanningResponse:
    """Planned grasps, or the reason the request failed (in which case no grasps are given)."""

    grasps: list[MappedGrasp] = field(default_factory=list)
    error_code: PlanningErrorCode = PlanningErrorCode.SUCCESS
    stats: PlanningStats = field(default_factory=PlanningStats)

    @property
    def success(self) -> bool:
        """Check whether the request succeeded."""
        return self.error_code == PlanningErrorCode.SUCCESS


class DatabaseGraspPlanner:
    """Plans grasps by retrieving stored grasps of a recognized object model from the database."""

    def __init__(
        self,
        database: GraspDatabase | None,
        hand_description: HandDescription,
        pipeline: GraspPlanningPipeline,
    ) -> None:
        """Initialize the planner with its collaborators.

        :param database: Connection to the objects database (None if the connection failed)
        :param hand_description: Resolves the hand attached to each arm
        :param pipeline: Converts retrieved database grasps into hand-specific grasps
        """
        self.database = database
        self.hand_description = hand_description
        self.pipeline = pipeline

    def plan_grasps(self, request: GraspPlanningRequest) -> GraspPlanningResponse:
        """Plan grasps for the given request, converting request-level failures to error codes.

        :param request: Arm, candidate object models, and desired reference frame
        :return: Response containing either the planned grasps or an error code
        """
        try:
            grasps, stats = self._plan(request)
        except GraspPlanningError as error:
            log_error(str(error))
            return GraspPlanningResponse(error_code=error.error_code)

        return GraspPlanningResponse(grasps=grasps, stats=stats)

    def _plan(self, request: GraspPlanningRequest) -> tuple[list[MappedGrasp], PlanningStats]:
        """Plan grasps for the request, raising an exception on request-level failures."""
        if self.database is None:
            raise DatabaseNotConnectedError("Database grasp planning: database not connected")

        if not request.potential_models:
            raise NoCandidatesError(
                "Database grasp planning: no potential model information in grasp planning target",
            )

        if len(request.potential_models) > 1:
            log_warning(
                "Database grasp planning: target has more than one potential models. "
                "Returning grasps for first model only",
            )

        model = request.potential_models[0]
        hand_id = self.hand_description.hand_database_name(request.arm_name)
        joint_names = self.hand_description.hand_joint_names(request.arm_name)

        records = self.database.get_cluster_rep_grasps(model.model_id, hand_id)

        result = self.pipeline.plan(
            records,
            hand_id=hand_id,
            hand_joint_names=joint_names,
            detection_pose=model.pose,
            reference_frame_id=request.reference_frame_id,
        )
        return result.grasps, result.stats
