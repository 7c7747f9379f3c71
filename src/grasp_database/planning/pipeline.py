"""Define the pipeline that converts raw database grasps into hand-specific grasps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grasp_database.errors import MappingError, NoCandidatesError
from grasp_database.grasps.filtering import prune_grasp_list
from grasp_database.grasps.hand_mappers import get_hand_mapper
from grasp_database.grasps.records import MappedGrasp
from grasp_database.io.logging import log_error, log_info
from grasp_database.planning.config import GraspPlanningConfig
from grasp_database.spatial.frame_chain import (
    TransformLookup,
    express_in_reference_frame,
    resolve_reference_transform,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grasp_database.grasps.records import GraspRecord
    from grasp_database.spatial import Pose3D


@dataclass(frozen=True)
class PlanningStats:
    """Counts describing what happened to the grasps of one planning request."""

    num_retrieved: int = 0
    num_pruned: int = 0
    num_mapped: int = 0
    num_skipped: int = 0


@dataclass(frozen=True)
class PlanningResult:
    """Grasps produced by a planning request, along with summary statistics."""

    grasps: list[MappedGrasp] = field(default_factory=list)
    stats: PlanningStats = field(default_factory=PlanningStats)


class GraspPlanningPipeline:
    """Prunes database grasps, maps them onto a hand, and expresses them in a reference frame."""

    def __init__(self, config: GraspPlanningConfig, transform_lookup: TransformLookup) -> None:
        """Initialize the pipeline with its configuration and transform collaborator.

        :param config: Thresholds and constants used to convert database grasps
        :param transform_lookup: Used to resolve the detection frame w.r.t. the reference frame
        """
        self.config = config
        self.transform_lookup = transform_lookup

    def plan(
        self,
        records: Sequence[GraspRecord],
        hand_id: str,
        hand_joint_names: Sequence[str],
        detection_pose: Pose3D,
        reference_frame_id: str,
        quality_cutoff: float | None = None,
    ) -> PlanningResult:
        """Convert database grasps for an object into grasps for the given hand.

        Grasps that cannot be mapped onto the hand are logged and skipped. Failures that affect
        every grasp of the request (no candidates, unresolvable frames) raise instead.

        :param records: Grasps retrieved from the database for the object's model and the hand
        :param hand_id: Database name of the hand, used to select how joint angles are mapped
        :param hand_joint_names: Names of the hand's joints, in canonical order
        :param detection_pose: Pose of the object model w.r.t. the frame it was detected in
        :param reference_frame_id: Frame in which the output grasp poses are expressed
        :param quality_cutoff: Pruning cutoff (defaults to the configured cutoff)
        :return: Mapped grasps (in database order) and statistics about the request
        :raises NoCandidatesError: If no database grasps were provided
        :raises FrameResolutionError: If grasps survive pruning but their frame can't be resolved
        """
        if not records:
            raise NoCandidatesError("Database grasp planning: no candidate grasps were provided")

        log_info(f"Database grasp planner: retrieved {len(records)} grasps from database")

        cutoff = self.config.quality_cutoff if quality_cutoff is None else quality_cutoff
        pruned = prune_grasp_list(records, cutoff)

        if not pruned.kept:
            log_info("Database grasp planner: returning 0 grasps")
            return PlanningResult(stats=PlanningStats(num_retrieved=len(records), num_pruned=pruned.num_pruned))

        pose_r_d = resolve_reference_transform(
            detection_frame=detection_pose.ref_frame,
            reference_frame=reference_frame_id,
            lookup=self.transform_lookup,
        )

        mapper = get_hand_mapper(
            hand_id,
            grasp_effort=self.config.grasp_effort,
            pre_grasp_effort=self.config.pre_grasp_effort,
        )

        grasps: list[MappedGrasp] = []
        num_skipped = 0
        for record in pruned.kept:
            try:
                postures = mapper.map_postures(record, hand_joint_names)
            except MappingError as error:
                log_error(f"Database grasp planner: skipping grasp {record.grasp_id}: {error}")
                num_skipped += 1
                continue

            grasp_pose = express_in_reference_frame(record.final_grasp_pose, detection_pose, pose_r_d)
            grasps.append(
                MappedGrasp(
                    pre_grasp_posture=postures.pre_grasp,
                    grasp_posture=postures.grasp,
                    grasp_pose=grasp_pose,
                    success_probability=record.scaled_quality,
                    desired_approach_distance_m=self.config.desired_approach_distance_m,
                    min_approach_distance_m=self.config.min_approach_distance_m,
                ),
            )

        log_info(f"Database grasp planner: returning {len(grasps)} grasps")

        stats = PlanningStats(
            num_retrieved=len(records),
            num_pruned=pruned.num_pruned,
            num_mapped=len(grasps),
            num_skipped=num_skipped,
        )
        return PlanningResult(grasps=grasps, stats=stats)
