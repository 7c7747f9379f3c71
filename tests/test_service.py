"""Unit tests for handling database grasp planning requests."""

from __future__ import annotations

import pytest

from grasp_database.errors import PlanningErrorCode
from grasp_database.grasps import DatabaseModelPose
from grasp_database.hands import StaticHandDescription
from grasp_database.planning import (
    DatabaseGraspPlanner,
    GraspPlanningConfig,
    GraspPlanningPipeline,
    GraspPlanningRequest,
)
from grasp_database.spatial import Pose3D

from .fakes import InMemoryGraspDatabase, RecordingLookup, make_grasp_record

MUG_ID = 18744
BOWL_ID = 18665


@pytest.fixture
def database() -> InMemoryGraspDatabase:
    """Return a database with PR2 gripper grasps for a mug and a bowl."""
    return InMemoryGraspDatabase(
        {
            (MUG_ID, "WILLOW_GRIPPER_2010"): [
                make_grasp_record([0.03], quality=-70.0, scaled_quality=0.9),
                make_grasp_record([0.04], quality=-20.0, scaled_quality=0.3),
            ],
            (BOWL_ID, "WILLOW_GRIPPER_2010"): [
                make_grasp_record([0.07], quality=-55.0, scaled_quality=0.6),
            ],
        },
    )


def make_planner(
    database: InMemoryGraspDatabase | None,
    hand_description: StaticHandDescription,
    lookup: RecordingLookup | None = None,
) -> DatabaseGraspPlanner:
    """Construct a planner using the given collaborators and the default configuration."""
    pipeline = GraspPlanningPipeline(GraspPlanningConfig(), lookup or RecordingLookup())
    return DatabaseGraspPlanner(database, hand_description, pipeline)


def make_request(*model_ids: int, reference_frame: str = "camera") -> GraspPlanningRequest:
    """Construct a request for the right arm with the given candidate models."""
    models = [DatabaseModelPose(m, Pose3D.from_xyz_rpy(x=0.5, ref_frame="camera")) for m in model_ids]
    return GraspPlanningRequest("right_arm", models, reference_frame)


def test_plan_grasps_succeeds_for_recognized_model(
    database: InMemoryGraspDatabase,
    hand_description: StaticHandDescription,
) -> None:
    """Verify that a request for a recognized model returns its pruned, mapped grasps."""
    # Arrange/Act - Plan grasps for the mug with the PR2 gripper
    response = make_planner(database, hand_description).plan_grasps(make_request(MUG_ID))

    # Assert - Expect the single good mug grasp, queried with the gripper's database name
    assert response.success
    assert response.error_code == PlanningErrorCode.SUCCESS
    assert [g.success_probability for g in response.grasps] == [0.9]
    assert database.queries == [(MUG_ID, "WILLOW_GRIPPER_2010")]
    assert response.stats.num_retrieved == 2


def test_plan_grasps_uses_only_first_potential_model(
    database: InMemoryGraspDatabase,
    hand_description: StaticHandDescription,
) -> None:
    """Verify that only the first of several candidate models is used."""
    response = make_planner(database, hand_description).plan_grasps(make_request(BOWL_ID, MUG_ID))

    assert response.success
    assert [g.success_probability for g in response.grasps] == [0.6]
    assert database.queries == [(BOWL_ID, "WILLOW_GRIPPER_2010")]


@pytest.mark.parametrize(
    ("request_model_ids", "expected_code"),
    [((), PlanningErrorCode.NO_CANDIDATES), ((99999,), PlanningErrorCode.NO_CANDIDATES)],
)
def test_plan_grasps_reports_missing_candidates(
    database: InMemoryGraspDatabase,
    hand_description: StaticHandDescription,
    request_model_ids: tuple[int, ...],
    expected_code: PlanningErrorCode,
) -> None:
    """Verify that requests without models, or with models lacking grasps, report no candidates."""
    response = make_planner(database, hand_description).plan_grasps(make_request(*request_model_ids))

    assert response.error_code == expected_code
    assert response.grasps == []


def test_plan_grasps_reports_database_query_errors(hand_description: StaticHandDescription) -> None:
    """Verify that a failed database query is reported as a query error."""
    failing_database = InMemoryGraspDatabase({}, fail=True)

    response = make_planner(failing_database, hand_description).plan_grasps(make_request(MUG_ID))

    assert response.error_code == PlanningErrorCode.QUERY_ERROR
    assert response.grasps == []


def test_plan_grasps_reports_missing_database_connection(hand_description: StaticHandDescription) -> None:
    """Verify that planning without a database connection reports it as not connected."""
    response = make_planner(None, hand_description).plan_grasps(make_request(MUG_ID))

    assert response.error_code == PlanningErrorCode.DATABASE_NOT_CONNECTED
    assert not response.success


def test_plan_grasps_reports_frame_resolution_errors(
    database: InMemoryGraspDatabase,
    hand_description: StaticHandDescription,
) -> None:
    """Verify that an unresolvable reference frame fails the request without partial results."""
    lookup = RecordingLookup(result=None)
    planner = make_planner(database, hand_description, lookup)

    response = planner.plan_grasps(make_request(MUG_ID, reference_frame="odom"))

    assert response.error_code == PlanningErrorCode.FRAME_RESOLUTION_ERROR
    assert response.grasps == []
    assert lookup.calls == [("camera", "odom")]
