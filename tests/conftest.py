"""Define test fixtures shared by the grasp planning tests."""

from __future__ import annotations

import pytest

from grasp_database.hands import HandSpec, StaticHandDescription
from grasp_database.planning import GraspPlanningConfig


@pytest.fixture
def willow_joint_names() -> list[str]:
    """Return the joint names of the PR2 parallel gripper."""
    return [
        "r_gripper_l_finger_joint",
        "r_gripper_r_finger_joint",
        "r_gripper_r_finger_tip_joint",
        "r_gripper_l_finger_tip_joint",
    ]


@pytest.fixture
def schunk_joint_names() -> list[str]:
    """Return the joint names of the Schunk dexterous hand."""
    return [
        "sdh_knuckle_joint",
        "sdh_finger_12_joint",
        "sdh_finger_13_joint",
        "sdh_finger_22_joint",
        "sdh_finger_23_joint",
        "sdh_thumb_2_joint",
        "sdh_thumb_3_joint",
    ]


@pytest.fixture
def hand_description(willow_joint_names: list[str], schunk_joint_names: list[str]) -> StaticHandDescription:
    """Return a hand description with a PR2 gripper on the right arm and a Schunk hand on the left."""
    return StaticHandDescription(
        {
            "right_arm": HandSpec("WILLOW_GRIPPER_2010", tuple(willow_joint_names)),
            "left_arm": HandSpec("Schunk", tuple(schunk_joint_names)),
        },
    )


@pytest.fixture
def planning_config() -> GraspPlanningConfig:
    """Return the default grasp planning configuration."""
    return GraspPlanningConfig()
