"""Unit tests for loading grasps, hands, transforms, and configuration from YAML files."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from grasp_database.database import ModelDescription, YamlGraspDatabase
from grasp_database.errors import QueryError
from grasp_database.hands import StaticHandDescription
from grasp_database.planning import GraspPlanningConfig
from grasp_database.spatial import StaticTransformLookup

DATABASE_YAML = dedent("""\
    models:
      18744:
        name: blue mug
        maker: Ikea
        tags: [mug, cup]
        sets: [kitchen]
        frame: mug_model
        grasps:
          WILLOW_GRIPPER_2010:
            - grasp_id: 7
              quality: -65.0
              scaled_quality: 0.8
              pre_grasp_joint_angles: [0.08]
              final_grasp_joint_angles: [0.03]
              final_grasp_pose: [0.0, 0.0, 0.12, 0.0, 1.5707, 0.0]
              table_clearance: 14.0
            - grasp_id: 8
              quality: -30.0
              scaled_quality: 0.4
              pre_grasp_joint_angles: [0.08]
              final_grasp_joint_angles: [0.05]
              final_grasp_pose: {xyz_rpy: [0.05, 0.0, 0.1, 0.0, 0.0, 0.0], frame: mug_handle}
      18665: {}
    """)

HANDS_YAML = dedent("""\
    hand_description:
      right_arm:
        hand_database_name: WILLOW_GRIPPER_2010
        hand_joints: [r_l_finger, r_r_finger, r_r_finger_tip, r_l_finger_tip]
    """)


def write_yaml(tmp_path: Path, filename: str, contents: str) -> Path:
    """Write the given YAML contents into a file in the temporary directory."""
    path = tmp_path / filename
    path.write_text(contents)
    return path


def test_yaml_grasp_database_loads_grasps_by_model_and_hand(tmp_path: Path) -> None:
    """Verify that database grasps are loaded with their poses, frames, and metadata."""
    # Arrange/Act - Load the database and query the mug's gripper grasps
    database = YamlGraspDatabase.from_yaml(write_yaml(tmp_path, "db.yaml", DATABASE_YAML))
    grasps = database.get_cluster_rep_grasps(18744, "WILLOW_GRIPPER_2010")

    # Assert - Expect both grasps, in file order, with poses in the model's frame by default
    assert database.model_ids == [18665, 18744]
    assert [g.grasp_id for g in grasps] == [7, 8]
    assert grasps[0].final_grasp_joint_angles == (0.03,)
    assert grasps[0].final_grasp_pose.ref_frame == "mug_model"
    assert grasps[0].table_clearance == 14.0
    assert grasps[1].final_grasp_pose.ref_frame == "mug_handle"


def test_yaml_grasp_database_query_results(tmp_path: Path) -> None:
    """Verify that known models without grasps give empty lists and unknown models fail."""
    database = YamlGraspDatabase.from_yaml(write_yaml(tmp_path, "db.yaml", DATABASE_YAML))

    assert database.get_cluster_rep_grasps(18665, "WILLOW_GRIPPER_2010") == []
    assert database.get_cluster_rep_grasps(18744, "Schunk") == []
    with pytest.raises(QueryError, match="12345"):
        database.get_cluster_rep_grasps(12345, "WILLOW_GRIPPER_2010")


def test_yaml_grasp_database_loads_model_descriptions_and_sets(tmp_path: Path) -> None:
    """Verify that model descriptions and set memberships are loaded, defaulting to empty."""
    # Arrange/Act - Load the database
    database = YamlGraspDatabase.from_yaml(write_yaml(tmp_path, "db.yaml", DATABASE_YAML))

    # Assert - Expect the mug's description and set, and an empty description for the bowl
    assert database.get_model_description(18744) == ModelDescription(18744, "blue mug", "Ikea", ("mug", "cup"))
    assert database.get_model_description(18665) == ModelDescription(18665)
    assert database.get_scaled_model_ids("kitchen") == [18744]
    assert database.get_scaled_model_ids("") == [18665, 18744]
    with pytest.raises(QueryError, match="12345"):
        database.get_model_description(12345)


def test_static_hand_description_from_yaml(tmp_path: Path) -> None:
    """Verify that hand descriptions are loaded using the ROS parameter layout."""
    hands = StaticHandDescription.from_yaml(write_yaml(tmp_path, "hands.yaml", HANDS_YAML))

    assert hands.hand_database_name("right_arm") == "WILLOW_GRIPPER_2010"
    assert hands.hand_joint_names("right_arm") == [
        "r_l_finger",
        "r_r_finger",
        "r_r_finger_tip",
        "r_l_finger_tip",
    ]
    with pytest.raises(KeyError, match="left_arm"):
        hands.hand_database_name("left_arm")


def test_static_hand_description_rejects_bad_joint_lists(tmp_path: Path) -> None:
    """Verify that hand joints which aren't a list of strings are rejected."""
    bad_yaml = dedent("""\
        hand_description:
          right_arm:
            hand_database_name: WILLOW_GRIPPER_2010
            hand_joints: r_gripper_joint
        """)

    with pytest.raises(ValueError, match="bad parameter"):
        StaticHandDescription.from_yaml(write_yaml(tmp_path, "hands.yaml", bad_yaml))


def test_static_transform_lookup_from_yaml(tmp_path: Path) -> None:
    """Verify that static transforms are loaded as named poses."""
    transforms_yaml = dedent("""\
        default_frame: base_link
        transforms:
          head_camera: [0.1, 0.0, 1.4, 0.0, 0.6, 0.0]
        """)

    lookup = StaticTransformLookup.from_yaml(write_yaml(tmp_path, "tf.yaml", transforms_yaml))
    pose = lookup.lookup_transform(child_frame="head_camera", parent_frame="base_link")

    assert pose is not None
    assert pose.position.to_tuple() == pytest.approx((0.1, 0.0, 1.4))


def test_planning_config_from_yaml_overrides_defaults(tmp_path: Path) -> None:
    """Verify that configuration values from YAML override the defaults."""
    config_yaml = "quality_cutoff: -55.0\nmin_approach_distance_m: 0.05\n"

    config = GraspPlanningConfig.from_yaml(write_yaml(tmp_path, "config.yaml", config_yaml))

    assert config.quality_cutoff == -55.0
    assert config.min_approach_distance_m == 0.05
    assert config.desired_approach_distance_m == 0.15
    assert config.prune_gripper_opening == 0.5


def test_planning_config_from_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    """Verify that an empty configuration file gives the default configuration."""
    config = GraspPlanningConfig.from_yaml(write_yaml(tmp_path, "config.yaml", ""))

    assert config == GraspPlanningConfig()


@pytest.mark.parametrize("contents", ["quality_threshold: -40.0\n", "min_approach_distance_m: -0.1\n"])
def test_planning_config_rejects_invalid_yaml(tmp_path: Path, contents: str) -> None:
    """Verify that unknown keys and invalid values are rejected."""
    with pytest.raises(ValidationError):
        GraspPlanningConfig.from_yaml(write_yaml(tmp_path, "config.yaml", contents))
