"""Define a hand description read from the ROS parameter server."""

from __future__ import annotations

import rospy

from grasp_database.hands import HandSpec


class RosHandDescription:
    """Reads the hand attached to each arm from `/hand_description/<arm>/...` parameters."""

    def hand_database_name(self, arm_name: str) -> str:
        """Retrieve the name under which the arm's hand is stored in the grasp database."""
        name = f"/hand_description/{arm_name}/hand_database_name"
        if not rospy.has_param(name):
            raise KeyError(f"Hand description: could not find parameter {name}")
        return str(rospy.get_param(name))

    def hand_joint_names(self, arm_name: str) -> list[str]:
        """Retrieve the names of the hand's joints, in canonical order."""
        name = f"/hand_description/{arm_name}/hand_joints"
        if not rospy.has_param(name):
            raise KeyError(f"Hand description: could not find parameter {name}")

        hand_data = {"hand_database_name": "", "hand_joints": rospy.get_param(name)}
        return list(HandSpec.from_yaml_data(arm_name, hand_data).joint_names)
