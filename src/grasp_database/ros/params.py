"""Define utility functions to support loading from ROS parameters."""

from __future__ import annotations

from typing import TypeVar

import rospy

from grasp_database.planning.config import GraspPlanningConfig, GraspPlanningConfigSchema

ParamT = TypeVar("ParamT")


def get_ros_param(name: str, param_t: type[ParamT], default_value: ParamT | None = None) -> ParamT:
    """Retrieve the parameter with the given name and type from the ROS parameter server.

    :param name: Name of the retrieved ROS parameter
    :param param_t: Type of the retrieved parameter
    :param default_value: Default value used if the ROS parameter doesn't exist (defaults to None)
    :return: Value retrieved from the ROS parameter server
    """
    if default_value is None:
        param_value = rospy.get_param(name)
    else:
        param_value = rospy.get_param(name, default=default_value)

    return param_t(param_value)


def load_planning_config(namespace: str = "~") -> GraspPlanningConfig:
    """Load the grasp planner configuration from ROS parameters in the given namespace.

    Parameters missing from the server keep their default values.
    """
    defaults = GraspPlanningConfigSchema()
    values = {
        name: get_ros_param(f"{namespace}{name}", float, default_value=default)
        for name, default in defaults.model_dump().items()
    }
    return GraspPlanningConfig.from_schema(GraspPlanningConfigSchema.model_validate(values))
