"""Import ROS-backed collaborators of the database grasp planner."""

from .hand_description import RosHandDescription as RosHandDescription
from .params import get_ros_param as get_ros_param
from .params import load_planning_config as load_planning_config
from .transform_manager import TransformManager as TransformManager
