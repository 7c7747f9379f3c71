"""Import classes and functions for representing, pruning, and mapping database grasps."""

from .filtering import PruneResult as PruneResult
from .filtering import prune_grasp_list as prune_grasp_list
from .hand_mappers import HAND_MAPPERS as HAND_MAPPERS
from .hand_mappers import HandPostureMapper as HandPostureMapper
from .hand_mappers import JointLimits as JointLimits
from .hand_mappers import PositionalHandMapper as PositionalHandMapper
from .hand_mappers import SchunkHandMapper as SchunkHandMapper
from .hand_mappers import WillowGripperMapper as WillowGripperMapper
from .hand_mappers import get_hand_mapper as get_hand_mapper
from .records import DatabaseModelPose as DatabaseModelPose
from .records import GraspRecord as GraspRecord
from .records import HandPostures as HandPostures
from .records import JointPosture as JointPosture
from .records import MappedGrasp as MappedGrasp
