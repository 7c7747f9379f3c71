"""Import interfaces and implementations of the objects database."""

from .grasp_database import DEFAULT_MODEL_FRAME as DEFAULT_MODEL_FRAME
from .grasp_database import GraspDatabase as GraspDatabase
from .grasp_database import ModelCatalog as ModelCatalog
from .grasp_database import ModelDescription as ModelDescription
from .grasp_database import YamlGraspDatabase as YamlGraspDatabase
