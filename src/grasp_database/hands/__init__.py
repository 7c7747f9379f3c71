"""Import classes describing the robot hands that execute database grasps."""

from .description import HandDescription as HandDescription
from .description import HandSpec as HandSpec
from .description import StaticHandDescription as StaticHandDescription
