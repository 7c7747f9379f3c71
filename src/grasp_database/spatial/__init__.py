"""Import classes and definitions representing 3D coordinate frames, poses, and rotations."""

from .frame_chain import TransformLookup as TransformLookup
from .frame_chain import express_in_reference_frame as express_in_reference_frame
from .frame_chain import resolve_reference_transform as resolve_reference_transform
from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .points import Point3D as Point3D
from .poses import XYZ_RPY as XYZ_RPY
from .poses import Pose3D as Pose3D
from .poses import compose_poses as compose_poses
from .rotations import EulerRPY as EulerRPY
from .rotations import Quaternion as Quaternion
from .static_transforms import StaticTransformLookup as StaticTransformLookup
