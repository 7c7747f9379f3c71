"""Define a transform lookup backed by a fixed collection of named frames."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grasp_database.spatial.poses import Pose3D

if TYPE_CHECKING:
    from pathlib import Path


class StaticTransformLookup:
    """Look up transforms among frames whose poses never change."""

    def __init__(self, frame_poses: dict[str, Pose3D]) -> None:
        """Initialize the lookup from poses of named frames w.r.t. their parent frames.

        :param frame_poses: Map from each frame name to its pose w.r.t. its parent frame
        """
        self.frame_poses = dict(frame_poses)

    @classmethod
    def from_yaml(cls, yaml_path: Path, collection_name: str = "transforms") -> StaticTransformLookup:
        """Load a static transform lookup from a YAML file of named poses."""
        return cls(Pose3D.load_named_poses(yaml_path, collection_name))

    def lookup_transform(self, child_frame: str, parent_frame: str) -> Pose3D | None:
        """Look up the pose of the child frame relative to the parent frame.

        Only direct parent-child relationships (in either direction) are resolved.

        :param child_frame: Frame whose relative pose we want to find
        :param parent_frame: Frame relative to which the transform is found
        :return: Pose3D representing transform_p_c, or None if it is unknown
        """
        if child_frame == parent_frame:
            return Pose3D.identity(parent_frame)

        pose_p_c = self.frame_poses.get(child_frame)
        if pose_p_c is not None and pose_p_c.ref_frame == parent_frame:
            return pose_p_c

        pose_c_p = self.frame_poses.get(parent_frame)
        if pose_c_p is not None and pose_c_p.ref_frame == child_frame:
            return pose_c_p.inverse(pose_frame=parent_frame)

        return None
