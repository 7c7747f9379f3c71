"""Express database grasp poses in a caller-requested reference frame."""

from __future__ import annotations

from typing import Protocol

from grasp_database.errors import FrameResolutionError
from grasp_database.io.logging import log_error
from grasp_database.spatial.poses import Pose3D, compose_poses


class TransformLookup(Protocol):
    """An interface for looking up the latest transform between two named frames."""

    def lookup_transform(self, child_frame: str, parent_frame: str) -> Pose3D | None:
        """Look up the pose of the child frame relative to the parent frame.

        :param child_frame: Frame whose relative pose we want to find
        :param parent_frame: Frame relative to which the transform is found
        :return: Pose3D representing transform_p_c, or None if the lookup failed
        """
        ...


def resolve_reference_transform(
    detection_frame: str,
    reference_frame: str,
    lookup: TransformLookup,
) -> Pose3D | None:
    """Resolve the transform from an object's detection frame into the reference frame.

    The lookup is performed at most once and uses the latest available data.

    :param detection_frame: Frame in which the object was detected (frame d)
    :param reference_frame: Frame in which the caller wants grasp poses expressed (frame r)
    :param lookup: Collaborator used to look up transforms between named frames
    :return: Pose of frame d w.r.t. frame r, or None if the two frames are identical
    :raises FrameResolutionError: If the frames differ and the lookup fails
    """
    if detection_frame == reference_frame:
        return None

    try:
        pose_r_d = lookup.lookup_transform(child_frame=detection_frame, parent_frame=reference_frame)
    except LookupError as error:
        log_error(
            f"Grasp planner: failed to get transform from {reference_frame} to "
            f"{detection_frame}; exception: {error}",
        )
        raise FrameResolutionError(
            f"Lookup from frame '{detection_frame}' to '{reference_frame}' failed",
        ) from error

    if pose_r_d is None:
        log_error(f"Grasp planner: failed to get transform from {reference_frame} to {detection_frame}")
        raise FrameResolutionError(
            f"Lookup from frame '{detection_frame}' to '{reference_frame}' failed",
        )

    return pose_r_d


def express_in_reference_frame(
    pose_o_g: Pose3D,
    pose_d_o: Pose3D,
    pose_r_d: Pose3D | None,
) -> Pose3D:
    """Express a database grasp pose in the caller's reference frame.

    Frames: object model (o), grasp (g), detection (d), and reference (r).

    :param pose_o_g: Grasp pose stored in the database w.r.t. the object model
    :param pose_d_o: Detected pose of the object model w.r.t. the detection frame
    :param pose_r_d: Transform of the detection frame w.r.t. the reference frame (None if equal)
    :return: Grasp pose w.r.t. the reference frame (i.e., pose_r_g)
    """
    pose_d_g = compose_poses(pose_d_o, pose_o_g)
    if pose_r_d is None:
        return pose_d_g

    return compose_poses(pose_r_d, pose_d_g)
