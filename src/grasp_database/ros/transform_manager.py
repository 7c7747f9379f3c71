"""Define a class to read transforms between named frames from the /tf tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rospy
from tf2_ros import Buffer, TransformException, TransformListener

from grasp_database.ros.msg_conversion import pose_from_tf_stamped_msg

if TYPE_CHECKING:
    from geometry_msgs.msg import TransformStamped

    from grasp_database.spatial import Pose3D


class TransformManager:
    """Looks up the latest transforms between frames using a TF2 buffer and listener."""

    LOOP_HZ = 10.0  # Frequency (Hz) of transform request loops

    def __init__(self, timeout_s: float = 5.0) -> None:
        """Initialize the TF2 buffer and start listening for transforms.

        :param timeout_s: Duration (seconds) after which a lookup is abandoned (defaults to 5)
        """
        self.timeout_s = timeout_s
        self._tf_buffer = Buffer()
        self._tf_listener = TransformListener(self._tf_buffer)

    @staticmethod
    def init_node(node_name: str) -> None:
        """Initialize a ROS node if this process does not yet have a ROS node."""
        if rospy.get_name() in ["", "/unnamed"]:
            rospy.init_node(node_name)
            rospy.loginfo(f"Initialized node with name '{rospy.get_name()}'")

    def lookup_transform(self, child_frame: str, parent_frame: str) -> Pose3D | None:
        """Look up the latest transform to convert from one frame to another using /tf.

        Frame notation: Child frame (c) and parent frame (p).

        Say our data is originally expressed in the child frame (data_wrt_c).
        This method outputs transform_p_c ("child relative to parent"), which lets us compute:

            transform_p_c @ data_wrt_c = data_wrt_p (i.e., "data expressed in the parent frame")

        :param child_frame: Frame whose relative pose we want to find
        :param parent_frame: Frame relative to which the transform is found
        :return: Pose3D representing transform_p_c or None (if lookup failed)
        """
        latest = rospy.Time(0)
        rate_hz = rospy.Rate(TransformManager.LOOP_HZ)
        timeout_time_s = rospy.get_time() + self.timeout_s

        tf_stamped_msg: TransformStamped | None = None
        while (rospy.get_time() < timeout_time_s) and (not rospy.is_shutdown()):
            try:
                tf_stamped_msg = self._tf_buffer.lookup_transform(
                    target_frame=parent_frame,
                    source_frame=child_frame,
                    time=latest,
                    timeout=rate_hz.sleep_dur,
                )
                break
            except TransformException as t_exc:
                rospy.logwarn(
                    f"[TransformManager.lookup_transform] Lookup of '{child_frame}' w.r.t. "
                    f"'{parent_frame}' gave exception: {t_exc}",
                )
                rate_hz.sleep()

        if tf_stamped_msg is None:
            rospy.logerr(
                f"[TransformManager.lookup_transform] Could not look up transform of "
                f"'{child_frame}' w.r.t. '{parent_frame}' within {self.timeout_s} seconds.",
            )
            return None

        return pose_from_tf_stamped_msg(tf_stamped_msg)
