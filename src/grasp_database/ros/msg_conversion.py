"""Define functions to convert between grasp planning and model query data structures and ROS messages."""

from __future__ import annotations

from geometry_msgs.msg import Point, Pose, PoseStamped, TransformStamped
from geometry_msgs.msg import Quaternion as QuaternionMsg
from household_objects_database_msgs.msg import DatabaseReturnCode
from object_manipulation_msgs.msg import Grasp, GraspPlanningErrorCode
from object_manipulation_msgs.srv import GraspPlanningRequest as GraspPlanningRequestMsg
from sensor_msgs.msg import JointState

from grasp_database.errors import PlanningErrorCode
from grasp_database.grasps.records import DatabaseModelPose, JointPosture, MappedGrasp
from grasp_database.planning.service import GraspPlanningRequest
from grasp_database.spatial import Point3D, Pose3D, Quaternion


def pose_to_msg(pose: Pose3D) -> Pose:
    """Convert the given pose into a geometry_msgs/Pose message."""
    position = Point(pose.position.x, pose.position.y, pose.position.z)
    q = pose.orientation
    return Pose(position, QuaternionMsg(q.x, q.y, q.z, q.w))


def pose_from_stamped_msg(pose_msg: PoseStamped) -> Pose3D:
    """Construct a Pose3D from a geometry_msgs/PoseStamped message."""
    p = pose_msg.pose.position
    q = pose_msg.pose.orientation
    return Pose3D(Point3D(p.x, p.y, p.z), Quaternion(q.x, q.y, q.z, q.w), pose_msg.header.frame_id)


def pose_from_tf_stamped_msg(tf_stamped_msg: TransformStamped) -> Pose3D:
    """Construct a Pose3D from a geometry_msgs/TransformStamped message."""
    t = tf_stamped_msg.transform.translation
    r = tf_stamped_msg.transform.rotation
    return Pose3D(
        Point3D(t.x, t.y, t.z),
        Quaternion(r.x, r.y, r.z, r.w),
        tf_stamped_msg.header.frame_id,
    )


def joint_posture_to_msg(posture: JointPosture) -> JointState:
    """Convert the given hand posture into a sensor_msgs/JointState message."""
    msg = JointState()
    msg.name = list(posture.joint_names)
    msg.position = list(posture.positions)
    msg.effort = list(posture.efforts)
    return msg


def mapped_grasp_to_msg(grasp: MappedGrasp) -> Grasp:
    """Convert a mapped database grasp into an object_manipulation_msgs/Grasp message."""
    msg = Grasp()
    msg.pre_grasp_posture = joint_posture_to_msg(grasp.pre_grasp_posture)
    msg.grasp_posture = joint_posture_to_msg(grasp.grasp_posture)
    msg.grasp_pose = pose_to_msg(grasp.grasp_pose)
    msg.success_probability = grasp.success_probability
    msg.desired_approach_distance = grasp.desired_approach_distance_m
    msg.min_approach_distance = grasp.min_approach_distance_m
    return msg


def request_from_msg(request_msg: GraspPlanningRequestMsg) -> GraspPlanningRequest:
    """Construct a GraspPlanningRequest from an object_manipulation_msgs/GraspPlanning request."""
    potential_models = [
        DatabaseModelPose(model_id=m.model_id, pose=pose_from_stamped_msg(m.pose))
        for m in request_msg.target.potential_models
    ]
    return GraspPlanningRequest(
        arm_name=request_msg.arm_name,
        potential_models=potential_models,
        reference_frame_id=request_msg.target.reference_frame_id,
    )


def error_code_to_msg(error_code: PlanningErrorCode) -> GraspPlanningErrorCode:
    """Convert a request-level outcome into an object_manipulation_msgs error code."""
    msg = GraspPlanningErrorCode()
    if error_code == PlanningErrorCode.SUCCESS:
        msg.value = GraspPlanningErrorCode.SUCCESS
    else:
        msg.value = GraspPlanningErrorCode.OTHER_ERROR
    return msg


def database_return_code_to_msg(error_code: PlanningErrorCode) -> DatabaseReturnCode:
    """Convert the outcome of a model query into a household_objects_database_msgs return code."""
    msg = DatabaseReturnCode()
    if error_code == PlanningErrorCode.SUCCESS:
        msg.code = DatabaseReturnCode.SUCCESS
    elif error_code == PlanningErrorCode.DATABASE_NOT_CONNECTED:
        msg.code = DatabaseReturnCode.DATABASE_NOT_CONNECTED
    elif error_code == PlanningErrorCode.QUERY_ERROR:
        msg.code = DatabaseReturnCode.DATABASE_QUERY_ERROR
    else:
        msg.code = DatabaseReturnCode.UNKNOWN_ERROR
    return msg
