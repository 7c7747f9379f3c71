"""Launch a ROS node that plans grasps for recognized objects and answers model queries."""

from pathlib import Path

import rospy
from household_objects_database_msgs.srv import (
    GetModelDescription,
    GetModelDescriptionRequest,
    GetModelDescriptionResponse,
    GetModelList,
    GetModelListRequest,
    GetModelListResponse,
)
from object_manipulation_msgs.srv import GraspPlanning, GraspPlanningRequest, GraspPlanningResponse

from grasp_database.database import YamlGraspDatabase
from grasp_database.planning import DatabaseGraspPlanner, GraspPlanningPipeline, ModelQueryHandler
from grasp_database.ros import RosHandDescription, TransformManager, get_ros_param, load_planning_config
from grasp_database.ros.msg_conversion import (
    database_return_code_to_msg,
    error_code_to_msg,
    mapped_grasp_to_msg,
    request_from_msg,
)

GET_MODELS_SERVICE_NAME = "get_model_list"
GET_DESCRIPTION_SERVICE_NAME = "get_model_description"
GRASP_PLANNING_SERVICE_NAME = "database_grasp_planning"


def main() -> None:
    """Advertise the database services and process requests until shutdown."""
    TransformManager.init_node("objects_database_node")

    config = load_planning_config("~")
    database_yaml_path = get_ros_param("~database_yaml_path", Path)

    database = None
    try:
        database = YamlGraspDatabase.from_yaml(database_yaml_path)
    except (FileNotFoundError, KeyError, RuntimeError) as error:
        rospy.logerr(
            f"ObjectsDatabaseNode: failed to open model database {database_yaml_path}: {error}. "
            "Unable to do grasp planning on database recognized objects.",
        )

    pipeline = GraspPlanningPipeline(config, TransformManager())
    planner = DatabaseGraspPlanner(database, RosHandDescription(), pipeline)
    model_queries = ModelQueryHandler(database)

    def handle_grasp_planning(request: GraspPlanningRequest) -> GraspPlanningResponse:
        """Answer a single grasp planning service request."""
        result = planner.plan_grasps(request_from_msg(request))

        response = GraspPlanningResponse()
        response.grasps = [mapped_grasp_to_msg(g) for g in result.grasps]
        response.error_code = error_code_to_msg(result.error_code)
        return response

    def handle_get_models(request: GetModelListRequest) -> GetModelListResponse:
        """Answer a request for the IDs of the models in a model set."""
        result = model_queries.get_models(request.model_set)

        response = GetModelListResponse()
        response.model_ids = result.model_ids
        response.return_code = database_return_code_to_msg(result.error_code)
        return response

    def handle_get_description(request: GetModelDescriptionRequest) -> GetModelDescriptionResponse:
        """Answer a request for the description of a single model."""
        result = model_queries.get_description(request.model_id)

        response = GetModelDescriptionResponse()
        if result.description is not None:
            response.name = result.description.name
            response.maker = result.description.maker
            response.tags = list(result.description.tags)
        response.return_code = database_return_code_to_msg(result.error_code)
        return response

    _ = rospy.Service(f"~{GET_MODELS_SERVICE_NAME}", GetModelList, handle_get_models)
    _ = rospy.Service(f"~{GET_DESCRIPTION_SERVICE_NAME}", GetModelDescription, handle_get_description)
    _ = rospy.Service(f"~{GRASP_PLANNING_SERVICE_NAME}", GraspPlanning, handle_grasp_planning)
    rospy.spin()


if __name__ == "__main__":
    main()
