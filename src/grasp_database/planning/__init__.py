"""Import classes used to plan grasps for recognized objects and query the models database."""

from .config import GraspPlanningConfig as GraspPlanningConfig
from .config import GraspPlanningConfigSchema as GraspPlanningConfigSchema
from .model_queries import ModelDescriptionResponse as ModelDescriptionResponse
from .model_queries import ModelListResponse as ModelListResponse
from .model_queries import ModelQueryHandler as ModelQueryHandler
from .pipeline import GraspPlanningPipeline as GraspPlanningPipeline
from .pipeline import PlanningResult as PlanningResult
from .pipeline import PlanningStats as PlanningStats
from .service import DatabaseGraspPlanner as DatabaseGraspPlanner
from .service import GraspPlanningRequest as GraspPlanningRequest
from .service import GraspPlanningResponse as GraspPlanningResponse
