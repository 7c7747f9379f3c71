"""Define the request handler that lists and describes the object models in the database."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grasp_database.errors import DatabaseNotConnectedError, GraspPlanningError, PlanningErrorCode
from grasp_database.io.logging import log_error

if TYPE_CHECKING:
    from grasp_database.database import ModelCatalog, ModelDescription


@dataclass(frozen=True)
class ModelListResponse:
    """IDs of the models in a model set, or the reason the query failed."""

    model_ids: list[int] = field(default_factory=list)
    error_code: PlanningErrorCode = PlanningErrorCode.SUCCESS


@dataclass(frozen=True)
class ModelDescriptionResponse:
    """Description of one model, or the reason the query failed (in which case it is None)."""

    description: ModelDescription | None = None
    error_code: PlanningErrorCode = PlanningErrorCode.SUCCESS


class ModelQueryHandler:
    """Answers queries about the models stored in the objects database."""

    def __init__(self, catalog: ModelCatalog | None) -> None:
        """Initialize the handler with its database connection (None if the connection failed)."""
        self.catalog = catalog

    def _connected_catalog(self, query_name: str) -> ModelCatalog:
        """Retrieve the database connection, raising an exception if there is none."""
        if self.catalog is None:
            raise DatabaseNotConnectedError(f"{query_name}: database not connected")
        return self.catalog

    def get_models(self, model_set: str = "") -> ModelListResponse:
        """List the IDs of the models in the named set.

        :param model_set: Name of the model set (if empty, every model is listed)
        :return: Response containing either the model IDs or an error code
        """
        try:
            model_ids = self._connected_catalog("GetModelList").get_scaled_model_ids(model_set)
        except GraspPlanningError as error:
            log_error(str(error))
            return ModelListResponse(error_code=error.error_code)

        return ModelListResponse(model_ids=list(model_ids))

    def get_description(self, model_id: int) -> ModelDescriptionResponse:
        """Describe the model with the given ID.

        :param model_id: Database ID of the scaled object model
        :return: Response containing either the model's description or an error code
        """
        try:
            description = self._connected_catalog("GetModelDescription").get_model_description(model_id)
        except GraspPlanningError as error:
            log_error(str(error))
            return ModelDescriptionResponse(error_code=error.error_code)

        return ModelDescriptionResponse(description=description)
