"""Unit tests for listing and describing the models stored in the objects database."""

from __future__ import annotations

import pytest

from grasp_database.database import ModelDescription, YamlGraspDatabase
from grasp_database.errors import PlanningErrorCode
from grasp_database.planning import ModelQueryHandler

from .fakes import InMemoryGraspDatabase

MUG_ID = 18744
BOWL_ID = 18665
CAN_ID = 18800


@pytest.fixture
def database() -> YamlGraspDatabase:
    """Return a database of three described models, two of which belong to the 'kitchen' set."""
    return YamlGraspDatabase(
        grasps={MUG_ID: {}, BOWL_ID: {}, CAN_ID: {}},
        descriptions={
            MUG_ID: ModelDescription(MUG_ID, name="blue mug", maker="Ikea", tags=("mug", "cup")),
            BOWL_ID: ModelDescription(BOWL_ID, name="cereal bowl", maker="Gerber", tags=("bowl",)),
        },
        model_sets={MUG_ID: ("kitchen",), BOWL_ID: ("kitchen", "plastic")},
    )


@pytest.mark.parametrize(
    ("model_set", "expected_ids"),
    [("", [BOWL_ID, MUG_ID, CAN_ID]), ("kitchen", [BOWL_ID, MUG_ID]), ("plastic", [BOWL_ID]), ("garage", [])],
)
def test_get_models_lists_models_in_set(
    database: YamlGraspDatabase,
    model_set: str,
    expected_ids: list[int],
) -> None:
    """Verify that models are listed by set, with an empty set name listing every model."""
    # Arrange/Act - List the models in the given set
    response = ModelQueryHandler(database).get_models(model_set)

    # Assert - Expect the sorted IDs of the set's models
    assert response.error_code == PlanningErrorCode.SUCCESS
    assert response.model_ids == expected_ids


def test_get_description_returns_name_maker_and_tags(database: YamlGraspDatabase) -> None:
    """Verify that a model's description reports its name, maker, and tags."""
    # Arrange/Act - Describe the mug
    response = ModelQueryHandler(database).get_description(MUG_ID)

    # Assert - Expect the stored description
    assert response.error_code == PlanningErrorCode.SUCCESS
    assert response.description == ModelDescription(MUG_ID, "blue mug", "Ikea", ("mug", "cup"))


def test_get_description_of_undescribed_model_is_empty(database: YamlGraspDatabase) -> None:
    """Verify that a model stored without descriptive fields gets an empty description."""
    response = ModelQueryHandler(database).get_description(CAN_ID)

    assert response.description == ModelDescription(CAN_ID)


def test_get_description_reports_unknown_model_as_query_error(database: YamlGraspDatabase) -> None:
    """Verify that describing a model missing from the database reports a query error."""
    response = ModelQueryHandler(database).get_description(99999)

    assert response.error_code == PlanningErrorCode.QUERY_ERROR
    assert response.description is None


def test_model_queries_report_missing_database_connection() -> None:
    """Verify that model queries without a database connection report it as not connected."""
    # Arrange - A handler whose database connection failed
    handler = ModelQueryHandler(None)

    # Act - Attempt both kinds of model query
    list_response = handler.get_models("kitchen")
    description_response = handler.get_description(MUG_ID)

    # Assert - Expect both queries to report the missing connection, with no results
    assert list_response.error_code == PlanningErrorCode.DATABASE_NOT_CONNECTED
    assert list_response.model_ids == []
    assert description_response.error_code == PlanningErrorCode.DATABASE_NOT_CONNECTED
    assert description_response.description is None


def test_get_models_reports_failed_query() -> None:
    """Verify that a failed model listing is reported as a query error."""
    response = ModelQueryHandler(InMemoryGraspDatabase({}, fail=True)).get_models("")

    assert response.error_code == PlanningErrorCode.QUERY_ERROR
    assert response.model_ids == []
