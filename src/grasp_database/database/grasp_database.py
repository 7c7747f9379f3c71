"""Define the interface to the objects database and a file-backed implementation of it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from grasp_database.errors import QueryError
from grasp_database.grasps.records import GraspRecord
from grasp_database.io.yaml_utils import load_yaml_data

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_MODEL_FRAME = "object_model"
"""Frame in which database grasp poses are stored if no other frame is specified."""


@dataclass(frozen=True)
class ModelDescription:
    """Human-readable description of a scaled object model in the database."""

    model_id: int
    name: str = ""
    maker: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_yaml_data(cls, model_id: int, model_data: dict[str, Any]) -> ModelDescription:
        """Construct a ModelDescription from the YAML data of one model (missing fields are empty)."""
        return ModelDescription(
            model_id=model_id,
            name=str(model_data.get("name", "")),
            maker=str(model_data.get("maker", "")),
            tags=tuple(str(t) for t in model_data.get("tags", [])),
        )


class GraspDatabase(Protocol):
    """An interface for retrieving grasps stored for object models."""

    def get_cluster_rep_grasps(self, model_id: int, hand_id: str) -> list[GraspRecord]:
        """Retrieve the cluster-representative grasps of a model for the named hand.

        :param model_id: Database ID of the scaled object model
        :param hand_id: Database name of the hand
        :return: Grasps stored for the model and hand (possibly empty)
        :raises QueryError: If the database cannot answer the query
        """
        ...


class ModelCatalog(Protocol):
    """An interface for listing and describing the object models in the database."""

    def get_scaled_model_ids(self, model_set: str) -> list[int]:
        """Retrieve the IDs of the models in the named set (all models if the name is empty).

        :raises QueryError: If the database cannot answer the query
        """
        ...

    def get_model_description(self, model_id: int) -> ModelDescription:
        """Retrieve the description of the model with the given ID.

        :raises QueryError: If the database holds no such model
        """
        ...


class YamlGraspDatabase:
    """A read-only grasp database loaded from a YAML file.

    Expected layout:
        models:
          <model_id>:
            name, maker, tags, sets   # Optional descriptive fields
            frame: <frame>            # Frame of the stored grasp poses
            grasps: {<hand_id>: [<grasp>, ...]}
    """

    def __init__(
        self,
        grasps: dict[int, dict[str, list[GraspRecord]]],
        descriptions: dict[int, ModelDescription] | None = None,
        model_sets: dict[int, tuple[str, ...]] | None = None,
    ) -> None:
        """Initialize the database from grasps keyed by model ID, then by hand name.

        :param grasps: Stored grasps of each model, keyed by hand name
        :param descriptions: Descriptions of the models (models without one get an empty description)
        :param model_sets: Names of the model sets each model belongs to
        """
        self.grasps = grasps
        self.descriptions = descriptions or {}
        self.model_sets = model_sets or {}

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> YamlGraspDatabase:
        """Load a grasp database from the given YAML file."""
        yaml_data = load_yaml_data(yaml_path, required_keys={"models"})

        grasps: dict[int, dict[str, list[GraspRecord]]] = {}
        descriptions: dict[int, ModelDescription] = {}
        model_sets: dict[int, tuple[str, ...]] = {}
        for model_key, model_data in yaml_data["models"].items():
            model_id = int(model_key)
            model_frame = model_data.get("frame", DEFAULT_MODEL_FRAME)
            grasps[model_id] = {
                str(hand_id): [GraspRecord.from_yaml_data(g, model_frame) for g in hand_grasps]
                for hand_id, hand_grasps in model_data.get("grasps", {}).items()
            }
            descriptions[model_id] = ModelDescription.from_yaml_data(model_id, model_data)
            model_sets[model_id] = tuple(str(s) for s in model_data.get("sets", []))

        return cls(grasps, descriptions, model_sets)

    @property
    def model_ids(self) -> list[int]:
        """Retrieve the sorted IDs of all models in the database."""
        return sorted(self.grasps)

    def get_cluster_rep_grasps(self, model_id: int, hand_id: str) -> list[GraspRecord]:
        """Retrieve the grasps stored for a model and the named hand.

        :param model_id: Database ID of the scaled object model
        :param hand_id: Database name of the hand
        :return: Copy of the list of grasps stored for the model and hand (possibly empty)
        :raises QueryError: If the model does not exist in the database
        """
        if model_id not in self.grasps:
            raise QueryError(f"Database query error: no model with ID {model_id}")

        return list(self.grasps[model_id].get(hand_id, []))

    def get_scaled_model_ids(self, model_set: str) -> list[int]:
        """Retrieve the sorted IDs of the models in the named set.

        :param model_set: Name of the model set (if empty, every model is listed)
        :return: Sorted model IDs (empty if no model belongs to the set)
        """
        if not model_set:
            return self.model_ids
        return [m for m in self.model_ids if model_set in self.model_sets.get(m, ())]

    def get_model_description(self, model_id: int) -> ModelDescription:
        """Retrieve the description of the model with the given ID.

        :raises QueryError: If the model does not exist in the database
        """
        if model_id not in self.grasps:
            raise QueryError(f"Database query error: no model with ID {model_id}")

        return self.descriptions.get(model_id, ModelDescription(model_id))
