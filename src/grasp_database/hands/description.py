"""Define how the hand attached to each arm is described to the grasp planner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from grasp_database.io.yaml_utils import load_yaml_data

if TYPE_CHECKING:
    from pathlib import Path


class HandDescription(Protocol):
    """An interface for resolving the hand attached to a named arm."""

    def hand_database_name(self, arm_name: str) -> str:
        """Retrieve the name under which the arm's hand is stored in the grasp database."""
        ...

    def hand_joint_names(self, arm_name: str) -> list[str]:
        """Retrieve the names of the hand's joints, in canonical order."""
        ...


@dataclass(frozen=True)
class HandSpec:
    """Database name and joint names of one robot hand."""

    database_name: str
    joint_names: tuple[str, ...]

    @classmethod
    def from_yaml_data(cls, arm_name: str, hand_data: dict[str, Any]) -> HandSpec:
        """Construct a HandSpec from the hand-description data of one arm.

        :param arm_name: Name of the arm the hand is attached to (used in error messages)
        :param hand_data: Dictionary with `hand_database_name` and `hand_joints` entries
        :return: Constructed HandSpec instance
        :raises ValueError: If the hand's joints are not given as a list of strings
        """
        joints = hand_data["hand_joints"]
        if not isinstance(joints, list) or not all(isinstance(j, str) for j in joints):
            raise ValueError(f"Hand description: bad parameter /hand_description/{arm_name}/hand_joints")

        return HandSpec(database_name=str(hand_data["hand_database_name"]), joint_names=tuple(joints))


class StaticHandDescription:
    """Describes a fixed set of hands, keyed by the name of the arm each is attached to."""

    def __init__(self, hands: dict[str, HandSpec]) -> None:
        """Initialize the hand description from a map of arm names to hand specifications."""
        self.hands = dict(hands)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> StaticHandDescription:
        """Load hand descriptions laid out as on the ROS parameter server.

        Expected layout: `hand_description: {<arm>: {hand_database_name, hand_joints}}`
        """
        yaml_data = load_yaml_data(yaml_path, required_keys={"hand_description"})
        return cls(
            {
                arm_name: HandSpec.from_yaml_data(arm_name, hand_data)
                for arm_name, hand_data in yaml_data["hand_description"].items()
            },
        )

    def _get_spec(self, arm_name: str) -> HandSpec:
        """Retrieve the specification of the hand attached to the named arm.

        :raises KeyError: If no hand is described for the arm
        """
        if arm_name not in self.hands:
            raise KeyError(f"Hand description: could not find a hand for arm '{arm_name}'")
        return self.hands[arm_name]

    def hand_database_name(self, arm_name: str) -> str:
        """Retrieve the name under which the arm's hand is stored in the grasp database."""
        return self._get_spec(arm_name).database_name

    def hand_joint_names(self, arm_name: str) -> list[str]:
        """Retrieve the names of the hand's joints, in canonical order."""
        return list(self._get_spec(arm_name).joint_names)
