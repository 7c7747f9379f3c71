"""Define strategies that map database joint-angle encodings onto specific robot hands.

The database stores each grasp's hand configuration in a generic encoding per hand model.
Each hand family converts that encoding into positions for its own named joints.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from grasp_database.errors import MappingError, MappingErrorKind
from grasp_database.grasps.records import HandPostures, JointPosture

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grasp_database.grasps.records import GraspRecord

DEFAULT_GRASP_EFFORT = 50.0
DEFAULT_PRE_GRASP_EFFORT = 100.0


@dataclass(frozen=True)
class JointLimits:
    """Specifies the position limits (in radians) of a single hand joint."""

    lower_rad: float
    upper_rad: float

    def clamp(self, angle_rad: float) -> float:
        """Clamp the given joint angle (radians) into the joint's limits."""
        return float(np.clip(angle_rad, self.lower_rad, self.upper_rad))


class HandPostureMapper(ABC):
    """An interface for converting database grasps into postures of a specific hand."""

    def __init__(
        self,
        grasp_effort: float = DEFAULT_GRASP_EFFORT,
        pre_grasp_effort: float = DEFAULT_PRE_GRASP_EFFORT,
    ) -> None:
        """Initialize the mapper with the efforts commanded for every hand joint.

        :param grasp_effort: Effort applied by each joint in the grasp posture
        :param pre_grasp_effort: Effort applied by each joint in the pre-grasp posture
        """
        self.grasp_effort = grasp_effort
        self.pre_grasp_effort = pre_grasp_effort

    @abstractmethod
    def validate_joint_counts(self, joint_names: tuple[str, ...], num_values: int) -> None:
        """Verify that the hand's joints are compatible with the database encoding's length.

        :param joint_names: Names of the hand's joints, in canonical order
        :param num_values: Number of values in the database's joint-angle vectors
        :raises MappingError: If the hand and the database encoding don't match
        """
        ...

    @abstractmethod
    def map_joint_angles(self, angles: tuple[float, ...], joint_names: tuple[str, ...]) -> list[float]:
        """Convert database joint angles into positions for each of the hand's joints."""
        ...

    def map_postures(self, record: GraspRecord, joint_names: Sequence[str]) -> HandPostures:
        """Map the pre-grasp and final-grasp joint angles of a database grasp onto the hand.

        :param record: Grasp retrieved from the database
        :param joint_names: Names of the hand's joints, in canonical order
        :return: Pre-grasp and grasp postures with positions and efforts for every joint
        :raises MappingError: If the grasp cannot be expressed for this hand
        """
        names = tuple(joint_names)
        pre_angles = record.pre_grasp_joint_angles
        final_angles = record.final_grasp_joint_angles

        if not pre_angles or not final_angles:
            raise MappingError(
                MappingErrorKind.UNSUPPORTED_ENCODING,
                "Database grasp specifies no joint angles",
            )

        if len(pre_angles) != len(final_angles):
            raise MappingError(
                MappingErrorKind.JOINT_COUNT_MISMATCH,
                f"Database grasp has {len(pre_angles)} pre-grasp values but "
                f"{len(final_angles)} final grasp values",
            )

        self.validate_joint_counts(names, len(final_angles))

        pre_positions = self.map_joint_angles(pre_angles, names)
        final_positions = self.map_joint_angles(final_angles, names)

        # Only values the hand actually uses must be finite
        for positions in (pre_positions, final_positions):
            if not np.all(np.isfinite(positions)):
                raise MappingError(
                    MappingErrorKind.UNSUPPORTED_ENCODING,
                    f"Database grasp maps to non-finite joint positions: {positions}",
                )

        pre_grasp = JointPosture.with_uniform_effort(names, pre_positions, self.pre_grasp_effort)
        grasp = JointPosture.with_uniform_effort(names, final_positions, self.grasp_effort)
        return HandPostures(pre_grasp=pre_grasp, grasp=grasp)


class SchunkHandMapper(HandPostureMapper):
    """Maps the database's 8-value encoding onto the 7 joints of the Schunk dexterous hand."""

    NUM_JOINTS: ClassVar[int] = 7
    NUM_DATABASE_VALUES: ClassVar[int] = 8

    DATABASE_INDICES: ClassVar[tuple[int, ...]] = (0, 6, 7, 1, 2, 3, 4)
    """Index of the database value used for each hand joint."""

    JOINT_LIMITS: ClassVar[tuple[JointLimits, ...]] = (
        JointLimits(0.0, 1.5707),
        *(JointLimits(-1.5707, 1.5707) for _ in range(6)),
    )

    def validate_joint_counts(self, joint_names: tuple[str, ...], num_values: int) -> None:
        """Verify that the hand has 7 joints and the database grasp specifies 8 values."""
        if len(joint_names) != self.NUM_JOINTS:
            raise MappingError(
                MappingErrorKind.JOINT_COUNT_MISMATCH,
                f"Hardcoded Schunk hand expects to have {self.NUM_JOINTS} joints, "
                f"got {len(joint_names)}",
            )
        if num_values != self.NUM_DATABASE_VALUES:
            raise MappingError(
                MappingErrorKind.JOINT_COUNT_MISMATCH,
                f"Hardcoded database model of Schunk hand expected to have "
                f"{self.NUM_DATABASE_VALUES} joints, got {num_values}",
            )

    def map_joint_angles(self, angles: tuple[float, ...], joint_names: tuple[str, ...]) -> list[float]:
        """Reorder the database values into hand joint order and clamp them to joint limits."""
        return [
            limits.clamp(angles[db_index])
            for db_index, limits in zip(self.DATABASE_INDICES, self.JOINT_LIMITS)
        ]


class WillowGripperMapper(HandPostureMapper):
    """Maps the single-DOF database encoding onto the 4 joints of the PR2 parallel gripper."""

    NUM_JOINTS: ClassVar[int] = 4

    def validate_joint_counts(self, joint_names: tuple[str, ...], num_values: int) -> None:
        """Verify that the gripper has 4 joints and the database grasp specifies 1 value."""
        if len(joint_names) != self.NUM_JOINTS or num_values != 1:
            raise MappingError(
                MappingErrorKind.JOINT_COUNT_MISMATCH,
                f"PR2 gripper specs and database grasp specs do not match expected values: "
                f"{len(joint_names)} joints and {num_values} database values",
            )

    def map_joint_angles(self, angles: tuple[float, ...], joint_names: tuple[str, ...]) -> list[float]:
        """Replicate the single database value across every gripper joint."""
        return [angles[0]] * len(joint_names)


class PositionalHandMapper(HandPostureMapper):
    """Copies database values onto hand joints, assuming both share the same joint order."""

    def validate_joint_counts(self, joint_names: tuple[str, ...], num_values: int) -> None:
        """Verify that the hand has exactly one joint per database value."""
        if len(joint_names) != num_values:
            raise MappingError(
                MappingErrorKind.JOINT_COUNT_MISMATCH,
                f"Database grasp specification does not match description of hand. Hand is "
                f"expected to have {len(joint_names)} joints, but database grasp specifies "
                f"{num_values} values",
            )

    def map_joint_angles(self, angles: tuple[float, ...], joint_names: tuple[str, ...]) -> list[float]:
        """Copy the database values positionally."""
        return list(angles)


HAND_MAPPERS: dict[str, type[HandPostureMapper]] = {
    "Schunk": SchunkHandMapper,
    "WILLOW_GRIPPER_2010": WillowGripperMapper,
}
"""Hand-specific mappers, keyed by the database name of the hand."""


def get_hand_mapper(
    hand_id: str,
    grasp_effort: float = DEFAULT_GRASP_EFFORT,
    pre_grasp_effort: float = DEFAULT_PRE_GRASP_EFFORT,
) -> HandPostureMapper:
    """Construct the posture mapper for the hand with the given database name.

    Hands without a dedicated mapper use positional copying.

    :param hand_id: Database name of the hand (matched exactly)
    :param grasp_effort: Effort applied by each joint in the grasp posture
    :param pre_grasp_effort: Effort applied by each joint in the pre-grasp posture
    :return: Mapper used to convert database grasps into postures of the hand
    """
    mapper_t = HAND_MAPPERS.get(hand_id, PositionalHandMapper)
    return mapper_t(grasp_effort=grasp_effort, pre_grasp_effort=pre_grasp_effort)
