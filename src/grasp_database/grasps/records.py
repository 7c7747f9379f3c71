"""Define data structures for database grasps and the hand-specific grasps derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from grasp_database.spatial import Pose3D

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class GraspRecord:
    """A candidate grasp as stored in the objects database.

    Joint angles use the database's generic encoding for the hand, which may differ from the
    joint convention of the hand that eventually executes the grasp.
    """

    quality: float
    """Raw grasp quality (more negative values are better)."""

    scaled_quality: float
    """Quality rescaled into [0, 1], reported as the grasp's success probability."""

    pre_grasp_joint_angles: tuple[float, ...]
    final_grasp_joint_angles: tuple[float, ...]

    final_grasp_pose: Pose3D
    """Pose of the hand at the final grasp w.r.t. the object model frame."""

    grasp_id: int | None = None
    table_clearance: float | None = None
    """Clearance between the grasp and the supporting table (stored in millimeters)."""

    @classmethod
    def from_yaml_data(cls, grasp_data: dict[str, Any], model_frame: str) -> GraspRecord:
        """Construct a GraspRecord from a dictionary of data imported from YAML.

        :param grasp_data: Dictionary describing a single database grasp
        :param model_frame: Frame of the object model, used if the grasp pose has no frame
        :return: Constructed GraspRecord instance
        """
        return GraspRecord(
            quality=float(grasp_data["quality"]),
            scaled_quality=float(grasp_data["scaled_quality"]),
            pre_grasp_joint_angles=tuple(float(a) for a in grasp_data["pre_grasp_joint_angles"]),
            final_grasp_joint_angles=tuple(float(a) for a in grasp_data["final_grasp_joint_angles"]),
            final_grasp_pose=Pose3D.from_yaml_data(grasp_data["final_grasp_pose"], model_frame),
            grasp_id=grasp_data.get("grasp_id"),
            table_clearance=grasp_data.get("table_clearance"),
        )


@dataclass(frozen=True)
class JointPosture:
    """Named joint positions and efforts describing one configuration of a hand."""

    joint_names: tuple[str, ...]
    positions: tuple[float, ...]
    efforts: tuple[float, ...]

    def __post_init__(self) -> None:
        """Verify that the names, positions, and efforts describe the same joints."""
        if not len(self.joint_names) == len(self.positions) == len(self.efforts):
            raise ValueError(
                f"JointPosture expects equal lengths, got {len(self.joint_names)} names, "
                f"{len(self.positions)} positions, and {len(self.efforts)} efforts.",
            )

    @classmethod
    def with_uniform_effort(
        cls,
        joint_names: Sequence[str],
        positions: Sequence[float],
        effort: float,
    ) -> JointPosture:
        """Construct a posture in which every joint is commanded with the same effort."""
        return JointPosture(
            joint_names=tuple(joint_names),
            positions=tuple(float(p) for p in positions),
            efforts=(float(effort),) * len(joint_names),
        )


@dataclass(frozen=True)
class HandPostures:
    """The pre-grasp and grasp postures of a hand for a single grasp."""

    pre_grasp: JointPosture
    grasp: JointPosture


@dataclass(frozen=True)
class MappedGrasp:
    """A database grasp expressed for a specific hand and reference frame."""

    pre_grasp_posture: JointPosture
    grasp_posture: JointPosture
    grasp_pose: Pose3D
    success_probability: float
    desired_approach_distance_m: float
    min_approach_distance_m: float


@dataclass(frozen=True)
class DatabaseModelPose:
    """A recognized database model and its detected pose w.r.t. the detection frame."""

    model_id: int
    pose: Pose3D
