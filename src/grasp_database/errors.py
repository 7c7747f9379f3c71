"""Define the exceptions and return codes used when planning grasps from the database."""

from __future__ import annotations

from enum import Enum


class PlanningErrorCode(Enum):
    """Request-level outcome of a grasp planning request or a model query."""

    SUCCESS = "success"
    NO_CANDIDATES = "no_candidates"
    QUERY_ERROR = "query_error"
    FRAME_RESOLUTION_ERROR = "frame_resolution_error"
    DATABASE_NOT_CONNECTED = "database_not_connected"


class GraspPlanningError(Exception):
    """Base class for errors raised while planning grasps from the database."""

    error_code = PlanningErrorCode.SUCCESS


class NoCandidatesError(GraspPlanningError):
    """Raised when a request provides no candidate grasps or models to plan with."""

    error_code = PlanningErrorCode.NO_CANDIDATES


class QueryError(GraspPlanningError):
    """Raised when the grasp database fails to answer a query."""

    error_code = PlanningErrorCode.QUERY_ERROR


class FrameResolutionError(GraspPlanningError):
    """Raised when the transform between the detection and reference frames is unavailable."""

    error_code = PlanningErrorCode.FRAME_RESOLUTION_ERROR


class DatabaseNotConnectedError(GraspPlanningError):
    """Raised when grasp planning or a model query is requested without a database connection."""

    error_code = PlanningErrorCode.DATABASE_NOT_CONNECTED


class MappingErrorKind(Enum):
    """Reasons why a database grasp cannot be mapped onto a hand."""

    JOINT_COUNT_MISMATCH = "joint_count_mismatch"
    UNSUPPORTED_ENCODING = "unsupported_encoding"


class MappingError(ValueError):
    """Raised when a single database grasp cannot be mapped onto the requesting hand.

    Mapping errors only invalidate one grasp; the planning pipeline skips it and continues.
    """

    def __init__(self, kind: MappingErrorKind, message: str) -> None:
        """Initialize the error with its kind and a human-readable message."""
        super().__init__(message)
        self.kind = kind
