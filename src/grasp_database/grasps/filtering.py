"""Define functions to prune database grasps before they are mapped onto a hand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from grasp_database.io.logging import log_info

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grasp_database.grasps.records import GraspRecord


@dataclass(frozen=True)
class PruneResult:
    """Grasps that survived pruning and the number of grasps that were discarded."""

    kept: list[GraspRecord]
    num_pruned: int


def prune_grasp_list(records: Sequence[GraspRecord], quality_cutoff: float) -> PruneResult:
    """Discard grasps whose database quality is not strictly below the given cutoff.

    Database qualities are inverted: more negative values are better. Relative order is kept.

    :param records: Grasps retrieved from the database
    :param quality_cutoff: Grasps with quality greater than or equal to this value are discarded
    :return: Surviving grasps (in their original order) and the number of discarded grasps
    """
    kept = [record for record in records if record.quality < quality_cutoff]
    num_pruned = len(records) - len(kept)

    log_info(f"Database grasp planner: pruned {num_pruned} grasps with quality >= {quality_cutoff}")
    return PruneResult(kept=kept, num_pruned=num_pruned)
