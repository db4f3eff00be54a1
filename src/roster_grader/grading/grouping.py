"""
Module: grading.grouping

Purpose:
    Partition annotated records by grade label.

Key Functions:
    - group(): Build distribution counts and per-grade groups in one pass

Key Classes:
    - GradeGroups: Read-only distribution + groups with a lookup query

Used By:
    - grading.processor
    - gui.main_window: drill-down on bar click
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from roster_grader.core.models.records import AnnotatedRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeGroups:
    """
    Grade distribution and the records behind each count.

    Both mappings iterate in first-encounter order of each label, and
    records inside a group keep their input order.

    Attributes:
        distribution: Label -> number of records
        groups: Label -> records holding that label
    """

    distribution: Mapping[str, int]
    groups: Mapping[str, Tuple[AnnotatedRecord, ...]]

    def lookup(self, grade: str) -> Tuple[AnnotatedRecord, ...]:
        """
        Records holding ``grade``, in input order.

        Unknown labels (including ladder labels nobody earned) give an
        empty tuple.
        """
        return self.groups.get(grade, ())

    @property
    def total(self) -> int:
        """Number of records across all groups."""
        return sum(self.distribution.values())


def group(records: Iterable[AnnotatedRecord]) -> GradeGroups:
    """
    Count and collect records per grade in a single pass.

    Args:
        records: Annotated records in input order

    Returns:
        GradeGroups with read-only views

    Example:
        >>> g = group([Record("A", 90).annotate("A+"), Record("B", 70).annotate("B+")])
        >>> dict(g.distribution)
        {'A+': 1, 'B+': 1}
    """
    distribution: Dict[str, int] = {}
    members: Dict[str, List[AnnotatedRecord]] = {}

    for record in records:
        distribution[record.grade] = distribution.get(record.grade, 0) + 1
        members.setdefault(record.grade, []).append(record)

    logger.info(f"Grade distribution: {distribution}")
    return GradeGroups(
        distribution=MappingProxyType(distribution),
        groups=MappingProxyType({label: tuple(rs) for label, rs in members.items()}),
    )
