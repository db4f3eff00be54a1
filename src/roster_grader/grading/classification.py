"""
Module: grading.classification

Purpose:
    Assign grade labels by walking the grade ladder top-down.

Key Functions:
    - classify(): Label for a single score
    - annotate(): Label every record, preserving input order

Dependencies:
    - roster_grader.core.models: Statistics, GradeLadder, records
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from roster_grader.core.models.grades import DEFAULT_LADDER, GradeLadder
from roster_grader.core.models.records import AnnotatedRecord, Record
from roster_grader.core.models.statistics import Statistics

logger = logging.getLogger(__name__)


def classify(score: float, stats: Statistics, ladder: GradeLadder = DEFAULT_LADDER) -> str:
    """
    Return the grade label for ``score``.

    Rungs are tested in ladder order and the first one whose threshold
    (``mean + multiplier * stddev``) the score reaches wins. Scores below
    every rung get the fallback label. With a zero standard deviation
    every threshold equals the mean, so a roster of identical scores is
    graded entirely at the top rung.

    Example:
        >>> stats = Statistics(mean=70.0, stddev=16.33, count=3)
        >>> classify(90.0, stats)
        'A+'
    """
    for rung in ladder.thresholds:
        if score >= stats.threshold(rung.multiplier):
            return rung.label
    return ladder.fallback


def annotate(
    records: Sequence[Record],
    stats: Statistics,
    ladder: GradeLadder = DEFAULT_LADDER,
) -> List[AnnotatedRecord]:
    """Classify every record, keeping input order."""
    annotated = []
    for record in records:
        grade = classify(record.score, stats, ladder)
        logger.debug(f"{record.name}: {record.score} -> {grade}")
        annotated.append(record.annotate(grade))
    return annotated
