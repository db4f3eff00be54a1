"""
Module: grading.statistics

Purpose:
    Compute mean and population standard deviation of roster scores.

Key Functions:
    - compute_statistics(): Summarise a non-empty record set

Key Classes:
    - EmptyInputError: Raised when there is nothing to summarise
"""

from __future__ import annotations

import logging
import statistics
from typing import Sequence

from roster_grader.core.models.records import Record
from roster_grader.core.models.statistics import Statistics

logger = logging.getLogger(__name__)


class EmptyInputError(Exception):
    """No records to compute statistics over."""
    pass


def compute_statistics(records: Sequence[Record]) -> Statistics:
    """
    Compute mean and population standard deviation of all scores.

    The population form divides the summed squared deviations by the
    record count, not count - 1. If every score is identical the
    deviation is exactly zero.

    Args:
        records: All loaded records

    Returns:
        Statistics for the record set

    Raises:
        EmptyInputError: If records is empty

    Example:
        >>> s = compute_statistics([Record("A", 90), Record("B", 70), Record("C", 50)])
        >>> s.mean, round(s.stddev, 2)
        (70.0, 16.33)
    """
    if not records:
        raise EmptyInputError("Cannot compute statistics for an empty roster")

    scores = [r.score for r in records]
    mean = float(statistics.mean(scores))
    stddev = float(statistics.pstdev(scores))

    result = Statistics(mean=mean, stddev=stddev, count=len(scores))
    logger.info(f"Computed statistics over {result.count} records: mean={mean:.2f}, stddev={stddev:.2f}")
    return result
