"""
Module: statistics

Purpose:
    Provides the Statistics dataclass - mean and population standard
    deviation of a roster's scores, derived once after loading.

Key Classes:
    - Statistics: Immutable summary used by the grade ladder

Used By:
    - grading.statistics.compute_statistics: creates it
    - grading.classification: reads thresholds from it
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Statistics:
    """
    Aggregate statistics for a roster.

    Attributes:
        mean: Arithmetic mean of all scores
        stddev: Population standard deviation (divides by count)
        count: Number of records summarised

    Invariants:
        - stddev >= 0
        - count >= 1
    """

    mean: float
    stddev: float
    count: int

    def __post_init__(self) -> None:
        """Validate statistics on construction."""
        if self.stddev < 0:
            raise ValueError(f"Standard deviation cannot be negative: {self.stddev}")
        if self.count < 1:
            raise ValueError(f"Statistics need at least one record, got {self.count}")

    def threshold(self, multiplier: float) -> float:
        """Score lying ``multiplier`` standard deviations from the mean."""
        return self.mean + multiplier * self.stddev

    def __repr__(self) -> str:
        return f"Statistics(mean={self.mean:.4g}, stddev={self.stddev:.4g}, n={self.count})"
