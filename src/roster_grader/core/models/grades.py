"""
Module: grades

Purpose:
    Provides the grade ladder - the ordered threshold table mapping a
    score's distance from the mean (in standard deviations) to a label.

Key Classes:
    - GradeThreshold: One rung of the ladder (label, multiplier)
    - GradeLadder: Ordered rungs plus the fallback label

Key Constants:
    - DEFAULT_LADDER: O / A+ / A / B+ / B / Fail
    - GRADE_LABELS: Labels of DEFAULT_LADDER, best first

Used By:
    - grading.classification
    - grading.config
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class GradeThreshold:
    """
    A ladder rung: scores at or above ``mean + multiplier * stddev`` earn
    ``label`` unless a higher rung matched first.
    """

    label: str
    multiplier: float

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Grade label cannot be empty")


@dataclass(frozen=True, slots=True)
class GradeLadder:
    """
    Ordered grade thresholds, evaluated top-down, first match wins.

    Attributes:
        thresholds: Rungs ordered by strictly decreasing multiplier
        fallback: Label for scores below the lowest rung

    Invariants:
        - at least one threshold
        - multipliers strictly decreasing
        - all labels (fallback included) distinct
    """

    thresholds: Tuple[GradeThreshold, ...]
    fallback: str

    def __post_init__(self) -> None:
        """Validate ladder on construction."""
        if not self.thresholds:
            raise ValueError("Grade ladder needs at least one threshold")
        if not self.fallback:
            raise ValueError("Fallback grade label cannot be empty")

        multipliers = [t.multiplier for t in self.thresholds]
        for upper, lower in zip(multipliers, multipliers[1:]):
            if lower >= upper:
                raise ValueError(
                    f"Threshold multipliers must be strictly decreasing: {multipliers}"
                )

        labels = self.labels
        if len(set(labels)) != len(labels):
            raise ValueError(f"Grade labels must be distinct: {labels}")

    @property
    def labels(self) -> Tuple[str, ...]:
        """Every label this ladder can produce, best first."""
        return tuple(t.label for t in self.thresholds) + (self.fallback,)


DEFAULT_LADDER = GradeLadder(
    thresholds=(
        GradeThreshold("O", 2.0),
        GradeThreshold("A+", 1.2),
        GradeThreshold("A", 0.5),
        GradeThreshold("B+", -0.2),
        GradeThreshold("B", -1.5),
    ),
    fallback="Fail",
)

GRADE_LABELS: Tuple[str, ...] = DEFAULT_LADDER.labels
