"""
Roster Grader Core Package

Shared data models for the grading pipeline and the display layer.
"""

from .models import (
    Record,
    AnnotatedRecord,
    Statistics,
    GradeThreshold,
    GradeLadder,
    DEFAULT_LADDER,
    GRADE_LABELS,
)

__all__ = [
    "Record",
    "AnnotatedRecord",
    "Statistics",
    "GradeThreshold",
    "GradeLadder",
    "DEFAULT_LADDER",
    "GRADE_LABELS",
]
