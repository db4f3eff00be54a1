"""
Core Models Package

Immutable data models shared by the grading pipeline and the GUI.

All models in this package are frozen dataclasses: a record is annotated
by creating a new AnnotatedRecord, never by mutating the Record.
"""

from .records import Record, AnnotatedRecord
from .statistics import Statistics
from .grades import GradeThreshold, GradeLadder, DEFAULT_LADDER, GRADE_LABELS

__all__ = [
    "Record",
    "AnnotatedRecord",
    "Statistics",
    "GradeThreshold",
    "GradeLadder",
    "DEFAULT_LADDER",
    "GRADE_LABELS",
]
