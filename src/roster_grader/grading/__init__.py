"""
Module: grading

Purpose:
    Roster grading pipeline: parse scores, compute mean and standard
    deviation, grade each student on the ladder, group by grade and
    write the annotated roster.

Key Functions:
    - grade_roster(): Run the whole pipeline on a file
    - parse_rows(), compute_statistics(), classify(), group(), serialize()

Used By:
    - gui.app: launcher
"""

from .config import GradingConfig
from .parser import parse_rows, parse_text, ParseError
from .statistics import compute_statistics, EmptyInputError
from .classification import classify, annotate
from .grouping import group, GradeGroups
from .serialization import serialize, OUTPUT_HEADER
from .io import read_roster, write_results, RosterIOError
from .processor import (
    grade_roster,
    GradingResult,
    RosterProcessor,
    ProcessingStage,
    InvalidStateError,
)

__all__ = [
    "GradingConfig",
    "parse_rows",
    "parse_text",
    "ParseError",
    "compute_statistics",
    "EmptyInputError",
    "classify",
    "annotate",
    "group",
    "GradeGroups",
    "serialize",
    "OUTPUT_HEADER",
    "read_roster",
    "write_results",
    "RosterIOError",
    "grade_roster",
    "GradingResult",
    "RosterProcessor",
    "ProcessingStage",
    "InvalidStateError",
]
