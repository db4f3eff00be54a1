"""
Module: records

Purpose:
    Provides the Record and AnnotatedRecord dataclasses - one row of a
    class roster before and after a grade has been assigned.

Key Classes:
    - Record: (name, score) pair read from the roster file
    - AnnotatedRecord: Record extended with its grade label

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - grading.parser: creates Records
    - grading.classification: creates AnnotatedRecords
    - grading.grouping, grading.serialization, gui
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Record:
    """
    A single student row from the roster.

    Attributes:
        name: Student name, already trimmed
        score: Numeric score

    Invariants:
        - score is finite

    Example:
        >>> r = Record("Alice", 90.0)
        >>> r.annotate("A+").grade
        'A+'
    """

    name: str
    score: float

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if not math.isfinite(self.score):
            raise ValueError(f"Score must be finite: {self.score!r}")
        # Integers are accepted and stored as floats
        object.__setattr__(self, "score", float(self.score))

    def annotate(self, grade: str) -> AnnotatedRecord:
        """Return a copy of this record carrying ``grade``."""
        return AnnotatedRecord(name=self.name, score=self.score, grade=grade)


@dataclass(frozen=True, slots=True)
class AnnotatedRecord(Record):
    """
    Record plus the grade label assigned during classification.

    Attributes:
        grade: One label from the grade ladder in use
    """

    grade: str

    @property
    def record(self) -> Record:
        """The underlying (name, score) pair without its grade."""
        return Record(name=self.name, score=self.score)

    def __str__(self) -> str:
        return f"Name: {self.name}, Marks: {self.score}, Grade: {self.grade}"
