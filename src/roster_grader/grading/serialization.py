"""
Module: grading.serialization

Purpose:
    Render annotated records as the output roster text.

Key Functions:
    - serialize(): Header plus one ``name, score, grade`` line per record

Notes:
    Names are written as-is. A name containing a comma produces a row
    that will not re-parse to the same name.
"""

from __future__ import annotations

from typing import Iterable

from roster_grader.core.models.records import AnnotatedRecord

OUTPUT_HEADER = "Name, Marks, Grade"


def format_row(record: AnnotatedRecord) -> str:
    """Format one output line (without newline)."""
    return f"{record.name}, {record.score!r}, {record.grade}"


def serialize(records: Iterable[AnnotatedRecord]) -> str:
    """
    Serialize records in the order given.

    Returns:
        Output text, newline-terminated

    Example:
        >>> serialize([Record("Alice", 90).annotate("A+")])
        'Name, Marks, Grade\\nAlice, 90.0, A+\\n'
    """
    lines = [OUTPUT_HEADER]
    lines.extend(format_row(r) for r in records)
    return "\n".join(lines) + "\n"
