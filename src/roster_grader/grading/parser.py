"""
Module: grading.parser

Purpose:
    Parse comma-delimited roster text into Record objects.

Key Functions:
    - parse_rows(): Parse an iterable of lines (header first)
    - parse_text(): Convenience wrapper for a whole document

Key Classes:
    - ParseError: Exception for malformed rows

Used By:
    - grading.io.read_roster
    - grading.processor.RosterProcessor
"""

from __future__ import annotations

import io
import logging
import math
from typing import Iterable, List

from roster_grader.core.models.records import Record

logger = logging.getLogger(__name__)

DELIMITER = ","


class ParseError(Exception):
    """Malformed roster row."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def parse_rows(lines: Iterable[str]) -> List[Record]:
    """
    Parse roster lines into records.

    The first line is a header and is skipped without looking at it.
    Each following line must be ``name,score``; both fields are trimmed,
    and any fields after the score are ignored. One bad row aborts the
    whole parse.

    Args:
        lines: Lines of text, with or without trailing newlines

    Returns:
        Records in input order (empty if only a header, or nothing, was given)

    Raises:
        ParseError: If a row has fewer than two fields or a non-numeric score

    Example:
        >>> parse_rows(["Name,Marks", "Alice, 90"])
        [Record(name='Alice', score=90.0)]
    """
    records: List[Record] = []
    iterator = iter(lines)

    # Header is skipped unconditionally
    if next(iterator, None) is None:
        logger.debug("Roster input is empty")
        return records

    for line_number, raw in enumerate(iterator, start=2):
        line = raw.rstrip("\r\n")
        records.append(_parse_row(line, line_number))

    logger.debug(f"Parsed {len(records)} roster rows")
    return records


def parse_text(text: str) -> List[Record]:
    """
    Parse a whole roster document.

    Lines break on \\n, \\r and \\r\\n only, the same as reading a file.
    A trailing newline adds no row.
    """
    return parse_rows(io.StringIO(text, newline=""))


def _parse_row(line: str, line_number: int) -> Record:
    fields = line.split(DELIMITER)
    if len(fields) < 2:
        raise ParseError(
            f"expected 'name,score' but found {len(fields)} field(s): {line!r}",
            line_number=line_number,
            line=line,
        )

    name = fields[0].strip()
    score_text = fields[1].strip()
    try:
        score = float(score_text)
    except ValueError:
        raise ParseError(
            f"score is not numeric: {score_text!r}",
            line_number=line_number,
            line=line,
        ) from None

    # float() also accepts nan and inf
    if not math.isfinite(score):
        raise ParseError(
            f"score is not a finite number: {score_text!r}",
            line_number=line_number,
            line=line,
        )

    return Record(name=name, score=score)
