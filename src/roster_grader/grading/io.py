"""
Module: grading.io

Purpose:
    Read roster files and write graded results to disk.

Key Functions:
    - read_roster(): Open and parse a roster file
    - write_results(): Atomically write the annotated roster

Key Classes:
    - RosterIOError: File open/read/write failure

Dependencies:
    - tempfile (std): temp file beside the destination for atomic replace

Used By:
    - grading.processor
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import List, Sequence

from roster_grader.core.models.records import AnnotatedRecord, Record

from .parser import parse_rows
from .serialization import serialize

logger = logging.getLogger(__name__)


class RosterIOError(Exception):
    """Error reading or writing a roster file."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def read_roster(path: Path, encoding: str = "utf-8") -> List[Record]:
    """
    Read and parse a roster file.

    The file is closed before returning, whether parsing succeeds or not.

    Args:
        path: Roster file (header line, then ``name,score`` rows)
        encoding: Text encoding of the file

    Returns:
        Records in file order

    Raises:
        RosterIOError: If the file cannot be opened or decoded
        ParseError: If any row is malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            records = parse_rows(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RosterIOError(f"Failed to read roster {path}: {e}", path) from e

    logger.info(f"Loaded {len(records)} records from {path}")
    return records


def write_results(
    records: Sequence[AnnotatedRecord],
    path: Path,
    encoding: str = "utf-8",
) -> Path:
    """
    Write annotated records to ``path``.

    Output is written to a temp file in the destination directory and
    then moved over ``path``, so a failed write never leaves a partial
    file behind.

    Args:
        records: Annotated records in input order
        path: Destination file
        encoding: Text encoding of the output

    Returns:
        The path written

    Raises:
        RosterIOError: If the file cannot be written
    """
    path = Path(path)
    text = serialize(records)
    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
            encoding=encoding,
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
        temp_path.replace(path)
    except (OSError, UnicodeEncodeError) as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise RosterIOError(f"Failed to write results to {path}: {e}", path) from e

    logger.info(f"Wrote {len(records)} graded records to {path}")
    return path
