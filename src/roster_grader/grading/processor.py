"""
Module: grading.processor

Purpose:
    Orchestrate the grading pipeline.
    Load → Compute → Classify (+ group) → Serialize

Key Functions:
    - grade_roster(): Main entry point for grading a roster file

Key Classes:
    - RosterProcessor: Stage-ordered processor for one run
    - ProcessingStage: Pipeline states
    - GradingResult: Complete, immutable run result
    - InvalidStateError: Stage invoked out of order

Dependencies:
    - grading.io: file access
    - grading.statistics, grading.classification, grading.grouping

Used By:
    - gui.app: launcher
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple

from roster_grader.core.models.records import AnnotatedRecord, Record
from roster_grader.core.models.statistics import Statistics

from .classification import annotate
from .config import GradingConfig
from .grouping import GradeGroups, group
from .io import read_roster, write_results
from .parser import parse_rows
from .serialization import serialize
from .statistics import compute_statistics

logger = logging.getLogger(__name__)


class InvalidStateError(Exception):
    """Pipeline stage called before the stage it depends on."""
    pass


class ProcessingStage(IntEnum):
    """Pipeline states, in the only order they may be reached."""
    UNLOADED = 0
    LOADED = 1
    COMPUTED = 2
    CLASSIFIED = 3
    SERIALIZED = 4


@dataclass(frozen=True)
class GradingResult:
    """
    Complete grading result (immutable).

    Attributes:
        records: Annotated records in input order
        statistics: Mean and standard deviation of the roster
        grades: Grade distribution and groups
        output_path: File the annotated roster was written to
    """
    records: Tuple[AnnotatedRecord, ...]
    statistics: Statistics
    grades: GradeGroups
    output_path: Path

    @property
    def distribution(self) -> Mapping[str, int]:
        return self.grades.distribution

    def lookup(self, grade: str) -> Tuple[AnnotatedRecord, ...]:
        return self.grades.lookup(grade)


class RosterProcessor:
    """
    Stage-ordered grading of a single roster.

    Each transition requires exactly the previous stage; a failed
    transition leaves the stage unchanged. Accessors raise
    InvalidStateError until the stage producing their data has run.

    Example:
        >>> p = RosterProcessor()
        >>> p.load_rows(["Name,Marks", "Alice,90", "Bob,70", "Carol,50"])
        >>> _ = p.compute_statistics()
        >>> _ = p.classify()
        >>> [r.grade for r in p.annotated_records]
        ['A+', 'B+', 'B']
    """

    def __init__(self, config: Optional[GradingConfig] = None) -> None:
        self.config = config or GradingConfig()
        self._stage = ProcessingStage.UNLOADED
        self._records: List[Record] = []
        self._statistics: Optional[Statistics] = None
        self._annotated: Tuple[AnnotatedRecord, ...] = ()
        self._grades: Optional[GradeGroups] = None

    @property
    def stage(self) -> ProcessingStage:
        return self._stage

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def load(self, path: Path) -> None:
        """Read and parse a roster file (Unloaded → Loaded)."""
        self._expect(ProcessingStage.UNLOADED, "load")
        self._records = read_roster(path, self.config.encoding)
        self._stage = ProcessingStage.LOADED

    def load_rows(self, lines: Iterable[str]) -> None:
        """Parse in-memory roster lines (Unloaded → Loaded)."""
        self._expect(ProcessingStage.UNLOADED, "load")
        self._records = parse_rows(lines)
        self._stage = ProcessingStage.LOADED

    def compute_statistics(self) -> Statistics:
        """Summarise the loaded scores (Loaded → Computed)."""
        self._expect(ProcessingStage.LOADED, "compute_statistics")
        self._statistics = compute_statistics(self._records)
        self._stage = ProcessingStage.COMPUTED
        return self._statistics

    def classify(self) -> GradeGroups:
        """Grade every record and group by grade (Computed → Classified)."""
        self._expect(ProcessingStage.COMPUTED, "classify")
        annotated = tuple(annotate(self._records, self._statistics, self.config.ladder))
        self._grades = group(annotated)
        self._annotated = annotated
        self._stage = ProcessingStage.CLASSIFIED
        return self._grades

    def serialize(self) -> str:
        """Render the output text (Classified → Serialized)."""
        self._expect(ProcessingStage.CLASSIFIED, "serialize")
        text = serialize(self._annotated)
        self._stage = ProcessingStage.SERIALIZED
        return text

    def save(self, path: Optional[Path] = None) -> Path:
        """Write the output file (Classified → Serialized)."""
        self._expect(ProcessingStage.CLASSIFIED, "save")
        written = write_results(
            self._annotated,
            path if path is not None else self.config.output_path,
            self.config.encoding,
        )
        self._stage = ProcessingStage.SERIALIZED
        return written

    # ─────────────────────────────────────────────────────────────────────────
    # Read-only views
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def records(self) -> Tuple[Record, ...]:
        self._require(ProcessingStage.LOADED, "records")
        return tuple(self._records)

    @property
    def statistics(self) -> Statistics:
        self._require(ProcessingStage.COMPUTED, "statistics")
        return self._statistics

    @property
    def annotated_records(self) -> Tuple[AnnotatedRecord, ...]:
        self._require(ProcessingStage.CLASSIFIED, "annotated_records")
        return self._annotated

    @property
    def grades(self) -> GradeGroups:
        self._require(ProcessingStage.CLASSIFIED, "grades")
        return self._grades

    @property
    def distribution(self) -> Mapping[str, int]:
        return self.grades.distribution

    def lookup(self, grade: str) -> Tuple[AnnotatedRecord, ...]:
        """Records holding ``grade`` in input order (empty if none)."""
        return self.grades.lookup(grade)

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _expect(self, stage: ProcessingStage, action: str) -> None:
        if self._stage != stage:
            raise InvalidStateError(
                f"Cannot {action} in stage {self._stage.name}; expected {stage.name}"
            )

    def _require(self, stage: ProcessingStage, what: str) -> None:
        if self._stage < stage:
            raise InvalidStateError(
                f"{what} unavailable in stage {self._stage.name}; requires {stage.name}"
            )


def grade_roster(input_path: Path, config: Optional[GradingConfig] = None) -> GradingResult:
    """
    Grade a roster file from start to finish.

    Pipeline:
    1. Load and parse the roster
    2. Compute mean and standard deviation
    3. Classify and group every record
    4. Write the annotated roster

    Any failure aborts before the output file is replaced.

    Args:
        input_path: Roster file to read
        config: Grading configuration (defaults if omitted)

    Returns:
        GradingResult with records, statistics and grade groups

    Raises:
        RosterIOError: If the input cannot be read or output written
        ParseError: If the roster has a malformed row
        EmptyInputError: If the roster has no data rows

    Example:
        >>> result = grade_roster(Path("class.csv"))
        >>> dict(result.distribution)
        {'A+': 1, 'B+': 1, 'B': 1}
    """
    start_time = time.perf_counter()
    processor = RosterProcessor(config)

    logger.info(f"Grading roster {input_path}")
    processor.load(input_path)
    processor.compute_statistics()
    processor.classify()
    output_path = processor.save()

    elapsed = time.perf_counter() - start_time
    logger.info(f"Grading completed in {elapsed:.3f}s")

    return GradingResult(
        records=processor.annotated_records,
        statistics=processor.statistics,
        grades=processor.grades,
        output_path=output_path,
    )
