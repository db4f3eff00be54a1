"""
Module: grading.config

Purpose:
    Configuration dataclass for the grading pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - GradingConfig: Output location, file encoding and grade ladder

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - grading.processor: pipeline entry point
    - gui.app: launcher
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path

from roster_grader.core.models.grades import DEFAULT_LADDER, GradeLadder

DEFAULT_OUTPUT_PATH = Path("grades_output.csv")


@dataclass(frozen=True)
class GradingConfig:
    """
    Configuration for a grading run (immutable).

    Attributes:
        output_path: Where the annotated roster is written
        encoding: Text encoding for both input and output files
        ladder: Grade ladder used for classification

    Example:
        >>> config = GradingConfig(output_path=Path("out/grades.csv"))
        >>> config.ladder.labels[0]
        'O'
    """

    output_path: Path = DEFAULT_OUTPUT_PATH
    encoding: str = "utf-8"
    ladder: GradeLadder = field(default=DEFAULT_LADDER)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not Path(self.output_path).name:
            raise ValueError(f"output_path must name a file: {self.output_path!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e
        # Accept plain strings for convenience
        object.__setattr__(self, "output_path", Path(self.output_path))
