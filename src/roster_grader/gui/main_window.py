"""
Main window showing the grade distribution of a graded roster.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtWidgets import QMainWindow, QMessageBox

from roster_grader.core.models.records import AnnotatedRecord
from roster_grader.grading.processor import GradingResult
from roster_grader.gui.widgets.grade_chart import GradeBarChart

logger = logging.getLogger(__name__)


def format_grade_details(grade: str, records: Sequence[AnnotatedRecord]) -> Optional[str]:
    """
    Text listing the students holding ``grade``.

    Returns None when nobody holds the grade.
    """
    if not records:
        return None
    lines = [f"Students with grade {grade}:"]
    lines.extend(f"{r.name} - {r.score} marks" for r in records)
    return "\n".join(lines)


class GradeDistributionWindow(QMainWindow):
    """Bar chart of grade counts with click-to-drill-down."""

    def __init__(self, result: GradingResult, parent=None):
        super().__init__(parent)
        self.result = result

        self.setWindowTitle("Grade Distribution")
        self.resize(800, 500)

        self.chart = GradeBarChart(result.distribution, self)
        self.chart.gradeClicked.connect(self.show_grade_details)
        self.setCentralWidget(self.chart)

        stats = result.statistics
        self.statusBar().showMessage(
            f"{stats.count} students  |  mean {stats.mean:.2f}  |  "
            f"std dev {stats.stddev:.2f}  |  saved to {result.output_path}"
        )

    def show_grade_details(self, grade: str) -> None:
        message = format_grade_details(grade, self.result.lookup(grade))
        if message is None:
            return
        logger.debug(f"Showing details for grade {grade}")
        QMessageBox.information(self, "Grade Details", message)
