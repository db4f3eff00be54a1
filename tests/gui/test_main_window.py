"""Tests for the grade distribution window and its drill-down."""

from pathlib import Path
from unittest.mock import patch

import pytest

from roster_grader.core.models.records import Record
from roster_grader.grading.config import GradingConfig
from roster_grader.grading.processor import grade_roster
from roster_grader.gui.main_window import GradeDistributionWindow, format_grade_details


@pytest.fixture
def result(roster_file, tmp_path: Path):
    return grade_roster(roster_file, GradingConfig(output_path=tmp_path / "grades_output.csv"))


class TestFormatGradeDetails:

    def test_format_when_members_then_lists_names_and_marks(self):
        records = [Record("Bob", 70.0).annotate("B+"), Record("Eve", 71.5).annotate("B+")]
        assert format_grade_details("B+", records) == (
            "Students with grade B+:\nBob - 70.0 marks\nEve - 71.5 marks"
        )

    def test_format_when_no_members_then_none(self):
        assert format_grade_details("O", ()) is None


class TestGradeDistributionWindow:

    def test_window_when_created_then_chart_shows_distribution(self, qtbot, result):
        window = GradeDistributionWindow(result)
        qtbot.addWidget(window)

        assert window.windowTitle() == "Grade Distribution"
        assert window.chart.distribution() == {"A+": 1, "B+": 1, "B": 1}
        assert "3 students" in window.statusBar().currentMessage()

    def test_chart_click_when_grade_has_members_then_shows_details(self, qtbot, result):
        window = GradeDistributionWindow(result)
        qtbot.addWidget(window)

        with patch("roster_grader.gui.main_window.QMessageBox.information") as info:
            window.chart.gradeClicked.emit("A+")

        info.assert_called_once()
        _, title, message = info.call_args.args
        assert title == "Grade Details"
        assert message == "Students with grade A+:\nAlice - 90.0 marks"

    def test_show_details_when_grade_empty_then_no_dialog(self, qtbot, result):
        window = GradeDistributionWindow(result)
        qtbot.addWidget(window)

        with patch("roster_grader.gui.main_window.QMessageBox.information") as info:
            window.show_grade_details("O")

        info.assert_not_called()
