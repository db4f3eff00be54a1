"""
Entry point for the PySide6 GUI.

Prompts for a roster file, grades it, writes the annotated roster and
opens the grade distribution chart.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ROSTER_FILTER = "CSV files (*.csv);;Text files (*.txt);;All files (*)"


def _prompt_for_roster(settings) -> Optional[Path]:
    """Ask the user for a roster file. Returns None if cancelled."""
    from PySide6.QtWidgets import QFileDialog

    start_dir = settings.get_last_input_dir() or str(Path.cwd())
    file_path, _ = QFileDialog.getOpenFileName(None, "Select roster CSV file", start_dir, ROSTER_FILTER)
    if not file_path or not file_path.strip():
        return None

    path = Path(file_path.strip())
    settings.set_last_input_dir(str(path.parent))
    return path


def run(config=None) -> int:
    """
    Main entry point for the GUI application.

    Returns the process exit status.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    from PySide6.QtWidgets import QApplication, QMessageBox

    from roster_grader.grading import (
        EmptyInputError,
        GradingConfig,
        ParseError,
        RosterIOError,
        grade_roster,
    )
    from roster_grader.gui.main_window import GradeDistributionWindow
    from roster_grader.gui.models.settings import SettingsStore
    from roster_grader.gui.utils.paths import get_settings_path

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Roster Grader")
    app.setApplicationDisplayName("Roster Grader")

    settings = SettingsStore(get_settings_path())

    input_path = _prompt_for_roster(settings)
    if input_path is None:
        QMessageBox.critical(None, "Error", "No file provided!")
        return 1

    try:
        result = grade_roster(input_path, config or GradingConfig())
    except (ParseError, EmptyInputError, RosterIOError) as e:
        logger.error(f"Grading failed: {e}")
        QMessageBox.critical(None, "Error", str(e))
        return 1

    QMessageBox.information(
        None,
        "Results Saved",
        f"Results saved successfully.\n{result.output_path.resolve()}",
    )

    window = GradeDistributionWindow(result)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(run())
