"""
PySide6 display layer: grade distribution chart with per-grade drill-down.

Entry point: roster_grader.gui.app.run
"""
