"""
Theme definitions for the Roster Grader GUI.
"""


class Colors:
    # Chart
    BAR_FILL = "#4682b4"  # steel blue
    BAR_OUTLINE = "#000000"
    BAR_TEXT = "#1f1f1f"
