"""
Grade distribution bar chart.

One bar per grade label, in distribution order. Clicking a bar, or the
label under it, emits gradeClicked with its label so the owner can show
the students behind it.
"""
from typing import Dict, Mapping, Optional

from PySide6.QtCore import QRect, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from roster_grader.gui.styles.theme import Colors

BAR_WIDTH = 80
BAR_STRIDE = 100
LEFT_MARGIN = 50
MAX_BAR_HEIGHT = 300
BASELINE_OFFSET = 60
# Labels sit this far above the bottom edge
LABEL_OFFSET = 40
MIN_BAR_HEIGHT = 1


class GradeBarChart(QWidget):
    """
    Painted bar chart of grade counts.
    """

    gradeClicked = Signal(str)

    def __init__(self, distribution: Optional[Mapping[str, int]] = None, parent=None):
        super().__init__(parent)
        self._distribution: Dict[str, int] = {}
        self._bar_fill = QColor(Colors.BAR_FILL)
        self._bar_outline = QColor(Colors.BAR_OUTLINE)
        self._text_color = QColor(Colors.BAR_TEXT)
        self.setMouseTracking(True)
        self.setMinimumHeight(MAX_BAR_HEIGHT + BASELINE_OFFSET + LABEL_OFFSET)
        self.set_distribution(distribution or {})

    def set_distribution(self, distribution: Mapping[str, int]) -> None:
        self._distribution = dict(distribution)
        self.setMinimumWidth(LEFT_MARGIN * 2 + BAR_STRIDE * max(len(self._distribution), 1))
        self.unsetCursor()
        self.update()

    def distribution(self) -> Dict[str, int]:
        return dict(self._distribution)

    def bar_rects(self) -> Dict[str, QRect]:
        """
        Bar geometry for the current widget size, keyed by grade label.

        A non-empty grade is at least MIN_BAR_HEIGHT tall even when it is
        tiny next to the largest one.
        """
        rects: Dict[str, QRect] = {}
        if not self._distribution:
            return rects

        max_count = max(self._distribution.values()) or 1
        x = LEFT_MARGIN
        for label, count in self._distribution.items():
            bar_height = int(count / max_count * MAX_BAR_HEIGHT)
            if count > 0:
                bar_height = max(bar_height, MIN_BAR_HEIGHT)
            top = self.height() - bar_height - BASELINE_OFFSET
            rects[label] = QRect(x, top, BAR_WIDTH, bar_height)
            x += BAR_STRIDE
        return rects

    def hit_rects(self) -> Dict[str, QRect]:
        """Clickable area per grade: the bar plus the label strip below it."""
        baseline = self.height() - BASELINE_OFFSET
        label_bottom = self.height() - LABEL_OFFSET + 5
        return {
            label: QRect(rect.x(), rect.top(), BAR_WIDTH, max(label_bottom, baseline) - rect.top())
            for label, rect in self.bar_rects().items()
        }

    def grade_at(self, pos) -> Optional[str]:
        """Label of the bar under ``pos``, or None."""
        for label, rect in self.hit_rects().items():
            if rect.contains(pos):
                return label
        return None

    def mouseMoveEvent(self, event):
        if self.grade_at(event.position().toPoint()) is not None:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.unsetCursor()
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            label = self.grade_at(event.position().toPoint())
            if label is not None:
                self.gradeClicked.emit(label)
        super().mouseReleaseEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        for label, rect in self.bar_rects().items():
            painter.setBrush(QBrush(self._bar_fill))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.drawRect(rect)

            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.setPen(QPen(self._bar_outline, 1))
            painter.drawRect(rect)

            painter.setPen(self._text_color)
            painter.drawText(rect.x() + 25, self.height() - LABEL_OFFSET, label)
            painter.drawText(rect.x() + 35, rect.top() - 5, str(self._distribution[label]))
        painter.end()
