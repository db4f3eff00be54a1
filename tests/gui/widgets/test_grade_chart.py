"""Unit tests for the grade distribution bar chart."""

from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtTest import QTest

from roster_grader.gui.widgets.grade_chart import (
    BAR_STRIDE,
    BAR_WIDTH,
    BASELINE_OFFSET,
    LABEL_OFFSET,
    LEFT_MARGIN,
    MAX_BAR_HEIGHT,
    MIN_BAR_HEIGHT,
    GradeBarChart,
)


def _make_chart(qtbot, distribution):
    chart = GradeBarChart(distribution)
    qtbot.addWidget(chart)
    chart.resize(800, 500)
    chart.show()
    return chart


class TestBarGeometry:

    def test_bars_follow_distribution_order(self, qtbot):
        chart = _make_chart(qtbot, {"B+": 2, "A+": 1, "B": 4})
        assert list(chart.bar_rects()) == ["B+", "A+", "B"]

    def test_bar_height_proportional_to_max(self, qtbot):
        chart = _make_chart(qtbot, {"A": 2, "B": 4})
        rects = chart.bar_rects()

        assert rects["B"].height() == MAX_BAR_HEIGHT
        assert rects["A"].height() == MAX_BAR_HEIGHT // 2

    def test_bars_share_baseline_and_stride(self, qtbot):
        chart = _make_chart(qtbot, {"A": 1, "B": 3})
        a, b = chart.bar_rects()["A"], chart.bar_rects()["B"]

        assert a.x() == LEFT_MARGIN
        assert b.x() == LEFT_MARGIN + BAR_STRIDE
        assert a.width() == b.width() == BAR_WIDTH
        assert a.top() + a.height() == chart.height() - BASELINE_OFFSET
        assert b.top() + b.height() == chart.height() - BASELINE_OFFSET

    def test_empty_distribution_has_no_bars(self, qtbot):
        chart = _make_chart(qtbot, {})
        assert chart.bar_rects() == {}
        assert chart.grade_at(QPoint(60, 300)) is None


class TestBarClick:

    def test_click_on_bar_emits_grade(self, qtbot):
        chart = _make_chart(qtbot, {"A+": 1, "B+": 3})
        centre = chart.bar_rects()["B+"].center()

        with qtbot.waitSignal(chart.gradeClicked, timeout=1000) as blocker:
            QTest.mouseClick(chart, Qt.MouseButton.LeftButton, pos=centre)

        assert blocker.args == ["B+"]

    def test_click_outside_bars_emits_nothing(self, qtbot):
        chart = _make_chart(qtbot, {"A+": 1})
        received = []
        chart.gradeClicked.connect(received.append)

        QTest.mouseClick(chart, Qt.MouseButton.LeftButton, pos=QPoint(5, 5))

        assert received == []

    def test_set_distribution_replaces_bars(self, qtbot):
        chart = _make_chart(qtbot, {"A": 1})
        chart.set_distribution({"O": 5, "Fail": 1})
        assert list(chart.bar_rects()) == ["O", "Fail"]
        assert chart.distribution() == {"O": 5, "Fail": 1}

    def test_paint_does_not_raise(self, qtbot):
        chart = _make_chart(qtbot, {"A+": 1, "B": 2})
        chart.repaint()


def _hover(chart, pos):
    point = QPointF(pos)
    event = QMouseEvent(
        QEvent.Type.MouseMove,
        point,
        point,
        Qt.MouseButton.NoButton,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )
    chart.mouseMoveEvent(event)


class TestSmallGroups:

    def test_tiny_group_still_gets_a_visible_bar(self, qtbot):
        chart = _make_chart(qtbot, {"A": 1, "B": 1000})
        assert chart.bar_rects()["A"].height() == MIN_BAR_HEIGHT

    def test_click_on_label_of_tiny_group_emits_grade(self, qtbot):
        chart = _make_chart(qtbot, {"A": 1, "B": 1000})
        label_pos = QPoint(chart.bar_rects()["A"].x() + 30, chart.height() - LABEL_OFFSET - 5)

        with qtbot.waitSignal(chart.gradeClicked, timeout=1000) as blocker:
            QTest.mouseClick(chart, Qt.MouseButton.LeftButton, pos=label_pos)

        assert blocker.args == ["A"]

    def test_click_on_one_pixel_bar_emits_grade(self, qtbot):
        chart = _make_chart(qtbot, {"A": 1, "B": 1000})
        bar = chart.bar_rects()["A"]
        assert chart.grade_at(QPoint(bar.x() + 10, bar.top())) == "A"


class TestCursor:

    def test_hover_over_bar_shows_pointing_hand(self, qtbot):
        chart = _make_chart(qtbot, {"A": 2, "B": 4})
        _hover(chart, chart.bar_rects()["B"].center())
        assert chart.cursor().shape() == Qt.CursorShape.PointingHandCursor

    def test_hover_over_empty_space_shows_arrow(self, qtbot):
        chart = _make_chart(qtbot, {"A": 2, "B": 4})
        _hover(chart, chart.bar_rects()["B"].center())
        _hover(chart, QPoint(5, 5))
        assert chart.cursor().shape() == Qt.CursorShape.ArrowCursor

    def test_cursor_is_arrow_before_any_hover(self, qtbot):
        chart = _make_chart(qtbot, {"A": 2})
        assert chart.cursor().shape() == Qt.CursorShape.ArrowCursor
