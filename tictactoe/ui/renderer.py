from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QPen

from ..game_board import Mark
from . import theme


class GameBoardRenderer:
    """
    draws a game board with a QPainter
    """
    def __init__(self, painter, game_board, layout):
        self.painter = painter
        self.game_board = game_board
        self.layout = layout

    def render(self, winning_positions=None):
        self.painter.setRenderHint(QPainter.Antialiasing, True)
        self._render_platform_border()
        self._render_platform()
        self._render_grid_lines()
        self._render_marks()
        if winning_positions:
            self._render_winning_line(winning_positions)

    # --- primitives ---------------------------------------------------------

    def _stroke_rect(self, rect, color, width):
        self.painter.setPen(QPen(color, width))
        self.painter.setBrush(Qt.NoBrush)
        self.painter.drawRect(rect)

    def _stroke_line(self, start, end, color, width):
        self.painter.setPen(QPen(color, width, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        self.painter.drawLine(start, end)

    # --- board parts --------------------------------------------------------

    def _render_platform_border(self):
        # two strokes, outer then inner, each half the border thickness
        line_width = theme.PLATFORM_BORDER / 2
        half = line_width / 2
        outer = self.layout.platform_border_rect.adjusted(half, half, -half, -half)
        inner = outer.adjusted(line_width, line_width, -line_width, -line_width)
        self._stroke_rect(outer, theme.BORDER_OUTER_COLOR, line_width)
        self._stroke_rect(inner, theme.BORDER_INNER_COLOR, line_width)

    def _render_platform(self):
        self.painter.fillRect(self.layout.platform_rect, theme.PLATFORM_FILL_COLOR)

    def _render_grid_lines(self):
        for rect in self.layout.grid_line_rects:
            self.painter.fillRect(rect, theme.GRID_LINE_COLOR)

    def _render_marks(self):
        for mark, position in self.game_board.marks_and_positions():
            if mark is None:
                continue
            rect = self.layout.cell_rect_at(position)
            m = theme.MARK_MARGIN
            self._render_mark(mark, rect.adjusted(m, m, -m, -m))

    def _render_mark(self, mark, rect):
        if mark is Mark.X:
            self._stroke_line(rect.topLeft(), rect.bottomRight(), theme.MARK_X_COLOR, theme.MARK)
            self._stroke_line(rect.bottomLeft(), rect.topRight(), theme.MARK_X_COLOR, theme.MARK)
        else:
            self.painter.setPen(QPen(theme.MARK_O_COLOR, theme.MARK))
            self.painter.setBrush(Qt.NoBrush)
            self.painter.drawEllipse(rect)

    def _render_winning_line(self, positions):
        start, end = self.layout.points_for_winning_line(positions)
        self._stroke_line(start, end, theme.WINNING_LINE_COLOR, theme.WINNING_LINE)
