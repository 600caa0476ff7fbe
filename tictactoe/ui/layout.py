import math

from PySide6.QtCore import QPointF, QRectF

from ..game_board import Position
from . import theme


class GameBoardLayout:
    """
    geometry of the board inside a bounding rect.

    the board is kept square and centered; everything the renderer
    draws and every click the widget maps goes through here.
    """
    def __init__(self, bounds, dimension=3):
        self.dimension = dimension
        bounds = QRectF(bounds)
        side = max(0.0, min(bounds.width(), bounds.height()) - 2 * theme.PLATFORM_MARGIN)
        left = bounds.x() + (bounds.width() - side) / 2
        top = bounds.y() + (bounds.height() - side) / 2
        self.platform_border_rect = QRectF(left, top, side, side)
        border = min(theme.PLATFORM_BORDER, side / 2)
        self.platform_rect = self.platform_border_rect.adjusted(border, border, -border, -border)
        self.cell_size = self.platform_rect.width() / dimension

    @property
    def grid_line_rects(self):
        """
        thin rects on the inner cell boundaries, vertical ones first
        """
        p = self.platform_rect
        half = theme.GRID_LINE / 2
        rects = []
        for i in range(1, self.dimension):
            x = p.left() + i * self.cell_size
            rects.append(QRectF(x - half, p.top(), theme.GRID_LINE, p.height()))
        for i in range(1, self.dimension):
            y = p.top() + i * self.cell_size
            rects.append(QRectF(p.left(), y - half, p.width(), theme.GRID_LINE))
        return rects

    def cell_rect_at(self, position):
        row, col = position
        p = self.platform_rect
        return QRectF(p.left() + col * self.cell_size, p.top() + row * self.cell_size,
                      self.cell_size, self.cell_size)

    def points_for_winning_line(self, positions):
        """
        (start, end) of a line through the outer cells of positions,
        running a bit past both of them
        """
        start = self.cell_rect_at(positions[0]).center()
        end = self.cell_rect_at(positions[-1]).center()
        dx, dy = end.x() - start.x(), end.y() - start.y()
        length = math.hypot(dx, dy)
        if length == 0:
            return start, end
        overshoot = self.cell_size * 0.35
        ux, uy = dx / length * overshoot, dy / length * overshoot
        return (QPointF(start.x() - ux, start.y() - uy),
                QPointF(end.x() + ux, end.y() + uy))

    def position_at(self, point):
        """
        cell under point, None outside the platform
        """
        p = self.platform_rect
        x, y = point.x(), point.y()
        if self.cell_size <= 0 or not (p.left() <= x < p.right() and p.top() <= y < p.bottom()):
            return None
        last = self.dimension - 1
        col = int((x - p.left()) // self.cell_size)
        row = int((y - p.top()) // self.cell_size)
        # clamp for float error on the far edge
        return Position(max(0, min(row, last)), max(0, min(col, last)))
