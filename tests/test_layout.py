import unittest

try:
    from PySide6.QtCore import QPointF, QRectF
except ImportError as exc:  # Qt libraries missing on this machine
    raise unittest.SkipTest(f"PySide6 unavailable: {exc}")

from tictactoe.game_board import Position
from tictactoe.ui import theme
from tictactoe.ui.layout import GameBoardLayout


class TestGameBoardLayout(unittest.TestCase):
    def setUp(self) -> None:
        self.layout = GameBoardLayout(QRectF(0, 0, 400, 300), 3)

    def test_board_is_square_and_centered(self) -> None:
        border = self.layout.platform_border_rect
        side = 300 - 2 * theme.PLATFORM_MARGIN
        self.assertAlmostEqual(border.width(), side)
        self.assertAlmostEqual(border.height(), side)
        self.assertAlmostEqual(border.center().x(), 200)
        self.assertAlmostEqual(border.center().y(), 150)
        self.assertTrue(border.contains(self.layout.platform_rect))

    def test_cells_tile_the_platform(self) -> None:
        platform = self.layout.platform_rect
        first = self.layout.cell_rect_at(Position(0, 0))
        last = self.layout.cell_rect_at(Position(2, 2))
        self.assertAlmostEqual(first.left(), platform.left())
        self.assertAlmostEqual(first.top(), platform.top())
        self.assertAlmostEqual(last.right(), platform.right())
        self.assertAlmostEqual(last.bottom(), platform.bottom())
        self.assertAlmostEqual(first.width(), platform.width() / 3)

    def test_grid_lines(self) -> None:
        rects = self.layout.grid_line_rects
        self.assertEqual(len(rects), 4)
        vertical, horizontal = rects[0], rects[2]
        self.assertAlmostEqual(vertical.width(), theme.GRID_LINE)
        self.assertAlmostEqual(vertical.center().x(), self.layout.cell_rect_at((0, 0)).right())
        self.assertAlmostEqual(horizontal.height(), theme.GRID_LINE)
        self.assertAlmostEqual(horizontal.center().y(), self.layout.cell_rect_at((0, 0)).bottom())

    def test_position_at_point(self) -> None:
        for position in (Position(0, 0), Position(1, 2), Position(2, 1)):
            center = self.layout.cell_rect_at(position).center()
            self.assertEqual(self.layout.position_at(center), position)
        self.assertIsNone(self.layout.position_at(QPointF(2, 2)))
        self.assertIsNone(self.layout.position_at(QPointF(399, 150)))

    def test_winning_line_runs_past_outer_cells(self) -> None:
        positions = [Position(0, 0), Position(0, 1), Position(0, 2)]
        start, end = self.layout.points_for_winning_line(positions)
        first = self.layout.cell_rect_at(positions[0]).center()
        last = self.layout.cell_rect_at(positions[-1]).center()
        self.assertAlmostEqual(start.y(), first.y())
        self.assertAlmostEqual(end.y(), last.y())
        self.assertLess(start.x(), first.x())
        self.assertGreater(end.x(), last.x())

    def test_tiny_bounds_do_not_break(self) -> None:
        layout = GameBoardLayout(QRectF(0, 0, 10, 10), 3)
        self.assertGreaterEqual(layout.platform_rect.width(), 0)
        self.assertIsNone(layout.position_at(QPointF(5, 5)))


if __name__ == "__main__":
    unittest.main()
