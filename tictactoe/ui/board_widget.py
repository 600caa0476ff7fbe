from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QRectF
from PySide6.QtGui import QPainter

from .layout import GameBoardLayout
from .renderer import GameBoardRenderer
from . import theme

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def board_layout(self):
        return GameBoardLayout(QRectF(self.rect()), self.game_logic.board_size)

    def paintEvent(self, event):
        """
        background, then the board through the renderer
        """
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), theme.BACKGROUND_COLOR)
            renderer = GameBoardRenderer(painter, self.game_logic.game_board, self.board_layout())
            renderer.render(self.game_logic.winning_positions)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        position = self.board_layout().position_at(event.position())
        if position is None:  # outside the grid
            return
        self.cell_clicked.emit(position.row, position.column)  # notify main window
