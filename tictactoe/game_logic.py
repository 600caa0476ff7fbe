import logging

from .game_board import GameBoard, InvalidMoveError, Mark, Position

logger = logging.getLogger(__name__)


def find_winning_line(board):
    """
    positions of a line filled with one mark, or None
    """
    for line in board.lines():
        first = board.mark_at(line[0])
        if first is not None and all(board.mark_at(p) is first for p in line):
            return line
    return None


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self, board_size=3, first_mark=Mark.X):
        """
        init board and counters
        """
        self.board_size = board_size      # fixed 3x3 in play
        self.first_mark = first_mark
        self.reset_game()

    def make_move(self, row, col, player):
        """
        place player mark, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        if self.game_over or player is not self.current_mark:
            return "invalid"
        try:
            self.game_board = self.game_board.with_mark(Position(row, col), player)
        except InvalidMoveError as exc:
            logger.debug("rejected move: %s", exc)
            return "invalid"
        self.move_count += 1
        self.current_mark = player.opponent
        if self.check_win(player):
            self.game_over = True; self.winner = player
            self.winning_positions = find_winning_line(self.game_board)
            return "win"
        elif self.check_draw():
            self.game_over = True; self.winner = None
            return "draw"
        return "continue"

    def check_win(self, player):
        """
        any row, col or diag full of player's mark
        """
        line = find_winning_line(self.game_board)
        return line is not None and self.game_board.mark_at(line[0]) is player

    def check_draw(self):
        """
        no empty cells and no winner
        """
        return self.game_board.is_full() and self.winner is None

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        position = Position(row, col)
        return self.game_board.contains(position) and self.game_board.is_empty(position)

    def reset_game(self, first_mark=None):
        """
        clear board and reset flags
        """
        if first_mark is not None:
            self.first_mark = first_mark
        self.game_board = GameBoard(self.board_size)
        self.current_mark = self.first_mark
        self.game_over = False; self.winner = None; self.move_count = 0
        self.winning_positions = None
