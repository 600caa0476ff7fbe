from enum import Enum
from typing import NamedTuple, Optional


class Mark(Enum):
    """
    a player's symbol
    """
    X = 'X'
    O = 'O'

    @property
    def opponent(self):
        return Mark.O if self is Mark.X else Mark.X


class Position(NamedTuple):
    row: int
    column: int


class InvalidMoveError(ValueError):
    """
    raised when a mark can't go where it was asked to
    """


class GameBoard:
    """
    immutable square grid of cells, each empty (None) or holding a Mark.

    placing a mark returns a new board, so tactics can look ahead
    on copies without touching the board the game is played on.
    """
    def __init__(self, dimension=3, cells=None):
        if dimension < 1:
            raise ValueError(f"board dimension must be positive, got {dimension}")
        self._dimension = dimension
        if cells is None:
            cells = [[None] * dimension for _ in range(dimension)]
        self._cells = tuple(tuple(row) for row in cells)
        if len(self._cells) != dimension \
           or any(len(row) != dimension for row in self._cells):
            raise ValueError(f"cells must form a {dimension}x{dimension} grid")

    @classmethod
    def from_rows(cls, *rows):
        """
        build a board from text rows, e.g. "XX ", "O  ", "X O" (space = empty)
        """
        cells = []
        for text in rows:
            row = []
            for ch in text:
                if ch == ' ':
                    row.append(None)
                else:
                    try:
                        row.append(Mark(ch.upper()))
                    except ValueError:
                        raise ValueError(f"unknown mark {ch!r} in row {text!r}") from None
            cells.append(row)
        return cls(len(rows), cells)

    @property
    def dimension(self):
        return self._dimension

    def contains(self, position):
        return 0 <= position[0] < self._dimension and 0 <= position[1] < self._dimension

    def mark_at(self, position) -> Optional[Mark]:
        if not self.contains(position):
            raise IndexError(f"position {tuple(position)} is off the board")
        return self._cells[position[0]][position[1]]

    def is_empty(self, position):
        return self.mark_at(position) is None

    def with_mark(self, position, mark) -> "GameBoard":
        """
        copy of this board with mark placed at position
        """
        if not self.contains(position):
            raise InvalidMoveError(f"position {tuple(position)} is off the board")
        row, col = position
        if self._cells[row][col] is not None:
            raise InvalidMoveError(
                f"cell {tuple(position)} already holds {self._cells[row][col].value}")
        cells = [list(r) for r in self._cells]
        cells[row][col] = mark
        return GameBoard(self._dimension, cells)

    # --- position queries ---------------------------------------------------

    @property
    def positions(self):
        n = self._dimension
        return [Position(r, c) for r in range(n) for c in range(n)]

    def empty_positions(self):
        return [p for p in self.positions if self._cells[p.row][p.column] is None]

    def positions_for_mark(self, mark):
        return [p for p in self.positions if self._cells[p.row][p.column] is mark]

    def marks_and_positions(self):
        """
        (mark, position) for every cell, mark is None when empty
        """
        return [(self._cells[p.row][p.column], p) for p in self.positions]

    def intersect_empty_positions(self, positions):
        # keeps the caller's order, tactics rely on it for tie-breaks
        return [Position(*p) for p in positions if self.is_empty(p)]

    def is_full(self):
        return all(cell is not None for row in self._cells for cell in row)

    # --- groupings ----------------------------------------------------------

    def rows(self):
        n = self._dimension
        return [[Position(r, c) for c in range(n)] for r in range(n)]

    def columns(self):
        n = self._dimension
        return [[Position(r, c) for r in range(n)] for c in range(n)]

    def diagonals(self):
        """
        top-left to bottom-right, then bottom-left to top-right
        """
        n = self._dimension
        return [[Position(i, i) for i in range(n)],
                [Position(n - 1 - i, i) for i in range(n)]]

    def lines(self):
        return self.rows() + self.columns() + self.diagonals()

    # --- geometry -----------------------------------------------------------

    def corner_positions(self):
        """
        top-left, top-right, bottom-right, bottom-left
        """
        last = self._dimension - 1
        return [Position(0, 0), Position(0, last),
                Position(last, last), Position(last, 0)]

    def opposite_corner(self, position):
        last = self._dimension - 1
        if position not in self.corner_positions():
            raise ValueError(f"{tuple(position)} is not a corner")
        return Position(last - position[0], last - position[1])

    def side_positions(self):
        last = self._dimension - 1
        corners = self.corner_positions()
        return [p for p in self.positions
                if (p.row in (0, last) or p.column in (0, last)) and p not in corners]

    def center_position(self):
        # even boards have no single center cell
        if self._dimension % 2 == 0:
            return None
        mid = self._dimension // 2
        return Position(mid, mid)

    # --- dunder -------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, GameBoard):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __str__(self):
        return '\n'.join(''.join(cell.value if cell else ' ' for cell in row)
                         for row in self._cells)

    def __repr__(self):
        rows = ', '.join(repr(r) for r in str(self).split('\n'))
        return f"GameBoard.from_rows({rows})"
