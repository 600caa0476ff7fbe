"""
Tactics from Newell and Simon's tic-tac-toe program.

Each tactic looks at a board and either proposes a position for the
given mark or returns None. Tactics hold no state and never change the
board they are handed, so the same instance can serve every game.
"""


class Tactic:
    """
    one heuristic rule for choosing a move
    """
    name = 'tactic'

    def choose_position(self, mark, board):
        """
        position where mark should go, or None if the rule doesn't apply
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


def winning_positions(mark, board):
    """
    empty cells that would complete a line for mark, in line scan order
    """
    found = []
    needed = board.dimension - 1
    for line in board.lines():
        marks = [board.mark_at(p) for p in line]
        if marks.count(mark) == needed and marks.count(None) == 1:
            cell = line[marks.index(None)]
            if cell not in found:
                found.append(cell)
    return found


def fork_positions(mark, board):
    """
    empty cells that give mark two different ways to win at once
    """
    return [p for p in board.empty_positions()
            if len(winning_positions(mark, board.with_mark(p, mark))) >= 2]


class WinTactic(Tactic):
    """
    #1: complete a line that already has all but one of our marks
    """
    name = 'win'

    def choose_position(self, mark, board):
        positions = winning_positions(mark, board)
        return positions[0] if positions else None


class BlockTactic(Tactic):
    """
    #2: take the cell the opponent needs to complete a line
    """
    name = 'block'

    def choose_position(self, mark, board):
        positions = winning_positions(mark.opponent, board)
        return positions[0] if positions else None


class ForkTactic(Tactic):
    """
    #3: make two winning threats with one move
    """
    name = 'fork'

    def choose_position(self, mark, board):
        positions = fork_positions(mark, board)
        return positions[0] if positions else None


class BlockForkTactic(Tactic):
    """
    #4: stop the opponent from forking.

    A single opponent fork is simply occupied. With several, we threaten
    a win of our own instead, picking a threat whose forced answer does
    not hand the opponent a fork. If no such threat exists we sit on the
    first fork cell.
    """
    name = 'block fork'

    def choose_position(self, mark, board):
        opponent = mark.opponent
        forks = fork_positions(opponent, board)
        if not forks:
            return None
        if len(forks) == 1:
            return forks[0]
        for position in board.empty_positions():
            after = board.with_mark(position, mark)
            threats = winning_positions(mark, after)
            if not threats:
                continue
            if len(threats) > 1:
                return position
            defended = after.with_mark(threats[0], opponent)
            if len(winning_positions(opponent, defended)) < 2:
                return position
        return forks[0]


class CenterTactic(Tactic):
    """
    #5: take the center
    """
    name = 'center'

    def choose_position(self, mark, board):
        center = board.center_position()
        if center is not None and board.is_empty(center):
            return center
        return None


class OppositeCornerTactic(Tactic):
    """
    #6: answer an opponent's corner with the corner across from it
    """
    name = 'opposite corner'

    def choose_position(self, mark, board):
        for corner in board.corner_positions():
            if board.mark_at(corner) is mark.opponent:
                opposite = board.opposite_corner(corner)
                if board.is_empty(opposite):
                    return opposite
        return None


class EmptyCornerTactic(Tactic):
    """
    #7: first empty corner, checked top-left, top-right, bottom-right, bottom-left
    """
    name = 'empty corner'

    def choose_position(self, mark, board):
        empty_corners = board.intersect_empty_positions(board.corner_positions())
        return empty_corners[0] if empty_corners else None


class EmptySideTactic(Tactic):
    """
    #8: first empty side cell
    """
    name = 'empty side'

    def choose_position(self, mark, board):
        empty_sides = board.intersect_empty_positions(board.side_positions())
        return empty_sides[0] if empty_sides else None
