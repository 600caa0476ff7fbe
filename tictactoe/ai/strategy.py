import logging

from .tactics import (
    WinTactic, BlockTactic, ForkTactic, BlockForkTactic,
    CenterTactic, OppositeCornerTactic, EmptyCornerTactic, EmptySideTactic,
)

logger = logging.getLogger(__name__)


def newell_and_simon_tactics():
    """
    the eight tactics in priority order
    """
    return (
        WinTactic(),
        BlockTactic(),
        ForkTactic(),
        BlockForkTactic(),
        CenterTactic(),
        OppositeCornerTactic(),
        EmptyCornerTactic(),
        EmptySideTactic(),
    )


class NewellAndSimonStrategy:
    """
    asks each tactic in turn and commits to the first answer
    """
    def __init__(self, tactics=None):
        self.tactics = tuple(tactics) if tactics is not None else newell_and_simon_tactics()

    def choose_position(self, mark, board):
        """
        position for mark, or None when no tactic has a move (board full)
        """
        for tactic in self.tactics:
            position = tactic.choose_position(mark, board)
            if position is not None:
                logger.debug("%s tactic puts %s at %s", tactic.name, mark.value, tuple(position))
                return position
        logger.debug("no tactic found a move for %s", mark.value)
        return None


class ComputerPlayer:
    """
    plays one mark using a strategy
    """
    def __init__(self, mark, strategy=None):
        self.mark = mark
        self.strategy = strategy or NewellAndSimonStrategy()

    def choose_move(self, game_logic):
        """
        (row, col) to play in game_logic, None if the game is over or it's not our turn
        """
        if game_logic.game_over:
            return None
        if game_logic.current_mark is not self.mark:
            logger.warning("asked to move for %s on %s's turn",
                           self.mark.value, game_logic.current_mark.value)
            return None
        return self.strategy.choose_position(self.mark, game_logic.game_board)
