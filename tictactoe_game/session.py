"""
Game session for TicTacToe.
Drives turn order, applies moves, and keeps the score across rounds.
"""

import logging
from typing import Optional, List, Tuple

from .config import GameConfig
from .game_state import (
    Board,
    Cell,
    Mark,
    Outcome,
    RoundState,
    Score,
    empty_board,
    to_mark,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


class GameSession:
    """
    The state of a TicTacToe session.

    Tracks:
    - The 9-cell board
    - Which mark moves next
    - Round state (in progress, won, drawn)
    - Score across rounds

    Hosts call play_move / reset_round / reset_all and then read
    the projections (board, status, score, ...) to redraw.
    Everything shown to the host is derived from the board, the
    mark to move, the round state, and the score.
    """

    def __init__(self, config=GameConfig):
        self.config = config
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._board: List[Cell] = empty_board()
        self._current_mark = Mark(config.FIRST_MARK)
        self._state = RoundState.IN_PROGRESS
        self._score = Score()

    @classmethod
    def from_board(cls, board: Board, config=GameConfig) -> "GameSession":
        """
        Build a session from an existing board.

        The mark to move is inferred from how many marks each side has
        placed, and the round state from evaluating the board. The
        score starts at zero.

        Raises:
            ValueError: If the board is not 9 cells or holds an unknown symbol.
        """
        if len(board) != config.CELL_COUNT:
            raise ValueError(f"Board must have exactly {config.CELL_COUNT} cells, got {len(board)}")

        session = cls(config)
        session._board = [to_mark(cell) if cell else None for cell in board]

        x_count = session._board.count(Mark.X)
        o_count = session._board.count(Mark.O)
        last_mover = Mark.X if x_count > o_count else Mark.O

        outcome = session.win_checker.evaluate(session._board)
        if outcome.is_win:
            session._state = RoundState.WON
            session._current_mark = outcome.winner
        elif outcome.is_draw:
            session._state = RoundState.DRAWN
            session._current_mark = last_mover
        elif x_count + o_count > 0:
            session._current_mark = last_mover.opposite()

        return session

    # ==================== OPERATIONS ====================

    def play_move(self, index: int) -> bool:
        """
        Place the current mark at a cell.

        Invalid moves (round over, bad index, occupied cell) are
        ignored and leave the session untouched.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was applied, False if it was ignored.
        """
        result = self.validator.validate_move(self._board, index, self._state)
        if not result.is_valid:
            logger.debug("Ignored move at %r: %s", index, result.error_message)
            return False

        mark = self._current_mark
        self._board[index] = mark
        logger.info("%s played cell %d", mark.value, index)

        outcome = self.win_checker.evaluate(self._board)
        if outcome.is_win:
            self._state = RoundState.WON
            self._score.record(outcome)
            logger.info("%s wins with line %s", outcome.winner.value, list(outcome.line))
        elif outcome.is_draw:
            self._state = RoundState.DRAWN
            self._score.record(outcome)
            logger.info("Round drawn")
        else:
            self._current_mark = mark.opposite()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board:\n%s", self.render())

        return True

    def reset_round(self) -> None:
        """Reset only the board to start a new round; keeps score."""
        self._board = empty_board()
        self._current_mark = Mark(self.config.FIRST_MARK)
        self._state = RoundState.IN_PROGRESS
        logger.info("Round reset")

    def reset_all(self) -> None:
        """Reset board and score."""
        self.reset_round()
        self._score.reset()
        logger.info("Score reset")

    # camelCase names for hosts that call playMove / resetRound / resetAll
    playMove = play_move
    resetRound = reset_round
    resetAll = reset_all

    # ==================== PROJECTIONS ====================

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board)

    @property
    def current_mark(self) -> Mark:
        return self._current_mark

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def outcome(self) -> Outcome:
        return self.win_checker.evaluate(self._board)

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.outcome.line

    @property
    def score(self) -> Score:
        """A copy of the score; changing it does not affect the session."""
        return Score(self._score.x_wins, self._score.o_wins, self._score.draws)

    @property
    def status(self) -> str:
        """Status line for the host, e.g. "Turn: X"."""
        if self._state == RoundState.WON:
            return self.config.STATUS_WIN.format(mark=self.winner.value)
        if self._state == RoundState.DRAWN:
            return self.config.STATUS_DRAW
        return self.config.STATUS_TURN.format(mark=self._current_mark.value)

    @property
    def can_play(self) -> bool:
        return self._state == RoundState.IN_PROGRESS

    @property
    def valid_moves(self) -> List[int]:
        return self.validator.get_valid_moves(self._board, self._state)

    def is_cell_playable(self, index: int) -> bool:
        """False for filled cells, bad indices, and every cell once the round is over."""
        return self.validator.validate_move(self._board, index, self._state).is_valid

    def is_highlighted(self, index: int) -> bool:
        """True if the cell is part of the winning line."""
        line = self.winning_line
        return line is not None and index in line

    def snapshot(self) -> dict:
        """
        Get every projection as plain values.

        Returns:
            Dict with board, current_mark, state, status,
            winning_line, score, and valid_moves.
        """
        line = self.winning_line
        return {
            "board": [cell.value if cell else None for cell in self._board],
            "current_mark": self._current_mark.value,
            "state": self._state.value,
            "status": self.status,
            "winning_line": list(line) if line else None,
            "score": self._score.as_dict(),
            "valid_moves": self.valid_moves,
        }

    def render(self) -> str:
        """Get the board as a 3-line text grid."""
        size = self.config.BOARD_SIZE
        symbols = [cell.value if cell else self.config.EMPTY_SYMBOL for cell in self._board]
        return "\n".join(
            " ".join(symbols[row * size:(row + 1) * size]) for row in range(size)
        )

    def __repr__(self) -> str:
        return f"GameSession(status={self.status!r}, score={self._score.as_dict()})"
