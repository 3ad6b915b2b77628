"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, RoundState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Round must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        index: int,
        state: RoundState = RoundState.IN_PROGRESS
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board cells.
            index: Cell to place the mark on (0-8).
            state: Current round state.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if round is over
        if state != RoundState.IN_PROGRESS:
            return ValidationResult(
                is_valid=False,
                error_message="Round is already over"
            )

        # bool is an int subclass, but True is not a cell
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer 0-{GameConfig.CELL_COUNT - 1}."
            )

        if not 0 <= index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = board[index]
        if occupant:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {getattr(occupant, 'value', occupant)}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(
        self,
        board: Board,
        state: RoundState = RoundState.IN_PROGRESS
    ) -> List[int]:
        """
        Get all cells the current player may play.

        Returns:
            Ascending list of empty cell indices, or [] once the round is over.
        """
        if state != RoundState.IN_PROGRESS:
            return []

        return [index for index, cell in enumerate(board) if not cell]
