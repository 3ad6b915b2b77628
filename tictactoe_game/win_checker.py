"""
Win checker for TicTacToe.
Checks if a mark has won or if the round is a draw.
"""

from typing import Optional, List, Tuple

from .game_state import Board, Cell, Mark, Outcome


# All possible winning lines as cell indices, in the order they are checked
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows, top to bottom
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns, left to right
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).

    Boards are 9-cell sequences holding None, Mark members,
    or the strings "X" / "O".
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The 9 cells of the board.

        Returns:
            Win for the first completed line, Draw if the board is
            full with no line, NoResult otherwise.
        """
        cells = self._cells(board)

        for line in self.WINNING_LINES:
            mark = self._check_line(cells, line)
            if mark is not None:
                return Outcome.win(mark, line)

        if self.is_full(cells):
            return Outcome.draw()

        return Outcome.no_result()

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line if there is one."""
        return self.evaluate(board).line

    def check_draw(self, board: Board) -> bool:
        """
        Check if the round is a draw.

        A draw occurs when all cells are filled AND no line is complete.
        """
        return self.evaluate(board).is_draw

    def is_full(self, board: Board) -> bool:
        return all(cell is not None for cell in self._cells(board))

    def _check_line(self, cells: List[Cell], line: Tuple[int, int, int]) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
        return None

    def _cells(self, board: Board) -> List[Cell]:
        # Empty strings count as empty cells, same as None
        return [Mark(cell) if cell else None for cell in board]


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Evaluate a board. See WinChecker.evaluate."""
    return _checker.evaluate(board)


def calculate_winner(board: Board) -> Tuple[Optional[Mark], Optional[Tuple[int, int, int]]]:
    """
    Determine the winner and winning line for a board.

    Returns:
        (winner, line), or (None, None) if nobody has won.
    """
    outcome = _checker.evaluate(board)
    return outcome.winner, outcome.line


def is_draw(board: Board) -> bool:
    """True if the board is full and there is no winner."""
    return _checker.check_draw(board)
