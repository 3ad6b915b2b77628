"""
Game state types for TicTacToe.
Marks, round states, outcomes, and the running score.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence, Union
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is empty (None) or holds a mark
Cell = Optional[Mark]
Board = Sequence[Optional[Union[Mark, str]]]


class RoundState(Enum):
    """Where the current round stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class OutcomeKind(Enum):
    """Result of evaluating a board."""
    NO_RESULT = "no_result"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The evaluated result of a board.

    Only WIN outcomes carry a winner and the winning line.
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def no_result(cls) -> "Outcome":
        return cls(OutcomeKind.NO_RESULT)

    @classmethod
    def win(cls, mark: Mark, line: Sequence[int]) -> "Outcome":
        line = tuple(line)
        if len(line) != 3:
            raise ValueError(f"A winning line has 3 cells, got {len(line)}")
        return cls(OutcomeKind.WIN, winner=Mark(mark), line=line)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_win(self) -> bool:
        return self.kind == OutcomeKind.WIN

    @property
    def is_draw(self) -> bool:
        return self.kind == OutcomeKind.DRAW

    @property
    def is_over(self) -> bool:
        """True for a win or a draw."""
        return self.kind != OutcomeKind.NO_RESULT


@dataclass
class Score:
    """
    Running score across the rounds of a session.

    Counters only go up; reset() is the one way back to zero.
    """
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        """Count a finished round. NO_RESULT outcomes are ignored."""
        if outcome.is_win:
            if outcome.winner == Mark.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif outcome.is_draw:
            self.draws += 1

    def wins_for(self, mark: Mark) -> int:
        """Get the number of rounds won by a mark."""
        return self.x_wins if Mark(mark) == Mark.X else self.o_wins

    def reset(self) -> None:
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def as_dict(self) -> dict:
        """Scoreboard shape used by hosts: {"X": .., "O": .., "draws": ..}."""
        return {"X": self.x_wins, "O": self.o_wins, "draws": self.draws}


def empty_board() -> List[Cell]:
    """Get a fresh board with every cell empty."""
    return [None] * GameConfig.CELL_COUNT


def to_mark(value) -> Cell:
    """
    Normalise a cell value to a Mark.

    Accepts None, a Mark, or the strings "X"/"O".
    Raises ValueError for anything else.
    """
    if value is None:
        return None
    return Mark(value)

