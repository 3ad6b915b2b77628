"""
Game configuration for TicTacToe.
All the settings for the board, status messages, and logging.
"""

import logging
from typing import Optional


class GameConfig:
    """
    Configuration class for game settings.
    Subclass and override to change the status wording.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row by row

    # X always opens a round
    FIRST_MARK = "X"

    # ==================== STATUS TEXT ====================
    STATUS_WIN = "Winner: {mark}"
    STATUS_DRAW = "It's a draw."
    STATUS_TURN = "Turn: {mark}"

    # Used by GameSession.render() for empty cells
    EMPTY_SYMBOL = "."

    # ==================== LOGGING SETTINGS ====================
    LOGGER_NAME = "tictactoe_game"
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[int] = None, config=GameConfig) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Safe to call more than once; a handler is only added the first time.

    Args:
        level: Logging level (default: config.LOG_LEVEL).
        config: Config class to read logger name and format from.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL if level is None else level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)

    return logger
