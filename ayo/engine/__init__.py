"""Turn driver and console rendering."""

from .session import (
    INVALID_MOVE_MESSAGE,
    MOVE_PROMPT,
    NOT_A_NUMBER_MESSAGE,
    GameConfig,
    GameEngine,
    format_board,
)

__all__ = [
    "INVALID_MOVE_MESSAGE",
    "MOVE_PROMPT",
    "NOT_A_NUMBER_MESSAGE",
    "GameConfig",
    "GameEngine",
    "format_board",
]
