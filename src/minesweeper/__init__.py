"""
Minesweeper game module.

Provides the board engine, cell state, and a Gymnasium adapter.
"""
from .errors import MinesweeperError, InvalidConfiguration, OutOfBounds
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    GameStatus,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
)
from .environment import MinesweeperEnv, render_text

__all__ = [
    "MinesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "GameStatus",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "MinesweeperEnv",
    "render_text",
]
