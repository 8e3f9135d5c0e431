"""
Minesweeper game module.

Provides the board engine (mine placement, clearing with flood fill,
flagging, win/loss detection) plus a Gymnasium environment and a
terminal front end built on it.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    DEFAULT_CONFIG,
    new_game,
    clear,
    toggle_flag,
)
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "new_game",
    "clear",
    "toggle_flag",
    "MinesweeperEnv",
    "make_vec_env",
]
