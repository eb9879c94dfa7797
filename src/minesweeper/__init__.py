"""
Minesweeper game module.

Provides core game logic including board management and cell state,
plus the console game and a Gymnasium environment built on top of it.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, SAFE_ZONE_CELLS
from .render import render_board
from .console import ConsoleGame, max_mines_for, parse_coordinate
from .environment import MinesweeperEnv
from .evaluation import Evaluator

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "SAFE_ZONE_CELLS",
    "render_board",
    "ConsoleGame",
    "max_mines_for",
    "parse_coordinate",
    "MinesweeperEnv",
    "Evaluator",
]
