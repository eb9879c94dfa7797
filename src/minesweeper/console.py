"""
Console front end for Minesweeper.

Handles prompting for board setup, reading "A1"-style moves, and the
play-again loop. Input and output are injectable callables so the game
can be driven by scripts and tests.
"""
import logging
from typing import Callable, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, GameState, SAFE_ZONE_CELLS
from .render import render_board


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_CONSOLE_SIZE = 4
# Rows are labelled A-Z
MAX_CONSOLE_SIZE = 26
MAX_MINE_DENSITY = 0.35

EXIT_KEY = "e"

WELCOME_MESSAGE = "Welcome to Minesweeper!"
INVALID_MOVE_MESSAGE = "Invalid input. Try again."
INVALID_NUMBER_MESSAGE = "Please enter a whole number."
TOO_MANY_MINES_MESSAGE = "Too many mines!"
NEGATIVE_MINES_MESSAGE = "Number of mines cannot be negative."
SIZE_OUT_OF_RANGE_MESSAGE = (
    f"Grid size must be between {MIN_CONSOLE_SIZE} and {MAX_CONSOLE_SIZE}."
)
LOSS_MESSAGE = "Oh no, you detonated a mine! Game over."
WIN_MESSAGE = "Congratulations, you have won the game!"
PLAY_AGAIN_PROMPT = "Press e for exit or Press any key to play again..."
EXIT_MESSAGE = "Exiting..."


def max_mines_for(size: int) -> int:
    """Largest mine count the console allows for a board size."""
    total_cells = size * size
    return max(
        min(int(total_cells * MAX_MINE_DENSITY), total_cells - SAFE_ZONE_CELLS),
        0,
    )


def parse_coordinate(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a move such as "A1" or "c12" into a 0-based position.

    Args:
        text: Row letter followed by a 1-based column number.
        size: Board size used for the range check.

    Returns:
        (row, col) tuple.

    Raises:
        ValueError: If the text is malformed or outside the board.
    """
    move = text.strip().upper()
    if len(move) < 2:
        raise ValueError(f"Move too short: {text!r}")

    row = ord(move[0]) - ord("A")
    if not 0 <= row < size:
        raise ValueError(f"Row out of range: {move[0]!r}")

    digits = move[1:]
    if not digits.isdigit():
        raise ValueError(f"Column is not a number: {digits!r}")

    col = int(digits) - 1
    if not 0 <= col < size:
        raise ValueError(f"Column out of range: {digits!r}")

    return row, col


# ============================================================================
# Console Game
# ============================================================================

class ConsoleGame:
    """
    Interactive Minesweeper session on the console.

    Attributes:
        input_fn: Callable that shows a prompt and returns a line.
        output_fn: Callable that displays a line of text.
        rng: Random generator shared by every board of the session.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.rng = rng if rng is not None else np.random.default_rng()

    # ========================================================================
    # Prompts
    # ========================================================================

    def ask_int(self, prompt: str) -> int:
        """Prompt until the answer is a whole number."""
        while True:
            answer = self.input_fn(prompt)
            try:
                return int(answer.strip())
            except ValueError:
                self.output_fn(INVALID_NUMBER_MESSAGE)

    def ask_size(self) -> int:
        """Prompt for the grid size."""
        prompt = (
            "Enter the size of the grid "
            f"(e.g. 4 for a 4x4 grid, {MIN_CONSOLE_SIZE} to {MAX_CONSOLE_SIZE}): "
        )
        while True:
            size = self.ask_int(prompt)
            if MIN_CONSOLE_SIZE <= size <= MAX_CONSOLE_SIZE:
                return size
            self.output_fn(SIZE_OUT_OF_RANGE_MESSAGE)

    def ask_mines(self, size: int) -> int:
        """Prompt for a mine count that fits the board."""
        max_mines = max_mines_for(size)
        prompt = f"Enter the number of mines (max {max_mines}): "
        while True:
            mines = self.ask_int(prompt)
            if mines < 0:
                self.output_fn(NEGATIVE_MINES_MESSAGE)
            elif mines > max_mines:
                self.output_fn(TOO_MANY_MINES_MESSAGE)
            else:
                return mines

    def ask_move(self, size: int) -> Tuple[int, int]:
        """Prompt until the answer is a coordinate on the board."""
        while True:
            answer = self.input_fn("Select a square to reveal (e.g. A1): ")
            try:
                return parse_coordinate(answer, size)
            except ValueError as exc:
                logger.debug("Rejected move %r: %s", answer, exc)
                self.output_fn(INVALID_MOVE_MESSAGE)

    # ========================================================================
    # Game Flow
    # ========================================================================

    def play_round(self) -> GameState:
        """
        Set up and play a single game.

        Returns:
            GameState.WON or GameState.LOST.
        """
        size = self.ask_size()
        config = BoardConfig(size, self.ask_mines(size))
        board = Board.from_config(config, rng=self.rng)
        logger.debug("Starting %dx%d game with %d mines",
                     size, size, config.num_mines)

        while not board.is_game_over:
            self.output_fn(render_board(board))
            row, col = self.ask_move(size)

            if not board.reveal(row, col):
                self.output_fn(render_board(board, reveal_all=True))
                self.output_fn(LOSS_MESSAGE)
                break

            if board.is_game_won:
                self.output_fn(render_board(board, reveal_all=True))
                self.output_fn(WIN_MESSAGE)
                break

        return board.game_state

    def run(self) -> None:
        """Play rounds until the player chooses to exit."""
        self.output_fn(WELCOME_MESSAGE)
        while True:
            self.play_round()
            answer = self.input_fn(PLAY_AGAIN_PROMPT)
            if answer.strip().lower() == EXIT_KEY:
                self.output_fn(EXIT_MESSAGE)
                return
