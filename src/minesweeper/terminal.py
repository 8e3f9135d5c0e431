"""
Terminal presentation for Minesweeper.

Renders a board as text, parses typed commands and runs an
interactive game loop on top of the board engine.
"""
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .board import Board, BoardConfig, DEFAULT_CONFIG, new_game
from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


# ============================================================================
# Constants
# ============================================================================

PLAYING_PROMPT = "Enter 'c ROW COL' to clear, 'f ROW COL' to flag, 'r' to restart, 'q' to quit"
WON_PROMPT = "You won! Enter 'r' for a new game or 'q' to quit"
LOST_PROMPT = "Game over. Enter 'r' for a new game or 'q' to quit"

CLEAR = "clear"
FLAG = "flag"
RESET = "reset"
QUIT = "quit"

_COMMAND_ALIASES = {
    "c": CLEAR,
    "clear": CLEAR,
    "f": FLAG,
    "flag": FLAG,
    "r": RESET,
    "reset": RESET,
    "q": QUIT,
    "quit": QUIT,
}


@dataclass(frozen=True)
class Command:
    """A parsed player command; row and col are set for clear and flag."""

    action: str
    row: Optional[int] = None
    col: Optional[int] = None


# ============================================================================
# Rendering
# ============================================================================

def _symbol(value: int) -> str:
    """Map an observation value to its board character."""
    if value == HIDDEN_VALUE:
        return "."
    if value == FLAGGED_VALUE:
        return "F"
    if value == MINE_VALUE:
        return "*"
    if value == 0:
        return " "
    return str(value)


def render_board(board: Board) -> str:
    """
    Render board as text with row and column numbers.

    Mines are shown for every mine once the game is over.
    """
    obs = board.get_observation()
    width = len(str(board.size - 1))

    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(board.size)
    )
    lines = [header]
    for row in range(board.size):
        cells = " ".join(_symbol(value).rjust(width) for value in obs[row])
        lines.append(f"{str(row).rjust(width)} {cells}")

    return "\n".join(lines)


def prompt(board: Board) -> str:
    """Get the status line for the current game state."""
    if not board.game_over:
        return PLAYING_PROMPT
    if board.won:
        return WON_PROMPT
    return LOST_PROMPT


# ============================================================================
# Input
# ============================================================================

def parse_command(line: str) -> Command:
    """
    Parse a line of player input.

    Args:
        line: Text such as "c 3 4", "f 0 0", "r" or "q".

    Returns:
        The parsed command.

    Raises:
        ValueError: If the line is not a valid command.
    """
    parts = line.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")

    action = _COMMAND_ALIASES.get(parts[0])
    if action is None:
        raise ValueError(f"Unknown command: {parts[0]!r}")

    if action in (RESET, QUIT):
        if len(parts) != 1:
            raise ValueError(f"'{parts[0]}' takes no arguments")
        return Command(action)

    if len(parts) != 3:
        raise ValueError(f"'{parts[0]}' needs a row and a column")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError(
            f"Row and column must be numbers: {line.strip()!r}"
        ) from None
    return Command(action, row, col)


# ============================================================================
# Game Loop
# ============================================================================

def play(
    config: BoardConfig = DEFAULT_CONFIG,
    rng: Optional[np.random.Generator] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Board:
    """
    Run an interactive game until the player quits or input runs out.

    Clear and flag commands are ignored once the game is over; only
    restart and quit are accepted then.

    Args:
        config: Board size and mine count.
        rng: Random source shared by every new board.
        read: Reads one line of input, given a prompt.
        write: Writes a block of output.

    Returns:
        The board in play when the loop ended.
    """
    if rng is None:
        rng = np.random.default_rng()
    board = new_game(config.size, config.num_mines, rng)

    while True:
        write(render_board(board))
        write(prompt(board))
        try:
            line = read("> ")
        except EOFError:
            return board

        try:
            command = parse_command(line)
        except ValueError as error:
            write(str(error))
            continue

        if command.action == QUIT:
            return board
        if command.action == RESET:
            board = new_game(config.size, config.num_mines, rng)
            continue
        if board.game_over:
            write("The game is over")
            continue

        try:
            if command.action == CLEAR:
                board.clear(command.row, command.col)
            else:
                board.toggle_flag(command.row, command.col)
        except IndexError as error:
            write(str(error))
