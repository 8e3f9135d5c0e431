"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, new_game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 15 mines from a fixed seed."""
    return new_game(10, 15, np.random.default_rng(1234))


@pytest.fixture
def small_board() -> Board:
    """
    Create a 3x3 board with a single mine in the corner.

        * 1 .
        1 1 .
        . . .
    """
    return Board.with_mines(BoardConfig(3, 1), [(0, 0)])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    Create a 5x5 board with one mine at the bottom right.

    Clearing (0, 0) floods everything except the mine.
    """
    return Board.with_mines(BoardConfig(5, 1), [(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a column of mines.

        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return Board.with_mines(
        BoardConfig(5, 5), [(row, 2) for row in range(5)]
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a cleared cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.clear()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 15)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for repeatable boards."""
    return np.random.default_rng(42)
