"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell clearing,
flood fill and game state management.
"""
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns (the board is square).
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if self.num_mines < 1:
            raise ValueError(
                f"Number of mines must be positive, got {self.num_mines}"
            )
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(
                f"Too many mines: {self.num_mines} (max {max_mines})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


DEFAULT_CONFIG = BoardConfig(10, 15)


def shuffle_positions(
    positions: List[Position], rng: np.random.Generator
) -> None:
    """
    Shuffle positions in place with Fisher-Yates.

    Walks from the last index down to 1, swapping each element with a
    uniformly chosen one at or below it.
    """
    for i in range(len(positions) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        positions[i], positions[j] = positions[j], positions[i]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, clearing logic,
    and win/lose conditions. Mines are placed on construction, either
    at ``mine_positions`` or at random using ``rng``.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    mine_positions: InitVar[Optional[Sequence[Position]]] = None
    rng: InitVar[Optional[np.random.Generator]] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _cleared_count: int = 0

    def __post_init__(
        self,
        mine_positions: Optional[Sequence[Position]],
        rng: Optional[np.random.Generator],
    ) -> None:
        """Build the grid and lay the mines."""
        self._init_grid()
        if mine_positions is None:
            mine_positions = self._random_mine_positions(rng)
        self._place_mines(mine_positions)
        self._calculate_adjacent_mines()

    @classmethod
    def with_mines(
        cls, config: BoardConfig, positions: Sequence[Position]
    ) -> "Board":
        """Create a board with mines at exactly the given positions."""
        return cls(config, mine_positions=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.size)]
            for _ in range(self.config.size)
        ]

    def _random_mine_positions(
        self, rng: Optional[np.random.Generator]
    ) -> List[Position]:
        """Shuffle every position and keep the first num_mines."""
        if rng is None:
            rng = np.random.default_rng()
        positions = [
            (row, col)
            for row in range(self.config.size)
            for col in range(self.config.size)
        ]
        shuffle_positions(positions, rng)
        return positions[:self.config.num_mines]

    def _place_mines(self, positions: Sequence[Position]) -> None:
        """
        Mark the given positions as mines.

        Args:
            positions: (row, col) pairs, one per configured mine.
        """
        if len(positions) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        if len(set(positions)) != len(positions):
            raise ValueError("Mine positions must be unique")
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
            self._grid[row][col].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                count = self._count_adjacent_mines(row, col)
                self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _check_position(self, row: int, col: int) -> None:
        """Raise IndexError for a position outside the board."""
        if not self._is_valid_position(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside a "
                f"{self.config.size}x{self.config.size} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def clear(self, row: int, col: int) -> bool:
        """
        Clear a cell at the given position.

        A flagged cell is cleared too, losing its flag. If the cell has
        no adjacent mines its neighbors are cleared as well, spreading
        through the whole zero region. Clearing a mine loses the game.
        Once the game is over the board no longer changes.

        Args:
            row: Row index to clear.
            col: Column index to clear.

        Returns:
            True if any cell was cleared, False otherwise.

        Raises:
            IndexError: If the position is off the board.
        """
        self._check_position(row, col)
        if self._game_state != GameState.PLAYING:
            return False
        if self._grid[row][col].is_cleared:
            return False

        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.clear():
                continue

            if cell.is_mine:
                self._game_state = GameState.LOST
                return True

            self._cleared_count += 1
            self._check_win_condition()

            if cell.adjacent_mines == 0:
                stack.extend(
                    (neighbor_row, neighbor_col)
                    for neighbor_row, neighbor_col
                    in self._get_neighbors(current_row, current_col)
                    if not self._grid[neighbor_row][neighbor_col].is_cleared
                )

        return True

    def _check_win_condition(self) -> None:
        """Win once every non-mine cell is cleared."""
        remaining = self.config.total_cells - self._cleared_count
        if remaining == self.config.num_mines:
            self._game_state = GameState.WON

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is cleared or
            the game is over.

        Raises:
            IndexError: If the position is off the board.
        """
        self._check_position(row, col)
        if self._game_state != GameState.PLAYING:
            return False
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Rows and columns of the square board."""
        return self.config.size

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def game_over(self) -> bool:
        """Check if the game has ended, won or lost."""
        return self._game_state != GameState.PLAYING

    @property
    def won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def cleared_count(self) -> int:
        """Number of non-mine cells cleared so far."""
        return self._cleared_count

    @property
    def remaining_safe(self) -> int:
        """Number of non-mine cells still to clear."""
        safe_cells = self.config.total_cells - self.config.num_mines
        return safe_cells - self._cleared_count

    @property
    def flags_placed(self) -> int:
        """Number of cells currently flagged."""
        return sum(1 for _, _, cell in self.cells() if cell.is_flagged)

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising IndexError if off the board."""
        self._check_position(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                yield row, col, self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for renderers and agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = cleared with adjacent count
                9 = mine (cleared, or any mine once the game is over)
        """
        show_mines = self.game_over
        obs = np.zeros((self.config.size, self.config.size), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation(show_mine=show_mines)
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be cleared.

        Returns:
            List of (row, col) positions that are not yet cleared, or an
            empty list once the game is over.
        """
        if self.game_over:
            return []
        return [
            (row, col) for row, col, cell in self.cells()
            if not cell.is_cleared
        ]


# ============================================================================
# Engine API
# ============================================================================

def new_game(
    size: int = DEFAULT_CONFIG.size,
    num_mines: int = DEFAULT_CONFIG.num_mines,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Start a new game on a fresh, randomly mined board.

    Args:
        size: Rows and columns of the square board.
        num_mines: Mines to place, 0 < num_mines < size * size.
        rng: Random source; a seeded generator gives a repeatable layout.

    Raises:
        ValueError: If size or num_mines are out of range.
    """
    return Board(BoardConfig(size, num_mines), rng=rng)


def clear(board: Board, row: int, col: int) -> Board:
    """Clear a cell and return the (mutated) board."""
    board.clear(row, col)
    return board


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """Toggle the flag on a cell and return the (mutated) board."""
    board.toggle_flag(row, col)
    return board
