"""
Board module for Minesweeper game.

Implements the board-state machine: mine placement, cell revealing
with flood fill, flag bookkeeping, and win/loss determination.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field, replace
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import InvalidConfiguration, OutOfBounds


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
EASY = BoardConfig(8, 10, 10)
MEDIUM = BoardConfig(14, 18, 40)
HARD = BoardConfig(20, 24, 99)

PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


@dataclass(frozen=True)
class GameStatus:
    """Read-only snapshot of the board counters and outcome."""

    nrows: int
    ncols: int
    nmines: int
    nmarked: int
    nuncovered: int
    done: bool
    exploded: bool

    @property
    def mines_remaining(self) -> int:
        """Mines left to flag; negative when over-flagged."""
        return self.nmines - self.nmarked


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Mines are placed when the board is
    initialized, using ``rng`` so layouts can be reproduced.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _cells_revealed: int = 0
    _cells_flagged: int = 0
    layout: InitVar[Optional[Iterable[Position]]] = None

    def __post_init__(self, layout: Optional[Iterable[Position]]) -> None:
        """Lay out the first game from the configuration."""
        self.initialize(
            self.config.rows,
            self.config.cols,
            self.config.num_mines,
            mine_positions=layout,
        )

    @classmethod
    def from_layout(
        cls,
        rows: int,
        cols: int,
        mine_positions: Iterable[Position],
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with mines at fixed positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mine_positions: (row, col) of every mine.
            rng: Generator used by later resets of this board.

        Returns:
            Board ready to play with the given layout.
        """
        positions = list(mine_positions)
        return cls(
            BoardConfig(rows, cols, len(positions)),
            rng=rng if rng is not None else random.Random(),
            layout=positions,
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(
        self,
        rows: int,
        cols: int,
        mines: int,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Start a new game, discarding any previous state.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mines: Number of mines to place.
            mine_positions: Optional explicit layout. Random placement
                is used when omitted.

        Raises:
            InvalidConfiguration: If the arguments do not describe a
                playable board. The current game is left untouched.
        """
        config = BoardConfig(rows, cols, mines)
        if mine_positions is None:
            positions = self._choose_mine_positions(config)
        else:
            positions = self._validate_layout(config, mine_positions)

        self.config = config
        self._init_grid()
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._game_state = GameState.PLAYING
        self._cells_revealed = 0
        self._cells_flagged = 0
        logger.debug("New %dx%d board with %d mines", rows, cols, mines)

    def reset(self) -> None:
        """Start a new game with the current configuration."""
        self.initialize(
            self.config.rows, self.config.cols, self.config.num_mines
        )

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _choose_mine_positions(self, config: BoardConfig) -> List[Position]:
        """Sample distinct mine positions uniformly without replacement."""
        positions = [
            (row, col)
            for row in range(config.rows)
            for col in range(config.cols)
        ]
        return self.rng.sample(positions, config.num_mines)

    @staticmethod
    def _validate_layout(
        config: BoardConfig, mine_positions: Iterable[Position]
    ) -> List[Position]:
        """Check an explicit mine layout against the configuration."""
        positions = [(int(row), int(col)) for row, col in mine_positions]
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Mine positions must be distinct")
        if len(positions) != config.num_mines:
            raise InvalidConfiguration(
                f"Expected {config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            if not (0 <= row < config.rows and 0 <= col < config.cols):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
        return positions

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
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
            List of (row, col) tuples for valid neighbors.
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
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.cols)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        Flagged cells are left alone and must be unflagged first.
        If the cell is empty (0 adjacent mines), its connected empty
        region and the numbered cells bordering it are revealed too.
        If the cell is a mine, the game is lost.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if at least one cell was revealed, False otherwise.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        self._check_bounds(row, col)
        if self._game_state != GameState.PLAYING:
            return False

        cell = self._grid[row][col]
        if not self._uncover(cell):
            return False

        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine revealed at (%d, %d)", row, col)
            return True

        if cell.adjacent_mines == 0:
            self._flood_fill(row, col)

        self._check_win_condition()
        return True

    def _uncover(self, cell: Cell) -> bool:
        """Reveal a single hidden cell and count it."""
        if not cell.reveal():
            return False
        self._cells_revealed += 1
        return True

    def _flood_fill(self, row: int, col: int) -> None:
        """
        Reveal the empty region connected to an empty cell.

        Uses a work-list so stack depth does not grow with board size.
        Each position is queued at most once.
        """
        visited = {(row, col)}
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            for position in self._get_neighbors(current_row, current_col):
                if position in visited:
                    continue
                visited.add(position)
                neighbor = self._grid[position[0]][position[1]]
                if not self._uncover(neighbor):
                    continue
                if neighbor.adjacent_mines == 0:
                    queue.append(position)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._cells_revealed >= self.config.safe_cells:
            self._game_state = GameState.WON
            logger.debug("All %d safe cells revealed", self._cells_revealed)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        The number of flags is not capped at the number of mines.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        self._check_bounds(row, col)
        if self._game_state != GameState.PLAYING:
            return False

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._cells_flagged += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_status(self) -> GameStatus:
        """Snapshot the counters and outcome of the current game."""
        return GameStatus(
            nrows=self.config.rows,
            ncols=self.config.cols,
            nmines=self.config.num_mines,
            nmarked=self._cells_flagged,
            nuncovered=self._cells_revealed,
            done=self._game_state != GameState.PLAYING,
            exploded=self._game_state == GameState.LOST,
        )

    def get_rendering(self) -> List[List[str]]:
        """
        Get the display code of every cell, row by row.

        Returns:
            Nested lists of codes: "H" hidden, "F" flagged,
            "0"-"8" revealed count, "M" mine. After a loss every
            mine is shown as "M".
        """
        exploded = self.is_lost
        return [
            [cell.to_code(exploded) for cell in grid_row]
            for grid_row in self._grid
        ]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get a copy of the cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return replace(self._grid[row][col])

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for programmatic players.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine (revealed, or every mine after a loss)
        """
        exploded = self.is_lost
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation(exploded)
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are still hidden.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions

    def mine_positions(self) -> List[Position]:
        """Get (row, col) of every mine, in row-major order."""
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].is_mine
        ]
