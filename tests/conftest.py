"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src (and the root, for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x10 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle; every safe cell is a 1."""
    return Board.from_layout(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """2x2 board with a single mine at (0, 0)."""
    return Board.from_layout(2, 2, [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return Board.from_layout(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines at col 3."""
    return Board.from_layout(5, 5, [(row, 3) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


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
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 10, 10)


@pytest.fixture
def tiny_config() -> BoardConfig:
    """3x3 configuration with one mine."""
    return BoardConfig(3, 3, 1)
