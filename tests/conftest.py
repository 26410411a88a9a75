"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, generate


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded board with the default 60x40 / 300 layout."""
    return Board(rng=1234)


@pytest.fixture
def small_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return generate(9, 9, 10, rng=42)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return generate(5, 5, 0, rng=0)


@pytest.fixture
def walled_board() -> Board:
    """
    5x3 board split by a column of mines.

        . . * . .
        . . * . .
        . . * . .
    """
    return Board.from_mines(5, 3, [(2, 0), (2, 1), (2, 2)])


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


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
