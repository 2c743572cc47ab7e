"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Sequence

# Add src (package imports) and the repository root (main.py) to path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """Stand-in random source whose randrange() yields fixed indices."""

    def __init__(self, indices: Sequence[int]) -> None:
        self._indices = iter(indices)

    def randrange(self, start, stop=None, step=1):
        return next(self._indices)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for boards with mines at the given flat indices."""
    def _make(width: int, height: int, mine_indices: Sequence[int]) -> Board:
        return Board.generate(
            width, height, len(mine_indices), rng=ScriptedRandom(mine_indices)
        )
    return _make


@pytest.fixture
def empty_board() -> Board:
    """Create a board that has not been populated."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a 9x9 board with 10 mines from a fixed seed."""
    return Board.generate(9, 9, 10, rng=random.Random(42))


@pytest.fixture
def corner_mine_board(make_board) -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return make_board(3, 3, [8])


@pytest.fixture
def mine_free_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.generate(5, 5, 0)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create an undiscovered cell."""
    return Cell(adjacent_mines=0)


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
