"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src and the repo root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minefield import Board, BoardConfig, GameController, Tile, build_board


def _board_from_rows(*rows: str) -> Board:
    """Build a board from strings where 'X' marks a hazard."""
    return build_board([[char == "X" for char in row] for row in rows])


class FakeClock:
    """Manually advanced clock for elapsed-time tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board():
    """Factory building a board from strings where 'X' marks a hazard."""
    return _board_from_rows


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with hazards at (0,0) and (2,2)."""
    return _board_from_rows(
        "X..",
        "...",
        "..X",
    )


@pytest.fixture
def single_hazard_board() -> Board:
    """2x2 board with one hazard at (0,0)."""
    return _board_from_rows(
        "X.",
        "..",
    )


@pytest.fixture
def wide_board() -> Board:
    """10x10 board with hazards at (1,1) and (5,5)."""
    rows = ["." * 10 for _ in range(10)]
    rows[1] = ".X........"
    rows[5] = ".....X...."
    return _board_from_rows(*rows)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed seed."""
    return random.Random(1234)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def corner_game(corner_board: Board, clock: FakeClock) -> GameController:
    """Session on the corner board whose handicap solves one tile only."""
    return GameController(corner_board, handicap_radius=0, clock=clock)


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden safe tile."""
    return Tile()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 10, 20, 3)
