"""
Board generation.

Hazards are placed cell by cell with a fixed percent chance, then every
safe cell is given the count of hazards among its eight neighbours.
"""
import random
import time
from typing import List, Optional, Sequence, Tuple

from .board import Board
from .config import DEFAULT_HAZARD_PROBABILITY, BoardConfig
from .tile import HAZARD, Content, Tile


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def get_neighbors(
    row: int, col: int, rows: int, cols: int
) -> List[Tuple[int, int]]:
    """
    Get valid neighboring positions in the Moore neighbourhood.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        rows: Grid height.
        cols: Grid width.

    Returns:
        List of (row, col) tuples; positions off the grid are skipped.
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                neighbors.append((new_row, new_col))
    return neighbors


def default_rng() -> random.Random:
    """Random source seeded from the wall clock, for interactive play."""
    return random.Random(time.time_ns())


# ============================================================================
# Generation Passes
# ============================================================================

def _place_hazards(
    rows: int, cols: int, probability: int, rng: random.Random
) -> List[List[bool]]:
    """Draw 1-100 per cell; a draw at or under ``probability`` is a hazard."""
    return [
        [rng.randint(1, 100) <= probability for _ in range(cols)]
        for _ in range(rows)
    ]


def build_board(hazards: Sequence[Sequence[bool]]) -> Board:
    """
    Count adjacent hazards for a complete layout and wrap it in a Board.

    Args:
        hazards: Rectangular rows of booleans, True marking a hazard.

    Returns:
        Board with every tile hidden and unflagged.
    """
    if not hazards or not hazards[0]:
        raise ValueError("Board dimensions must be positive")
    rows = len(hazards)
    cols = len(hazards[0])
    if any(len(row) != cols for row in hazards):
        raise ValueError("Hazard layout must be rectangular")

    tiles = []
    for row in range(rows):
        tile_row = []
        for col in range(cols):
            if hazards[row][col]:
                tile_row.append(Tile(content=HAZARD))
                continue
            count = sum(
                1 for n_row, n_col in get_neighbors(row, col, rows, cols)
                if hazards[n_row][n_col]
            )
            tile_row.append(Tile(content=Content.safe(count)))
        tiles.append(tile_row)
    return Board(tiles)


def generate(
    rows: int,
    cols: int,
    hazard_probability_percent: int = DEFAULT_HAZARD_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a new board.

    Args:
        rows: Number of rows (at least 1).
        cols: Number of columns (at least 1).
        hazard_probability_percent: Chance in percent that a tile is a hazard.
        rng: Random source; a clock-seeded one is created when omitted.

    Returns:
        Board whose remaining-hazard counter equals the hazards placed.
    """
    if rows < 1 or cols < 1:
        raise ValueError("Board dimensions must be positive")
    if not 0 <= hazard_probability_percent <= 100:
        raise ValueError("Hazard probability must be between 0 and 100")
    if rng is None:
        rng = default_rng()

    hazards = _place_hazards(rows, cols, hazard_probability_percent, rng)
    return build_board(hazards)


def generate_from_config(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> Board:
    """Generate a board sized and seeded per ``config``."""
    return generate(config.rows, config.cols, config.hazard_probability, rng)
