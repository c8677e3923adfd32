"""
Board module for the minefield game.

Owns the tile grid and the remaining-hazard counter, and implements the
reveal, flag and first-move handicap transitions. Boards are produced by
``minefield.generator``.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import (
    AlreadyRevealed,
    InvalidCoordinate,
    TileAlreadyRevealed,
    TileFlagged,
)
from .tile import FlagState, Tile


# ============================================================================
# Outcomes
# ============================================================================

@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a successful reveal.

    Attributes:
        hazard_triggered: True when the revealed tile was a hazard.
        adjacent_hazards: Safe count of the revealed tile, None on a hazard.
    """

    hazard_triggered: bool
    adjacent_hazards: Optional[int] = None

    @classmethod
    def triggered(cls) -> "RevealOutcome":
        """Outcome of revealing a hazard."""
        return cls(hazard_triggered=True)

    @classmethod
    def revealed(cls, count: int) -> "RevealOutcome":
        """Outcome of revealing a safe tile with ``count`` neighbours."""
        return cls(hazard_triggered=False, adjacent_hazards=count)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minefield game board.

    The remaining-hazard counter always equals the number of hazard
    tiles that are not flagged, so the board is won as soon as every
    hazard carries a flag. Revealing a hazard loses the board for good.
    """

    def __init__(self, tiles: List[List[Tile]]) -> None:
        """
        Wrap a rectangular grid of freshly generated tiles.

        Args:
            tiles: Rows of tiles, all hidden and unflagged.
        """
        if not tiles or not tiles[0]:
            raise ValueError("Board dimensions must be positive")
        width = len(tiles[0])
        if any(len(row) != width for row in tiles):
            raise ValueError("Board rows must all have the same length")

        self._grid = tiles
        self._rows = len(tiles)
        self._cols = width
        self._hazard_count = sum(
            1 for row in tiles for tile in row if tile.is_hazard
        )
        self._remaining_hazards = sum(
            1 for row in tiles for tile in row
            if tile.is_hazard and not tile.is_flagged
        )
        self._lost = False

    def __repr__(self) -> str:
        return (
            f"Board(rows={self._rows}, cols={self._cols}, "
            f"remaining_hazards={self._remaining_hazards}, lost={self._lost})"
        )

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _require_position(self, row: int, col: int) -> Tile:
        """Return the tile at a position, rejecting out-of-range indexes."""
        if not self.is_valid_position(row, col):
            raise InvalidCoordinate(row, col, self._rows, self._cols)
        return self._grid[row][col]

    def _clamped_square(
        self, row: int, col: int, radius: int
    ) -> List[Tuple[int, int]]:
        """
        Distinct positions covered by a clamped square around a centre.

        Offsets that fall off the grid collapse onto the nearest edge row
        or column, so each resulting position appears once.
        """
        seen = set()
        positions = []
        for delta_row in range(-radius, radius + 1):
            target_row = min(max(row + delta_row, 0), self._rows - 1)
            for delta_col in range(-radius, radius + 1):
                target_col = min(max(col + delta_col, 0), self._cols - 1)
                position = (target_row, target_col)
                if position not in seen:
                    seen.add(position)
                    positions.append(position)
        return positions

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the tile at the given position.

        Zero-count tiles do not open their neighbours.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome describing the uncovered content.

        Raises:
            InvalidCoordinate: Position is off the grid.
            AlreadyRevealed: Tile was revealed earlier.
            TileFlagged: Tile must be unflagged first.
        """
        tile = self._require_position(row, col)
        if tile.is_revealed:
            raise AlreadyRevealed(row, col)
        if tile.is_flagged:
            raise TileFlagged(row, col)

        tile.reveal()
        if tile.is_hazard:
            self._lost = True
            return RevealOutcome.triggered()
        return RevealOutcome.revealed(tile.content.adjacent_hazards)

    def toggle_flag(self, row: int, col: int) -> FlagState:
        """
        Toggle the flag on a hidden tile.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The tile's new flag state.

        Raises:
            InvalidCoordinate: Position is off the grid.
            TileAlreadyRevealed: Revealed tiles cannot be flagged.
        """
        tile = self._require_position(row, col)
        if not tile.toggle_flag():
            raise TileAlreadyRevealed(row, col)

        if tile.is_hazard:
            if tile.is_flagged:
                self._remaining_hazards -= 1
            else:
                self._remaining_hazards += 1
        return tile.flag_state

    def apply_handicap(self, row: int, col: int, radius: int = 3) -> int:
        """
        Pre-solve the square neighbourhood around a first move.

        Unflagged hazards in range are flagged, hidden unflagged safe
        tiles are revealed, and anything already flagged or revealed is
        left alone. Cannot trigger a loss.

        Args:
            row: Row index of the centre.
            col: Column index of the centre.
            radius: Chebyshev radius of the square.

        Returns:
            Number of tiles flagged or revealed.
        """
        self._require_position(row, col)
        if radius < 0:
            raise ValueError("Handicap radius cannot be negative")

        changed = 0
        for target_row, target_col in self._clamped_square(row, col, radius):
            tile = self._grid[target_row][target_col]
            if tile.is_flagged or tile.is_revealed:
                continue
            if tile.is_hazard:
                self.toggle_flag(target_row, target_col)
            else:
                tile.reveal()
            changed += 1
        return changed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid size as (rows, cols)."""
        return self._rows, self._cols

    @property
    def hazard_count(self) -> int:
        """Total hazards placed at generation."""
        return self._hazard_count

    @property
    def remaining_hazards(self) -> int:
        """Hazard tiles that are still unflagged."""
        return self._remaining_hazards

    @property
    def is_lost(self) -> bool:
        """Check if a hazard has been revealed."""
        return self._lost

    @property
    def is_won(self) -> bool:
        """Check if every hazard is flagged."""
        return self._remaining_hazards == 0

    def get_tile(self, row: int, col: int) -> Tile:
        """Get tile at position, raising InvalidCoordinate if off the grid."""
        return self._require_position(row, col)

    def iter_tiles(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield ``(row, col, tile)`` in row-major order."""
        for row, tiles in enumerate(self._grid):
            for col, tile in enumerate(tiles):
                yield row, col, tile

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed hazard
        """
        obs = np.zeros((self._rows, self._cols), dtype=np.int8)
        for row, col, tile in self.iter_tiles():
            obs[row, col] = tile.to_observation()
        return obs

    def get_hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Get positions that still accept commands.

        Returns:
            List of (row, col) positions whose tile is hidden.
        """
        return [
            (row, col) for row, col, tile in self.iter_tiles()
            if tile.is_hidden
        ]
