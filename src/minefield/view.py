"""
Presentation snapshot of a board.

Each tile becomes a ``TileView`` of symbol and style; colours, fonts and
layout are left to whatever draws them.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from .board import Board
from .tile import Tile


class Style(Enum):
    """How a tile should be drawn."""

    UNREVEALED = auto()
    FLAGGED = auto()
    REVEALED_SAFE = auto()
    REVEALED_HAZARD = auto()


@dataclass(frozen=True)
class TileView:
    symbol: str
    style: Style


HIDDEN_VIEW = TileView("?", Style.UNREVEALED)
FLAGGED_VIEW = TileView("F", Style.FLAGGED)
HAZARD_VIEW = TileView("!", Style.REVEALED_HAZARD)


def tile_view(tile: Tile) -> TileView:
    """Map a tile's state to its view record."""
    if tile.is_flagged:
        return FLAGGED_VIEW
    if tile.is_hidden:
        return HIDDEN_VIEW
    if tile.is_hazard:
        return HAZARD_VIEW
    return TileView(str(tile.content.adjacent_hazards), Style.REVEALED_SAFE)


def board_view(board: Board) -> List[List[TileView]]:
    """Rows of view records for the whole board."""
    views: List[List[TileView]] = [[] for _ in range(board.rows)]
    for row, _, tile in board.iter_tiles():
        views[row].append(tile_view(tile))
    return views


def render_text(board: Board) -> str:
    """Render board as text, one line per row."""
    return "\n".join(
        " ".join(view.symbol for view in row) for row in board_view(board)
    )
