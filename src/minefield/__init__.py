"""
Minefield game module.

Provides the board model, session controller, and the input, view and
environment layers built on them.
"""
from .tile import Content, FlagState, HAZARD, RevealState, Tile
from .config import BoardConfig
from .board import Board, RevealOutcome
from .generator import build_board, generate, generate_from_config
from .controller import GameController, GameStatus, SessionSummary
from .errors import (
    AlreadyRevealed,
    InvalidCoordinate,
    MinefieldError,
    SessionOver,
    TileAlreadyRevealed,
    TileFlagged,
    TileStateError,
)
from .input import PointerMapper
from .view import Style, TileView, board_view, render_text, tile_view
from .environment import MinefieldEnv

__all__ = [
    "Content",
    "FlagState",
    "HAZARD",
    "RevealState",
    "Tile",
    "BoardConfig",
    "Board",
    "RevealOutcome",
    "build_board",
    "generate",
    "generate_from_config",
    "GameController",
    "GameStatus",
    "SessionSummary",
    "AlreadyRevealed",
    "InvalidCoordinate",
    "MinefieldError",
    "SessionOver",
    "TileAlreadyRevealed",
    "TileFlagged",
    "TileStateError",
    "PointerMapper",
    "Style",
    "TileView",
    "board_view",
    "render_text",
    "tile_view",
    "MinefieldEnv",
]
