"""
Errors raised by the minefield core.

Every error here rejects a single command without touching board state,
so callers can report it and keep the session going.
"""


class MinefieldError(Exception):
    """Base class for recoverable command rejections."""


class InvalidCoordinate(MinefieldError, IndexError):
    """Row or column falls outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"({row}, {col}) is outside the {rows}x{cols} grid"
        )
        self.row = row
        self.col = col


class TileStateError(MinefieldError):
    """The tile's current state forbids the requested command."""

    def __init__(self, row: int, col: int, reason: str) -> None:
        super().__init__(f"Tile ({row}, {col}) {reason}")
        self.row = row
        self.col = col


class AlreadyRevealed(TileStateError):
    """Reveal attempted on a tile that is already revealed."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, "is already revealed")


class TileFlagged(TileStateError):
    """Reveal attempted on a flagged tile."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, "is flagged; unflag it first")


class TileAlreadyRevealed(TileStateError):
    """Flag toggle attempted on a revealed tile."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, "is revealed and cannot be flagged")


class SessionOver(MinefieldError):
    """Command issued after the session was won or lost."""
