"""
Game session controller.

Routes the two pointer commands to a single Board, spends the first-move
handicap, and reports whether the session is won, lost or still running.
"""
import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Union

from .board import Board, RevealOutcome
from .config import DEFAULT_HANDICAP_RADIUS, BoardConfig
from .errors import SessionOver
from .generator import generate_from_config
from .tile import FlagState


class GameStatus(Enum):
    """Possible states of a session."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class SessionSummary:
    """Final outcome and whole seconds taken."""

    status: GameStatus
    elapsed_seconds: int

    def message(self) -> str:
        if self.status == GameStatus.WON:
            return (
                f"You won! It took you {self.elapsed_seconds} seconds "
                f"to disarm all the mines."
            )
        return f"You blew yourself up in {self.elapsed_seconds} seconds."


class GameController:
    """
    One game session over one board.

    The first primary command applies the handicap instead of a reveal,
    whatever it ends up changing; every later primary command reveals.
    """

    def __init__(
        self,
        board: Board,
        handicap_radius: int = DEFAULT_HANDICAP_RADIUS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if handicap_radius < 0:
            raise ValueError("Handicap radius cannot be negative")
        self._board = board
        self._handicap_radius = handicap_radius
        self._handicap_available = True
        self._clock = clock
        self._started_at = clock()

    @classmethod
    def new(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "GameController":
        """Generate a fresh board from ``config`` and start a session on it."""
        config = config or BoardConfig()
        board = generate_from_config(config, rng)
        return cls(board, handicap_radius=config.handicap_radius, clock=clock)

    # ========================================================================
    # Commands
    # ========================================================================

    def on_primary(self, row: int, col: int) -> Union[int, RevealOutcome]:
        """
        Handle a primary (left) click on a grid position.

        Returns:
            Number of tiles the handicap changed on the first call,
            otherwise the reveal outcome.
        """
        self._require_in_progress()
        if self._handicap_available:
            # Off-grid clicks must not spend the handicap.
            self._board.get_tile(row, col)
            self._handicap_available = False
            return self._board.apply_handicap(
                row, col, self._handicap_radius
            )

        return self._board.reveal(row, col)

    def on_secondary(self, row: int, col: int) -> FlagState:
        """Handle a secondary (right) click by toggling the flag."""
        self._require_in_progress()
        return self._board.toggle_flag(row, col)

    def _require_in_progress(self) -> None:
        if self.status != GameStatus.IN_PROGRESS:
            raise SessionOver(f"Session already {self.status.name}")

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def handicap_available(self) -> bool:
        return self._handicap_available

    @property
    def status(self) -> GameStatus:
        """Current status; a loss outranks a win."""
        if self._board.is_lost:
            return GameStatus.LOST
        if self._board.is_won:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def elapsed_seconds(self) -> int:
        """Whole seconds since the session started."""
        return int(self._clock() - self._started_at)

    def summary(self) -> SessionSummary:
        """
        End-of-session summary.

        Raises:
            RuntimeError: The session is still in progress.
        """
        if not self.is_over:
            raise RuntimeError("Session is still in progress")
        return SessionSummary(self.status, self.elapsed_seconds())
