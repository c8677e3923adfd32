"""
Tile module for the minefield board.

A tile pairs immutable content (hazard or safe count) with two
independent pieces of player-facing state: whether it is revealed and
whether it carries a flag.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

MAX_ADJACENT = 8


class RevealState(Enum):
    """Whether the player has uncovered a tile."""

    HIDDEN = auto()
    REVEALED = auto()


class FlagState(Enum):
    """Whether the player has marked a tile as a hazard."""

    UNFLAGGED = auto()
    FLAGGED = auto()


# ============================================================================
# Content
# ============================================================================

@dataclass(frozen=True)
class Content:
    """
    What a tile holds: a hazard, or a safe count of neighbouring hazards.

    Use ``HAZARD`` or ``Content.safe(n)`` rather than building one directly.

    Attributes:
        is_hazard: Whether the tile is a hazard.
        adjacent_hazards: Hazards among the Moore neighbours (0-8).
            Always 0 for hazard content.
    """

    is_hazard: bool = False
    adjacent_hazards: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_hazards <= MAX_ADJACENT:
            raise ValueError(
                f"Adjacent hazard count must be 0-{MAX_ADJACENT}, "
                f"got {self.adjacent_hazards}"
            )
        if self.is_hazard and self.adjacent_hazards:
            raise ValueError("Hazard content carries no adjacency count")

    @classmethod
    def safe(cls, count: int) -> "Content":
        """Build SafeCount content for ``count`` hazardous neighbours."""
        return cls(is_hazard=False, adjacent_hazards=count)

    def __str__(self) -> str:
        if self.is_hazard:
            return "Hazard"
        return f"SafeCount({self.adjacent_hazards})"


HAZARD = Content(is_hazard=True)


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    A single cell of the board.

    Content is fixed when the board is generated: Content values are
    frozen and nothing outside the generator assigns a tile's content.
    The state transitions here are local to the tile; the hazard counter
    lives on Board.

    Attributes:
        content: Hazard or safe count, never reassigned.
        reveal_state: HIDDEN until revealed, then REVEALED for good.
        flag_state: Toggles while hidden, frozen once revealed.
    """

    content: Content = field(default_factory=Content)
    reveal_state: RevealState = RevealState.HIDDEN
    flag_state: FlagState = FlagState.UNFLAGGED

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if the tile was revealed, False if it was already
            revealed or is flagged.
        """
        if self.reveal_state == RevealState.REVEALED or self.is_flagged:
            return False
        self.reveal_state = RevealState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this tile.

        Returns:
            True if the flag was toggled, False if the tile is revealed.
        """
        if self.is_revealed:
            return False
        if self.flag_state == FlagState.UNFLAGGED:
            self.flag_state = FlagState.FLAGGED
        else:
            self.flag_state = FlagState.UNFLAGGED
        return True

    @property
    def is_hazard(self) -> bool:
        """Check if tile holds a hazard."""
        return self.content.is_hazard

    @property
    def adjacent_hazards(self) -> Optional[int]:
        """Safe count, or None for hazard tiles."""
        if self.content.is_hazard:
            return None
        return self.content.adjacent_hazards

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden."""
        return self.reveal_state == RevealState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.reveal_state == RevealState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.flag_state == FlagState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert tile to a numeric observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed safe tile with its adjacent hazard count
            9: Revealed hazard
        """
        if self.is_flagged:
            return -2
        if self.is_hidden:
            return -1
        if self.is_hazard:
            return 9
        return self.content.adjacent_hazards
