"""
Session configuration for the minefield game.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_HAZARD_PROBABILITY = 20
DEFAULT_HANDICAP_RADIUS = 3


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for one game session.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        hazard_probability: Percent chance (0-100) that a tile is a hazard.
        handicap_radius: Chebyshev radius pre-solved by the first move.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    hazard_probability: int = DEFAULT_HAZARD_PROBABILITY
    handicap_radius: int = DEFAULT_HANDICAP_RADIUS

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0 <= self.hazard_probability <= 100:
            raise ValueError("Hazard probability must be between 0 and 100")
        if self.handicap_radius < 0:
            raise ValueError("Handicap radius cannot be negative")
