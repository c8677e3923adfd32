"""
Pointer input mapping.

Translates pixel positions on a render surface into grid coordinates and
forwards them to a GameController as primary or secondary commands.
"""
from dataclasses import dataclass, field
from typing import Tuple, Union

from .board import RevealOutcome
from .controller import GameController
from .errors import InvalidCoordinate
from .tile import FlagState


@dataclass(frozen=True)
class PointerMapper:
    """
    Maps surface pixels to tiles of a rows x cols grid.

    Tiles are ``surface_width // cols`` by ``surface_height // rows``
    pixels. Any leftover pixels at the right or bottom edge map past the
    last row or column and are rejected.
    """

    surface_width: int
    surface_height: int
    rows: int
    cols: int
    tile_size: Tuple[int, int] = field(init=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.surface_width < self.cols or self.surface_height < self.rows:
            raise ValueError("Surface is smaller than one pixel per tile")
        object.__setattr__(
            self,
            "tile_size",
            (self.surface_width // self.cols, self.surface_height // self.rows),
        )

    @classmethod
    def for_controller(
        cls, controller: GameController, surface_width: int, surface_height: int
    ) -> "PointerMapper":
        """Build a mapper sized to the board the controller is playing."""
        board = controller.board
        return cls(surface_width, surface_height, board.rows, board.cols)

    def locate(self, pixel_x: int, pixel_y: int) -> Tuple[int, int]:
        """
        Convert a pixel position to ``(row, col)``.

        Raises:
            InvalidCoordinate: The pixel lies outside the grid.
        """
        tile_width, tile_height = self.tile_size
        row = pixel_y // tile_height
        col = pixel_x // tile_width
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise InvalidCoordinate(row, col, self.rows, self.cols)
        return row, col

    def primary_click(
        self, controller: GameController, pixel_x: int, pixel_y: int
    ) -> Union[int, RevealOutcome]:
        """
        Map a pixel and forward it as a primary command.

        Raises:
            InvalidCoordinate: The pixel lies outside the grid.
        """
        row, col = self.locate(pixel_x, pixel_y)
        return controller.on_primary(row, col)

    def secondary_click(
        self, controller: GameController, pixel_x: int, pixel_y: int
    ) -> FlagState:
        """Map a pixel and forward it as a secondary (flag) command."""
        row, col = self.locate(pixel_x, pixel_y)
        return controller.on_secondary(row, col)
