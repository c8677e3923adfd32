"""
Unit tests for pointer-to-grid mapping.
"""
import pytest
from minefield import FlagState, GameController, GameStatus, InvalidCoordinate, PointerMapper


@pytest.fixture
def mapper() -> PointerMapper:
    """800x800 surface over a 10x10 grid, 80px tiles."""
    return PointerMapper(800, 800, 10, 10)


class TestLocate:
    """Test pixel to (row, col) conversion."""

    def test_tile_size(self, mapper: PointerMapper) -> None:
        assert mapper.tile_size == (80, 80)

    def test_rows_come_from_y(self, mapper: PointerMapper) -> None:
        assert mapper.locate(85, 170) == (2, 1)

    def test_far_corner(self, mapper: PointerMapper) -> None:
        assert mapper.locate(799, 799) == (9, 9)

    def test_uneven_tiles_use_floor_division(self) -> None:
        mapper = PointerMapper(300, 200, 4, 3)
        assert mapper.tile_size == (100, 50)
        assert mapper.locate(250, 199) == (3, 2)

    def test_leftover_edge_pixels_rejected(self) -> None:
        """Pixels past the last whole tile would index past the grid."""
        mapper = PointerMapper(805, 800, 10, 10)
        with pytest.raises(InvalidCoordinate):
            mapper.locate(802, 10)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (800, 0), (0, 800)])
    def test_outside_surface_rejected(
        self, mapper: PointerMapper, x: int, y: int
    ) -> None:
        with pytest.raises(InvalidCoordinate):
            mapper.locate(x, y)

    def test_surface_smaller_than_grid_raises(self) -> None:
        with pytest.raises(ValueError):
            PointerMapper(5, 5, 10, 10)


class TestClicks:
    """Test forwarding clicks to a controller."""

    @pytest.fixture
    def game(self, make_board) -> GameController:
        rows = ["." * 10 for _ in range(9)] + ["." * 9 + "X"]
        return GameController(make_board(*rows))

    def test_for_controller_uses_board_shape(self, game) -> None:
        mapper = PointerMapper.for_controller(game, 400, 200)
        assert mapper.tile_size == (40, 20)

    def test_primary_click_forwards(self, mapper, game) -> None:
        assert mapper.primary_click(game, 5, 5) == 16
        assert game.handicap_available is False

    def test_secondary_click_forwards(self, mapper, game) -> None:
        assert mapper.secondary_click(game, 795, 795) == FlagState.FLAGGED
        assert game.status == GameStatus.WON

    def test_rejected_click_does_not_reach_board(self, mapper, game) -> None:
        with pytest.raises(InvalidCoordinate):
            mapper.primary_click(game, 900, 5)
        assert game.handicap_available is True
