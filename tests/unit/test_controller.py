"""
Unit tests for GameController.

Tests command routing, single-use handicap, status and session end.
"""
import random

import pytest
from minefield import (
    AlreadyRevealed,
    BoardConfig,
    FlagState,
    GameController,
    GameStatus,
    InvalidCoordinate,
    RevealOutcome,
    SessionOver,
)


@pytest.fixture
def game(make_board) -> GameController:
    """10x10 session with a single hazard in the far corner (9,9)."""
    rows = ["." * 10 for _ in range(9)] + ["." * 9 + "X"]
    return GameController(make_board(*rows))


# ============================================================================
# Handicap Routing Tests
# ============================================================================

class TestHandicap:
    """Test the first primary command."""

    def test_first_primary_applies_handicap(self, game: GameController) -> None:
        changed = game.on_primary(0, 0)
        assert changed == 16
        assert game.handicap_available is False
        assert game.board.get_tile(3, 3).is_revealed is True

    def test_handicap_is_single_use(self, game: GameController) -> None:
        """Later primaries reveal, even when the handicap found nothing."""
        game.on_primary(0, 0)

        outcome = game.on_primary(5, 5)
        assert isinstance(outcome, RevealOutcome)
        assert outcome == RevealOutcome.revealed(0)
        assert game.board.get_tile(5, 6).is_hidden is True

    def test_second_primary_on_solved_tile_is_rejected(
        self, game: GameController
    ) -> None:
        game.on_primary(0, 0)
        with pytest.raises(AlreadyRevealed):
            game.on_primary(0, 0)

    def test_secondary_does_not_spend_handicap(self, game: GameController) -> None:
        assert game.on_secondary(4, 4) == FlagState.FLAGGED
        assert game.handicap_available is True

    def test_invalid_primary_keeps_handicap(self, game: GameController) -> None:
        with pytest.raises(InvalidCoordinate):
            game.on_primary(10, 0)
        assert game.handicap_available is True

    def test_hazard_free_board_is_won(self) -> None:
        config = BoardConfig(rows=6, cols=6, hazard_probability=0,
                             handicap_radius=1)
        game = GameController.new(config, random.Random(3))
        assert game.status == GameStatus.WON

    def test_negative_radius_raises(self, corner_board) -> None:
        with pytest.raises(ValueError):
            GameController(corner_board, handicap_radius=-2)


# ============================================================================
# Status Tests
# ============================================================================

class TestStatus:
    """Test win/loss/in-progress reporting."""

    def test_new_session_in_progress(self, corner_game: GameController) -> None:
        assert corner_game.status == GameStatus.IN_PROGRESS
        assert corner_game.is_over is False

    def test_reveal_hazard_loses(self, corner_game: GameController) -> None:
        corner_game.on_primary(1, 1)
        outcome = corner_game.on_primary(0, 0)
        assert outcome.hazard_triggered is True
        assert corner_game.status == GameStatus.LOST

    def test_commands_after_loss_raise(self, corner_game: GameController) -> None:
        corner_game.on_primary(1, 1)
        corner_game.on_primary(0, 0)
        with pytest.raises(SessionOver):
            corner_game.on_primary(0, 2)
        with pytest.raises(SessionOver):
            corner_game.on_secondary(2, 2)

    def test_flag_only_win(self, single_hazard_board, clock) -> None:
        """Flagging the lone hazard wins with every safe tile hidden."""
        game = GameController(single_hazard_board, clock=clock)
        game.on_secondary(0, 0)
        assert game.status == GameStatus.WON
        assert game.board.get_tile(1, 1).is_hidden is True

    def test_win_through_handicap(self, corner_board) -> None:
        """A handicap that flags every hazard wins outright."""
        game = GameController(corner_board, handicap_radius=1)
        game.on_primary(1, 1)
        assert game.status == GameStatus.WON

    def test_unflagging_undoes_progress(self, corner_game: GameController) -> None:
        corner_game.on_secondary(0, 0)
        corner_game.on_secondary(0, 0)
        assert corner_game.board.remaining_hazards == 2
        assert corner_game.status == GameStatus.IN_PROGRESS

    def test_lost_board_reports_lost(self, make_board) -> None:
        board = make_board("X.", "..")
        board.reveal(0, 0)
        game = GameController(board)
        assert game.status == GameStatus.LOST


# ============================================================================
# Summary Tests
# ============================================================================

class TestSummary:
    """Test the end-of-session summary."""

    def test_won_summary(self, single_hazard_board, clock) -> None:
        clock.now = 50.0
        game = GameController(single_hazard_board, clock=clock)
        clock.now = 62.7
        game.on_secondary(0, 0)
        summary = game.summary()
        assert summary.status == GameStatus.WON
        assert summary.elapsed_seconds == 12
        assert summary.message() == (
            "You won! It took you 12 seconds to disarm all the mines."
        )

    def test_lost_summary(self, corner_game: GameController, clock) -> None:
        corner_game.on_primary(1, 1)
        clock.now += 5
        corner_game.on_primary(2, 2)
        summary = corner_game.summary()
        assert summary.status == GameStatus.LOST
        assert summary.message() == "You blew yourself up in 5 seconds."

    def test_summary_in_progress_raises(self, corner_game) -> None:
        with pytest.raises(RuntimeError):
            corner_game.summary()

    def test_elapsed_seconds(self, corner_game: GameController, clock) -> None:
        clock.now += 3.9
        assert corner_game.elapsed_seconds() == 3
