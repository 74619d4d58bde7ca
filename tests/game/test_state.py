"""Tests for GameState."""

import logging

import pytest

from chesslite.core.enums import CastlingSide, Color, GameStatus, PieceType
from chesslite.core.move import Move
from chesslite.core.notation import position_to_fen
from chesslite.core.rules import IllegalMoveError, Rules
from chesslite.core.types import Square, parse_square
from chesslite.game.interfaces import ClickOutcome, GamePhase
from chesslite.game.state import GameState

E2, E4, E7, E5 = (parse_square(n) for n in ("e2", "e4", "e7", "e5"))


def click_move(gs: GameState, from_name: str, to_name: str) -> ClickOutcome:
    gs.click(parse_square(from_name))
    return gs.click(parse_square(to_name))


class TestGameStateSetup:
    def test_not_started_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.status == GameStatus.NORMAL
        assert gs.side_to_move == Color.WHITE
        assert gs.selected is None

    def test_setup_custom_fen(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 b - - 0 1"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Color.BLACK
        assert position_to_fen(gs.position) == fen

    def test_setup_on_finished_position_is_game_over(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert gs.status == GameStatus.STALEMATE
        assert gs.is_game_over

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        click_move(gs, "e2", "e4")
        gs.click(E7)
        gs.setup()
        assert gs.side_to_move == Color.WHITE
        assert gs.selected is None
        assert gs.board[E2] is not None


class TestClicks:
    def test_select_own_piece(self, game: GameState) -> None:
        gs = game
        assert gs.click(E2) == ClickOutcome.SELECTED
        assert gs.selected == E2
        assert {m.to_sq for m in gs.selected_moves} == {parse_square("e3"), E4}

    def test_select_empty_or_enemy_ignored(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.click(parse_square("e4")) == ClickOutcome.IGNORED
        assert gs.click(E7) == ClickOutcome.IGNORED
        assert gs.selected is None

    def test_click_selected_again_deselects(self) -> None:
        gs = GameState()
        gs.setup()
        gs.click(E2)
        assert gs.click(E2) == ClickOutcome.DESELECTED
        assert gs.selected is None
        assert gs.selected_moves == []

    def test_click_destination_moves_and_flips_turn(self) -> None:
        gs = GameState()
        gs.setup()
        assert click_move(gs, "e2", "e4") == ClickOutcome.MOVED
        assert gs.board[E2] is None
        assert gs.board[E4] is not None
        assert gs.side_to_move == Color.BLACK
        assert gs.status == GameStatus.NORMAL
        assert gs.selected is None

    def test_click_other_own_piece_reselects(self) -> None:
        gs = GameState()
        gs.setup()
        gs.click(E2)
        assert gs.click(parse_square("d2")) == ClickOutcome.SELECTED
        assert gs.selected == parse_square("d2")

    def test_click_unreachable_square_keeps_selection(self) -> None:
        gs = GameState()
        gs.setup()
        gs.click(E2)
        assert gs.click(parse_square("e5")) == ClickOutcome.IGNORED
        assert gs.selected == E2

    def test_white_cannot_select_on_black_turn(self) -> None:
        gs = GameState()
        gs.setup()
        click_move(gs, "e2", "e4")
        assert gs.click(parse_square("d2")) == ClickOutcome.IGNORED
        assert gs.click(E7) == ClickOutcome.SELECTED

    def test_castling_by_click_moves_rook(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        assert click_move(gs, "e1", "g1") == ClickOutcome.MOVED
        rook = gs.board[parse_square("f1")]
        assert rook is not None
        assert rook.piece_type == PieceType.ROOK
        assert gs.board[parse_square("h1")] is None

    def test_clicks_ignored_after_game_over(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert gs.click(parse_square("h8")) == ClickOutcome.IGNORED


class TestSelfCheckOption:
    PINNED = "k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1"

    def test_filtered_by_default(self) -> None:
        gs = GameState()
        gs.setup(self.PINNED)
        gs.click(E2)
        assert parse_square("d2") not in {m.to_sq for m in gs.selected_moves}

    def test_pseudo_legal_when_disabled(self) -> None:
        gs = GameState(filter_self_check=False)
        gs.setup(self.PINNED)
        gs.click(E2)
        assert parse_square("d2") in {m.to_sq for m in gs.selected_moves}
        assert gs.click(parse_square("d2")) == ClickOutcome.MOVED
        assert gs.side_to_move == Color.BLACK
        assert Rules.is_in_check(gs.board, Color.WHITE)


class TestApplyMove:
    def test_rejects_illegal_move(self, caplog: pytest.LogCaptureFixture) -> None:
        gs = GameState()
        gs.setup()
        with caplog.at_level(logging.WARNING, logger="chesslite.game.state"):
            with pytest.raises(IllegalMoveError, match="Illegal move"):
                gs.apply_move(Move(E2, E5))
        assert "Rejected move e2e5" in caplog.text
        assert gs.side_to_move == Color.WHITE

    def test_rejects_wrong_side(self) -> None:
        gs = GameState()
        gs.setup()
        with pytest.raises(IllegalMoveError):
            gs.apply_move(Move(E7, E5))

    def test_rejects_forged_castling(self) -> None:
        gs = GameState()
        gs.setup()
        with pytest.raises(IllegalMoveError):
            gs.apply_move(
                Move(parse_square("e1"), parse_square("g1"), CastlingSide.KINGSIDE)
            )

    def test_returns_new_status(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.apply_move(Move(E2, E4)) == GameStatus.NORMAL


class TestGameOver:
    def test_fools_mate_detected(self, caplog: pytest.LogCaptureFixture) -> None:
        gs = GameState()
        gs.setup()
        with caplog.at_level(logging.INFO, logger="chesslite.game.state"):
            click_move(gs, "f2", "f3")
            click_move(gs, "e7", "e5")
            click_move(gs, "g2", "g4")
            click_move(gs, "d8", "h4")

        assert gs.status == GameStatus.CHECKMATE
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.is_game_over
        assert gs.winner == Color.BLACK
        assert "Game over: CHECKMATE" in caplog.text

    def test_stalemate_has_no_winner(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        gs.apply_move(Move(parse_square("g5"), parse_square("g6")))
        assert gs.status == GameStatus.STALEMATE
        assert gs.winner is None

    def test_check_is_not_game_over(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        gs.apply_move(Move(parse_square("a1"), parse_square("a8")))
        assert gs.status == GameStatus.CHECK
        assert not gs.is_game_over

    def test_no_moves_after_game_over(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        gs.apply_move(Move(parse_square("g5"), parse_square("g6")))
        with pytest.raises(IllegalMoveError, match="Game is over"):
            gs.apply_move(Move(parse_square("f6"), parse_square("e6")))


def test_promotion_through_session() -> None:
    gs = GameState()
    gs.setup("7k/P7/8/8/8/8/8/4K3 w - - 0 1")
    click_move(gs, "a7", "a8")
    queen = gs.board[Square(0, 0)]
    assert queen is not None
    assert queen.piece_type == PieceType.QUEEN
    assert gs.status == GameStatus.CHECK
