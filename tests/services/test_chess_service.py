"""Unit tests for src/services/chess_service.py"""

import pytest

from src.chess.fen import STARTING_POSITION
from src.chess.game import Game
from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Color
from src.services.chess_service import (
    CandidateMovesRequest,
    ChessService,
    GameResponse,
    NewGameRequest,
    SquareClickRequest,
)


@pytest.fixture
def service() -> ChessService:
    return ChessService()


def click(service: ChessService, square: str) -> GameResponse:
    return service.click_square(SquareClickRequest(square=square))


# --- SERVICE - NEW GAME ----
def test_service_starts_with_a_game(service: ChessService) -> None:
    response = service.get_game_state()
    assert response.position_fen == STARTING_POSITION
    assert response.turn == Color.WHITE
    assert response.selected_square is None
    assert response.outcome is None


def test_new_game_from_fen(service: ChessService) -> None:
    click(service, "e2")
    click(service, "e4")

    response = service.new_game(NewGameRequest(starting_fen="4k3/8/8/8/8/8/8/4K3 b"))
    assert response.position_fen == "4k3/8/8/8/8/8/8/4K3"
    assert response.position == {"e1": "K", "e8": "k"}
    assert response.turn == Color.BLACK


def test_new_game_resets(service: ChessService) -> None:
    click(service, "e2")
    click(service, "e4")
    response = service.new_game(NewGameRequest())
    assert response.position_fen == STARTING_POSITION
    assert response.turn == Color.WHITE


def test_service_with_given_game() -> None:
    game = Game.new_game("8/8/8/8/3R4/8/8/8")
    service = ChessService(game)
    assert service.get_game_state().position == {"d4": "R"}


# --- SERVICE - CLICKS ----
def test_select_and_move(service: ChessService) -> None:
    response = click(service, "e2")
    assert response.outcome == "selected"
    assert response.selected_square == "e2"
    assert response.candidates == ["e3", "e4"]

    response = click(service, "e4")
    assert response.outcome == "moved"
    assert response.selected_square is None
    assert response.candidates == []
    assert "e2" not in response.position
    assert response.position["e4"] == "P"
    assert response.turn == Color.BLACK


def test_select_then_deselect(service: ChessService) -> None:
    click(service, "e2")
    response = click(service, "a5")
    assert response.outcome == "deselected"
    assert response.position_fen == STARTING_POSITION
    assert response.turn == Color.WHITE


def test_ignored_click(service: ChessService) -> None:
    response = click(service, "e7")
    assert response.outcome == "ignored"
    assert response.selected_square is None


def test_state_reflects_last_click(service: ChessService) -> None:
    click(service, "g1")
    response = service.get_game_state()
    assert response.selected_square == "g1"
    assert response.candidates == ["f3", "h3"]
    assert response.outcome is None


# --- SERVICE - CANDIDATE MOVES QUERY ----
def test_candidate_moves_query(service: ChessService) -> None:
    response = service.candidate_moves(CandidateMovesRequest(square="g8"))
    assert response.piece == "n"
    assert response.candidates == ["f6", "h6"]
    # the query does not touch the selection
    assert service.get_game_state().selected_square is None


def test_candidate_moves_on_empty_square(service: ChessService) -> None:
    response = service.candidate_moves(CandidateMovesRequest(square="e4"))
    assert response.piece is None
    assert response.candidates == []


def test_unvalidated_square_fails_fast(service: ChessService) -> None:
    """model_construct() skips validation, the domain still refuses a bad square"""
    with pytest.raises(InvalidSquareError):
        service.click_square(SquareClickRequest.model_construct(square="z9"))


def test_candidate_moves_echoes_canonical_square(service: ChessService) -> None:
    response = service.candidate_moves(CandidateMovesRequest(square="B1"))
    assert response.square == "b1"
    assert response.candidates == ["a3", "c3"]
