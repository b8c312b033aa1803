"""Orchestration of communication from the view layer to the game logic (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    CandidateMovesRequest,
    CandidateMovesResponse,
    GameResponse,
    NewGameRequest,
    SquareClickRequest,
)
from src.chess.game import ClickOutcome, Game
from src.chess.moves import generate_moves
from src.chess.square import Square
from src.core.models import GameModel

_LOGGER = logging.getLogger(__name__)


class ChessService:
    """
    Owns a single game session for as long as the service lives.

    NOTE: nothing is persisted. Creating a new game throws the old one away.
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.new_game()

    # -- view layer logic ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Start over, from the standard position or from the requested one."""
        self.game = Game.new_game(starting_fen=request.starting_fen)
        _LOGGER.info(
            "New game started from %s", request.starting_fen or "the starting position"
        )
        return self._create_game_response(self.game.to_model())

    def click_square(self, request: SquareClickRequest) -> GameResponse:
        """A square was clicked. Returns the state to re-render from."""
        square = Square.from_algebraic(request.square)
        outcome = self.game.handle_square_click(square)
        return self._create_game_response(self.game.to_model(), outcome)

    def get_game_state(self) -> GameResponse:
        return self._create_game_response(self.game.to_model())

    def candidate_moves(self, request: CandidateMovesRequest) -> CandidateMovesResponse:
        """
        Where could the piece on this square go?
        ----
        Pure query: works for either color and leaves the selection alone (ex. to preview moves on hover).
        """
        square = Square.from_algebraic(request.square)
        piece = self.game.piece(square)
        destinations = generate_moves(self.game.board, square)
        return CandidateMovesResponse(
            square=request.square,
            piece=piece.to_fen() if piece else None,
            candidates=[sq.to_algebraic() for sq in sorted(destinations)],
        )

    # -- Internal helpers --
    def _create_game_response(
        self, model: GameModel, outcome: Optional[ClickOutcome] = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        return GameResponse(
            position=model.position,
            position_fen=model.position_fen,
            turn=model.turn,
            selected_square=model.selected_square,
            candidates=model.candidates,
            outcome=outcome.name.lower() if outcome else None,
        )
