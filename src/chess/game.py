"""
The Game class is the entrypoint into the domain layer for the service layer.

It owns the Board and the (transient) selection, and interprets clicks on squares:
select one of your pieces, then click one of its highlighted destinations to move it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, generate_moves
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.models import GameModel
from src.core.shared_types import Color

_LOGGER = logging.getLogger(__name__)


class SelectionState(Enum):
    IDLE = auto()
    PIECE_SELECTED = auto()


class ClickOutcome(Enum):
    """What a single click ended up doing"""

    SELECTED = auto()
    MOVED = auto()
    DESELECTED = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class Selection:
    """The selected square and the squares its piece may move to"""

    square: Square
    candidates: frozenset[Square]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board.starting_position)
    selection: Optional[Selection] = None

    @classmethod
    def new_game(cls, starting_fen: Optional[str] = None) -> Self:
        """Standard starting position (white to move), unless a placement FEN ("<placement> [w|b]") is given"""
        board = (
            Board.from_fen(starting_fen) if starting_fen else Board.starting_position()
        )
        return cls(board=board)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Rebuild a session from a snapshot. The candidates are recomputed, not trusted.

        A selection is only restored when it holds a piece of the side to move, otherwise the game starts idle.
        """
        board = Board.from_fen(model.position_fen, turn=Color(model.turn))
        game = cls(board=board)
        if model.selected_square is not None:
            square = Square.from_algebraic(model.selected_square)
            if game._is_selectable(square):
                game._select(square)
        return game

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            position={
                square.to_algebraic(): piece.to_fen()
                for square, piece in sorted(self.board.position.items())
            },
            position_fen=self.board.to_fen(),
            turn=str(self.turn),
            selected_square=(
                self.selected_square.to_algebraic() if self.selected_square else None
            ),
            candidates=[square.to_algebraic() for square in sorted(self.candidates)],
        )

    # -- read-only views for rendering --
    @property
    def turn(self) -> Color:
        return self.board.turn

    @property
    def state(self) -> SelectionState:
        if self.selection is None:
            return SelectionState.IDLE
        return SelectionState.PIECE_SELECTED

    @property
    def selected_square(self) -> Optional[Square]:
        return self.selection.square if self.selection else None

    @property
    def candidates(self) -> frozenset[Square]:
        return self.selection.candidates if self.selection else frozenset()

    def piece(self, square: Square) -> Optional[Piece]:
        return self.board.piece(square)

    def handle_square_click(self, square: Square) -> ClickOutcome:
        """
        The only way the view changes the game.
        ----

        * Piece selected and the click is one of its candidates: move it, flip the turn, back to idle.
        * Piece selected and the click is anywhere else: deselect. This includes clicking another one of your own
          pieces; that needs a second click to select it. Kept on purpose, the view decides whether to re-send the click.
        * Nothing selected and the click is on a piece of the side to move: select it and compute its candidates
          (possibly none).
        * Nothing selected and anything else clicked: nothing happens.
        """
        if self.selection is not None:
            if square in self.selection.candidates:
                self._execute_move(Move(self.selection.square, square))
                return ClickOutcome.MOVED
            _LOGGER.debug("Deselected %s (clicked %s)", self.selection.square, square)
            self.selection = None
            return ClickOutcome.DESELECTED

        if not self._is_selectable(square):
            return ClickOutcome.IGNORED

        self._select(square)
        return ClickOutcome.SELECTED

    # -- PRIVATE HELPERS ---
    def _is_selectable(self, square: Square) -> bool:
        piece = self.board.piece(square)
        return piece is not None and piece.color == self.turn

    def _select(self, square: Square) -> None:
        candidates = frozenset(generate_moves(self.board, square))
        self.selection = Selection(square, candidates)
        _LOGGER.debug(
            "Selected %s with %d candidate move(s)", square, len(candidates)
        )

    def _execute_move(self, move: Move) -> None:
        """Relocate the piece, clear the selection and hand the turn to the opponent."""
        captured = self.board.piece(move.to_square)
        self.board.move_piece(move)
        self.selection = None
        self.board.flip_turn()
        _LOGGER.debug(
            "Played %s%s, %s to move",
            move.to_uci(),
            f" capturing {captured.to_fen()}" if captured else "",
            self.turn,
        )
