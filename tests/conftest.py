"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color

BoardBuilder = Callable[..., Board]


@pytest.fixture
def build_board() -> BoardBuilder:
    """
    Call the inner function with pieces keyed by square name, using FEN letters for the pieces.

    ex) build_board(d4="R", d7="p") gives a white rook on d4 and a black pawn on d7, white to move.
    """

    def _create_board(turn: Color = Color.WHITE, **pieces: str) -> Board:
        position = {
            Square.from_algebraic(square_name): Piece.from_fen(fen_char)
            for square_name, fen_char in pieces.items()
        }
        return Board(position, turn)

    return _create_board
