"""The Game board: which piece stands where, and whose turn it is. Only the Game (controller) mutates it."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.fen import (
    STARTING_POSITION,
    color_from_fen,
    is_valid_position,
)
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color


@dataclass
class Board:
    """
    NOTE: empty squares are simply absent from `position`. A dict can never hold two pieces on one square.
    """

    position: dict[Square, Piece] = field(default_factory=dict)
    turn: Color = Color.WHITE

    @classmethod
    def starting_position(cls) -> Self:
        """16 pieces per side, white on ranks 1 and 2, white to move"""
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, fen_str: str, turn: Color = Color.WHITE) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.

        Also accepts "<placement> <w|b>" in which case the active color overrides `turn`.
        """
        placement, *rest = fen_str.strip().split(" ")
        if not is_valid_position(placement):
            raise InvalidFENError(f"Invalid piece placement: {placement!r}")
        if rest:
            turn = color_from_fen(rest[0])

        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(placement.split("/")):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character.isalpha():
                    position[Square(file, rank)] = Piece.from_fen(character)
                    file += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
        return cls(position, turn)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def move_piece(self, move: Move) -> None:
        """Update the position on the board: the target square's occupant (if any) is captured."""
        piece_that_moved = self.position.pop(move.from_square)
        self.position[move.to_square] = piece_that_moved

    def flip_turn(self) -> None:
        self.turn = self.turn.opponent
