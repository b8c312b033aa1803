"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.fen import is_valid_color_code, is_valid_position
from src.chess.square import Square
from src.core.exceptions import InvalidRequestError, InvalidSquareError
from src.core.shared_types import Color

SquareName = str
PieceCode = str


def _validate_square_name(value: str) -> str:
    """Returns the canonical (lower case) name, so "E4" comes back as "e4"."""
    try:
        square = Square.from_algebraic(value)
    except InvalidSquareError as e:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        ) from e
    return square.to_algebraic()


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    """Leave `starting_fen` out for the standard starting position."""

    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        parts = value.strip().split(" ")
        if len(parts) > 2:
            raise InvalidRequestError(
                "Only the piece placement and active color of a FEN string are supported."
            )
        if not is_valid_position(parts[0]):
            raise InvalidRequestError(f"Invalid piece placement: {parts[0]!r}")
        if len(parts) == 2 and not is_valid_color_code(parts[1]):
            raise InvalidRequestError(f"Invalid active color: {parts[1]!r}")
        return value.strip()


class SquareClickRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class CandidateMovesRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    position: dict[SquareName, PieceCode]
    position_fen: str
    turn: Color
    selected_square: Optional[SquareName]
    candidates: list[SquareName]
    outcome: Optional[str] = None


class CandidateMovesResponse(BaseModel):
    square: SquareName
    piece: Optional[PieceCode]
    candidates: list[SquareName]
