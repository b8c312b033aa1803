"""
Reading/writing the parts of FEN (Forsyth-Edwards Notation) this engine cares about.

A full FEN has six space-separated fields:
<board position string><active color><castling rights><en passant square><# half move clock><number turns played>

Castling, en passant and the move clocks are not modelled here, so only the first two fields are supported:
* The board position, read from the 8th rank down to the 1st, a-file first. Letters denote pieces
  (upper case: white, lower case: black), digits denote that many consecutive empty squares.
* The active color, "w" or "b".

ex) The standard starting position is
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w
"""

from src.chess.pieces import FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[1])
# a run of empty squares is written as a single digit, 1 up to the width of the board
EMPTY_RUN_DIGITS = "".join(str(n) for n in range(1, BOARD_DIMENSIONS[0] + 1))

FEN_TO_COLOR: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character in EMPTY_RUN_DIGITS:
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False
        # each rank must describe exactly one row of the board
        if file_count != num_files:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in FEN_TO_COLOR


def color_from_fen(color: str) -> Color:
    if not is_valid_color_code(color):
        raise InvalidFENError(
            f"Active color must be one of {', '.join(FEN_TO_COLOR)}. Got {color!r}"
        )
    return FEN_TO_COLOR[color]