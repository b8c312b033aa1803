"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer (lower) produces them, the Service turns them into response models for whatever view sits on top.
(Decouples the domain objects from the information needed to render a board)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
SquareName = str
PieceCode = str


@dataclass
class GameModel:
    """
    Transport-safe snapshot of a game session.

    * position: algebraic square -> FEN letter of the piece on it (empty squares are left out)
    * candidates: sorted algebraic names, empty when nothing is selected
    """

    position: dict[SquareName, PieceCode]
    position_fen: str
    turn: str
    selected_square: Optional[SquareName] = None
    candidates: list[SquareName] = field(default_factory=list)
