"""
Errors raised by the domain and boundary layers.

Invalid clicks are never errors (they are ignored or deselect). These exceptions only
cover raw external input that cannot be parsed into domain values.
"""


class GameError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidSquareError(GameError):
    """A square name outside of a1 - h8"""


class InvalidFENError(GameError):
    """Malformed piece placement or active color in FEN notation"""


class InvalidRequestError(GameError):
    """
    Request model failed validation.

    NOTE: deliberately not a ValueError, so pydantic re-raises it as-is instead of wrapping it in a ValidationError.
    """
