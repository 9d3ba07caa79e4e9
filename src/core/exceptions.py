"""
Custom exceptions used across layers.

Everything raised on purpose by this package derives from GameError, so a caller can catch the whole family at once.
NOTE: none of these derive from ValueError on purpose: pydantic would otherwise wrap them into a ValidationError.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing or storing a game."""


# --- STRUCTURAL ERRORS ---
class BoardNotInitializedError(GameError):
    """An operation needs a board (or a session holding one) that was never created."""


class BoardShapeError(GameError):
    """Board dimensions do not match the number of cells supplied."""


class SaveDataError(GameError):
    """A save file is readable JSON but misses a required field or holds invalid values."""


class MissingPlayersError(GameError):
    """A winner must be named, but the session does not hold two player names."""


# --- GAME FLOW ERRORS ---
class InvalidMoveError(GameError):
    """Applying a move that starts from an empty cell or leaves the board."""


class GameOverError(GameError):
    """The game already reached a terminal state."""


# --- BOUNDARY ERRORS ---
class InvalidRequestError(GameError):
    """Request data coming in from the UI layer did not pass validation."""
