"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    WHITE_WON = "white won"
    BLACK_WON = "black won"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class FirstMoveOption(StrEnum):
    """What the new-game screen offers. RANDOM gets resolved to WHITE or BLACK before a session starts."""

    WHITE = "white"
    BLACK = "black"
    RANDOM = "random"


# Persisted value of the first-move flag: 0 means white opens the game, 1 means black does
FIRST_MOVE_FLAGS: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 1}
