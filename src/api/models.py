"""Requests the UI layer sends to the service"""

from typing import Self

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import FirstMoveOption

# The engine itself works with any size. These limits keep the board playable (and printable in a terminal).
MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 16
DEFAULT_BOARD_SIZE = 8


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    white_player: str
    black_player: str
    first_move: FirstMoveOption = FirstMoveOption.WHITE
    height: int = DEFAULT_BOARD_SIZE
    width: int = DEFAULT_BOARD_SIZE

    @field_validator(*["white_player", "black_player"])
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Player names cannot be empty.")
        return name

    @field_validator(*["height", "width"])
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
            raise InvalidRequestError(
                f"Board dimensions must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {value}."
            )
        return value

    @model_validator(mode="after")
    def validate_distinct_players(self) -> Self:
        # statistics are keyed on the name, so two players with the same name would share their wins
        if self.white_player == self.black_player:
            raise InvalidRequestError(
                f"Both players are called {self.white_player!r}. Pick two different names."
            )
        return self


class MoveRequest(BaseModel):
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @field_validator(*["from_row", "from_col", "to_row", "to_col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value
