"""
Boundary layer data model(s).

The Service and the storage layer exchange games using the model defined here.
(Decouples the file format in src/storage/schema.py from what the rest of the code works with)
"""

from dataclasses import dataclass

from src.breakthrough.board import Board
from src.breakthrough.rules import is_white_turn

# Type aliases to make GameSession easier to read
PlayerName = str
UniqueCode = str


@dataclass
class GameSession:
    """One game: everything needed to continue playing it after a restart."""

    unique_code: UniqueCode
    move_count: int
    players: list[PlayerName]  # [white, black]
    first_move: int  # 0: white opens the game, 1: black does
    board: Board
    save_file_path: str | None = None

    @property
    def white_to_move(self) -> bool:
        return is_white_turn(self.move_count, self.first_move)
