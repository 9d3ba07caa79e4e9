"""File schemas: the JSON written to save files and to the statistics file"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.breakthrough.board import Board, Cell
from src.core.exceptions import SaveDataError
from src.core.models import GameSession

CELL_VALUES = {int(cell) for cell in Cell}


class SaveData(BaseModel):
    """
    One save file. Every key is required when loading.

    example:
    {"UniqueCode": "20250101120000123", "MoveCount": 3, "Players": ["Ann", "Bob"], "FirstMove": 0,
     "Matrix": [[2, 2], [0, 0], [1, 1]], "SaveFilePath": "/home/ann/Saves/20250101120000123.json"}
    """

    model_config = ConfigDict(populate_by_name=True)

    unique_code: str = Field(alias="UniqueCode")
    move_count: int = Field(alias="MoveCount", ge=0)
    players: list[str] = Field(alias="Players", min_length=2, max_length=2)
    first_move: int = Field(alias="FirstMove", ge=0, le=1)
    matrix: list[list[int]] = Field(alias="Matrix")
    save_file_path: str = Field(alias="SaveFilePath")

    @field_validator("matrix")
    @classmethod
    def validate_matrix(cls, value: list[list[int]]) -> list[list[int]]:
        if value and any(len(row) != len(value[0]) for row in value):
            raise ValueError("Matrix rows must all have the same length.")
        for row in value:
            for cell in row:
                if cell not in CELL_VALUES:
                    raise ValueError(
                        f"Unknown cell value {cell!r}. Expected one of {sorted(CELL_VALUES)}."
                    )
        return value

    @classmethod
    def from_session(cls, session: GameSession) -> Self:
        if session.save_file_path is None:
            raise SaveDataError(
                "A session must know its save file path before it gets written."
            )
        return cls(
            unique_code=session.unique_code,
            move_count=session.move_count,
            players=list(session.players),
            first_move=session.first_move,
            matrix=session.board.to_matrix(),
            save_file_path=session.save_file_path,
        )

    def to_session(self) -> GameSession:
        return GameSession(
            unique_code=self.unique_code,
            move_count=self.move_count,
            players=list(self.players),
            first_move=self.first_move,
            board=Board.from_matrix(self.matrix),
            save_file_path=self.save_file_path,
        )


class StatisticsData(BaseModel):
    """The single statistics file. Missing keys fall back to "no games recorded yet"."""

    model_config = ConfigDict(populate_by_name=True)

    player_wins: dict[str, int] = Field(default_factory=dict, alias="PlayerWins")
    shortest_game: int | None = Field(default=None, alias="ShortestGame")
    longest_game: int | None = Field(default=None, alias="LongestGame")

    @model_validator(mode="after")
    def validate_win_counts(self) -> Self:
        negative = [name for name, wins in self.player_wins.items() if wins < 0]
        if negative:
            raise ValueError(f"Win counts cannot be negative: {', '.join(negative)}")
        return self
