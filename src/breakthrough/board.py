"""
The game board: a fixed size grid of cells.

Stored as a flat, row-major tuple. Row 0 is the top edge (black's back rank), row height - 1 the bottom edge (white's).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from src.core.exceptions import BoardShapeError

Coord = tuple[int, int]  # (row, col)


class Cell(IntEnum):
    """Integer values double as the encoding used in save files."""

    EMPTY = 0
    WHITE = 1
    BLACK = 2


@dataclass(frozen=True)
class Board:
    height: int
    width: int
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if self.height < 0 or self.width < 0:
            raise BoardShapeError(
                f"Board dimensions must be non-negative, got {self.height}x{self.width}."
            )
        if len(self.cells) != self.height * self.width:
            raise BoardShapeError(
                f"A {self.height}x{self.width} board needs {self.height * self.width} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls, height: int, width: int) -> Self:
        return cls(height, width, (Cell.EMPTY,) * (height * width))

    @classmethod
    def from_matrix(cls, matrix: list[list[int]]) -> Self:
        """Build from nested rows of integers (0 empty, 1 white, 2 black).

        Raises BoardShapeError if the rows are ragged. Unknown integers raise a ValueError from the Cell enum.
        """
        height = len(matrix)
        width = len(matrix[0]) if height > 0 else 0
        if any(len(row) != width for row in matrix):
            raise BoardShapeError("All rows of the matrix must have the same length.")
        return cls(height, width, tuple(Cell(value) for row in matrix for value in row))

    def to_matrix(self) -> list[list[int]]:
        return [
            [int(self.cells[self.index(row, col)]) for col in range(self.width)]
            for row in range(self.height)
        ]

    def index(self, row: int, col: int) -> int:
        """Position of (row, col) in the flat buffer (no bounds check)."""
        return row * self.width + col

    def is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        if not self.is_within_bounds(row, col):
            raise IndexError(
                f"({row}, {col}) is outside the {self.height}x{self.width} board."
            )
        return self.cells[self.index(row, col)]

    def coords(self) -> Iterator[Coord]:
        """Every coordinate, row-major."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def replace(self, updates: Iterable[tuple[Coord, Cell]]) -> Board:
        """Copy of the board with some cells overwritten. Updates are applied in order."""
        new_cells = list(self.cells)
        for (row, col), value in updates:
            if not self.is_within_bounds(row, col):
                raise IndexError(
                    f"({row}, {col}) is outside the {self.height}x{self.width} board."
                )
            new_cells[self.index(row, col)] = value
        return Board(self.height, self.width, tuple(new_cells))

    def pretty(self) -> str:
        """Plain text rendering, mostly handy in test failure output."""
        symbols = {Cell.EMPTY: ".", Cell.WHITE: "W", Cell.BLACK: "B"}
        return "\n".join(
            " ".join(symbols[self.cells[self.index(row, col)]] for col in range(self.width))
            for row in range(self.height)
        )
