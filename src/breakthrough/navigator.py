"""
Selection cursor navigation.

The UI shows a cursor on one of a handful of cells (pawns that can move, or the destinations of the selected pawn).
Arrow keys move the cursor to the next candidate in that direction:
* left / right stay on the current row and pick the closest column past the cursor.
* up / down pick the first candidate on the nearest row past the cursor.

When nothing lies further in that direction, the cursor jumps to the extreme candidate in that direction
(or, with `wrap_to_opposite`, wraps around to the other edge).

Ties always go to the candidate that comes first in the list.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from src.breakthrough.board import Coord


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


# +1: towards larger column / row numbers, -1: towards smaller ones
STEP: dict[Direction, int] = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.UP: -1,
    Direction.DOWN: 1,
}


def navigate(
    coords: Sequence[Coord],
    index: int,
    direction: Direction,
    wrap_to_opposite: bool = False,
) -> int:
    """Index of the candidate the cursor lands on. Returns `index` unchanged for an empty candidate list."""
    if not coords:
        return index

    match direction:
        case Direction.LEFT | Direction.RIGHT:
            return _next_in_row(coords, index, STEP[direction], wrap_to_opposite)
        case Direction.UP | Direction.DOWN:
            return _next_row(coords, index, STEP[direction], wrap_to_opposite)


def next_right(coords: Sequence[Coord], index: int, wrap_to_opposite: bool = False) -> int:
    return navigate(coords, index, Direction.RIGHT, wrap_to_opposite)


def next_left(coords: Sequence[Coord], index: int, wrap_to_opposite: bool = False) -> int:
    return navigate(coords, index, Direction.LEFT, wrap_to_opposite)


def next_up(coords: Sequence[Coord], index: int, wrap_to_opposite: bool = False) -> int:
    return navigate(coords, index, Direction.UP, wrap_to_opposite)


def next_down(coords: Sequence[Coord], index: int, wrap_to_opposite: bool = False) -> int:
    return navigate(coords, index, Direction.DOWN, wrap_to_opposite)


def _next_in_row(
    coords: Sequence[Coord], index: int, step: int, wrap_to_opposite: bool
) -> int:
    """
    Search along the current row.
    ---

    best: the closest column strictly past the cursor in the direction of `step`.
    fallback: the extreme column of the row (same direction as `step`, or the opposite one when wrapping).
    NOTE the cursor's own cell is part of the row, so the fallback always finds something.
    """
    current_row, current_col = coords[index]
    fallback_step = -step if wrap_to_opposite else step

    best_idx = -1
    extreme_idx = -1
    for i, (row, col) in enumerate(coords):
        if row != current_row:
            continue

        if extreme_idx == -1 or _is_further(col, coords[extreme_idx][1], fallback_step):
            extreme_idx = i

        is_past_cursor = _is_further(col, current_col, step)
        if is_past_cursor and (
            best_idx == -1 or _is_further(coords[best_idx][1], col, step)
        ):
            best_idx = i

    return best_idx if best_idx != -1 else extreme_idx


def _next_row(
    coords: Sequence[Coord], index: int, step: int, wrap_to_opposite: bool
) -> int:
    """
    Search across rows.
    ---

    best: the first candidate on the nearest row strictly past the cursor's row.
    fallback: the first candidate on the extreme row (same direction as `step`, or the opposite one when wrapping).
    """
    current_row = coords[index][0]

    best_idx = _first_extreme(
        coords,
        keep=lambda row: _is_further(row, current_row, step),
        is_better=lambda row, best_row: _is_further(best_row, row, step),
    )
    if best_idx != -1:
        return best_idx

    fallback_step = -step if wrap_to_opposite else step
    return _first_extreme(
        coords,
        keep=lambda row: True,
        is_better=lambda row, best_row: _is_further(row, best_row, fallback_step),
    )


def _first_extreme(
    coords: Sequence[Coord],
    keep: Callable[[int], bool],
    is_better: Callable[[int, int], bool],
) -> int:
    """First index (in list order) whose row beats every other kept row. -1 if no row is kept."""
    best_idx = -1
    for i, (row, _) in enumerate(coords):
        if not keep(row):
            continue
        if best_idx == -1 or is_better(row, coords[best_idx][0]):
            best_idx = i
    return best_idx


def _is_further(value: int, reference: int, step: int) -> bool:
    """Is `value` strictly past `reference` when walking in the direction of `step`?"""
    return value > reference if step > 0 else value < reference


@dataclass
class Cursor:
    """
    Selection state the session carries around: the candidate cells and which one is highlighted.
    """

    coords: list[Coord] = field(default_factory=list)
    index: int = 0
    wrap_to_opposite: bool = False

    @property
    def current(self) -> Coord | None:
        if not self.coords:
            return None
        return self.coords[self.index]

    def move(self, direction: Direction) -> Coord | None:
        self.index = navigate(self.coords, self.index, direction, self.wrap_to_opposite)
        return self.current

    def reset(self, coords: list[Coord]) -> None:
        """New set of candidates (e.g. after a move was made): start over at the first one."""
        self.coords = list(coords)
        self.index = 0
