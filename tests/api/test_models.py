import pytest

from src.api.models import (
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    MoveRequest,
    NewGameRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import FirstMoveOption


# -- Validation - NewGameRequest --
def test_defaults() -> None:
    request = NewGameRequest(white_player="Ann", black_player="Bob")
    assert request.first_move == FirstMoveOption.WHITE
    assert request.height == DEFAULT_BOARD_SIZE
    assert request.width == DEFAULT_BOARD_SIZE


def test_names_are_stripped() -> None:
    request = NewGameRequest(white_player="  Ann ", black_player="Bob\t")
    assert request.white_player == "Ann"
    assert request.black_player == "Bob"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_player_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(white_player=name, black_player="Bob")
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(white_player="Ann", black_player=name)


def test_players_need_different_names() -> None:
    """Wins are counted per name"""
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(white_player="Ann", black_player=" Ann")


@pytest.mark.parametrize("size", [MIN_BOARD_SIZE, 11, MAX_BOARD_SIZE])
def test_valid_board_sizes(size: int) -> None:
    request = NewGameRequest(
        white_player="Ann", black_player="Bob", height=size, width=size
    )
    assert request.height == size
    assert request.width == size


@pytest.mark.parametrize("size", [MIN_BOARD_SIZE - 1, MAX_BOARD_SIZE + 1, 0, -8])
def test_invalid_board_sizes(size: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(white_player="Ann", black_player="Bob", height=size)
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(white_player="Ann", black_player="Bob", width=size)


@pytest.mark.parametrize("option", ["white", "black", "random"])
def test_first_move_options(option: str) -> None:
    request = NewGameRequest(white_player="Ann", black_player="Bob", first_move=option)
    assert request.first_move == FirstMoveOption(option)


# -- Validation - MoveRequest --
def test_valid_move_request() -> None:
    request = MoveRequest(from_row=6, from_col=0, to_row=5, to_col=1)
    assert (request.from_row, request.from_col) == (6, 0)
    assert (request.to_row, request.to_col) == (5, 1)


@pytest.mark.parametrize("field", ["from_row", "from_col", "to_row", "to_col"])
def test_negative_coordinate(field: str) -> None:
    coordinates = {"from_row": 6, "from_col": 0, "to_row": 5, "to_col": 1}
    coordinates[field] = -1
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(**coordinates)
