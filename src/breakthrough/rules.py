"""
Rules of the game: which moves a pawn has, what a move does to the board, and when the game is over.

Key idea: every function here is pure. A Board goes in, a new value comes out, nothing is mutated or remembered.
Persisting the result is the job of the caller (the service layer).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.breakthrough.board import Board, Cell, Coord
from src.core.exceptions import InvalidMoveError

Vector = tuple[int, int]

# Each side always moves towards the opponent's back rank: white up the board (row 0), black down (row height - 1)
FORWARD: dict[Cell, int] = {Cell.WHITE: -1, Cell.BLACK: 1}

# Straight ahead, or one of the two diagonals. Order matters: it is the order in which moves get listed.
COLUMN_OFFSETS: tuple[int, ...] = (-1, 0, 1)

OPPONENT: dict[Cell, Cell] = {Cell.WHITE: Cell.BLACK, Cell.BLACK: Cell.WHITE}


class Winner(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Coord
    to_square: Coord

    @classmethod
    def from_coords(cls, from_row: int, from_col: int, to_row: int, to_col: int) -> Self:
        return cls((from_row, from_col), (to_row, to_col))


# --- TURN ---
def is_white_turn(move_count: int, first_move: int) -> bool:
    """first_move is 0 when white opens the game and 1 when black does."""
    return (move_count + first_move) % 2 == 0


# --- SETUP ---
def initial_board(height: int, width: int) -> Board:
    """
    Two rows of black pawns on top, two rows of white pawns at the bottom.

    NOTE: with fewer than 4 rows the two ranges overlap. White is assigned last, so it wins the overlapping rows.
    """
    rows: list[list[int]] = []
    for row in range(height):
        value = Cell.EMPTY
        if row <= 1:
            value = Cell.BLACK
        if row >= height - 2:
            value = Cell.WHITE
        rows.append([value] * width)
    return Board(height, width, tuple(Cell(value) for row in rows for value in row))


# --- MOVEMENT RULES ---
def legal_moves(board: Board, white_turn: bool, row: int, col: int) -> list[Coord]:
    """
    Destinations the pawn on (row, col) can move to.

    ---
    * Straight ahead: only onto an empty cell.
    * Diagonally ahead: onto an empty cell, or onto an opponent's pawn (capture).

    ---
    Returns an empty list when the cell is off the board, empty, or holds a pawn of the side that is not to move.
    "Nothing to move" and "not your pawn" look the same to the caller.
    """
    if not board.is_within_bounds(row, col):
        return []

    pawn = board.cell(row, col)
    own_side = Cell.WHITE if white_turn else Cell.BLACK
    if pawn != own_side:
        return []

    moves: list[Coord] = []
    for d_row, d_col in _step_vectors(pawn):
        target_row = row + d_row
        target_col = col + d_col
        if not board.is_within_bounds(target_row, target_col):
            continue
        if _is_valid_step(board.cell(target_row, target_col), d_col, pawn):
            moves.append((target_row, target_col))
    return moves


def _step_vectors(pawn: Cell) -> list[Vector]:
    return [(FORWARD[pawn], offset) for offset in COLUMN_OFFSETS]


def _is_valid_step(target: Cell, col_offset: int, pawn: Cell) -> bool:
    if col_offset == 0:
        return target == Cell.EMPTY
    return target in (Cell.EMPTY, OPPONENT[pawn])


def movable_coordinates(board: Board, white_turn: bool) -> list[Coord]:
    """The pawns of the side to move that have at least one legal move (row-major)."""
    return [
        (row, col)
        for row, col in occupied_coordinates(board)
        if legal_moves(board, white_turn, row, col)
    ]


def occupied_coordinates(board: Board) -> list[Coord]:
    """All cells holding a pawn of either color, row-major. The pool the selection cursor moves through."""
    return [
        (row, col) for row, col in board.coords() if board.cell(row, col) != Cell.EMPTY
    ]


# --- APPLYING A MOVE ---
def apply_move(board: Board, from_square: Coord, to_square: Coord) -> tuple[Board, Winner]:
    """
    Make the move on a copy of the board and report whether it ended the game.

    ---
    1. Copy the board, move the pawn, empty the starting cell (a capture simply overwrites the target).
    2. Edge reach: a white pawn landing on row 0, or a black pawn landing on the last row, wins.
    3. Wipeout: otherwise, if the opponent has no pawns left, the mover wins.

    NOTE: the move itself is not checked against `legal_moves`. That is up to the caller.
    """
    from_row, from_col = from_square
    to_row, to_col = to_square
    if not board.is_within_bounds(from_row, from_col) or not board.is_within_bounds(
        to_row, to_col
    ):
        raise InvalidMoveError(
            f"Move {from_square} -> {to_square} leaves the {board.height}x{board.width} board."
        )

    pawn = board.cell(from_row, from_col)
    if pawn == Cell.EMPTY:
        raise InvalidMoveError(f"There is no pawn to move on {from_square}.")

    new_board = board.replace([(from_square, Cell.EMPTY), (to_square, pawn)])

    winner = _edge_reach_winner(new_board, pawn, to_row)
    if winner == Winner.NONE:
        winner = _wipeout_winner(new_board)
    return new_board, winner


def _edge_reach_winner(board: Board, pawn: Cell, landed_row: int) -> Winner:
    if pawn == Cell.WHITE and landed_row == 0:
        return Winner.WHITE
    if pawn == Cell.BLACK and landed_row == board.height - 1:
        return Winner.BLACK
    return Winner.NONE


def _wipeout_winner(board: Board) -> Winner:
    """Checked for both colors: only one pawn can be taken per move, but the check does not rely on that."""
    pieces = count_pieces(board)
    if pieces[Cell.BLACK] == 0:
        return Winner.WHITE
    if pieces[Cell.WHITE] == 0:
        return Winner.BLACK
    return Winner.NONE


def count_pieces(board: Board) -> dict[Cell, int]:
    """Tally the pawns each side has on the board"""
    return {cell: board.count(cell) for cell in (Cell.WHITE, Cell.BLACK)}
