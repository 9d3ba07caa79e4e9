"""Orchestration between the UI layer, the rules engine, and the storage layer."""

import logging
import random
from dataclasses import dataclass
from typing import Self

from src.api.models import MoveRequest, NewGameRequest
from src.breakthrough.board import Coord
from src.breakthrough.navigator import Cursor, Direction
from src.breakthrough.rules import (
    Move,
    Winner,
    apply_move,
    initial_board,
    legal_moves,
    movable_coordinates,
)
from src.core.config import Settings
from src.core.exceptions import BoardNotInitializedError, GameOverError, MissingPlayersError
from src.core.logging_config import configure_logging
from src.core.models import GameSession, PlayerName
from src.core.shared_types import FIRST_MOVE_FLAGS, Color, FirstMoveOption, Status
from src.storage.repository import SaveRepository, StatisticsRepository
from src.storage.save_store import SaveFileRepository, SaveStore
from src.storage.statistics_store import StatisticsStore

logger = logging.getLogger(__name__)


@dataclass
class MoveOutcome:
    """What happened after a move request."""

    accepted: bool
    session: GameSession
    winner: Winner = Winner.NONE
    winner_name: PlayerName | None = None

    @property
    def is_game_over(self) -> bool:
        return self.winner != Winner.NONE


class GameService:
    """
    Holds the one game that is being played (plus the selection cursor) and runs every move through the rules
    engine before storing it.
    """

    def __init__(
        self,
        save_repository: SaveRepository,
        statistics: StatisticsRepository,
        rng: random.Random | None = None,
    ) -> None:
        self.save_repo = save_repository
        self.statistics = statistics
        self.rng = rng or random.Random()
        self.store: SaveStore | None = None
        self.status = Status.NOT_STARTED
        self.cursor = Cursor(wrap_to_opposite=True)
        self.selected_pawn: Coord | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Self:
        """Wire the service to the save files and the statistics file under the configured base directory."""
        settings = settings or Settings.from_env()
        configure_logging(settings)
        return cls(SaveFileRepository(settings), StatisticsStore(settings))

    # -- UI entry points ---
    def new_game(self, request: NewGameRequest) -> GameSession:
        """Set up the starting position and save it right away."""
        first_move = self._resolve_first_move(request.first_move)
        board = initial_board(request.height, request.width)

        self.store = SaveStore(self.save_repo)
        session = self.store.start(
            board, [request.white_player, request.black_player], first_move
        )
        self._change_status(Status.IN_PROGRESS)
        self.start_pawn_selection()
        logger.info(
            "New %dx%d game: %s (white) vs %s (black)",
            request.height,
            request.width,
            request.white_player,
            request.black_player,
        )
        return session

    def saved_games(self) -> list[GameSession]:
        """Games that can be continued, newest first."""
        return self.save_repo.load_all()

    def load_game(self, session: GameSession) -> GameSession:
        """Continue a game picked from `saved_games()`."""
        self.store = SaveStore.resume(self.save_repo, session)
        self._change_status(Status.IN_PROGRESS)
        self.start_pawn_selection()
        return session

    @property
    def session(self) -> GameSession:
        if self.store is None:
            raise BoardNotInitializedError("Start or load a game first.")
        return self.store.session

    def legal_moves(self, row: int, col: int) -> list[Coord]:
        session = self.session
        return legal_moves(session.board, session.white_to_move, row, col)

    def selectable_pawns(self) -> list[Coord]:
        session = self.session
        return movable_coordinates(session.board, session.white_to_move)

    def make_move(self, request: MoveRequest) -> MoveOutcome:
        """
        Attempt a move
        -----

        1. Is the destination one of the legal moves of that pawn? No -> nothing happens (not an error).
        2. Apply the move and save the new board.
        3. Winner? -> the game is over, update statistics, then delete the save file (also when the statistics fail).
        """
        session = self.session
        self._assert_in_progress()

        move = Move.from_coords(
            request.from_row, request.from_col, request.to_row, request.to_col
        )
        if move.to_square not in self.legal_moves(*move.from_square):
            logger.debug(
                "Ignoring move %s -> %s: not a legal move", move.from_square, move.to_square
            )
            return MoveOutcome(accepted=False, session=session)

        new_board, winner = apply_move(session.board, move.from_square, move.to_square)

        # a winning move must be attributable before anything is written
        name = self.winner_name(winner) if winner != Winner.NONE else None

        # for the type checker: self.session already raised if there is no store
        assert self.store is not None
        session = self.store.record_move(new_board)

        if name is None:
            self.start_pawn_selection()
            return MoveOutcome(accepted=True, session=session)

        self._change_status(Status.WHITE_WON if winner == Winner.WHITE else Status.BLACK_WON)
        self.cursor.reset([])
        try:
            self.statistics.record_win(name, session.move_count)
        finally:
            self.store.finish()
        return MoveOutcome(accepted=True, session=session, winner=winner, winner_name=name)

    def winner_name(self, winner: Winner) -> PlayerName:
        players = self.session.players
        if len(players) < 2 or not all(players):
            raise MissingPlayersError("Cannot name the winner: player names are missing.")

        match winner:
            case Winner.WHITE:
                return players[0]
            case Winner.BLACK:
                return players[1]
            case Winner.NONE:
                raise GameOverError("Nobody has won this game (yet).")

    # -- Selection cursor ---
    def start_pawn_selection(self) -> None:
        """Cursor cycles through the pawns that can move."""
        self.selected_pawn = None
        self.cursor.reset(self.selectable_pawns())

    def start_move_selection(self, row: int, col: int) -> list[Coord]:
        """Cursor cycles through the destinations of the pawn on (row, col). Empty if it cannot move."""
        moves = self.legal_moves(row, col)
        if moves:
            self.selected_pawn = (row, col)
            self.cursor.reset(moves)
        return moves

    def move_cursor(self, direction: Direction) -> Coord | None:
        return self.cursor.move(direction)

    # -- Internal helpers --
    def _resolve_first_move(self, option: FirstMoveOption) -> int:
        match option:
            case FirstMoveOption.WHITE:
                return FIRST_MOVE_FLAGS[Color.WHITE]
            case FirstMoveOption.BLACK:
                return FIRST_MOVE_FLAGS[Color.BLACK]
            case FirstMoveOption.RANDOM:
                return FIRST_MOVE_FLAGS[self.rng.choice([Color.WHITE, Color.BLACK])]

    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameOverError(f"Game is not in progress. status: {self.status}")

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
