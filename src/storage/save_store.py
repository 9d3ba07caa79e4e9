"""
Save files for games in progress.

Every save creates a brand new file named after a fresh unique code (the UTC time of the save, to the millisecond).
Only after the new file has been written is the previous one deleted. So an interrupted save never loses the last
good state, at the price of a short moment during which two files of the same game exist on disk.

---
NOTE: Two saves within the same millisecond get the same unique code, hence the same path. The second write then
overwrites the first file, and that file is not deleted afterwards. This is logged, not prevented.
"""

import json
import logging
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from src.breakthrough.board import Board
from src.core.config import Settings
from src.core.exceptions import BoardNotInitializedError, GameOverError, SaveDataError
from src.core.models import GameSession, PlayerName
from src.storage.repository import SaveRepository
from src.storage.schema import SaveData

logger = logging.getLogger(__name__)

SAVE_FILE_SUFFIX = ".json"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_unique_code() -> str:
    """Timestamp with fixed width (YYYYMMDDHHMMSSmmm), so sorting the strings sorts the saves by time."""
    now = utc_now()
    return f"{now:%Y%m%d%H%M%S}{now.microsecond // 1000:03d}"


def classify_load_error(exc: Exception) -> str:
    """Short label for the log record of a save file that could not be loaded."""
    match exc:
        case json.JSONDecodeError():
            return "JSON_ERROR"
        case SaveDataError():
            return "SAVE_DATA_ERROR"
        case PermissionError():
            return "ACCESS_ERROR"
        case OSError() | UnicodeDecodeError():
            return "FILE_ERROR"
        case _:
            return "UNKNOWN_ERROR"


class SaveFileRepository:
    """Save files as JSON documents in <base>/Saves/"""

    def __init__(self, settings: Settings) -> None:
        self.saves_dir = settings.saves_dir

    def build_path(self, unique_code: str) -> str:
        return str(self.saves_dir / f"{unique_code}{SAVE_FILE_SUFFIX}")

    def write(self, session: GameSession, path: str) -> None:
        """Errors (disk full, no permission, ...) propagate to the caller."""
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        data = SaveData.from_session(session)
        Path(path).write_text(data.model_dump_json(by_alias=True), encoding="utf-8")

    def delete(self, path: str | None) -> None:
        if path and Path(path).exists():
            Path(path).unlink()

    def load(self, path: Path) -> GameSession:
        """
        Read one save file.

        Raises json.JSONDecodeError for anything that is not JSON, SaveDataError when the JSON does not hold a
        complete session, and OSError (or one of its subclasses) if the file cannot be read at all.
        """
        raw = json.loads(path.read_text(encoding="utf-8"))
        try:
            data = SaveData.model_validate(raw)
        except ValidationError as exc:
            raise SaveDataError(f"Invalid save data in {path.name}: {exc}") from exc
        return data.to_session()

    def load_all(self) -> list[GameSession]:
        """
        Load every save file. A file that fails to load is skipped and logged, it never stops the scan.

        Sessions come back newest first (sorted on their unique code).
        """
        self.saves_dir.mkdir(parents=True, exist_ok=True)

        sessions: list[GameSession] = []
        for path in sorted(self.saves_dir.glob(f"*{SAVE_FILE_SUFFIX}")):
            session = self._try_load(path)
            if session is not None:
                sessions.append(session)
        return sorted(sessions, key=lambda session: session.unique_code, reverse=True)

    def _try_load(self, path: Path) -> GameSession | None:
        try:
            return self.load(path)
        except Exception as exc:
            logger.warning("%s\t%s\t%s", path, classify_load_error(exc), exc)
            return None


class SaveStore:
    """
    Lifecycle of the save file(s) of exactly one game.
    ---

    start() -> record_move() for every move -> finish() once the game is won.
    """

    def __init__(self, repository: SaveRepository, session: GameSession | None = None) -> None:
        self.repo = repository
        self._session = session
        self._finished = False

    @classmethod
    def resume(cls, repository: SaveRepository, session: GameSession) -> "SaveStore":
        """Continue a game loaded from disk. Its file gets rotated away on the next save."""
        return cls(repository, session)

    @property
    def session(self) -> GameSession:
        if self._session is None:
            raise BoardNotInitializedError("No game has been started or loaded yet.")
        return self._session

    @property
    def is_started(self) -> bool:
        return self._session is not None

    def start(self, board: Board, players: list[PlayerName], first_move: int) -> GameSession:
        """New game: zero moves made, saved right away."""
        new_session = GameSession(
            unique_code="",
            move_count=0,
            players=list(players),
            first_move=first_move,
            board=board,
        )
        self._finished = False
        return self._save(new_session)

    def record_move(self, board: Board) -> GameSession:
        """A move was accepted: store the new board under a new file name."""
        session = self.session
        if self._finished:
            raise GameOverError("This game is finished, no more moves can be recorded.")
        return self._save(replace(session, board=board, move_count=session.move_count + 1))

    def finish(self) -> None:
        """The game is over: remove its save file. (Statistics are the caller's business.)"""
        session = self.session
        self.repo.delete(session.save_file_path)
        self._finished = True
        logger.info(
            "Finished game %s after %d moves", session.unique_code, session.move_count
        )

    def list_all(self) -> list[GameSession]:
        return self.repo.load_all()

    def has_saved_games(self) -> bool:
        return len(self.repo.load_all()) > 0

    def _save(self, session: GameSession) -> GameSession:
        """
        Write the new file first, then delete the old one.

        The store only switches over to `session` once the write succeeded. A failing write leaves the previous
        state (and its file) untouched and propagates the error.
        """
        old_path = session.save_file_path
        unique_code = generate_unique_code()
        new_path = self.repo.build_path(unique_code)
        if new_path == old_path:
            logger.warning(
                "Unique code %s was generated twice, overwriting %s in place",
                unique_code,
                new_path,
            )
        saved = replace(session, unique_code=unique_code, save_file_path=new_path)

        self.repo.write(saved, new_path)
        self._session = saved

        if old_path != new_path:
            self.repo.delete(old_path)
        logger.debug("Saved move %d to %s", saved.move_count, new_path)
        return saved
