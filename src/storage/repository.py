"""Protocol repositories (the file based versions live next to this module; tests swap in dictionaries)"""

from typing import Protocol

from src.core.models import GameSession, PlayerName


class SaveRepository(Protocol):
    """Where save files for game sessions go."""

    def build_path(self, unique_code: str) -> str:
        """Location of the save file for the given unique code."""
        ...

    def write(self, session: GameSession, path: str) -> None:
        """Store the full session at `path` (overwriting whatever is there)."""
        ...

    def delete(self, path: str | None) -> None:
        """Remove the file at `path` if there is one."""
        ...

    def load_all(self) -> list[GameSession]:
        """All sessions that could be loaded, newest first."""
        ...


class StatisticsRepository(Protocol):
    """Aggregated results over all finished games."""

    def record_win(self, winner_name: PlayerName, move_count: int) -> None:
        """Count one more win for the player and update the shortest/longest game."""
        ...

    def best_player(self) -> str:
        """Name of the player with the most wins, or "undetermined"."""
        ...
