"""Statistics over all finished games, kept in a single JSON file (<base>/top-scores.json)"""

import logging
from pathlib import Path

from pydantic import ValidationError

from src.core.config import Settings
from src.core.models import PlayerName
from src.storage.schema import StatisticsData

logger = logging.getLogger(__name__)

UNDETERMINED = "undetermined"


class StatisticsStore:
    """
    Load - modify - overwrite on every finished game.

    NOTE: assumes a single process plays a single game at a time, there is no locking.
    """

    def __init__(self, settings: Settings) -> None:
        self.path: Path = settings.statistics_path

    def load(self) -> StatisticsData:
        """A missing or corrupt file counts as "no games recorded yet"."""
        if not self.path.exists():
            return StatisticsData()
        try:
            return StatisticsData.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable statistics file %s: %s", self.path, exc)
            return StatisticsData()

    def save(self, stats: StatisticsData) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            stats.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )

    def record_win(self, winner_name: PlayerName, move_count: int) -> None:
        stats = self.load()

        stats.player_wins[winner_name] = stats.player_wins.get(winner_name, 0) + 1

        if stats.shortest_game is None or move_count < stats.shortest_game:
            stats.shortest_game = move_count

        if stats.longest_game is None or move_count > stats.longest_game:
            stats.longest_game = move_count

        self.save(stats)
        logger.info("Recorded win for %s after %d moves", winner_name, move_count)

    def best_player(self) -> str:
        """The player with strictly the most wins. A tie for first place (or no games at all) is undetermined."""
        return best_player(self.load().player_wins)

    def shortest_game(self) -> int | None:
        return self.load().shortest_game

    def longest_game(self) -> int | None:
        return self.load().longest_game

    def top_scores(self) -> list[tuple[str, str]]:
        """Rows for the statistics screen: (label, value)."""
        stats = self.load()
        return [
            ("Player with the most wins", best_player(stats.player_wins)),
            ("Longest game", _format_moves(stats.longest_game)),
            ("Shortest game", _format_moves(stats.shortest_game)),
        ]


def best_player(player_wins: dict[PlayerName, int]) -> str:
    if not player_wins:
        return UNDETERMINED
    most_wins = max(player_wins.values())
    leaders = [name for name, wins in player_wins.items() if wins == most_wins]
    return leaders[0] if len(leaders) == 1 else UNDETERMINED


def _format_moves(move_count: int | None) -> str:
    return str(move_count) if move_count is not None else UNDETERMINED
