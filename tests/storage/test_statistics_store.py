"""Unit tests for src/storage/statistics_store.py"""

import json

import pytest

from src.storage.statistics_store import UNDETERMINED, StatisticsStore, best_player


def test_missing_file_means_no_games(statistics_store: StatisticsStore) -> None:
    assert not statistics_store.path.exists()
    assert statistics_store.best_player() == UNDETERMINED
    assert statistics_store.shortest_game() is None
    assert statistics_store.longest_game() is None


def test_first_win_sets_both_records(statistics_store: StatisticsStore) -> None:
    statistics_store.record_win("Ann", 17)

    assert statistics_store.best_player() == "Ann"
    assert statistics_store.shortest_game() == 17
    assert statistics_store.longest_game() == 17


def test_records_use_strict_min_max(statistics_store: StatisticsStore) -> None:
    for moves in [20, 12, 31, 12, 25]:
        statistics_store.record_win("Ann", moves)

    assert statistics_store.shortest_game() == 12
    assert statistics_store.longest_game() == 31
    assert statistics_store.load().player_wins == {"Ann": 5}


def test_file_format(statistics_store: StatisticsStore) -> None:
    statistics_store.record_win("Ann", 9)
    statistics_store.record_win("Bob", 14)
    statistics_store.record_win("Ann", 11)

    content = json.loads(statistics_store.path.read_text(encoding="utf-8"))
    assert content == {
        "PlayerWins": {"Ann": 2, "Bob": 1},
        "ShortestGame": 9,
        "LongestGame": 14,
    }


def test_tie_is_undetermined(statistics_store: StatisticsStore) -> None:
    statistics_store.record_win("Ann", 9)
    statistics_store.record_win("Bob", 14)
    assert statistics_store.best_player() == UNDETERMINED

    statistics_store.record_win("Bob", 10)
    assert statistics_store.best_player() == "Bob"


@pytest.mark.parametrize(
    "player_wins, expected",
    [
        ({}, UNDETERMINED),
        ({"Ann": 1}, "Ann"),
        ({"Ann": 3, "Bob": 1, "Cid": 2}, "Ann"),
        ({"Ann": 3, "Bob": 3, "Cid": 2}, UNDETERMINED),
        ({"Ann": 1, "Bob": 4, "Cid": 4}, UNDETERMINED),
    ],
)
def test_best_player(player_wins: dict[str, int], expected: str) -> None:
    assert best_player(player_wins) == expected


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json at all",
        "null",
        '{"PlayerWins": {"Ann": "many"}}',
        '{"PlayerWins": {"Ann": -3}}',
    ],
)
def test_corrupt_file_counts_as_empty(
    statistics_store: StatisticsStore, content: str
) -> None:
    statistics_store.path.write_text(content, encoding="utf-8")
    assert statistics_store.best_player() == UNDETERMINED

    # and the next win simply starts over
    statistics_store.record_win("Ann", 8)
    assert statistics_store.load().player_wins == {"Ann": 1}
    assert statistics_store.shortest_game() == 8


def test_top_scores(statistics_store: StatisticsStore) -> None:
    assert statistics_store.top_scores() == [
        ("Player with the most wins", UNDETERMINED),
        ("Longest game", UNDETERMINED),
        ("Shortest game", UNDETERMINED),
    ]

    statistics_store.record_win("Ann", 12)
    statistics_store.record_win("Ann", 30)
    assert statistics_store.top_scores() == [
        ("Player with the most wins", "Ann"),
        ("Longest game", "30"),
        ("Shortest game", "12"),
    ]
