"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path
from typing import Callable

import pytest

from src.breakthrough.board import Board, Cell, Coord
from src.core.config import Settings
from src.storage.save_store import SaveFileRepository
from src.storage.statistics_store import StatisticsStore

BoardFactory = Callable[..., Board]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Every test gets its own base directory (saves, statistics, and error log all end up in there)."""
    return Settings(base_dir=tmp_path)


@pytest.fixture
def save_repository(settings: Settings) -> SaveFileRepository:
    return SaveFileRepository(settings)


@pytest.fixture
def statistics_store(settings: Settings) -> StatisticsStore:
    return StatisticsStore(settings)


@pytest.fixture
def board_with_pawns() -> BoardFactory:
    """Call the inner function with the pawns to place: lists of (row, col) for white and black"""

    def _create_board(
        white: list[Coord] | None = None,
        black: list[Coord] | None = None,
        height: int = 8,
        width: int = 8,
    ) -> Board:
        updates = [(square, Cell.WHITE) for square in white or []]
        updates += [(square, Cell.BLACK) for square in black or []]
        return Board.empty(height, width).replace(updates)

    return _create_board
