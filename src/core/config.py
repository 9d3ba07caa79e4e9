"""Where the game keeps its files.

Everything lives below a single base directory:
* <base>/Saves/<unique code>.json : one file per game in progress
* <base>/top-scores.json : aggregated statistics
* <base>/error.log : records of save files that could not be loaded
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Self

BASE_DIR_ENV_VAR = "BREAKTHROUGH_HOME"
SAVES_FOLDER_NAME = "Saves"
STATISTICS_FILE_NAME = "top-scores.json"
ERROR_LOG_FILE_NAME = "error.log"


@dataclass(frozen=True)
class Settings:
    base_dir: Path

    @classmethod
    def from_env(cls) -> Self:
        """Use $BREAKTHROUGH_HOME if set, otherwise the current working directory."""
        base = os.getenv(BASE_DIR_ENV_VAR)
        return cls(Path(base) if base else Path.cwd())

    @property
    def saves_dir(self) -> Path:
        return self.base_dir / SAVES_FOLDER_NAME

    @property
    def statistics_path(self) -> Path:
        return self.base_dir / STATISTICS_FILE_NAME

    @property
    def error_log_path(self) -> Path:
        return self.base_dir / ERROR_LOG_FILE_NAME
