"""Core constants used across GameRec modules.

This module centralizes defaults and dataset layout constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATASET_PATH = Path("data") / "video_games.csv"
DEFAULT_DELIMITER = ","
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DATASET_ENCODING = "utf-8"
GAME_FIELD_NAMES = (
    "name",
    "platform",
    "release_date",
    "user_review",
    "meta_score",
    "summary",
)
NAMES_SEPARATOR = ", "
QUERY_SPEC_VERSION = 1
