"""Runtime configuration model for GameRec.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATASET_PATH, DEFAULT_DATE_FORMAT, DEFAULT_DELIMITER
from core.errors import GameRecConfigError


@dataclass(frozen=True)
class GameRecConfig:
    """Validated runtime configuration.

    Attributes:
        dataset_path: Default dataset file loaded by the SDK and CLI.
        delimiter: Single-character field delimiter of dataset rows.
        date_format: ``strptime`` pattern for the release date column.
    """

    dataset_path: Path
    delimiter: str
    date_format: str

    @classmethod
    def from_env(cls) -> "GameRecConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GameRecConfigError: If environment values are invalid.
        """
        dataset_value = os.getenv("GAMEREC_DATASET", str(DEFAULT_DATASET_PATH))
        delimiter = _parse_delimiter(os.getenv("GAMEREC_DELIMITER", DEFAULT_DELIMITER))
        date_format = _parse_date_format(os.getenv("GAMEREC_DATE_FORMAT", DEFAULT_DATE_FORMAT))
        return cls(
            dataset_path=Path(dataset_value).expanduser().resolve(),
            delimiter=delimiter,
            date_format=date_format,
        )


def _parse_delimiter(raw_value: str) -> str:
    """Validate the dataset delimiter environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        The delimiter character.

    Raises:
        GameRecConfigError: If value is not exactly one character.
    """
    if len(raw_value) != 1:
        raise GameRecConfigError(
            "Invalid GAMEREC_DELIMITER value: "
            f"expected a single character, got '{raw_value}'. "
            "Set GAMEREC_DELIMITER to one character such as ',' or ';'."
        )
    return raw_value


def _parse_date_format(raw_value: str) -> str:
    if not raw_value.strip():
        raise GameRecConfigError(
            "Invalid GAMEREC_DATE_FORMAT value: expected a strptime pattern, got a blank string. "
            "Unset it to use the ISO default."
        )
    return raw_value
