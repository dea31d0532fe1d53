"""In-memory game dataset queries.

This module loads a game dataset once and answers read-only queries
over the immutable record tuple. Every query returns a new value.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import TextIO

from core.constants import (
    DATASET_ENCODING,
    DEFAULT_DATE_FORMAT,
    DEFAULT_DELIMITER,
    NAMES_SEPARATOR,
)
from core.errors import DatasetLoadError, InvalidArgumentError, NotFoundError
from core.logging_config import get_logger
from core.types import Game
from ingest.game_reader import read_game_records

_LOGGER = get_logger(__name__)


class GameRecommender:
    """Read-only query layer over a fully loaded game dataset."""

    def __init__(
        self,
        data_input: TextIO,
        delimiter: str = DEFAULT_DELIMITER,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        """Load the dataset from a readable text stream.

        Args:
            data_input: Text stream whose first line is a header.
            delimiter: Single-character field delimiter.
            date_format: ``strptime`` pattern for release dates.

        Raises:
            DatasetLoadError: If the stream cannot be read or parsed.
        """
        self._games = read_game_records(data_input, delimiter, date_format)
        _LOGGER.info("dataset_loaded", record_count=len(self._games))

    @classmethod
    def from_path(
        cls,
        dataset_path: str | Path,
        delimiter: str = DEFAULT_DELIMITER,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> "GameRecommender":
        """Load the dataset from a local file.

        Args:
            dataset_path: Path to a delimited dataset file.
            delimiter: Single-character field delimiter.
            date_format: ``strptime`` pattern for release dates.

        Returns:
            Loaded recommender.

        Raises:
            DatasetLoadError: If the file is missing, unreadable, or invalid.
        """
        resolved_path = Path(dataset_path).expanduser()
        try:
            data_input = resolved_path.open("r", encoding=DATASET_ENCODING, newline="")
        except OSError as error:
            raise DatasetLoadError(
                f"Failed to open dataset at {resolved_path}: {error.strerror or error}. "
                "Provide an existing readable file."
            ) from error
        return cls(data_input, delimiter, date_format)

    def get_all_games(self) -> tuple[Game, ...]:
        """Return every game in dataset order.

        Returns:
            All games; empty when the dataset had only a header.
        """
        return self._games

    def get_games_released_after(self, release_date: date | None) -> tuple[Game, ...]:
        """Return games released strictly after ``release_date``.

        Args:
            release_date: Exclusive lower bound.

        Returns:
            Matching games in dataset order.

        Raises:
            InvalidArgumentError: If ``release_date`` is None.
        """
        if release_date is None:
            raise InvalidArgumentError("Date cannot be None")
        return tuple(game for game in self._games if game.release_date > release_date)

    def get_top_n_user_rated_games(self, n: int) -> tuple[Game, ...]:
        """Return the ``n`` games with the highest user review score.

        Ties keep their dataset order. ``n`` larger than the dataset
        returns every game.

        Args:
            n: Maximum number of games to return.

        Returns:
            Games sorted by user review score, descending.

        Raises:
            InvalidArgumentError: If ``n`` is negative.
        """
        if n < 0:
            raise InvalidArgumentError(f"N cannot be a negative number, got {n}")
        ranked = sorted(self._games, key=lambda game: game.user_review, reverse=True)
        return tuple(ranked[:n])

    def get_years_with_top_scoring_games(self, minimal_score: int) -> list[int]:
        """Return distinct years with a game scoring at least ``minimal_score``.

        Args:
            minimal_score: Inclusive meta score threshold.

        Returns:
            Years without repetition, in order of first appearance.
        """
        years = (game.release_year for game in self._games if game.meta_score >= minimal_score)
        return list(dict.fromkeys(years))

    def get_all_names_of_games_released_in(self, year: int) -> str:
        """Return names of games released in ``year`` joined by ``", "``.

        Returns:
            Joined names, or an empty string when nothing matches.
        """
        return NAMES_SEPARATOR.join(
            game.name for game in self._games if game.release_year == year
        )

    def get_highest_user_rated_game_by_platform(self, platform: str | None) -> Game:
        """Return the best user-rated game for ``platform``.

        The first game in dataset order wins among equal scores.

        Args:
            platform: Platform name.

        Returns:
            The game with the maximal user review score.

        Raises:
            NotFoundError: If ``platform`` is None, blank, or has no games.
        """
        if platform is None or not platform.strip():
            raise NotFoundError("Platform cannot be None or blank")
        candidates = [game for game in self._games if game.platform == platform]
        if not candidates:
            raise NotFoundError(f"No games found for platform '{platform}'")
        return max(candidates, key=lambda game: game.user_review)

    def get_all_games_by_platform(self) -> dict[str, frozenset[Game]]:
        """Group games by platform.

        Returns:
            New mapping of platform name to the set of its games.
        """
        grouped: dict[str, set[Game]] = {}
        for game in self._games:
            grouped.setdefault(game.platform, set()).add(game)
        return {platform: frozenset(games) for platform, games in grouped.items()}

    def get_years_active(self, platform: str | None) -> int:
        """Return the inclusive span of release years for ``platform``.

        Returns:
            ``max_year - min_year + 1``, or 0 for a None, blank,
            or unknown platform.
        """
        if platform is None or not platform.strip():
            return 0
        years = [game.release_year for game in self._games if game.platform == platform]
        if not years:
            return 0
        return max(years) - min(years) + 1

    def get_games_similar_to(self, *keywords: str) -> tuple[Game, ...]:
        """Return games whose summary contains every keyword.

        Matching is case-sensitive substring containment. Calling
        without keywords returns every game.

        Args:
            keywords: Substrings that must all appear in the summary.

        Returns:
            Matching games in dataset order.

        Raises:
            InvalidArgumentError: If any keyword is None or blank.
        """
        for keyword in keywords:
            if keyword is None or not keyword.strip():
                raise InvalidArgumentError("Keywords cannot be None or blank")
        return tuple(
            game
            for game in self._games
            if all(keyword in game.summary for keyword in keywords)
        )
