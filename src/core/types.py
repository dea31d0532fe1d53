"""Shared typed models.

This module defines immutable data models used by ingest, store,
SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Mapping

QueryCommand = Literal[
    "all",
    "released-after",
    "top",
    "years-with-score",
    "names-in-year",
    "best-on-platform",
    "by-platform",
    "years-active",
    "similar",
]


@dataclass(frozen=True)
class Game:
    """One parsed dataset row describing a single game.

    Attributes:
        name: Game title.
        platform: Platform the game was released on.
        release_date: Calendar release date.
        user_review: Audience review score.
        meta_score: Critic aggregate score.
        summary: Free-text game description.
    """

    name: str
    platform: str
    release_date: date
    user_review: float
    meta_score: int
    summary: str

    @property
    def release_year(self) -> int:
        """Return the calendar year of the release date."""
        return self.release_date.year


@dataclass(frozen=True)
class QuerySpecDefaults:
    """Default values applied to query-spec steps."""

    dataset_path: str | None = None


@dataclass(frozen=True)
class QueryStep:
    """One runnable query from a query-spec file."""

    command: QueryCommand
    args: Mapping[str, object]


@dataclass(frozen=True)
class QuerySpec:
    """Validated query-spec root object."""

    version: int
    defaults: QuerySpecDefaults
    steps: tuple[QueryStep, ...]
