"""Shared pytest fixtures for GameRec tests."""

from __future__ import annotations

import io
from typing import Callable

import pytest

from store.game_recommender import GameRecommender

DATASET_HEADER = "name,platform,release_date,user_review,meta_score,summary"


def build_dataset_text(*rows: str) -> str:
    """Join CSV rows under the standard dataset header."""
    return "\n".join((DATASET_HEADER, *rows)) + "\n"


@pytest.fixture
def recommender_from_rows() -> Callable[..., GameRecommender]:
    """Return a factory that loads a recommender from raw CSV rows."""

    def _build(*rows: str) -> GameRecommender:
        return GameRecommender(io.StringIO(build_dataset_text(*rows)))

    return _build


@pytest.fixture
def two_pc_games(recommender_from_rows: Callable[..., GameRecommender]) -> GameRecommender:
    """Recommender holding two PC games with overlapping summaries."""
    return recommender_from_rows(
        "Game A,PC,2020-01-01,8.5,90,great open world",
        "Game B,PC,2021-06-01,9.0,95,great story",
    )
