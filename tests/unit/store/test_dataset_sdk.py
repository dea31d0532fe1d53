"""Unit tests for the GameRec SDK client."""

from __future__ import annotations

from dataclasses import replace
import logging
from pathlib import Path

import pytest

from core.config import GameRecConfig
from core.errors import DatasetLoadError, WrongReceiverError
from gifts.gift_types import Gift, Person
from store.dataset_sdk import GameRecClient
from tests.fixture_paths import games_fixture


def _client(dataset_path: Path) -> GameRecClient:
    return GameRecClient(replace(GameRecConfig.from_env(), dataset_path=dataset_path))


def test_load_uses_configured_dataset() -> None:
    """Client should load the dataset named by its config."""
    recommender = _client(games_fixture("valid.csv")).load()

    assert len(recommender.get_all_games()) == 10


def test_load_uses_configured_delimiter() -> None:
    """Client should pass its delimiter to the reader."""
    config = replace(
        GameRecConfig.from_env(),
        dataset_path=games_fixture("semicolon.csv"),
        delimiter=";",
    )

    recommender = GameRecClient(config).load()

    assert recommender.get_years_active("PC") == 2


def test_load_override_path_wins(tmp_path: Path) -> None:
    """An explicit path should override the configured dataset."""
    client = _client(tmp_path / "missing.csv")

    recommender = client.load(str(games_fixture("header_only.csv")))

    assert recommender.get_all_games() == ()


def test_load_missing_dataset_raises(tmp_path: Path) -> None:
    """Missing configured datasets should raise load errors."""
    with pytest.raises(DatasetLoadError):
        _client(tmp_path / "missing.csv").load()


def test_load_logs_record_count(caplog: pytest.LogCaptureFixture) -> None:
    """Loading should emit a structured dataset_loaded event."""
    caplog.set_level(logging.INFO)

    _client(games_fixture("valid.csv")).load()

    assert '"event": "dataset_loaded"' in caplog.text and '"record_count": 10' in caplog.text


def test_with_dataset_path_returns_new_client(tmp_path: Path) -> None:
    """Cloning should switch dataset without touching the original."""
    client = _client(tmp_path / "missing.csv")

    cloned = client.with_dataset_path(str(games_fixture("valid.csv")))

    assert cloned.config.dataset_path == games_fixture("valid.csv")
    assert client.config.dataset_path == tmp_path / "missing.csv"


def test_deliver_delegates_to_delivery_service() -> None:
    """Client delivery should enforce receiver checks."""
    maria = Person(person_id=1, name="Maria")
    petar = Person(person_id=2, name="Petar")
    gift = Gift(name="book", price=12.5, sender=petar, receiver=maria)
    client = _client(games_fixture("valid.csv"))

    client.deliver(maria, gift)
    with pytest.raises(WrongReceiverError):
        client.deliver(petar, gift)

    assert maria.received_gifts == [gift] and petar.received_gifts == []


def test_resolve_dataset_path_defaults_to_config(tmp_path: Path) -> None:
    """No explicit path should resolve to the configured dataset."""
    client = _client(tmp_path / "games.csv")

    assert client.resolve_dataset_path() == tmp_path / "games.csv"
    assert client.resolve_dataset_path(str(tmp_path / "x" / ".." / "a.csv")) == (
        tmp_path / "a.csv"
    ).resolve()
