"""Public SDK surface for GameRec.

This module provides a stable import path for library users.
It re-exports the primary client, recommender, and typed models.
"""

from __future__ import annotations

from core.config import GameRecConfig
from core.errors import (
    DatasetLoadError,
    GameRecError,
    InvalidArgumentError,
    NotFoundError,
    WrongReceiverError,
)
from core.types import Game
from gifts.delivery_service import DeliveryService
from gifts.gift_types import Gift, Person
from store.dataset_sdk import GameRecClient
from store.game_recommender import GameRecommender

__all__ = [
    "DatasetLoadError",
    "DeliveryService",
    "Game",
    "GameRecClient",
    "GameRecConfig",
    "GameRecError",
    "GameRecommender",
    "Gift",
    "InvalidArgumentError",
    "NotFoundError",
    "Person",
    "WrongReceiverError",
]
