"""Python SDK for game dataset queries.

This module exposes high-level APIs for loading datasets, running
query specs, and delivering gifts through one client object.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import GameRecConfig
from core.run_spec_execution import execute_query_spec_file
from gifts.delivery_service import DeliveryService
from gifts.gift_types import Gift, Person
from store.game_recommender import GameRecommender


class GameRecClient:
    """Primary SDK entry point for dataset queries."""

    def __init__(self, config: GameRecConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or GameRecConfig.from_env()
        self._delivery_service = DeliveryService()

    @property
    def config(self) -> GameRecConfig:
        """Return the runtime configuration."""
        return self._config

    def load(self, dataset_path: str | None = None) -> GameRecommender:
        """Load a dataset into a query-ready recommender.

        Args:
            dataset_path: Optional path overriding the configured dataset.

        Returns:
            Loaded recommender.

        Raises:
            DatasetLoadError: If the dataset cannot be read or parsed.
        """
        return GameRecommender.from_path(
            self.resolve_dataset_path(dataset_path),
            delimiter=self._config.delimiter,
            date_format=self._config.date_format,
        )

    def resolve_dataset_path(self, dataset_path: str | None = None) -> Path:
        """Return the absolute dataset path, falling back to the configured one."""
        if not dataset_path:
            return self._config.dataset_path
        return Path(dataset_path).expanduser().resolve()

    def with_dataset_path(self, dataset_path: str) -> "GameRecClient":
        """Clone the client with a different default dataset.

        Args:
            dataset_path: New dataset file path.

        Returns:
            New SDK client instance.
        """
        resolved_path = Path(dataset_path).expanduser().resolve()
        return GameRecClient(replace(self._config, dataset_path=resolved_path))

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML query-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML query-spec file.

        Returns:
            Ordered output lines.
        """
        return execute_query_spec_file(self, spec_file)

    def deliver(self, receiver: Person | None, gift: Gift | None) -> None:
        """Hand a gift to its receiver.

        Raises:
            InvalidArgumentError: If either argument is None.
            WrongReceiverError: If the gift is addressed to someone else.
        """
        self._delivery_service.send(receiver, gift)
