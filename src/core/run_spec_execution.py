"""Shared query-spec execution engine for CLI and SDK workflows.

This module maps validated query steps to recommender operations so the
CLI, YAML batches, and SDK all render results through one code path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from core.errors import RunSpecError
from core.logging_config import get_logger
from core.run_spec import load_query_spec
from core.run_spec_fields import (
    optional_string,
    required_date,
    required_int,
    string_list,
)
from core.types import Game, QuerySpec, QueryStep
from store.game_recommender import GameRecommender

_LOGGER = get_logger(__name__)


class QueryClient(Protocol):
    """Client API contract required by query-spec execution."""

    def resolve_dataset_path(self, dataset_path: str | None = None) -> Path: ...

    def load(self, dataset_path: str | None = None) -> GameRecommender: ...


@dataclass
class QueryExecutionContext:
    """In-memory context used to execute query-spec steps."""

    client: QueryClient
    default_dataset_path: str | None
    loaded: dict[Path, GameRecommender] = field(default_factory=dict)

    def recommender_for(self, step: QueryStep) -> GameRecommender:
        """Return the recommender for a step, loading each dataset once."""
        dataset_path = optional_string(step.args, "dataset") or self.default_dataset_path
        resolved_path = self.client.resolve_dataset_path(dataset_path)
        if resolved_path not in self.loaded:
            self.loaded[resolved_path] = self.client.load(str(resolved_path))
        return self.loaded[resolved_path]


def execute_query_spec_file(client: QueryClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a query-spec file, returning printable output lines."""
    spec = load_query_spec(spec_file)
    return execute_query_spec(client, spec)


def execute_query_spec(client: QueryClient, spec: QuerySpec) -> tuple[str, ...]:
    """Execute a parsed query-spec object and return output lines."""
    context = QueryExecutionContext(
        client=client,
        default_dataset_path=spec.defaults.dataset_path,
    )
    output_lines: list[str] = []
    for step in spec.steps:
        output_lines.extend(execute_query_step(context.recommender_for(step), step))
    _LOGGER.info(
        "query_spec_executed",
        step_count=len(spec.steps),
        dataset_count=len(context.loaded),
    )
    return tuple(output_lines)


def execute_query_step(recommender: GameRecommender, step: QueryStep) -> tuple[str, ...]:
    """Run one query step against a loaded recommender.

    Args:
        recommender: Loaded dataset.
        step: Validated query step.

    Returns:
        Output lines for the step.

    Raises:
        RunSpecError: If step arguments are missing or mistyped.
    """
    args = step.args
    if step.command == "all":
        return _game_rows(recommender.get_all_games())
    if step.command == "released-after":
        return _game_rows(recommender.get_games_released_after(required_date(args, "date")))
    if step.command == "top":
        return _game_rows(recommender.get_top_n_user_rated_games(required_int(args, "n")))
    if step.command == "years-with-score":
        years = recommender.get_years_with_top_scoring_games(required_int(args, "min_score"))
        return tuple(str(year) for year in years)
    if step.command == "names-in-year":
        return (recommender.get_all_names_of_games_released_in(required_int(args, "year")),)
    if step.command == "best-on-platform":
        platform = optional_string(args, "platform")
        return (format_game_row(recommender.get_highest_user_rated_game_by_platform(platform)),)
    if step.command == "by-platform":
        grouped = recommender.get_all_games_by_platform()
        return tuple(f"{platform}\t{len(grouped[platform])}" for platform in sorted(grouped))
    if step.command == "years-active":
        return (str(recommender.get_years_active(optional_string(args, "platform"))),)
    if step.command == "similar":
        return _game_rows(recommender.get_games_similar_to(*string_list(args, "keywords")))
    raise RunSpecError(f"Unsupported query-spec command '{step.command}'.")


def format_game_row(game: Game) -> str:
    """Render one game as a tab-separated output row."""
    return (
        f"{game.name}\t{game.platform}\t{game.release_date.isoformat()}\t"
        f"{game.user_review}\t{game.meta_score}"
    )


def _game_rows(games: tuple[Game, ...]) -> tuple[str, ...]:
    return tuple(format_game_row(game) for game in games)
