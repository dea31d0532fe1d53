"""GameRec CLI entry points.
This module exposes dataset query commands and query-spec batches.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import Any, Sequence, cast

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.errors import GameRecError
from core.logging_config import enable_console_logging
from core.run_spec import SUPPORTED_QUERY_COMMANDS
from core.run_spec_execution import execute_query_step
from core.types import QueryCommand, QueryStep
from store.dataset_sdk import GameRecClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="gamerec", description="GameRec dataset query CLI")
    parser.add_argument("--dataset", help="Override GAMEREC_DATASET for this command")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print structured log events to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_query_commands(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the GameRec CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        enable_console_logging()
    try:
        client = _build_client(args.dataset)
        if args.command == "run-spec":
            return run_run_spec_command(client, args)
        if args.command in SUPPORTED_QUERY_COMMANDS:
            return _run_query_command(client, args)
    except GameRecError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(dataset_path: str | None) -> GameRecClient:
    """Build SDK client with optional dataset override.

    Args:
        dataset_path: Optional override path.

    Returns:
        Configured SDK client.
    """
    client = GameRecClient()
    if dataset_path:
        return client.with_dataset_path(dataset_path)
    return client


def _run_query_command(client: GameRecClient, args: argparse.Namespace) -> int:
    """Handle a single dataset query command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    step = QueryStep(command=cast(QueryCommand, args.command), args=_step_args(args))
    for line in execute_query_step(client.load(), step):
        print(line)
    return 0


def _step_args(args: argparse.Namespace) -> dict[str, object]:
    """Collect subcommand arguments into query-step fields."""
    step_args = dict(vars(args))
    for key in ("command", "dataset", "verbose"):
        step_args.pop(key, None)
    return step_args


def _add_query_commands(subparsers: Any) -> None:
    """Register one subcommand per dataset query."""
    subparsers.add_parser("all", help="List every game in dataset order")
    released_after = subparsers.add_parser(
        "released-after",
        help="List games released strictly after a date",
    )
    released_after.add_argument("date", type=date.fromisoformat, help="ISO date, e.g. 2020-01-31")
    top = subparsers.add_parser("top", help="List the top N games by user review score")
    top.add_argument("n", type=int, help="Number of games to list")
    years_with_score = subparsers.add_parser(
        "years-with-score",
        help="List years with a game at or above a meta score",
    )
    years_with_score.add_argument("min_score", type=int, help="Minimum meta score")
    names_in_year = subparsers.add_parser(
        "names-in-year",
        help="Print names of games released in a year",
    )
    names_in_year.add_argument("year", type=int, help="Release year")
    best_on_platform = subparsers.add_parser(
        "best-on-platform",
        help="Show the best user-rated game for a platform",
    )
    best_on_platform.add_argument("platform", help="Platform name")
    subparsers.add_parser("by-platform", help="Count games per platform")
    years_active = subparsers.add_parser(
        "years-active",
        help="Print the number of years a platform has been live",
    )
    years_active.add_argument("platform", help="Platform name")
    similar = subparsers.add_parser(
        "similar",
        help="List games whose summary contains every keyword",
    )
    similar.add_argument("keywords", nargs="*", help="Case-sensitive summary keywords")
