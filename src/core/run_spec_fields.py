"""Type-safe field parsing helpers for query-spec execution.

This module centralizes primitive parsing so query-spec executors stay
concise and produce consistent validation errors.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping

from core.errors import RunSpecError


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a query-spec step."""
    value = optional_string(args, field_name)
    if value is None:
        raise RunSpecError(f"Query-spec step is missing required field '{field_name}'.")
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a query-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise RunSpecError(f"Query-spec field '{field_name}' must be a string when provided.")


def required_int(args: Mapping[str, object], field_name: str) -> int:
    """Read a required integer field from a query-spec step."""
    value = args.get(field_name)
    if value is None:
        raise RunSpecError(f"Query-spec step is missing required field '{field_name}'.")
    if isinstance(value, bool) or not isinstance(value, int):
        raise RunSpecError(f"Query-spec field '{field_name}' must be an integer.")
    return value


def required_date(args: Mapping[str, object], field_name: str) -> date:
    """Read a required ISO date field from a query-spec step.

    YAML loads unquoted ISO dates as ``date`` objects already; quoted
    values are parsed from text.
    """
    value = args.get(field_name)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw_value = required_string(args, field_name)
    try:
        return date.fromisoformat(raw_value)
    except ValueError as error:
        raise RunSpecError(
            f"Query-spec field '{field_name}' must be an ISO date (YYYY-MM-DD), got '{raw_value}'."
        ) from error


def string_list(args: Mapping[str, object], field_name: str) -> tuple[str, ...]:
    """Read a list of strings, accepting a single string as one item."""
    value = args.get(field_name)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise RunSpecError(f"Query-spec field '{field_name}' must be a list of strings.")
