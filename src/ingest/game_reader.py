"""Game dataset readers.

This module parses a delimited text stream into typed game records.
It owns quoting, header handling, and per-field conversion errors.
"""

from __future__ import annotations

import csv
import math
from datetime import date, datetime
from typing import Sequence, TextIO

from core.constants import DEFAULT_DATE_FORMAT, DEFAULT_DELIMITER, GAME_FIELD_NAMES
from core.errors import DatasetLoadError
from core.types import Game


def read_game_records(
    stream: TextIO,
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> tuple[Game, ...]:
    """Read every game row from a text stream.

    The first row is a header and is always skipped. The stream is
    closed once reading finishes, whether or not parsing succeeded.

    Args:
        stream: Readable text stream positioned at the header row.
        delimiter: Single-character field delimiter.
        date_format: ``strptime`` pattern for release dates.

    Returns:
        Parsed games in dataset order.

    Raises:
        DatasetLoadError: If the stream is unreadable or a row is invalid.
    """
    try:
        with stream:
            return _read_rows(stream, delimiter, date_format)
    except (OSError, ValueError) as error:
        raise DatasetLoadError(
            f"Could not load dataset: {error}. Check the input source and retry."
        ) from error


def parse_game_row(fields: Sequence[str], date_format: str = DEFAULT_DATE_FORMAT) -> Game:
    """Parse one already-split dataset row into a game.

    Args:
        fields: Row values in dataset column order.
        date_format: ``strptime`` pattern for the release date.

    Returns:
        Parsed game record.

    Raises:
        ValueError: If the field count or any value is malformed.
    """
    if len(fields) != len(GAME_FIELD_NAMES):
        raise ValueError(
            f"expected {len(GAME_FIELD_NAMES)} fields "
            f"({', '.join(GAME_FIELD_NAMES)}), got {len(fields)}"
        )
    name, platform, raw_date, raw_user_review, raw_meta_score, summary = (
        field.strip() for field in fields
    )
    return Game(
        name=name,
        platform=platform,
        release_date=_parse_date(raw_date, date_format),
        user_review=_parse_float("user_review", raw_user_review),
        meta_score=_parse_int("meta_score", raw_meta_score),
        summary=summary,
    )


def _read_rows(stream: TextIO, delimiter: str, date_format: str) -> tuple[Game, ...]:
    games: list[Game] = []
    reader = csv.reader(stream, delimiter=delimiter)
    try:
        next(reader, None)
        for fields in reader:
            if not fields:
                continue
            games.append(_parse_numbered_row(fields, reader.line_num, date_format))
    except csv.Error as error:
        raise DatasetLoadError(
            f"Failed to parse dataset at line {reader.line_num}: {error}. "
            "Check quoting around fields that contain the delimiter."
        ) from error
    return tuple(games)


def _parse_numbered_row(fields: Sequence[str], line_number: int, date_format: str) -> Game:
    try:
        return parse_game_row(fields, date_format)
    except ValueError as error:
        raise DatasetLoadError(
            f"Invalid game record at line {line_number}: {error}. "
            "Fix the row and reload the dataset."
        ) from error


def _parse_date(raw_value: str, date_format: str) -> date:
    try:
        return datetime.strptime(raw_value, date_format).date()
    except ValueError as error:
        raise ValueError(
            f"release_date '{raw_value}' does not match format '{date_format}'"
        ) from error


def _parse_float(field_name: str, raw_value: str) -> float:
    try:
        value = float(raw_value)
    except ValueError as error:
        raise ValueError(f"{field_name} '{raw_value}' is not a decimal number") from error
    if not math.isfinite(value):
        raise ValueError(f"{field_name} '{raw_value}' must be a finite number")
    return value


def _parse_int(field_name: str, raw_value: str) -> int:
    try:
        return int(raw_value)
    except ValueError as error:
        raise ValueError(f"{field_name} '{raw_value}' is not an integer") from error
