"""GameRec exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class GameRecError(Exception):
    """Base exception for all GameRec failures."""


class GameRecConfigError(GameRecError):
    """Raised for invalid runtime configuration."""


class DatasetLoadError(GameRecError):
    """Raised when a dataset stream cannot be read or parsed."""


class InvalidArgumentError(GameRecError, ValueError):
    """Raised for missing or out-of-domain query arguments."""


class NotFoundError(GameRecError, LookupError):
    """Raised when a lookup that must find a record finds nothing."""


class WrongReceiverError(GameRecError):
    """Raised when a gift is handed to someone other than its receiver."""


class RunSpecError(GameRecError):
    """Raised for invalid or unsupported query-spec configuration."""
