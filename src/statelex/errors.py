"""Exception classes for statelex.

Bad input never raises: it surfaces as an ILLEGAL token. These exceptions
report misuse of the engine by state functions or configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statelex.tokens import Token


class StatelexError(Exception):
    """Base exception for all statelex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(StatelexError, ValueError):
    """Invalid lexer configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending LexConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"LexConfig.{field_name}: {message}")


class TokenQueueFullError(StatelexError):
    """A single state step emitted more tokens than the pending queue holds.

    Raised instead of silently dropping a token. Either emit fewer tokens
    per step or raise LexConfig.queue_capacity.
    """

    def __init__(self, capacity: int, token: Token) -> None:
        """Initialize queue overflow error.

        Args:
            capacity: Capacity of the full queue
            token: Token that could not be enqueued
        """
        self.capacity = capacity
        self.token = token
        super().__init__(
            f"pending token queue full (capacity {capacity}), cannot enqueue {token!r}"
        )


class BackupError(StatelexError):
    """backup() called without a preceding next().

    Only raised when LexConfig.strict_backup is enabled.
    """

    def __init__(self, pos: int, message: str = "backup() must directly follow next()") -> None:
        self.pos = pos
        super().__init__(f"offset {pos}: {message}")


__all__ = [
    "BackupError",
    "ConfigError",
    "StatelexError",
    "TokenQueueFullError",
]
