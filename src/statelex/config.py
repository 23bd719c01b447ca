"""ContextVar-based lexer configuration for statelex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from statelex.config import LexConfig, lex_config_context

    # Explicit config
    lexer = Lexer(source, lex_start, config=LexConfig(strict_backup=True))

    # Or scoped to a block
    with lex_config_context(LexConfig(queue_capacity=4)):
        lexer = Lexer(source, lex_start)
        tokens = list(lexer.tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from statelex.errors import ConfigError

MIN_QUEUE_CAPACITY = 2


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        queue_capacity: Maximum tokens a single state step may emit before
            the lexer hands them out. Must be at least 2.
        strict_backup: Raise BackupError when backup() does not directly
            follow next(). Off by default; state functions are trusted to
            back up at most once per read.

    """

    queue_capacity: int = MIN_QUEUE_CAPACITY
    strict_backup: bool = False

    def __post_init__(self) -> None:
        if self.queue_capacity < MIN_QUEUE_CAPACITY:
            raise ConfigError(
                "queue_capacity",
                f"must be at least {MIN_QUEUE_CAPACITY}, got {self.queue_capacity}",
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "queue_capacity": 4,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.queue_capacity
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "MIN_QUEUE_CAPACITY",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
