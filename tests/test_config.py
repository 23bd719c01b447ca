"""Tests for ContextVar-based lexer configuration.

Validates defaults, validation, thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from statelex import (
    LexConfig,
    Lexer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from statelex.errors import BackupError, ConfigError, TokenQueueFullError


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.queue_capacity == 2
        assert config.strict_backup is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict_backup = True  # type: ignore[misc]

    @pytest.mark.parametrize("capacity", [1, 0, -3])
    def test_capacity_below_minimum(self, capacity: int) -> None:
        with pytest.raises(ConfigError, match="queue_capacity"):
            LexConfig(queue_capacity=capacity)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            LexConfig(queue_capacity=1)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"queue_capacity": 4, "unknown_key": "ignored"})
        assert config.queue_capacity == 4
        assert config.strict_backup is False

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(strict_backup=True))
        assert get_lex_config().strict_backup is True

    def test_reset_restores_default(self) -> None:
        set_lex_config(LexConfig(queue_capacity=8))
        reset_lex_config()
        assert get_lex_config().queue_capacity == 2


class TestLexConfigContext:
    def test_context_sets_config(self) -> None:
        with lex_config_context(LexConfig(strict_backup=True)):
            assert get_lex_config().strict_backup is True
        assert get_lex_config().strict_backup is False

    def test_nested_contexts(self) -> None:
        with lex_config_context(LexConfig(strict_backup=True)):
            with lex_config_context(LexConfig(queue_capacity=3)):
                assert get_lex_config().queue_capacity == 3
                assert get_lex_config().strict_backup is False
            assert get_lex_config().strict_backup is True
        assert get_lex_config() == LexConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with lex_config_context(LexConfig(strict_backup=True)):
                raise ValueError("test")
        assert get_lex_config().strict_backup is False


class TestLexerReadsConfig:
    def test_lexer_uses_context_config(self) -> None:
        with lex_config_context(LexConfig(strict_backup=True)):
            lexer = Lexer("ab", None)
        # Config is captured at construction, not at call time
        with pytest.raises(BackupError):
            lexer.backup()

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(strict_backup=True)):
            lexer = Lexer("ab", None, config=LexConfig())
        lexer.backup()
        assert lexer.pos == 0

    def test_queue_capacity_applied(self) -> None:
        def burst(lexer: Lexer) -> None:
            for _ in range(4):
                lexer.emit("T")

        with lex_config_context(LexConfig(queue_capacity=3)):
            lexer = Lexer("", burst)
        with pytest.raises(TokenQueueFullError) as exc_info:
            lexer.next_token()
        assert exc_info.value.capacity == 3


class TestThreadIsolation:
    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, bool] = {}

        def worker(thread_id: int, config: LexConfig) -> None:
            set_lex_config(config)
            results[thread_id] = get_lex_config().strict_backup

        threads = [
            Thread(target=worker, args=(0, LexConfig(strict_backup=True))),
            Thread(target=worker, args=(1, LexConfig())),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: True, 1: False}
        assert get_lex_config().strict_backup is False
