"""
statelex: pull-driven lexical scanning engine for Python

Build a tokenizer for any textual grammar by writing state functions that
share one scanning cursor. The engine defines no grammar of its own and has
zero runtime dependencies.

Quick Start:
    >>> from statelex import EOF_RUNE, Lexer, TokenType, is_digit
    >>> NUMBER = TokenType("NUMBER")
    >>>
    >>> def lex_number(lexer):
    ...     lexer.ignore_whitespace()
    ...     if lexer.peek() == EOF_RUNE:
    ...         return None
    ...     if not is_digit(lexer.peek()):
    ...         return lexer.errorf("expected digit, got %r", lexer.next())
    ...     lexer.accept_digits()
    ...     lexer.emit(NUMBER)
    ...     return lex_number
    >>>
    >>> [t.literal for t in Lexer("12 345", lex_number).tokenize()]
    ['12', '345', '']

Configuration:
    >>> from statelex import LexConfig, lex_config_context
    >>> with lex_config_context(LexConfig(strict_backup=True)):
    ...     tokens = list(Lexer("1 2", lex_number).tokenize())

Installation:
    pip install statelex
"""

from statelex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from statelex.errors import BackupError, ConfigError, StatelexError, TokenQueueFullError
from statelex.lexer import Lexer, StateFn, TokenQueue
from statelex.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from statelex.runes import (
    EOF_RUNE,
    INVALID_RUNE,
    decode_rune,
    is_alpha,
    is_digit,
    is_end_of_line,
    is_space,
)
from statelex.tokens import EOF, ILLEGAL, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "BackupError",
    "ConfigError",
    "EOF",
    "EOF_RUNE",
    "ILLEGAL",
    "INVALID_RUNE",
    "LexConfig",
    "Lexer",
    "ScanAccumulator",
    "StateFn",
    "StatelexError",
    "Token",
    "TokenQueue",
    "TokenQueueFullError",
    "TokenType",
    "__version__",
    "decode_rune",
    "get_lex_config",
    "get_scan_accumulator",
    "is_alpha",
    "is_digit",
    "is_end_of_line",
    "is_space",
    "lex_config_context",
    "profiled_scan",
    "reset_lex_config",
    "set_lex_config",
]
