"""Pull-driven state-machine lexer.

The lexer owns a cursor over the input, a bounded queue of pending tokens,
and the current state function. No work happens until a token is
requested: next_token() runs state functions one step at a time until a
token is queued or the state becomes terminal.

A state function takes the lexer, consumes input through the cursor API,
optionally emits tokens, and returns the next state function. Returning
None is the terminal marker. errorf() queues an ILLEGAL token and returns
None, so ``return lexer.errorf(...)`` halts the scan.

Mutually recursive states need no registration: module-level functions and
closures resolve sibling names when called, not when defined.

Thread Safety:
Lexer instances are single-use. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

from statelex.config import LexConfig, get_lex_config
from statelex.lexer.cursor import CursorMixin
from statelex.lexer.queue import TokenQueue
from statelex.profiling import get_scan_accumulator
from statelex.tokens import EOF, ILLEGAL, Token, TokenType
from statelex.utils.logger import get_logger

logger = get_logger(__name__)

StateFn = Callable[["Lexer"], Optional["StateFn"]]


class Lexer(CursorMixin):
    """State-machine lexer driven by consumer-supplied state functions.

    Usage:
            >>> WORD = TokenType("WORD")
            >>> def lex_word(lexer):
            ...     lexer.ignore_whitespace()
            ...     if lexer.peek() == "":
            ...         return None
            ...     lexer.accept_alpha()
            ...     if lexer.pos == lexer.start:
            ...         return lexer.errorf("unexpected %r", lexer.next())
            ...     lexer.emit(WORD)
            ...     return lex_word
            >>> list(Lexer("hi there", lex_word).tokenize())
        [Token(WORD, 'hi', @0), Token(WORD, 'there', @3), Token(EOF, '', @8)]

    Thread Safety:
        Lexer instances are single-use. Create one per input.
        Do not drive one instance from several threads.

    """

    __slots__ = (
        "_input",
        "_input_len",
        "_start",
        "_pos",
        "_width",
        "_can_backup",
        "_strict_backup",
        "_state",
        "_tokens",
    )

    def __init__(
        self,
        source: str | bytes,
        start_state: StateFn | None,
        *,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to scan. str is encoded as UTF-8 (lone surrogates
                become malformed bytes); bytes are used as-is.
            start_state: First state function, or None for a lexer that
                only ever returns EOF.
            config: Lexer configuration (defaults to the active context config)
        """
        if config is None:
            config = get_lex_config()

        if isinstance(source, str):
            source = source.encode("utf-8", errors="surrogatepass")

        self._input = bytes(source)
        self._input_len = len(self._input)
        self._start = 0
        self._pos = 0
        self._width = 0
        self._can_backup = False
        self._strict_backup = config.strict_backup

        self._state: StateFn | None = start_state
        self._tokens = TokenQueue(config.queue_capacity)

    def __repr__(self) -> str:
        state = getattr(self._state, "__name__", None) if self._state else "<done>"
        return f"Lexer(pos={self._pos}/{self._input_len}, state={state})"

    # =========================================================================
    # Driver
    # =========================================================================

    @property
    def done(self) -> bool:
        """True once the state is terminal and every pending token is returned."""
        return self._state is None and not self._tokens

    def next_token(self) -> Token:
        """Return the next token, running state functions as needed.

        Once the state is terminal and the queue is drained, every call
        returns a fresh Token(EOF, "").
        """
        acc = get_scan_accumulator()
        while True:
            if self._tokens:
                return self._tokens.pop()

            if self._state is None:
                return Token(EOF, "", self._pos)

            if acc is not None:
                acc.record_step()
            self._state = self._state(self)
            if self._state is None:
                logger.debug("lexer reached terminal state at offset %d", self._pos)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == EOF:
                return

    # =========================================================================
    # Emission
    # =========================================================================

    def _enqueue(self, token: Token) -> None:
        self._tokens.push(token)
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_token(token.type == ILLEGAL)

    def emit(self, token_type: TokenType) -> None:
        """Queue the text between start and pos as a token of token_type."""
        self._enqueue(Token(token_type, self.current_input, self._start))
        self._start = self._pos
        self._can_backup = False

    def errorf(self, format: str, *args: object) -> None:
        """Queue an ILLEGAL token and return the terminal state.

        The message is built printf-style, as in logging: ``format % args``
        when args are given, otherwise format verbatim.

        Usage:
            return lexer.errorf("unexpected %r", r)
        """
        message = format % args if args else format
        logger.debug("lexer error at offset %d: %s", self._pos, message)
        self._enqueue(Token(ILLEGAL, message, self._pos))
        return None
