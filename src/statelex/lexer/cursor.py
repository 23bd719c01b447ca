"""Cursor mixin: position bookkeeping over the immutable input buffer.

The cursor tracks three byte offsets into the UTF-8 input:

    start  beginning of the token being accumulated
    pos    next byte to decode
    width  encoded length of the last code point read by next()

Invariant: 0 <= start <= pos <= len(input).

backup() undoes exactly one next(). Calling it twice in a row, or after
ignore()/emit()/accept_sequence(), is a contract violation with undefined
effect: pos may move before start. The engine's own helpers never do this.
Enable LexConfig.strict_backup to turn violations into BackupError.
"""

from __future__ import annotations

from collections.abc import Callable, Container

from statelex.errors import BackupError
from statelex.runes import EOF_RUNE, decode_rune, is_alpha, is_digit, is_space


class CursorMixin:
    """Mixin providing single-code-point lookahead, consumption and backup."""

    # These will be set by the Lexer class
    _input: bytes
    _input_len: int
    _start: int
    _pos: int
    _width: int
    _can_backup: bool
    _strict_backup: bool

    # =========================================================================
    # Position accessors
    # =========================================================================

    @property
    def input(self) -> bytes:
        """The full UTF-8 input buffer."""
        return self._input

    @property
    def pos(self) -> int:
        """Byte offset of the next code point to read."""
        return self._pos

    @property
    def start(self) -> int:
        """Byte offset where the current token began."""
        return self._start

    @property
    def width(self) -> int:
        """Byte width of the last code point read (0 at end of input)."""
        return self._width

    @property
    def current_input(self) -> str:
        """Text consumed since the last emit() or ignore()."""
        return self._input[self._start : self._pos].decode("utf-8", errors="replace")

    @property
    def remaining(self) -> str:
        """Text not yet consumed."""
        return self._input[self._pos :].decode("utf-8", errors="replace")

    # =========================================================================
    # Primitives
    # =========================================================================

    def next(self) -> str:
        """Consume and return the next code point.

        Returns:
            The decoded code point, EOF_RUNE at end of input (width 0), or
            INVALID_RUNE for a malformed byte (width 1).
        """
        r, self._width = decode_rune(self._input, self._pos)
        self._pos += self._width
        self._can_backup = True
        return r

    def backup(self) -> None:
        """Step back over the code point returned by the last next().

        Valid once per next(). At end of input this is a no-op, since
        next() recorded a width of 0.
        """
        if self._strict_backup:
            if not self._can_backup:
                raise BackupError(self._pos)
            self._can_backup = False
        self._pos -= self._width

    def peek(self) -> str:
        """Return the next code point without consuming it."""
        r = self.next()
        self.backup()
        return r

    def ignore(self) -> None:
        """Discard everything consumed since the last emit() or ignore()."""
        self._start = self._pos
        self._can_backup = False

    # =========================================================================
    # Acceptors
    # =========================================================================

    def accept(self, valid: Container[str]) -> bool:
        """Consume one code point if it is in valid.

        Args:
            valid: String or set of single characters

        Returns:
            True if a code point was consumed.
        """
        r = self.next()
        if r != EOF_RUNE and r in valid:
            return True
        self.backup()
        return False

    def _accept_while(self, predicate: Callable[[str], bool]) -> None:
        r = self.next()
        while r != EOF_RUNE and predicate(r):
            r = self.next()
        self.backup()

    def accept_run(self, valid: Container[str]) -> None:
        """Consume the longest run of code points that are in valid."""
        self._accept_while(valid.__contains__)

    def accept_alpha(self) -> None:
        """Consume the longest run of ASCII letters and underscores."""
        self._accept_while(is_alpha)

    def accept_digits(self) -> None:
        """Consume the longest run of ASCII digits."""
        self._accept_while(is_digit)

    def accept_sequence(self, sequence: str) -> bool:
        """Consume sequence if the input continues with exactly that text.

        Comparison is on the UTF-8 encoding, so multi-byte code points
        advance pos by their byte length. A sequence longer than the
        remaining input simply fails.

        Args:
            sequence: Literal text to match

        Returns:
            True if matched and consumed; False leaves pos unchanged.
        """
        encoded = sequence.encode("utf-8")
        if not self._input.startswith(encoded, self._pos):
            return False
        self._pos += len(encoded)
        self._can_backup = False
        return True

    def ignore_whitespace(self) -> None:
        """Skip whitespace, leaving the cursor on the next non-space code point."""
        while is_space(self.next()):
            self.ignore()
        self.backup()
