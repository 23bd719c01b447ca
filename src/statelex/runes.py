"""Code points, sentinels, and classification predicates.

A code point ("rune") is a one-character ``str`` decoded from the lexer's
UTF-8 input buffer. Two reserved values are never produced by valid text
at a real position:

- EOF_RUNE: returned at end of input (empty string)
- INVALID_RUNE: returned for a malformed byte (U+FFFD, width 1)

A literal U+FFFD in well-formed input decodes to INVALID_RUNE as well.
Every predicate here returns False for both sentinels, so grammars built
on them reject malformed input without special-casing it.

All character sets are frozensets for O(1) membership and immutability.

Usage:
    from statelex.runes import is_alpha, is_digit

    if is_alpha(lexer.peek()):
        ...
"""

from __future__ import annotations

import unicodedata

EOF_RUNE: str = ""
INVALID_RUNE: str = "\ufffd"

DIGITS: frozenset[str] = frozenset("0123456789")

ALPHA: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

END_OF_LINE: frozenset[str] = frozenset("\n\r")

# Latin-1 White_Space code points; everything above U+00FF is checked by category
LATIN1_SPACE: frozenset[str] = frozenset("\t\n\v\f\r \x85\xa0")


def _utf8_length(lead: int) -> int:
    """Sequence length announced by a UTF-8 lead byte, or 0 if it cannot lead."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_rune(buf: bytes, pos: int) -> tuple[str, int]:
    """Decode the code point starting at ``buf[pos]``.

    Args:
        buf: UTF-8 encoded input
        pos: Byte offset to decode at

    Returns:
        (rune, width) where width is the encoded byte length.
        (EOF_RUNE, 0) at or past the end of buf.
        (INVALID_RUNE, 1) for a truncated, overlong, surrogate or
        out-of-range sequence, so the caller always advances past bad bytes.
    """
    if pos >= len(buf):
        return EOF_RUNE, 0

    lead = buf[pos]
    if lead < 0x80:
        return chr(lead), 1

    size = _utf8_length(lead)
    if size == 0:
        return INVALID_RUNE, 1

    try:
        return buf[pos : pos + size].decode("utf-8"), size
    except UnicodeDecodeError:
        return INVALID_RUNE, 1


def is_space(r: str) -> bool:
    """Check if r is Unicode white space (Zs, line/paragraph separators, controls)."""
    if not r:
        return False
    if r <= "\xff":
        return r in LATIN1_SPACE
    return r == "\u2028" or r == "\u2029" or unicodedata.category(r) == "Zs"


def is_digit(r: str) -> bool:
    """Check if r is an ASCII decimal digit."""
    return r in DIGITS


def is_alpha(r: str) -> bool:
    """Check if r is an ASCII letter or underscore."""
    return r in ALPHA


def is_end_of_line(r: str) -> bool:
    return r in END_OF_LINE


__all__ = [
    "ALPHA",
    "DIGITS",
    "END_OF_LINE",
    "EOF_RUNE",
    "INVALID_RUNE",
    "LATIN1_SPACE",
    "decode_rune",
    "is_alpha",
    "is_digit",
    "is_end_of_line",
    "is_space",
]
