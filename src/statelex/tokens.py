"""Token and TokenType definitions for the statelex engine.

State functions emit Token objects that the lexer hands back one at a time.
Each Token has a type and the literal text it covers.

TokenType is open: consumers define their own vocabulary. The engine
reserves two values:

- EOF: end of input, literal always empty
- ILLEGAL: scanning failure, literal carries a diagnostic message

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

TokenType = NewType("TokenType", str)

EOF = TokenType("EOF")
ILLEGAL = TokenType("ILLEGAL")


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (consumer vocabulary, or EOF/ILLEGAL)
        literal: Exact text consumed for this token, or the diagnostic
            message when type is ILLEGAL
        offset: Byte offset in the input where the token starts. Excluded
            from comparison so tokens compare by (type, literal) only.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    literal: str
    offset: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lit = self.literal
        if len(lit) > 20:
            lit = lit[:17] + "..."
        return f"Token({self.type}, {lit!r}, @{self.offset})"

    @property
    def is_error(self) -> bool:
        """True for ILLEGAL tokens."""
        return self.type == ILLEGAL


__all__ = ["EOF", "ILLEGAL", "Token", "TokenType"]
