"""Pull-driven state-machine lexer engine.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, StateFn, TokenQueue
├── core.py              # Lexer class (driver loop + token emission)
├── cursor.py            # CursorMixin (next/backup/peek/accept*)
└── queue.py             # TokenQueue (bounded pending-token FIFO)

Usage:
    >>> from statelex.lexer import Lexer
    >>> lexer = Lexer("abc", None)
    >>> lexer.next_token()
Token(EOF, '', @0)

"""

from statelex.lexer.core import Lexer, StateFn
from statelex.lexer.cursor import CursorMixin
from statelex.lexer.queue import TokenQueue

__all__ = ["CursorMixin", "Lexer", "StateFn", "TokenQueue"]
