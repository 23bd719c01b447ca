"""Bounded FIFO of tokens emitted but not yet returned by the lexer."""

from __future__ import annotations

from collections import deque

from statelex.errors import TokenQueueFullError
from statelex.tokens import Token


class TokenQueue:
    """Fixed-capacity FIFO buffer of pending tokens.

    A state step may emit several tokens before control returns to the
    lexer; the lexer then hands them out one at a time, in emission order.
    This is an in-process buffer, not a cross-thread channel.

    Pushing onto a full queue raises TokenQueueFullError rather than
    dropping or overwriting a token.

    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int) -> None:
        self._items: deque[Token] = deque()
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, token: Token) -> None:
        """Append token at the tail.

        Raises:
            TokenQueueFullError: The queue already holds capacity tokens.
        """
        if len(self._items) >= self._capacity:
            raise TokenQueueFullError(self._capacity, token)
        self._items.append(token)

    def pop(self) -> Token:
        """Remove and return the oldest token.

        Raises:
            IndexError: The queue is empty.
        """
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
