"""statelex ScanAccumulator: opt-in metrics for lexing.

This module provides accumulated metrics while a lexer runs:
- State function invocations
- Tokens emitted (and how many were ILLEGAL)
- Wall time of the profiled block

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from statelex.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = list(Lexer(source, lex_start).tokenize())

    print(metrics.summary())
    # {"total_ms": 0.4, "state_steps": 23, "tokens_emitted": 12, "errors": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics while lexing.

    Attributes:
        start_time: Profiling start timestamp.
        state_steps: Number of state function invocations.
        tokens_emitted: Number of tokens enqueued by emit() or errorf().
        errors: Number of ILLEGAL tokens enqueued.

    """

    start_time: float = field(default_factory=perf_counter)
    state_steps: int = 0
    tokens_emitted: int = 0
    errors: int = 0

    def record_step(self) -> None:
        self.state_steps += 1

    def record_token(self, is_error: bool) -> None:
        """Record an enqueued token.

        Args:
            is_error: True if the token is ILLEGAL.

        """
        self.tokens_emitted += 1
        if is_error:
            self.errors += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, state_steps, tokens_emitted, errors.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "state_steps": self.state_steps,
            "tokens_emitted": self.tokens_emitted,
            "errors": self.errors,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled lexing.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated while lexers run.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["ScanAccumulator", "get_scan_accumulator", "profiled_scan"]
