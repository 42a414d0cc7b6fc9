# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Peekable view over the remaining command-line tokens.

Recognizers inspect tokens with `peek()` / `lookahead()` and only call `next()`
once they are certain of a match, so a declined attempt never loses input.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable


class TokenStream:
    """A forward-only token view supporting lookahead without consumption."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: deque[str] = deque(tokens)
        self.consumed: int = 0

    def has_next(self) -> bool:
        return bool(self._tokens)

    def peek(self) -> str:
        if not self._tokens:
            raise IndexError("No tokens remaining")
        return self._tokens[0]

    def lookahead(self, count: int) -> list[str]:
        """Return up to `count` upcoming tokens without consuming them."""
        return [self._tokens[index] for index in range(min(count, len(self._tokens)))]

    def next(self) -> str:
        if not self._tokens:
            raise IndexError("No tokens remaining")
        self.consumed += 1
        return self._tokens.popleft()

    @property
    def remaining(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return self.has_next()

    def __repr__(self) -> str:
        return f"TokenStream(remaining={list(self._tokens)!r}, consumed={self.consumed})"
