# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Error handler policies deciding whether a recoverable failure aborts the parse.

Every `ParseError` discovered while binding a token is passed to the active
handler. The parsing logic itself is policy-agnostic: a failed binding always
moves the token to unparsed input, and the handler alone decides whether control
ever gets back to the parser.

Policies:
- FailFast: Re-raise the first error immediately.
- CollectAll: Record every error and keep parsing; the result carries them.
- FailAll: Record every error and keep parsing, then raise `ParseFailedError`
  aggregating all of them once parsing is finished.

Handlers are stateful per parse. `ParserConfig.error_handler` holds a factory
(usually one of these classes) and the parser creates a fresh handler each run.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from runway.exceptions import ParseError, ParseFailedError
from runway.logger import logger
from runway.parser.parse_result import ParseResult

if TYPE_CHECKING:
    from runway.parser.state import ParseState


class ErrorHandler(ABC):
    """Policy receiving every recoverable failure of a parse."""

    def __init__(self) -> None:
        self._errors: list[ParseError] = []

    @property
    def errors(self) -> tuple[ParseError, ...]:
        return tuple(self._errors)

    @abstractmethod
    def handle_error(self, error: ParseError) -> None:
        """Raise `error` to abort the parse, or record it and return to continue."""

    def finished(self, state: ParseState) -> ParseResult:
        """Produce the result for the final state."""
        return ParseResult(state=state, errors=self.errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(errors={len(self._errors)})"


class FailFast(ErrorHandler):
    """Abort the parse on the first error."""

    def handle_error(self, error: ParseError) -> None:
        logger.debug("Aborting parse: %s", error)
        raise error


class CollectAll(ErrorHandler):
    """Collect every error and let the parse run to the end of input."""

    def handle_error(self, error: ParseError) -> None:
        logger.debug("Collected parse error: %s", error)
        self._errors.append(error)


class FailAll(CollectAll):
    """Collect every error, then fail once parsing has finished."""

    def finished(self, state: ParseState) -> ParseResult:
        if self._errors:
            raise ParseFailedError(self._errors)
        return super().finished(state)


ERROR_HANDLERS: dict[str, type[ErrorHandler]] = {
    "fail-fast": FailFast,
    "collect-all": CollectAll,
    "fail-all": FailAll,
}
