# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Runway parsing engine.

Runway separates failures into two families that never share a handling path:

- Fatal errors signal a defect in the static command definition or in the driver
  itself. They are raised immediately and always abort the parse.
- Recoverable errors (`ParseError` and its subclasses) describe bad user input.
  They are caught where they occur and handed to the active `ErrorHandler`, which
  alone decides whether the parse aborts or continues.

Exception Hierarchy:
- RunwayError
    ├── MetadataError
    ├── ParseStateError
    ├── ParseInvalidRestrictionError
    ├── UnsupportedSyntaxError
    └── ParseError
        ├── ParseConversionError
        ├── ParseOptionMissingValueError
        ├── ParseOptionMissingError
        ├── ParseArgumentsMissingError
        ├── ParseCommandMissingError
        ├── ParseRestrictionViolatedError
        │   └── ParseOptionOutOfRangeError
        └── ParseFailedError
"""
from __future__ import annotations

from typing import Any, Sequence


class RunwayError(Exception):
    """Base exception for the Runway parsing engine."""


class MetadataError(RunwayError):
    """Exception raised when a metadata model entity is malformed."""


class ParseStateError(RunwayError):
    """Exception raised when the driver performs an invalid state transition."""


class ParseInvalidRestrictionError(RunwayError):
    """
    Exception raised when a restriction is misconfigured or applied to a target
    whose value type it cannot handle.

    Never routed through an `ErrorHandler`.
    """


class UnsupportedSyntaxError(RunwayError):
    """
    Exception raised when a recognizer matches an option in a syntactic form that
    option cannot be used with (e.g. an arity 2 option inside `-abc`).

    Never routed through an `ErrorHandler`.
    """


class ParseError(RunwayError):
    """Recoverable parse failure caused by user input."""


class ParseConversionError(ParseError):
    """Exception raised when a raw token cannot be converted to the target type."""

    def __init__(self, title: str, token: Any, target_type: Any, reason: str = ""):
        self.title = title
        self.token = token
        self.target_type = target_type
        type_name = getattr(target_type, "__name__", str(target_type))
        message = f"{title}: unable to convert '{token}' to {type_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseOptionMissingValueError(ParseError):
    """Exception raised when an option is given fewer values than its arity."""

    def __init__(self, title: str, arity: int, received: int = 0):
        self.title = title
        self.arity = arity
        self.received = received
        plural = "s" if arity != 1 else ""
        super().__init__(
            f"Option '{title}' requires {arity} value{plural} but received {received}"
        )


class ParseOptionMissingError(ParseError):
    """Exception raised when a required option was never supplied."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Required option '{title}' is missing")


class ParseArgumentsMissingError(ParseError):
    """Exception raised when required positional arguments or arguments are missing."""

    def __init__(self, titles: Sequence[str]):
        self.titles = list(titles)
        super().__init__(f"Required arguments are missing: {', '.join(self.titles)}")


class ParseCommandMissingError(ParseError):
    """Exception raised when no command was selected and no default exists."""

    def __init__(self, message: str = "No command specified"):
        super().__init__(message)


class ParseRestrictionViolatedError(ParseError):
    """Exception raised when a value fails a configured restriction."""


def _range_text(
    minimum: Any, min_inclusive: bool, maximum: Any, max_inclusive: bool
) -> str:
    if minimum is not None and maximum is not None:
        opening = "[" if min_inclusive else "("
        closing = "]" if max_inclusive else ")"
        return f"{opening}{minimum}, {maximum}{closing}"
    if minimum is not None:
        return f"{'>=' if min_inclusive else '>'} {minimum}"
    if maximum is not None:
        return f"{'<=' if max_inclusive else '<'} {maximum}"
    return "any value"


class ParseOptionOutOfRangeError(ParseRestrictionViolatedError):
    """Exception raised when a value falls outside a range restriction."""

    def __init__(
        self,
        title: str,
        value: Any,
        minimum: Any,
        min_inclusive: bool,
        maximum: Any,
        max_inclusive: bool,
    ):
        self.title = title
        self.value = value
        self.minimum = minimum
        self.min_inclusive = min_inclusive
        self.maximum = maximum
        self.max_inclusive = max_inclusive
        self.range_text = _range_text(minimum, min_inclusive, maximum, max_inclusive)
        super().__init__(
            f"{title} was given value '{value}' which is outside the range {self.range_text}"
        )


class ParseFailedError(ParseError):
    """Aggregate of every error collected during a parse."""

    def __init__(self, errors: Sequence[ParseError]):
        self.errors = list(errors)
        plural = "s" if len(self.errors) != 1 else ""
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"Parsing failed with {len(self.errors)} error{plural}: {details}")
