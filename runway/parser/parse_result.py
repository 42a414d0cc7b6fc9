# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Final outcome of a parse: the last `ParseState` plus any collected diagnostics.

Produced by `ErrorHandler.finished()` at the end of `Parser.parse()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from runway.exceptions import ParseError
from runway.model import (
    CommandGroupMetadata,
    CommandMetadata,
    OptionMetadata,
    PositionalArgumentMetadata,
)

if TYPE_CHECKING:
    from runway.parser.state import ParseState


@dataclass(frozen=True)
class ParseResult:
    """The final parse state and the errors collected while producing it."""

    state: ParseState
    errors: tuple[ParseError, ...] = ()

    @property
    def was_successful(self) -> bool:
        return not self.errors

    @property
    def group(self) -> CommandGroupMetadata | None:
        return self.state.group

    @property
    def command(self) -> CommandMetadata | None:
        return self.state.command

    @property
    def parsed_options(self) -> tuple[tuple[OptionMetadata, Any], ...]:
        return self.state.parsed_options

    @property
    def parsed_positional_args(self) -> tuple[tuple[PositionalArgumentMetadata, Any], ...]:
        return self.state.parsed_positional_args

    @property
    def parsed_arguments(self) -> tuple[Any, ...]:
        return self.state.parsed_arguments

    @property
    def unparsed_input(self) -> tuple[Any, ...]:
        return self.state.unparsed_input

    def option_values(self, name: str) -> list[Any]:
        """Return every value bound to the option answering to `name`, in order."""
        return self.state.get_option_values(name)

    def positional_value(self, title: str, default: Any = None) -> Any:
        """Return the value bound to the positional argument titled `title`."""
        return next(
            (value for arg, value in self.parsed_positional_args if arg.title == title),
            default,
        )
