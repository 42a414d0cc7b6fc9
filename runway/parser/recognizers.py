# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Option recognizers: pluggable strategies matching tokens against legal options.

A recognizer is any callable with the `OptionRecognizer` signature. It receives
the remaining tokens, the current `ParseState` and the options legal in the active
scope, and returns either a new state (having consumed at least one token) or
`None` when the next token is not in a shape it understands. The driver tries the
configured recognizers in priority order.

Recognizers peek before they consume: a recognizer that returns `None` has not
consumed anything and has not reported anything to the error handler.

Recognizers:
- StandardOptionRecognizer: `--name value`, `-n value`, `--flag`
- LongGetOptRecognizer: `--name=value`
- ClassicGetOptRecognizer: squashed short flags `-abc`, `-ab5`, `-ab 5`
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from runway.exceptions import ParseOptionMissingValueError, UnsupportedSyntaxError
from runway.logger import logger
from runway.model import OptionMetadata
from runway.parser.context import Context
from runway.parser.tokens import TokenStream

if TYPE_CHECKING:
    from runway.parser.state import ParseState

LONG_VALUE_PATTERN = re.compile(r"^(--[^=]+)=(.*)$", re.DOTALL)
SHORT_OPTIONS_PATTERN = re.compile(r"^-[^-]")


@runtime_checkable
class OptionRecognizer(Protocol):
    def __call__(
        self,
        tokens: TokenStream,
        state: ParseState,
        allowed_options: Sequence[OptionMetadata],
    ) -> ParseState | None: ...


def find_option(
    allowed_options: Sequence[OptionMetadata], name: str
) -> OptionMetadata | None:
    """Return the first allowed option answering to `name`."""
    return next((option for option in allowed_options if option.matches(name)), None)


def enter_option(state: ParseState, option: OptionMetadata) -> ParseState:
    return state.push_context(Context.OPTION).with_current_option(option)


def leave_option(state: ParseState) -> ParseState:
    return state.with_current_option(None).pop_context()


def missing_value(
    state: ParseState, option: OptionMetadata, token: str, received: int = 0
) -> ParseState:
    """Report a missing option value and record `token` as unparsed."""
    state.error_handler.handle_error(
        ParseOptionMissingValueError(option.display_name, option.arity, received)
    )
    return state.with_unparsed_input(token)


class StandardOptionRecognizer:
    """Matches a whole token against an option name and consumes `arity` values."""

    def __call__(
        self,
        tokens: TokenStream,
        state: ParseState,
        allowed_options: Sequence[OptionMetadata],
    ) -> ParseState | None:
        token = tokens.peek()
        option = find_option(allowed_options, token)
        if option is None:
            return None

        values = []
        for candidate in tokens.lookahead(option.arity + 1)[1:]:
            if state.config.is_separator(candidate):
                break
            values.append(candidate)

        tokens.next()
        logger.debug("Matched %s with %s", token, type(self).__name__)
        next_state = enter_option(state, option)
        if option.arity == 0:
            return leave_option(next_state.with_option_value(option, True))
        if len(values) < option.arity:
            return leave_option(missing_value(next_state, option, token, len(values)))
        for value in values:
            tokens.next()
            next_state = next_state.with_option_value(option, value)
        return leave_option(next_state)

    def __repr__(self) -> str:
        return "StandardOptionRecognizer()"


class LongGetOptRecognizer:
    """Matches `--name=value` for single value options."""

    def __call__(
        self,
        tokens: TokenStream,
        state: ParseState,
        allowed_options: Sequence[OptionMetadata],
    ) -> ParseState | None:
        match = LONG_VALUE_PATTERN.match(tokens.peek())
        if not match:
            return None
        name, value = match.group(1), match.group(2)
        option = find_option(allowed_options, name)
        if option is None:
            return None
        if option.arity != 1:
            raise UnsupportedSyntaxError(
                f"Option '{name}' takes {option.arity} values and cannot be given "
                "a value with '='"
            )

        tokens.next()
        logger.debug("Matched %s with %s", name, type(self).__name__)
        return leave_option(enter_option(state, option).with_option_value(option, value))

    def __repr__(self) -> str:
        return "LongGetOptRecognizer()"


class ClassicGetOptRecognizer:
    """
    Matches squashed single character options such as `-abc`.

    Flags (arity 0) may be combined freely. A single value option (arity 1) ends the
    sequence: any characters left in the token are its value, otherwise the next
    token is. Options taking two or more values cannot be squashed.
    """

    def _plan(
        self, characters: str, allowed_options: Sequence[OptionMetadata]
    ) -> list[tuple[str, OptionMetadata, str]] | None:
        plan: list[tuple[str, OptionMetadata, str]] = []
        remaining = characters
        while remaining:
            character, remaining = remaining[0], remaining[1:]
            option = find_option(allowed_options, f"-{character}")
            if option is None:
                return None
            if option.arity == 0:
                plan.append((character, option, ""))
                continue
            if option.arity == 1:
                plan.append((character, option, remaining))
                return plan
            raise UnsupportedSyntaxError(
                f"Short option style cannot be used with option '-{character}' "
                f"which takes {option.arity} values"
            )
        return plan

    def __call__(
        self,
        tokens: TokenStream,
        state: ParseState,
        allowed_options: Sequence[OptionMetadata],
    ) -> ParseState | None:
        token = tokens.peek()
        if not SHORT_OPTIONS_PATTERN.match(token):
            return None
        plan = self._plan(token[1:], allowed_options)
        if plan is None:
            return None

        tokens.next()
        logger.debug("Matched %s with %s", token, type(self).__name__)
        next_state = state
        for character, option, inline_value in plan:
            next_state = enter_option(next_state, option)
            if option.arity == 0:
                next_state = next_state.with_option_value(option, True)
            elif inline_value:
                next_state = next_state.with_option_value(option, inline_value)
            elif tokens.has_next() and not state.config.is_separator(tokens.peek()):
                next_state = next_state.with_option_value(option, tokens.next())
            else:
                next_state = missing_value(next_state, option, f"-{character}")
            next_state = leave_option(next_state)
        return next_state

    def __repr__(self) -> str:
        return "ClassicGetOptRecognizer()"


RECOGNIZERS: dict[str, type] = {
    "standard": StandardOptionRecognizer,
    "long-getopt": LongGetOptRecognizer,
    "classic-getopt": ClassicGetOptRecognizer,
}


def default_recognizers() -> tuple[OptionRecognizer, ...]:
    """Return the default recognizers in priority order."""
    return (
        StandardOptionRecognizer(),
        LongGetOptRecognizer(),
        ClassicGetOptRecognizer(),
    )
