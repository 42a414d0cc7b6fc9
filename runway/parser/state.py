# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Immutable snapshot of parsing progress.

`ParseState` records everything the driver has learned so far: the metadata in
scope, a stack of location markers, the (option, value) pairs bound in order, the
positional and vararg values, the option currently being bound, and every raw token
that could not be used ("unparsed input").

Every transition (`push_context`, `with_option_value`, `with_argument`, ...) returns
a new `ParseState`; no instance is ever mutated. A recognizer can therefore try a
transition, throw the result away and let another recognizer start again from the
same state without any rollback.

Failures raised while binding a value are routed to the state's `ErrorHandler`.
When the handler lets the parse continue, the offending token is moved to
`unparsed_input` and the parsed values are left untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from runway.exceptions import ParseError, ParseStateError
from runway.logger import logger
from runway.model import (
    ArgumentsMetadata,
    CommandGroupMetadata,
    CommandMetadata,
    GlobalMetadata,
    OptionMetadata,
    PositionalArgumentMetadata,
    TargetKind,
)
from runway.parser.context import Context
from runway.parser.error_handlers import ErrorHandler
from runway.parser.parser_config import ParserConfig

Target = OptionMetadata | PositionalArgumentMetadata | ArgumentsMetadata


@dataclass(frozen=True)
class ParseState:
    """Immutable parser progress snapshot."""

    metadata: GlobalMetadata | None = field(default=None, compare=False, repr=False)
    config: ParserConfig = field(default_factory=ParserConfig, compare=False, repr=False)
    error_handler: ErrorHandler = field(
        default_factory=lambda: ParserConfig().error_handler(), compare=False, repr=False
    )
    group: CommandGroupMetadata | None = None
    command: CommandMetadata | None = None
    location_stack: tuple[Context, ...] = ()
    parsed_options: tuple[tuple[OptionMetadata, Any], ...] = ()
    parsed_positional_args: tuple[tuple[PositionalArgumentMetadata, Any], ...] = ()
    parsed_arguments: tuple[Any, ...] = ()
    current_option: OptionMetadata | None = None
    unparsed_input: tuple[Any, ...] = ()

    @classmethod
    def new(
        cls,
        metadata: GlobalMetadata | None = None,
        config: ParserConfig | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> ParseState:
        """Create an empty state for a new parse."""
        config = config or ParserConfig()
        return cls(
            metadata=metadata,
            config=config,
            error_handler=error_handler or config.error_handler(),
        )

    @property
    def location(self) -> Context | None:
        """The innermost location marker, or None before any scope is entered."""
        return self.location_stack[-1] if self.location_stack else None

    def push_context(self, location: Context) -> ParseState:
        return replace(self, location_stack=self.location_stack + (location,))

    def pop_context(self) -> ParseState:
        if not self.location_stack:
            raise ParseStateError("Cannot pop a location from an empty location stack")
        return replace(self, location_stack=self.location_stack[:-1])

    def with_group(self, group: CommandGroupMetadata | None) -> ParseState:
        return replace(self, group=group)

    def with_command(self, command: CommandMetadata | None) -> ParseState:
        return replace(self, command=command)

    def with_current_option(self, option: OptionMetadata | None) -> ParseState:
        return replace(self, current_option=option)

    def with_unparsed_input(self, token: Any) -> ParseState:
        logger.debug("Recording unparsed input: %r", token)
        return replace(self, unparsed_input=self.unparsed_input + (token,))

    def with_option_value(self, option: OptionMetadata, raw: Any) -> ParseState:
        """
        Validate, convert and bind a value for `option`.

        Args:
            option (OptionMetadata): The option receiving the value.
            raw (Any): The raw token (or `True` for flags).

        Returns:
            ParseState: A state with the (option, value) pair appended, or with `raw`
            appended to unparsed input if any failure was recorded.
        """
        value, valid = self._bind_value(option, raw)
        if not valid:
            return self.with_unparsed_input(raw)
        logger.debug("Bound %s = %r", option.display_name, value)
        return replace(self, parsed_options=self.parsed_options + ((option, value),))

    def with_argument(
        self,
        positional_args: Iterable[PositionalArgumentMetadata],
        arguments: ArgumentsMetadata | None,
        raw: Any,
    ) -> ParseState:
        """
        Bind `raw` to the next free positional slot, else to the arguments collection.

        With every positional slot filled and no arguments collection declared, the
        token is recorded as unparsed input without raising.
        """
        positional_args = tuple(positional_args)
        bound = len(self.parsed_positional_args)
        target: Target
        if bound < len(positional_args):
            target = positional_args[bound]
        elif arguments is not None:
            target = arguments
        else:
            logger.debug("No argument slot left for %r", raw)
            return self.with_unparsed_input(raw)

        value, valid = self._bind_value(target, raw)
        if not valid:
            return self.with_unparsed_input(raw)
        if target.kind == TargetKind.POSITIONAL:
            logger.debug("Bound positional %s = %r", target.title, value)
            return replace(
                self,
                parsed_positional_args=self.parsed_positional_args + ((target, value),),
            )
        logger.debug("Bound argument %s = %r", target.title, value)
        return replace(self, parsed_arguments=self.parsed_arguments + (value,))

    def allowed_options(self) -> list[OptionMetadata]:
        """Return the options legal in the current scope, closest scope first."""
        options: list[OptionMetadata] = []
        if self.command is not None:
            options.extend(self.command.options)
        if self.group is not None:
            options.extend(self.group.options)
        if self.metadata is not None:
            options.extend(self.metadata.options)
        return options

    def get_option_values(self, name: str) -> list[Any]:
        """Return every value bound to the option answering to `name`, in order."""
        return [value for option, value in self.parsed_options if option.matches(name)]

    def _bind_value(self, target: Target, raw: Any) -> tuple[Any, bool]:
        valid = self._validate(target, raw, post=False)
        try:
            value = self._convert(target, raw)
        except ParseError as error:
            self.error_handler.handle_error(error)
            return None, False
        valid = self._validate(target, value, post=True) and valid
        return value, valid

    def _convert(self, target: Target, raw: Any) -> Any:
        converter = target.converter or self.config.type_converter
        return converter.convert(target.title, target.type, raw)

    def _validate(self, target: Target, payload: Any, post: bool) -> bool:
        valid = True
        for restriction in target.restrictions:
            restriction.check_target(target)
            try:
                if post:
                    restriction.post_validate(self, target, payload)
                else:
                    restriction.pre_validate(self, target, payload)
            except ParseError as error:
                self.error_handler.handle_error(error)
                valid = False
        return valid
