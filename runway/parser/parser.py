# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the driver loop of the Runway parsing engine.

The parser walks a flat token list against a `GlobalMetadata` model and threads an
immutable `ParseState` through every step:

    GLOBAL options -> GROUP name (optional) -> COMMAND name -> COMMAND options/arguments

At each step the options legal in the active scope (command, then group, then
global options) are offered to the configured recognizers in priority order. When
every recognizer declines, the token is classified by precedence:

1. group or command name (only before a command has been selected)
2. next positional argument slot
3. the arguments collection
4. unparsed input

When no command has been selected and the token names no group or command, the
group default command (or, without a group, the global default command) is
entered first and the token is offered to the recognizers again.

A configured separator (`--` by default) ends option and name recognition; every
token after it is bound as an argument.

Example Usage:
    parser = Parser(metadata, ParserConfig(error_handler=CollectAll))
    result = parser.parse(["--verbose", "remote", "add", "origin", "https://..."])
    if not result.was_successful:
        for error in result.errors:
            print(error)
"""
from __future__ import annotations

from typing import Iterable

from runway.logger import logger
from runway.model import CommandMetadata, GlobalMetadata
from runway.parser.context import Context
from runway.parser.parse_result import ParseResult
from runway.parser.parser_config import ParserConfig
from runway.parser.state import ParseState
from runway.parser.tokens import TokenStream


class Parser:
    """
    Parses command-line tokens against a metadata model.

    The parser holds no per-parse state; the same instance may be used for any
    number of parses.
    """

    def __init__(self, metadata: GlobalMetadata, config: ParserConfig | None = None) -> None:
        self.metadata: GlobalMetadata = metadata
        self.config: ParserConfig = config or ParserConfig()

    def parse(self, args: Iterable[str] | None = None) -> ParseResult:
        """
        Parse `args` and return the result produced by the error handler.

        Args:
            args (Iterable[str] | None): Tokens to parse, excluding the program name.

        Returns:
            ParseResult: The final state and any collected errors.

        Raises:
            ParseError: When the error handler policy aborts the parse.
        """
        state = self.parse_state(args)
        return state.error_handler.finished(state)

    def parse_state(self, args: Iterable[str] | None = None) -> ParseState:
        """Parse `args` and return the final `ParseState` after completion hooks."""
        tokens = TokenStream(args or [])
        state = ParseState.new(self.metadata, self.config).push_context(Context.GLOBAL)
        logger.debug("Parsing %d tokens for '%s'", len(tokens), self.metadata.name)

        options_ended = False
        while tokens.has_next():
            token = tokens.peek()
            if not options_ended:
                if self.config.is_separator(token):
                    tokens.next()
                    options_ended = True
                    logger.debug("Separator '%s' ends option recognition", token)
                    continue
                next_state = self._recognize(tokens, state)
                if next_state is not None:
                    state = next_state
                    continue
                if state.command is None:
                    next_state = self._resolve_name(token, state)
                    if next_state is not None:
                        tokens.next()
                        state = next_state
                        continue
                    default_command = self._default_command(state)
                    if default_command is not None:
                        # offer the same token again with the default command's options
                        state = self._enter_command(state, default_command)
                        continue
            state = self._bind_argument(tokens.next(), state)

        if state.command is None:
            default_command = self._default_command(state)
            if default_command is not None:
                state = self._enter_command(state, default_command)

        for hook in self.config.completion_hooks:
            state = hook(state) or state
        return state

    def _recognize(self, tokens: TokenStream, state: ParseState) -> ParseState | None:
        allowed_options = state.allowed_options()
        for recognizer in self.config.recognizers:
            next_state = recognizer(tokens, state, allowed_options)
            if next_state is not None:
                return next_state
        return None

    def _resolve_name(self, token: str, state: ParseState) -> ParseState | None:
        if state.group is None:
            group = self.metadata.find_group(token)
            if group is not None:
                logger.debug("Entering group '%s'", group.name)
                return state.with_group(group).push_context(Context.GROUP)
            command = self.metadata.find_command(token)
        else:
            command = state.group.find_command(token)
        if command is not None:
            return self._enter_command(state, command)
        return None

    def _default_command(self, state: ParseState) -> CommandMetadata | None:
        if state.group is not None:
            return state.group.default_command
        return self.metadata.default_command

    def _enter_command(self, state: ParseState, command: CommandMetadata) -> ParseState:
        logger.debug("Entering command '%s'", command.name)
        return state.with_command(command).push_context(Context.COMMAND)

    def _bind_argument(self, token: str, state: ParseState) -> ParseState:
        if state.command is None:
            default_command = self._default_command(state)
            if default_command is None:
                logger.debug("No command selected for '%s'", token)
                return state.with_unparsed_input(token)
            state = self._enter_command(state, default_command)
        if state.location != Context.ARGUMENTS:
            state = state.push_context(Context.ARGUMENTS)
        command = state.command
        assert command is not None, "command should be selected before binding arguments"
        return state.with_argument(command.positional_args, command.arguments, token)

    def __repr__(self) -> str:
        return f"Parser(metadata={self.metadata.name!r}, config={self.config!r})"
