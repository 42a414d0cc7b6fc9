# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Completion hooks run on the final `ParseState` once every token is consumed.

Some rules can only be checked when parsing is over, such as whether a required
option was ever supplied. Hooks are configured through
`ParserConfig.completion_hooks` and report failures through the state's error
handler, like any other recoverable failure.
"""
from __future__ import annotations

from runway.exceptions import (
    ParseArgumentsMissingError,
    ParseCommandMissingError,
    ParseOptionMissingError,
)
from runway.parser.state import ParseState


def check_required(state: ParseState) -> None:
    """Report a missing command, missing required options and missing arguments."""
    metadata = state.metadata
    handler = state.error_handler
    if metadata is None:
        return

    if state.command is None and (metadata.groups or metadata.commands):
        if state.group is not None:
            handler.handle_error(
                ParseCommandMissingError(f"No command specified for group '{state.group.name}'")
            )
        else:
            handler.handle_error(ParseCommandMissingError())

    bound_options = [option for option, _ in state.parsed_options]
    for option in state.allowed_options():
        if option.required and option not in bound_options:
            handler.handle_error(ParseOptionMissingError(option.display_name))

    command = state.command
    if command is None:
        return
    bound_positional = [arg for arg, _ in state.parsed_positional_args]
    missing = [
        arg.title
        for arg in command.positional_args
        if arg.required and arg not in bound_positional
    ]
    if command.arguments is not None and command.arguments.required:
        if not state.parsed_arguments:
            missing.append(command.arguments.title)
    if missing:
        handler.handle_error(ParseArgumentsMissingError(missing))
