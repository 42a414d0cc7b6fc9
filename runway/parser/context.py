# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Location markers pushed onto a `ParseState` location stack."""
from enum import Enum


class Context(Enum):
    """Scope entered by the parser, used for diagnostics."""

    GLOBAL = "global"
    GROUP = "group"
    COMMAND = "command"
    OPTION = "option"
    ARGUMENTS = "arguments"

    def __str__(self) -> str:
        return self.value
