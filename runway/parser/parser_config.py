# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parser configuration threaded explicitly through every parse.

`ParserConfig` bundles the ordered recognizer strategies, the error handler
policy, `--` separator handling, the default type converter and the completion
hooks run on the final state. It is an immutable value: build a new one with
`dataclasses.replace()` rather than changing a shared instance.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from runway.parser.converter import DefaultTypeConverter, TypeConverter
from runway.parser.error_handlers import ErrorHandler, FailFast
from runway.parser.recognizers import OptionRecognizer, default_recognizers

if TYPE_CHECKING:
    from runway.parser.state import ParseState

CompletionHook = Callable[["ParseState"], "ParseState | None"]


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for a `Parser`.

    Attributes:
        recognizers (tuple[OptionRecognizer, ...]): Option recognizers in priority order.
        error_handler (Callable[[], ErrorHandler]): Factory for the per-parse error handler.
        allow_separator (bool): True if `separator` ends option recognition.
        separator (str): Token ending option recognition (default `--`).
        type_converter (TypeConverter): Converter used when a target declares none.
        completion_hooks (tuple[CompletionHook, ...]): Run on the final state, in order.
            A hook may return a replacement state.
    """

    recognizers: tuple[OptionRecognizer, ...] = field(default_factory=default_recognizers)
    error_handler: Callable[[], ErrorHandler] = FailFast
    allow_separator: bool = True
    separator: str = "--"
    type_converter: TypeConverter = field(default_factory=DefaultTypeConverter)
    completion_hooks: tuple[CompletionHook, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "recognizers", tuple(self.recognizers))
        object.__setattr__(self, "completion_hooks", tuple(self.completion_hooks))

    def is_separator(self, token: str) -> bool:
        return self.allow_separator and token == self.separator
