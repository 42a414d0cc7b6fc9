# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for use with Prompt Toolkit.

Interactive front ends that prompt for a single option or argument value can reuse
the restrictions and type conversion declared in the metadata model, so a prompt
rejects exactly the values the parser would reject.

Included Validators:
- restriction_validator: Validates one value for an option, positional argument or
  the arguments collection.
"""
from __future__ import annotations

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from runway.model import TargetKind
from runway.parser.converter import TypeConverter
from runway.parser.error_handlers import CollectAll
from runway.parser.parser_config import ParserConfig
from runway.parser.state import ParseState, Target


class RestrictionValidator(Validator):
    """Validates prompt input against a target's type and restrictions."""

    def __init__(self, target: Target, converter: TypeConverter | None = None) -> None:
        self.target = target
        self.converter = converter
        super().__init__()

    def check(self, text: str) -> ParseState:
        """Bind `text` to the target on a scratch state and return that state."""
        config = (
            ParserConfig(type_converter=self.converter)
            if self.converter is not None
            else ParserConfig()
        )
        state = ParseState.new(config=config, error_handler=CollectAll())
        if self.target.kind == TargetKind.OPTION:
            return state.with_option_value(self.target, text)
        if self.target.kind == TargetKind.POSITIONAL:
            return state.with_argument((self.target,), None, text)
        return state.with_argument((), self.target, text)

    def validate(self, document: Document) -> None:
        state = self.check(document.text)
        errors = state.error_handler.errors
        if errors:
            raise ValidationError(message=str(errors[0]), cursor_position=len(document.text))


def restriction_validator(
    target: Target, converter: TypeConverter | None = None
) -> Validator:
    """Validator for a single option or argument value."""
    return RestrictionValidator(target, converter)
