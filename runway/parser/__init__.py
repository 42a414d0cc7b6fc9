"""
Runway CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .completion import check_required
from .context import Context
from .converter import DefaultTypeConverter, TypeConverter, coerce_value
from .error_handlers import ERROR_HANDLERS, CollectAll, ErrorHandler, FailAll, FailFast
from .parse_result import ParseResult
from .parser import Parser
from .parser_config import ParserConfig
from .recognizers import (
    RECOGNIZERS,
    ClassicGetOptRecognizer,
    LongGetOptRecognizer,
    OptionRecognizer,
    StandardOptionRecognizer,
    default_recognizers,
)
from .state import ParseState
from .tokens import TokenStream

__all__ = [
    "Parser",
    "ParserConfig",
    "ParseState",
    "ParseResult",
    "Context",
    "TokenStream",
    "TypeConverter",
    "DefaultTypeConverter",
    "coerce_value",
    "ErrorHandler",
    "FailFast",
    "CollectAll",
    "FailAll",
    "ERROR_HANDLERS",
    "OptionRecognizer",
    "StandardOptionRecognizer",
    "LongGetOptRecognizer",
    "ClassicGetOptRecognizer",
    "RECOGNIZERS",
    "default_recognizers",
    "check_required",
]
