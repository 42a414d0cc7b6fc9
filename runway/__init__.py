"""
Runway CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    MetadataError,
    ParseArgumentsMissingError,
    ParseCommandMissingError,
    ParseConversionError,
    ParseError,
    ParseFailedError,
    ParseInvalidRestrictionError,
    ParseOptionMissingError,
    ParseOptionMissingValueError,
    ParseOptionOutOfRangeError,
    ParseRestrictionViolatedError,
    ParseStateError,
    RunwayError,
    UnsupportedSyntaxError,
)
from .model import (
    ArgumentsMetadata,
    CommandGroupMetadata,
    CommandMetadata,
    GlobalMetadata,
    OptionMetadata,
    PositionalArgumentMetadata,
    TargetKind,
)
from .parser import (
    CollectAll,
    FailAll,
    FailFast,
    Parser,
    ParseResult,
    ParserConfig,
    ParseState,
    check_required,
)
from .restrictions import PortRange, PortRestriction, PortType, RangeRestriction
from .version import __version__

logger = logging.getLogger("runway")


__all__ = [
    "Parser",
    "ParserConfig",
    "ParseState",
    "ParseResult",
    "FailFast",
    "CollectAll",
    "FailAll",
    "check_required",
    "GlobalMetadata",
    "CommandGroupMetadata",
    "CommandMetadata",
    "OptionMetadata",
    "PositionalArgumentMetadata",
    "ArgumentsMetadata",
    "TargetKind",
    "RangeRestriction",
    "PortRestriction",
    "PortRange",
    "PortType",
    "RunwayError",
    "MetadataError",
    "ParseStateError",
    "ParseInvalidRestrictionError",
    "UnsupportedSyntaxError",
    "ParseError",
    "ParseConversionError",
    "ParseOptionMissingValueError",
    "ParseOptionMissingError",
    "ParseArgumentsMissingError",
    "ParseCommandMissingError",
    "ParseRestrictionViolatedError",
    "ParseOptionOutOfRangeError",
    "ParseFailedError",
    "__version__",
]
