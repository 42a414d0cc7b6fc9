from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

import pytest

from runway.exceptions import ParseConversionError
from runway.model import ArgumentsMetadata, OptionMetadata, PositionalArgumentMetadata
from runway.parser import CollectAll, DefaultTypeConverter, ParserConfig, ParseState


class Level(Enum):
    DEBUG = "debug"
    INFO = "info"


class Priority(Enum):
    LOW = 1
    HIGH = 2


def collecting_state(config: ParserConfig | None = None) -> ParseState:
    return ParseState.new(config=config, error_handler=CollectAll())


@pytest.mark.parametrize(
    "target_type, raw, expected",
    [
        (int, "42", 42),
        (float, "0.5", 0.5),
        (Path, "/tmp/out.txt", Path("/tmp/out.txt")),
        (Level, "info", Level.INFO),
        (Level, "DEBUG", Level.DEBUG),
        (Priority, "2", Priority.HIGH),
        (Literal["fast", "safe"], "safe", "safe"),
        (int | float, "2.5", 2.5),
        (int | None, "7", 7),
        (bool, "off", False),
    ],
)
def test_option_value_is_converted(target_type, raw, expected):
    option = OptionMetadata(("--value",), type=target_type)
    state = collecting_state().with_option_value(option, raw)
    assert state.parsed_options == ((option, expected),)
    assert state.error_handler.errors == ()


@pytest.mark.parametrize(
    "target_type, raw",
    [
        (int, "forty"),
        (Level, "trace"),
        (Priority, "3"),
        (Literal["fast", "safe"], "slow"),
        (int | float, "many"),
        (bool, "maybe"),
        (datetime, "not-a-date"),
    ],
)
def test_conversion_failure_is_recorded(target_type, raw):
    option = OptionMetadata(("--value", "-x"), type=target_type)
    state = collecting_state().with_option_value(option, raw)
    assert state.parsed_options == ()
    assert state.unparsed_input == (raw,)
    (error,) = state.error_handler.errors
    assert isinstance(error, ParseConversionError)
    assert error.title == "value"
    assert error.token == raw


def test_datetime_argument():
    when = PositionalArgumentMetadata(0, "when", type=datetime)
    state = collecting_state().with_argument((when,), None, "2023-10-01T13:00:00")
    ((_, value),) = state.parsed_positional_args
    assert value == datetime(2023, 10, 1, 13, 0)


def test_arguments_collection_converts_each_value():
    numbers = ArgumentsMetadata(("numbers",), type=int)
    state = collecting_state()
    for raw in ["1", "two", "3"]:
        state = state.with_argument((), numbers, raw)
    assert state.parsed_arguments == (1, 3)
    assert state.unparsed_input == ("two",)
    assert "numbers: unable to convert 'two' to int" in str(state.error_handler.errors[0])


def test_flag_binds_true_without_conversion_error():
    flag = OptionMetadata(("--force",), arity=0)
    state = collecting_state().with_option_value(flag, True)
    assert state.parsed_options == ((flag, True),)


def test_target_converter_overrides_config_converter():
    class Split:
        def convert(self, title, target_type, raw):
            return tuple(raw.split(","))

    class Fail:
        def convert(self, title, target_type, raw):
            raise ParseConversionError(title, raw, target_type, "never used")

    option = OptionMetadata(("--tags",), converter=Split())
    state = collecting_state(ParserConfig(type_converter=Fail()))
    state = state.with_option_value(option, "a,b")
    assert state.parsed_options == ((option, ("a", "b")),)


def test_config_converter_used_by_default():
    class Upper(DefaultTypeConverter):
        def convert(self, title, target_type, raw):
            return super().convert(title, target_type, raw.upper())

    option = OptionMetadata(("--level",), type=Level)
    state = collecting_state(ParserConfig(type_converter=Upper()))
    state = state.with_option_value(option, "info")
    assert state.parsed_options == ((option, Level.INFO),)


def test_default_converter_message():
    with pytest.raises(ParseConversionError) as excinfo:
        DefaultTypeConverter().convert("port", int, "eighty")
    assert str(excinfo.value).startswith("port: unable to convert 'eighty' to int (")
