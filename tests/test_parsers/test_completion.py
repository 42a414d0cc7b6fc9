import pytest

from runway.exceptions import (
    ParseArgumentsMissingError,
    ParseCommandMissingError,
    ParseOptionMissingError,
)
from runway.model import (
    ArgumentsMetadata,
    CommandGroupMetadata,
    CommandMetadata,
    GlobalMetadata,
    OptionMetadata,
    PositionalArgumentMetadata,
)
from runway.parser import CollectAll, Parser, ParserConfig, check_required

TOKEN = OptionMetadata(("--token",), required=True)
PROFILE = OptionMetadata(("--profile",), required=True)
DEPLOY = CommandMetadata(
    name="deploy",
    options=(TOKEN,),
    positional_args=(PositionalArgumentMetadata(0, "target", required=True),),
    arguments=ArgumentsMetadata(("services",), required=True),
)
CLOUD = CommandGroupMetadata(name="cloud", commands=(DEPLOY,))
CLI = GlobalMetadata(name="ops", options=(PROFILE,), groups=(CLOUD,))


@pytest.fixture
def parser():
    return Parser(
        CLI, ParserConfig(error_handler=CollectAll, completion_hooks=[check_required])
    )


def test_all_requirements_met(parser):
    result = parser.parse(
        ["--profile", "prod", "cloud", "deploy", "--token", "t", "eu", "api"]
    )
    assert result.was_successful


def test_missing_command(parser):
    result = parser.parse(["--profile", "prod"])
    (error,) = result.errors
    assert isinstance(error, ParseCommandMissingError)
    assert str(error) == "No command specified"


def test_missing_command_in_group(parser):
    result = parser.parse(["--profile", "prod", "cloud"])
    (error,) = result.errors
    assert isinstance(error, ParseCommandMissingError)
    assert "cloud" in str(error)


def test_missing_required_options(parser):
    result = parser.parse(["cloud", "deploy", "eu", "api"])
    missing = [error.title for error in result.errors]
    assert missing == ["--token", "--profile"]
    assert all(isinstance(error, ParseOptionMissingError) for error in result.errors)


def test_missing_required_arguments(parser):
    result = parser.parse(["--profile", "p", "cloud", "deploy", "--token", "t"])
    (error,) = result.errors
    assert isinstance(error, ParseArgumentsMissingError)
    assert error.titles == ["target", "services"]


def test_check_required_is_opt_in():
    result = Parser(CLI, ParserConfig(error_handler=CollectAll)).parse([])
    assert result.was_successful
