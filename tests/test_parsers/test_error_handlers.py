import pytest

from runway.exceptions import ParseCommandMissingError, ParseError, ParseFailedError
from runway.parser import (
    ERROR_HANDLERS,
    CollectAll,
    ErrorHandler,
    FailAll,
    FailFast,
    ParseResult,
    ParseState,
)


def test_error_handler_is_abstract():
    with pytest.raises(TypeError):
        ErrorHandler()


def test_fail_fast_raises_the_error():
    handler = FailFast()
    error = ParseError("boom")
    with pytest.raises(ParseError) as excinfo:
        handler.handle_error(error)
    assert excinfo.value is error


def test_collect_all_keeps_errors_in_order():
    handler = CollectAll()
    first, second = ParseError("one"), ParseError("two")
    handler.handle_error(first)
    handler.handle_error(second)
    assert handler.errors == (first, second)

    state = ParseState.new(error_handler=handler)
    result = handler.finished(state)
    assert isinstance(result, ParseResult)
    assert result.errors == (first, second)
    assert not result.was_successful


def test_fail_all_raises_aggregate_when_finished():
    handler = FailAll()
    handler.handle_error(ParseCommandMissingError())
    handler.handle_error(ParseError("two"))
    with pytest.raises(ParseFailedError) as excinfo:
        handler.finished(ParseState.new(error_handler=handler))
    assert len(excinfo.value.errors) == 2
    assert "Parsing failed with 2 errors" in str(excinfo.value)


def test_fail_all_without_errors_succeeds():
    handler = FailAll()
    result = handler.finished(ParseState.new(error_handler=handler))
    assert result.was_successful


def test_registry_names():
    assert ERROR_HANDLERS == {
        "fail-fast": FailFast,
        "collect-all": CollectAll,
        "fail-all": FailAll,
    }
    assert repr(CollectAll()) == "CollectAll(errors=0)"
