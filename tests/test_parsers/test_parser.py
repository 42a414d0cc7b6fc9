import pytest

from runway.exceptions import (
    ParseConversionError,
    ParseOptionOutOfRangeError,
    ParseRestrictionViolatedError,
)
from runway.model import (
    ArgumentsMetadata,
    CommandGroupMetadata,
    CommandMetadata,
    GlobalMetadata,
    OptionMetadata,
    PositionalArgumentMetadata,
)
from runway.parser import CollectAll, Context, FailAll, Parser, ParserConfig
from runway.parser.recognizers import StandardOptionRecognizer
from runway.restrictions import RangeRestriction, Restriction

VERBOSE = OptionMetadata(("-v", "--verbose"), arity=0)
DRY_RUN = OptionMetadata(("--dry-run",), arity=0)
LEVEL = OptionMetadata(
    ("-l", "--level"), type=int, restrictions=(RangeRestriction(1, 10),)
)
FORCE = OptionMetadata(("-f", "--force"), arity=0)

ADD = CommandMetadata(
    name="add",
    aliases=("a",),
    options=(LEVEL, FORCE),
    positional_args=(
        PositionalArgumentMetadata(1, "url"),
        PositionalArgumentMetadata(0, "name"),
    ),
)
LIST = CommandMetadata(name="list", arguments=ArgumentsMetadata(("filters",)))
REMOTE = CommandGroupMetadata(
    name="remote", options=(DRY_RUN,), commands=(ADD, LIST), default_command=LIST
)
STATUS = CommandMetadata(name="status", options=(LEVEL,), arguments=ArgumentsMetadata())
GIT = GlobalMetadata(
    name="git", options=(VERBOSE,), groups=(REMOTE,), commands=(STATUS,)
)


def collect() -> ParserConfig:
    return ParserConfig(error_handler=CollectAll)


def test_parse_global_group_command_and_arguments():
    result = Parser(GIT).parse(
        ["-v", "remote", "--dry-run", "add", "-l", "3", "origin", "https://example.com"]
    )
    assert result.was_successful
    assert result.group is REMOTE
    assert result.command is ADD
    assert result.parsed_options == ((VERBOSE, True), (DRY_RUN, True), (LEVEL, 3))
    assert result.positional_value("name") == "origin"
    assert result.positional_value("url") == "https://example.com"
    assert result.state.location_stack == (
        Context.GLOBAL,
        Context.GROUP,
        Context.COMMAND,
        Context.ARGUMENTS,
    )


def test_parse_command_alias_and_mixed_option_styles():
    result = Parser(GIT).parse(["remote", "a", "-fl7", "--level=2", "origin"])
    assert result.command is ADD
    assert result.option_values("--level") == [7, 2]
    assert result.option_values("-f") == [True]


def test_options_outside_scope_are_not_recognized():
    result = Parser(GIT, collect()).parse(["--dry-run", "status"])
    assert result.command is STATUS
    assert result.unparsed_input == ("--dry-run",)
    assert result.was_successful


def test_global_options_allowed_after_command():
    result = Parser(GIT).parse(["status", "--verbose", "x"])
    assert result.option_values("-v") == [True]
    assert result.parsed_arguments == ("x",)


def test_group_default_command():
    result = Parser(GIT).parse(["remote", "origin"])
    assert result.group is REMOTE
    assert result.command is LIST
    assert result.parsed_arguments == ("origin",)


def test_group_default_command_applied_at_end_of_input():
    result = Parser(GIT).parse(["remote"])
    assert result.command is LIST
    assert result.state.location == Context.COMMAND


def test_global_default_command():
    cli = GlobalMetadata(name="tool", commands=(STATUS,), default_command=STATUS)
    result = Parser(cli).parse(["a", "b"])
    assert result.command is STATUS
    assert result.parsed_arguments == ("a", "b")


def test_tokens_without_command_are_unparsed():
    result = Parser(GIT, collect()).parse(["bogus", "-v"])
    assert result.command is None
    assert result.unparsed_input == ("bogus",)
    assert result.option_values("--verbose") == [True]


def test_command_names_are_arguments_once_command_selected():
    result = Parser(GIT).parse(["status", "remote", "status"])
    assert result.command is STATUS
    assert result.parsed_arguments == ("remote", "status")


def test_separator_ends_option_recognition():
    result = Parser(GIT).parse(["status", "--", "-l", "3", "--verbose"])
    assert result.parsed_options == ()
    assert result.parsed_arguments == ("-l", "3", "--verbose")


def test_separator_disabled():
    config = ParserConfig(error_handler=CollectAll, allow_separator=False)
    result = Parser(GIT, config).parse(["status", "--", "-l", "3"])
    assert result.parsed_arguments == ("--",)
    assert result.option_values("-l") == [3]


def test_custom_recognizer_order():
    config = ParserConfig(recognizers=[StandardOptionRecognizer()], error_handler=CollectAll)
    result = Parser(GIT, config).parse(["status", "--level=3"])
    assert result.parsed_options == ()
    assert result.parsed_arguments == ("--level=3",)


def test_collect_all_reports_every_invalid_value():
    result = Parser(GIT, collect()).parse(["status", "-l", "0", "-l", "x", "-l", "4"])
    assert not result.was_successful
    assert result.parsed_options == ((LEVEL, 4),)
    assert result.unparsed_input == ("0", "x")
    assert len(result.errors) == 2
    assert isinstance(result.errors[0], ParseOptionOutOfRangeError)
    assert isinstance(result.errors[1], ParseConversionError)


def test_fail_fast_stops_at_first_invalid_value():
    seen = []

    def record(state):
        seen.append(state)

    config = ParserConfig(completion_hooks=[record])
    with pytest.raises(ParseOptionOutOfRangeError):
        Parser(GIT, config).parse(["status", "-l", "0", "-l", "x"])
    assert seen == []


def test_fail_all_raises_aggregate():
    from runway.exceptions import ParseFailedError

    config = ParserConfig(error_handler=FailAll)
    with pytest.raises(ParseFailedError) as excinfo:
        Parser(GIT, config).parse(["status", "-l", "0", "-l", "x"])
    assert len(excinfo.value.errors) == 2


def test_parser_is_reusable_between_parses():
    parser = Parser(GIT, collect())
    first = parser.parse(["status", "-l", "0"])
    second = parser.parse(["status", "-l", "2"])
    assert len(first.errors) == 1
    assert second.was_successful
    assert second.option_values("--level") == [2]


def test_completion_hook_may_replace_state():
    def tag(state):
        return state.with_unparsed_input("<end>")

    config = ParserConfig(completion_hooks=[tag])
    result = Parser(GIT, config).parse(["status"])
    assert result.unparsed_input == ("<end>",)


def test_empty_input():
    result = Parser(GIT).parse([])
    assert result.command is None
    assert result.state.location_stack == (Context.GLOBAL,)
    assert Parser(GIT).parse().was_successful


def test_default_command_options_are_recognized():
    cli = GlobalMetadata(name="tool", commands=(STATUS,), default_command=STATUS)
    result = Parser(cli).parse(["-l", "3", "x"])
    assert result.command is STATUS
    assert result.option_values("-l") == [3]
    assert result.parsed_arguments == ("x",)


def test_group_default_command_options_are_recognized():
    tagged = CommandMetadata(name="tag", options=(FORCE,), arguments=ArgumentsMetadata())
    group = CommandGroupMetadata(name="release", commands=(tagged,), default_command=tagged)
    cli = GlobalMetadata(name="tool", options=(VERBOSE,), groups=(group,))
    result = Parser(cli).parse(["release", "-v", "--force", "v1.0"])
    assert result.command is tagged
    assert result.parsed_options == ((VERBOSE, True), (FORCE, True))
    assert result.parsed_arguments == ("v1.0",)


class RejectNine(Restriction):
    def pre_validate(self, state, target, raw):
        if raw == "9":
            raise ParseRestrictionViolatedError(f"'{raw}' is reserved")


def test_every_restriction_runs_after_a_failure():
    checked = OptionMetadata(
        ("-n",),
        type=int,
        restrictions=(RejectNine(), RangeRestriction(1, 2), RangeRestriction(5, 6)),
    )
    command = CommandMetadata(name="run", options=(checked,))
    cli = GlobalMetadata(name="tool", commands=(command,))
    result = Parser(cli, collect()).parse(["run", "-n", "9"])
    assert len(result.errors) == 3
    assert isinstance(result.errors[0], ParseRestrictionViolatedError)
    assert isinstance(result.errors[1], ParseOptionOutOfRangeError)
    assert isinstance(result.errors[2], ParseOptionOutOfRangeError)
    assert result.unparsed_input == ("9",)
    assert result.parsed_options == ()
    assert result.option_values("-n") == []


def test_pre_validation_sees_raw_token():
    seen = []

    class Record(Restriction):
        def pre_validate(self, state, target, raw):
            seen.append(("pre", raw))

        def post_validate(self, state, target, value):
            seen.append(("post", value))

    option = OptionMetadata(("-n",), type=int, restrictions=(Record(),))
    command = CommandMetadata(name="run", options=(option,))
    Parser(GlobalMetadata(name="tool", commands=(command,))).parse(["run", "-n", "4"])
    assert seen == [("pre", "4"), ("post", 4)]


class RecordingRecognizer:
    def __init__(self):
        self.inner = StandardOptionRecognizer()
        self.seen = []

    def __call__(self, tokens, state, allowed_options):
        self.seen.append(tokens.peek())
        return self.inner(tokens, state, allowed_options)


def test_fail_fast_never_reads_tokens_after_failure():
    recognizer = RecordingRecognizer()
    config = ParserConfig(recognizers=[recognizer])
    with pytest.raises(ParseOptionOutOfRangeError):
        Parser(GIT, config).parse(["status", "-l", "0", "-l", "x", "later"])
    assert recognizer.seen == ["status", "-l"]
