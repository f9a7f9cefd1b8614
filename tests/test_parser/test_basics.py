import copy

import pytest

from clparse import (
    CommandLineParser,
    Option,
    OptionConfigError,
    OptionHandle,
    ParseOutcome,
    ParserStateError,
)


def build_parser(argv, *options, **kwargs):
    parser = CommandLineParser(argv, **kwargs)
    for option in options:
        parser.add_option(option)
    return parser


def test_str():
    parser = CommandLineParser(["prog"])
    assert str(parser) == "CommandLineParser(options=0, required=0, separators=0)"

    parser.add_option(Option("-n", "--name", "Name", required=True))
    parser.add_separator()
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    assert str(parser) == "CommandLineParser(options=3, required=1, separators=1)"
    assert repr(parser) == str(parser)
    assert len(parser) == 3


def test_value_round_trip():
    file_option = Option("-f", "--file", "Output file")
    parser = build_parser(["prog", "-f", "out.txt"], file_option)
    result = parser.parse_args()
    assert result.outcome is ParseOutcome.OK
    assert result.ok
    assert result.exit_code == 0
    assert parser.is_set(file_option) is True
    assert parser.get_value(file_option) == "out.txt"


def test_alternate_form_round_trip():
    file_option = Option("-f", "--file", "Output file")
    parser = build_parser(["prog", "--file", "out.txt"], file_option)
    assert parser.parse_args().ok
    assert parser.get_value(file_option) == "out.txt"


def test_argv_zero_is_never_matched():
    file_option = Option.flag("-f", "--file", "File")
    parser = build_parser(["-f"], file_option)
    result = parser.parse_args(require_match=False)
    assert result.ok
    assert result.any_match is False
    assert parser.is_set(file_option) is False


def test_first_match_wins():
    file_option = Option("-f", "--file", "Output file")
    parser = build_parser(["prog", "-f", "first", "--file", "second"], file_option)
    result = parser.parse_args()
    assert result.ok
    assert parser.get_value(file_option) == "first"
    assert result.unrecognized == ["--file", "second"]


def test_value_token_is_not_matched_as_option():
    file_option = Option("-f", "--file", "Output file")
    quiet = Option.flag("-q", "--quiet", "Quiet")
    parser = build_parser(["prog", "-f", "-q"], file_option, quiet)
    assert parser.parse_args().ok
    assert parser.get_value(file_option) == "-q"
    assert parser.is_set(quiet) is False


def test_flag_and_value_options_together():
    level = Option("-l", "--level", "Level")
    quiet = Option.flag("-q", "--quiet", "Quiet")
    parser = build_parser(["prog", "-q", "--level", "7"], level, quiet)
    assert parser.parse_args().ok
    assert parser.is_set(quiet) is True
    assert parser.get_value(quiet) == ""
    assert parser.get_value(level) == "7"


def test_value_is_not_trimmed_or_coerced():
    level = Option("-l", "--level", "Level")
    parser = build_parser(["prog", "-l", " 007 "], level)
    assert parser.parse_args().ok
    assert parser.get_value(level) == " 007 "


def test_default_value_when_absent():
    output = Option.with_default("-o", "--output", "Output", "out.txt")
    quiet = Option.flag("-q", "--quiet", "Quiet")
    parser = build_parser(["prog", "-q"], output, quiet)
    assert parser.parse_args().ok
    assert parser.is_set(output) is True
    assert parser.get_value(output) == "out.txt"


def test_every_option_sees_every_token():
    first = Option.flag("-x", "", "First")
    second = Option.flag("", "-x", "Second")
    parser = build_parser(["prog", "-x"], first, second)
    assert parser.parse_args().ok
    assert parser.is_set(first) is True
    assert parser.is_set(second) is True


def test_shared_token_consumes_successive_values():
    first = Option("-x", "", "First")
    second = Option("", "-x", "Second")
    parser = build_parser(["prog", "-x", "one", "two"], first, second)
    assert parser.parse_args().ok
    assert parser.get_value(first) == "one"
    assert parser.get_value(second) == "two"


def test_unknown_option_queries():
    parser = build_parser(["prog", "-q"], Option.flag("-q", "--quiet", "Quiet"))
    parser.parse_args()
    unknown = Option("-u", "--unknown", "Unknown")
    assert parser.is_set(unknown) is False
    assert parser.get_value(unknown) == ""
    assert parser.get_value_list(unknown) == []
    assert unknown not in parser


def test_query_with_wrong_key_type():
    parser = CommandLineParser(["prog"])
    with pytest.raises(TypeError):
        parser.is_set("-q")


def test_callers_option_is_not_mutated():
    file_option = Option("-f", "--file", "Output file")
    parser = build_parser(["prog", "-f", "out.txt"], file_option)
    parser.parse_args()
    assert file_option.matched is False
    assert file_option.get_value() == ""
    assert parser.get_value(file_option) == "out.txt"


def test_duplicate_registration_is_rejected():
    parser = CommandLineParser(["prog"])
    parser.add_option(Option("-f", "--file", "Output file"))
    with pytest.raises(OptionConfigError):
        parser.add_option(Option("-f", "--file", "Output file", default="x"))


def test_multiple_separators_are_allowed():
    parser = CommandLineParser(["prog"])
    parser.add_separator()
    parser.add_separator()
    assert len(parser) == 2


def test_register_non_option():
    parser = CommandLineParser(["prog"])
    with pytest.raises(OptionConfigError):
        parser.add_option("-f")


def test_parser_parses_once():
    parser = build_parser(["prog", "-q"], Option.flag("-q", "--quiet", "Quiet"))
    parser.parse_args()
    with pytest.raises(ParserStateError):
        parser.parse_args()
    with pytest.raises(ParserStateError):
        parser.add_option(Option.flag("-z", "--zed", "Zed"))


def test_parser_cannot_be_copied():
    parser = CommandLineParser(["prog"])
    with pytest.raises(TypeError):
        copy.copy(parser)
    with pytest.raises(TypeError):
        copy.deepcopy(parser)


def test_argv_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "-q"])
    quiet = Option.flag("-q", "--quiet", "Quiet")
    parser = build_parser(None, quiet)
    assert parser.parse_args().ok
    assert parser.is_set(quiet)


def test_handles():
    quiet = Option.flag("-q", "--quiet", "Quiet")
    parser = CommandLineParser(["prog", "-q", "-l", "3"])
    quiet_handle = parser.add_option(quiet)
    level_handle, output_handle = parser.add_options(
        Option("-l", "--level", "Level"),
        Option.with_default("-o", "--output", "Output", "out.txt"),
    )
    assert isinstance(quiet_handle, OptionHandle)
    assert len({quiet_handle, level_handle, output_handle}) == 3
    assert parser.parse_args().ok

    assert parser.is_set(quiet_handle) is parser.is_set(quiet) is True
    assert parser.get_value(level_handle) == "3"
    assert parser.get_value(output_handle) == "out.txt"
    assert quiet_handle in parser


def test_handle_from_other_parser_is_unknown():
    other = CommandLineParser(["prog"])
    handle = other.add_option(Option.flag("-q", "--quiet", "Quiet"))
    parser = CommandLineParser(["prog", "-q"])
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    parser.parse_args()
    assert parser.is_set(handle) is False
    assert parser.get_value(handle) == ""


def test_options_keep_registration_order():
    parser = CommandLineParser(["prog"], help_option=True)
    parser.add_option(Option("-a", "--alpha", "Alpha"))
    parser.add_separator()
    parser.add_version_option()
    parser.add_option(Option("-b", "--beta", "Beta"))
    forms = [option.form for option in parser.options]
    assert forms == ["-h", "-a", "", "-v", "-b"]
    assert [option.form for option in parser] == forms
