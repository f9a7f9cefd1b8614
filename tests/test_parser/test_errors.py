import pytest

from clparse import (
    EXIT_FAILURE,
    CommandLineParser,
    MissingRequiredOptionError,
    MissingValueError,
    Option,
    ParseOutcome,
)


def test_missing_value_result():
    file_option = Option("-f", "--file", "Output file")
    parser = CommandLineParser(["prog", "-f"])
    parser.add_option(file_option)
    result = parser.parse_args()
    assert result.outcome is ParseOutcome.ERROR
    assert result.exit_code == EXIT_FAILURE
    assert len(result.errors) == 1
    error = result.errors[0]
    assert isinstance(error, MissingValueError)
    assert error.option == file_option
    assert result.diagnostics == [
        "ERROR: Option (-f / --file) requires a value, but none was provided, exiting ..."
    ]


def test_missing_value_exits(capsys):
    parser = CommandLineParser(["prog", "--file"])
    parser.add_option(Option("-f", "--file", "Output file"))
    with pytest.raises(SystemExit) as exc_info:
        parser.parse()
    assert exc_info.value.code == EXIT_FAILURE

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Option (-f / --file) requires a value" in captured.err


def test_missing_value_is_reported_before_help():
    parser = CommandLineParser(["prog", "-h", "-f"], help_option=True)
    parser.add_option(Option("-f", "--file", "Output file"))
    result = parser.parse_args()
    assert result.outcome is ParseOutcome.ERROR
    assert isinstance(result.errors[0], MissingValueError)


def test_missing_value_stops_required_checks():
    parser = CommandLineParser(["prog", "-f"])
    parser.add_option(Option("-n", "--name", "Name", required=True))
    parser.add_option(Option("-f", "--file", "Output file"))
    result = parser.parse_args()
    assert [type(error) for error in result.errors] == [MissingValueError]


def test_required_but_absent(capsys):
    parser = CommandLineParser(["prog", "-q"])
    parser.add_option(Option("-n", "--name", "Name", required=True))
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    with pytest.raises(SystemExit) as exc_info:
        parser.parse()
    assert exc_info.value.code != 0

    captured = capsys.readouterr()
    assert "Required option (-n / --name) not set" in captured.err


def test_required_errors_are_batched(capsys):
    parser = CommandLineParser(["prog", "-q"])
    parser.add_option(Option("-n", "--name", "Name", required=True))
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    parser.add_option(Option("-o", "--output", "Output", required=True))
    result = parser.parse_args()
    assert result.outcome is ParseOutcome.ERROR
    assert all(isinstance(error, MissingRequiredOptionError) for error in result.errors)
    assert [error.option.form for error in result.errors] == ["-n", "-o"]


def test_required_errors_print_one_line_each(capsys):
    parser = CommandLineParser(["prog", "-q"])
    parser.add_option(Option("-n", "--name", "Name", required=True))
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    parser.add_option(Option("-o", "--output", "Output", required=True))
    with pytest.raises(SystemExit):
        parser.parse()

    lines = capsys.readouterr().err.splitlines()
    assert lines == [
        "ERROR: Required option (-n / --name) not set, exiting ...",
        "ERROR: Required option (-o / --output) not set, exiting ...",
    ]


def test_required_with_default_is_satisfied():
    parser = CommandLineParser(["prog", "-q"])
    name = Option.with_default("-n", "--name", "Name", "anonymous", required=True)
    parser.add_option(name)
    parser.add_option(Option.flag("-q", "--quiet", "Quiet"))
    result = parser.parse()
    assert result.ok
    assert parser.get_value(name) == "anonymous"


def test_required_option_given():
    parser = CommandLineParser(["prog", "--name", "bob"])
    name = Option("-n", "--name", "Name", required=True)
    parser.add_option(name)
    result = parser.parse()
    assert result.outcome is ParseOutcome.OK
    assert parser.get_value(name) == "bob"
