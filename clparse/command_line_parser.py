# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, a small declarative option parser with
fixed-layout help output.

Options are registered in order, matched against an argument vector in that same
order, and rendered in that order by `print_help()`. Values are never coerced: every
value is the raw token that followed its flag.

Key Features:
- Registration returns an `OptionHandle`; the declared `Option` works as a key too
- Built-in `-h/--help` and `-v/--version` options, opt-in per parser
- Separators for blank lines in the help listing
- Batched reporting of every missing required option
- Optional strict mode reporting tokens that match no option

Public Interface:
- `add_option(...)`, `add_separator()`, `add_help_option(...)`, `add_version_option(...)`
- `parse_args(...)`: Parse and return a `ParseResult`, never exits.
- `parse(...)`: Parse, then print help/version/diagnostics and exit when needed.
- `is_set(...)`, `get_value(...)`, `get_value_list(...)`: Query parsed options.
- `format_help()` / `print_help()`, `format_version()` / `print_version()`

Example Usage:
    parser = CommandLineParser(program_name="demo", program_version="1.0",
                               help_option=True, version_option=True)
    output = Option("-o", "--output", "Output file", default="out.txt")
    parser.add_option(output)
    parser.parse()

    print(parser.get_value(output))
"""
from __future__ import annotations

import itertools
import sys
from typing import Iterator, Sequence

from rich.console import Console

from clparse.console import console, error_console
from clparse.exceptions import (
    MissingRequiredOptionError,
    MissingValueError,
    OptionConfigError,
    ParseError,
    ParserStateError,
    UnrecognizedArgumentError,
)
from clparse.logger import logger
from clparse.option import Option
from clparse.parser_types import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    OptionHandle,
    ParseOutcome,
    ParseResult,
)
from clparse.utils import get_program_name, split_value

OptionKey = Option | OptionHandle

_handle_ids = itertools.count(1)


def default_help_option() -> Option:
    """The option registered by `add_help_option()` when none is given."""
    return Option.flag("-h", "--help", "Displays Help")


def default_version_option() -> Option:
    """The option registered by `add_version_option()` when none is given."""
    return Option.flag("-v", "--version", "Print the version")


class CommandLineParser:
    """
    Parses one argument vector against an ordered set of declared options.

    A parser is tied to a single argument vector and parses it once. It cannot be
    copied; a second call to `parse_args()` or `parse()` raises `ParserStateError`.

    Args:
        argv (Sequence[str] | None): Argument vector, `argv[0]` being the invoked
            program path. Defaults to `sys.argv`.
        program_name (str): Name shown by the version banner.
        program_version (str): Version shown by the version banner.
        help_option (bool | Option | None): True registers `-h/--help`; an
            `Option` registers that option as the help option.
        version_option (bool | Option | None): True registers `-v/--version`; an
            `Option` registers that option as the version option.
        strict (bool): Report tokens that match no option as errors instead of
            ignoring them.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        program_name: str = "",
        program_version: str = "",
        help_option: bool | Option | None = None,
        version_option: bool | Option | None = None,
        strict: bool = False,
    ) -> None:
        self.console: Console = console
        self.error_console: Console = error_console
        self.argv: list[str] = list(sys.argv if argv is None else argv)
        self.program_name: str = program_name
        self.program_version: str = program_version
        self.strict: bool = strict
        self._options: list[Option] = []
        self._handles: dict[OptionHandle, Option] = {}
        self._help_option: Option | None = None
        self._version_option: Option | None = None
        self._parsed: bool = False

        if help_option:
            self.add_help_option(
                help_option if isinstance(help_option, Option) else None
            )
        if version_option:
            self.add_version_option(
                version_option if isinstance(version_option, Option) else None
            )

    def __copy__(self):
        raise TypeError("CommandLineParser cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("CommandLineParser cannot be copied")

    def _register(self, option: Option, front: bool = False) -> OptionHandle:
        if not isinstance(option, Option):
            raise OptionConfigError(
                f"Expected an Option, got {type(option).__name__}"
            )
        if self._parsed:
            raise ParserStateError("Options cannot be added after parsing")
        if not option.separator and option in self._options:
            raise OptionConfigError(
                f"Option '{option.args_text}' ({option.description}) is already registered"
            )

        registered = option.clone()
        if front:
            self._options.insert(0, registered)
        else:
            self._options.append(registered)
        handle = OptionHandle(next(_handle_ids))
        self._handles[handle] = registered
        logger.debug(
            "Registered option '%s' (requires_value=%s, required=%s)",
            registered.args_text,
            registered.requires_value,
            registered.required,
        )
        return handle

    def add_option(self, option: Option) -> OptionHandle:
        """Append `option` to the option list and return its handle."""
        return self._register(option)

    def add_options(self, *options: Option) -> list[OptionHandle]:
        return [self._register(option) for option in options]

    def add_separator(self) -> OptionHandle:
        """Append a blank line to the help listing."""
        return self._register(Option.make_separator())

    def add_help_option(self, option: Option | None = None) -> OptionHandle:
        """
        Register the help option at the front of the option list.

        Args:
            option (Option | None): Custom help option, `-h/--help` when omitted.
        """
        if self._help_option is not None:
            raise OptionConfigError("A help option is already registered")
        handle = self._register(option or default_help_option(), front=True)
        self._help_option = self._handles[handle]
        return handle

    def add_version_option(self, option: Option | None = None) -> OptionHandle:
        """
        Register the version option at the current end of the option list.

        Args:
            option (Option | None): Custom version option, `-v/--version` when omitted.
        """
        if self._version_option is not None:
            raise OptionConfigError("A version option is already registered")
        handle = self._register(option or default_version_option())
        self._version_option = self._handles[handle]
        return handle

    @property
    def options(self) -> tuple[Option, ...]:
        """Registered options in registration order."""
        return tuple(self._options)

    @property
    def help_option(self) -> Option | None:
        return self._help_option

    @property
    def version_option(self) -> Option | None:
        return self._version_option

    def parse_args(self, require_match: bool = True) -> ParseResult:
        """
        Match the argument vector against the registered options.

        Every token after `argv[0]` is offered to every option in registration
        order. An option that matches and requires a value consumes the next
        token. An option matches at most once, so only its first occurrence
        counts.

        Args:
            require_match (bool): Treat a run where nothing matched as a help request.

        Returns:
            ParseResult: The outcome and any collected errors.

        Raises:
            ParserStateError: If this parser has already parsed.
        """
        if self._parsed:
            raise ParserStateError("CommandLineParser can only parse once")
        self._parsed = True

        tokens = self.argv
        any_match = False
        unrecognized: list[str] = []

        index = 1
        while index < len(tokens):
            token = tokens[index]
            token_matched = False
            for option in self._options:
                if not option.check(token):
                    continue
                logger.debug("Matched option '%s' on %r", option.args_text, token)
                if option.requires_value:
                    index += 1
                    if index >= len(tokens):
                        error = MissingValueError(option)
                        logger.debug("Parse failed: %s", error)
                        return ParseResult(
                            ParseOutcome.ERROR,
                            errors=[error],
                            any_match=True,
                            unrecognized=unrecognized,
                        )
                    option.set_value(tokens[index])
                any_match = True
                token_matched = True
            if not token_matched:
                unrecognized.append(token)
            index += 1

        if self._is_registered_set(self._help_option) or (
            require_match and not any_match and not (self.strict and unrecognized)
        ):
            logger.debug("Parse requested help (any_match=%s)", any_match)
            return ParseResult(
                ParseOutcome.HELP, any_match=any_match, unrecognized=unrecognized
            )

        if self._is_registered_set(self._version_option):
            logger.debug("Parse requested version")
            return ParseResult(
                ParseOutcome.VERSION, any_match=any_match, unrecognized=unrecognized
            )

        errors: list[ParseError] = [
            MissingRequiredOptionError(option)
            for option in self._options
            if option.required and not option.is_set()
        ]
        if self.strict:
            errors.extend(UnrecognizedArgumentError(token) for token in unrecognized)

        if errors:
            logger.debug("Parse failed with %d error(s)", len(errors))
            return ParseResult(
                ParseOutcome.ERROR,
                errors=errors,
                any_match=any_match,
                unrecognized=unrecognized,
            )

        logger.debug("Parse succeeded")
        return ParseResult(ParseOutcome.OK, any_match=any_match, unrecognized=unrecognized)

    def parse(self, require_match: bool = True) -> ParseResult:
        """
        Parse the argument vector and act on the outcome.

        Prints help or the version banner and exits with status 0 when either was
        requested. Prints one diagnostic per error to stderr and exits with
        `EXIT_FAILURE` on errors. Returns only when parsing succeeded.

        Args:
            require_match (bool): Treat a run where nothing matched as a help request.

        Returns:
            ParseResult: The successful result.
        """
        result = self.parse_args(require_match=require_match)

        if result.outcome is ParseOutcome.HELP:
            self.print_help()
            sys.exit(EXIT_SUCCESS)

        if result.outcome is ParseOutcome.VERSION:
            self.print_version()
            sys.exit(EXIT_SUCCESS)

        if result.outcome is ParseOutcome.ERROR:
            for error in result.errors:
                self.error_console.print(
                    error.diagnostic,
                    style="clparse.error",
                    markup=False,
                    highlight=False,
                    emoji=False,
                    soft_wrap=True,
                )
            sys.exit(EXIT_FAILURE)

        return result

    def _is_registered_set(self, option: Option | None) -> bool:
        return option is not None and option.is_set()

    def _resolve(self, key: OptionKey) -> Option | None:
        if isinstance(key, OptionHandle):
            return self._handles.get(key)
        if isinstance(key, Option):
            return next((option for option in self._options if option == key), None)
        raise TypeError(f"Expected an Option or OptionHandle, got {type(key).__name__}")

    def is_set(self, key: OptionKey) -> bool:
        """True if the registered option was matched or has a default."""
        option = self._resolve(key)
        if option is None:
            return False
        return option.is_set()

    def get_value(self, key: OptionKey) -> str:
        """The registered option's value, "" if it is not registered."""
        option = self._resolve(key)
        if option is None:
            return ""
        return option.get_value()

    def get_value_list(self, key: OptionKey, delimiter: str = ",") -> list[str]:
        """
        The registered option's value split into fields.

        Splits on the first character of `delimiter` (`","` if it is empty) and
        keeps empty fields: `"a,b,,c"` gives `["a", "b", "", "c"]`.
        """
        option = self._resolve(key)
        if option is None:
            return []
        return split_value(option.get_value(), delimiter)

    def _update_padding(self) -> None:
        width = max((option.args_length for option in self._options), default=0)
        for option in self._options:
            option.padding = width

    @property
    def program(self) -> str:
        """Program name shown in the usage line, derived from `argv[0]`."""
        return get_program_name(self.argv[0] if self.argv else "")

    def format_help(self) -> str:
        """
        Render the help listing.

        The flags column is as wide as the longest `"form, alt_form"` among the
        registered options, followed by a four-space gutter and the description.
        """
        self._update_padding()
        usage = f"Usage: {self.program} option\n\n"
        return usage + "".join(option.format_help() for option in self._options)

    def _write(self, text: str) -> None:
        """Write pre-rendered text to the console file without rich processing."""
        file = self.console.file
        file.write(text)
        file.flush()

    def print_help(self) -> None:
        self._write(self.format_help())

    def format_version(self) -> str:
        """`"<program_name> - <program_version>"`, or whichever of the two is set."""
        banner = self.program_name
        if self.program_version:
            if self.program_name:
                banner += " - "
            banner += self.program_version
        return banner + "\n"

    def print_version(self) -> None:
        self._write(self.format_version())

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (Option, OptionHandle)):
            return False
        return self._resolve(key) is not None

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        required = sum(option.required for option in self._options)
        separators = sum(option.separator for option in self._options)
        return (
            f"CommandLineParser(options={len(self._options)}, "
            f"required={required}, separators={separators})"
        )

    def __repr__(self) -> str:
        return str(self)
