# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clparse.

Declaration and registration mistakes are raised immediately. Parse-time
failures are collected into a `ParseResult` by `CommandLineParser.parse_args()`
and only turned into diagnostics and a process exit by `CommandLineParser.parse()`.

Exception Hierarchy:
- ClparseError
    ├── OptionConfigError
    ├── ParserStateError
    ├── ConfigLoadError
    └── ParseError
          ├── MissingValueError
          ├── MissingRequiredOptionError
          └── UnrecognizedArgumentError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clparse.option import Option


class ClparseError(Exception):
    """Base exception for clparse."""


class OptionConfigError(ClparseError):
    """Exception raised when an option is declared or registered incorrectly."""


class ParserStateError(ClparseError):
    """Exception raised when a parser is used outside its one-shot lifecycle."""


class ConfigLoadError(ClparseError):
    """Exception raised when an option declaration file cannot be loaded."""


class ParseError(ClparseError):
    """Base class for failures found while parsing an argument vector."""

    @property
    def diagnostic(self) -> str:
        """The line printed to stderr for this failure."""
        return f"ERROR: {self}, exiting ..."


class MissingValueError(ParseError):
    """A value-requiring option was the last token with nothing following it."""

    def __init__(self, option: Option):
        self.option = option
        super().__init__(
            f"Option ({option.form} / {option.alt_form}) requires a value, "
            "but none was provided"
        )


class MissingRequiredOptionError(ParseError):
    """A required option was never matched and carries no default."""

    def __init__(self, option: Option):
        self.option = option
        super().__init__(f"Required option ({option.form} / {option.alt_form}) not set")


class UnrecognizedArgumentError(ParseError):
    """A token matched no registered option while parsing in strict mode."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized argument '{token}'")
