"""
clparse Command-Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_line_parser import (
    CommandLineParser,
    default_help_option,
    default_version_option,
)
from .config import loader
from .exceptions import (
    ClparseError,
    ConfigLoadError,
    MissingRequiredOptionError,
    MissingValueError,
    OptionConfigError,
    ParseError,
    ParserStateError,
    UnrecognizedArgumentError,
)
from .logger import logger
from .option import Option
from .parser_types import EXIT_FAILURE, EXIT_SUCCESS, OptionHandle, ParseOutcome, ParseResult

__version__ = "0.1.0"

__all__ = [
    "CommandLineParser",
    "Option",
    "OptionHandle",
    "ParseOutcome",
    "ParseResult",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "default_help_option",
    "default_version_option",
    "loader",
    "logger",
    "ClparseError",
    "ConfigLoadError",
    "OptionConfigError",
    "ParseError",
    "ParserStateError",
    "MissingValueError",
    "MissingRequiredOptionError",
    "UnrecognizedArgumentError",
]
