"""
clparse Command-Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Checks an argument vector against a YAML or TOML option declaration file:

    clparse demo.yaml -- -o report.txt -n world
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich.table import Table

from clparse.command_line_parser import CommandLineParser
from clparse.config import load_config
from clparse.console import console, error_console
from clparse.exceptions import ConfigLoadError, OptionConfigError
from clparse.parser_types import EXIT_FAILURE
from clparse.utils import setup_logging


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="clparse",
        description="Parse arguments against an option declaration file.",
        epilog="Arguments after CONFIG are parsed as if passed to the declared program.",
    )
    parser.add_argument("config", metavar="CONFIG", help="YAML or TOML declaration file")
    parser.add_argument(
        "args",
        nargs=REMAINDER,
        help="Arguments to parse; a leading '--' is dropped",
    )
    parser.add_argument(
        "--no-require-match",
        action="store_true",
        help="Do not show help when no argument matches an option",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Logging output mode",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log parsing steps to the console"
    )
    return parser


def render_values(parser: CommandLineParser) -> Table:
    table = Table(title=parser.program_name or None)
    table.add_column("Option", style="clparse.option")
    table.add_column("Set")
    table.add_column("Value", style="clparse.value")
    for option in parser:
        if option.separator or option in (parser.help_option, parser.version_option):
            continue
        if option.is_set():
            table.add_row(option.args_text, "yes", option.get_value())
        else:
            table.add_row(option.args_text, "[clparse.unset]no[/]", "")
    return table


def run(namespace: Namespace) -> CommandLineParser:
    config = load_config(namespace.config)
    args = list(namespace.args)
    if args and args[0] == "--":
        args = args[1:]
    program = config.program_name or namespace.config
    parser = config.to_parser([program, *args])
    parser.parse(require_match=not namespace.no_require_match)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    namespace = get_root_parser().parse_args(argv)
    setup_logging(
        mode=namespace.log_mode,
        console_log_level=logging.DEBUG if namespace.debug else logging.WARNING,
    )
    try:
        parser = run(namespace)
    except (ConfigLoadError, OptionConfigError) as error:
        error_console.print(
            f"ERROR: {error}", style="clparse.error", markup=False, soft_wrap=True
        )
        return EXIT_FAILURE
    console.print(render_values(parser))
    return 0


if __name__ == "__main__":
    sys.exit(main())
