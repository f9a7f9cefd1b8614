# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and handle types returned by `CommandLineParser`.

Contents:
- `ParseOutcome`: What a parse run concluded (continue, show help, show version, fail).
- `ParseResult`: The outcome plus every collected `ParseError`.
- `OptionHandle`: Opaque reference to a registered option, returned at registration.
- `EXIT_SUCCESS` / `EXIT_FAILURE`: Process exit statuses used by `CommandLineParser.parse()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from clparse.exceptions import ParseError

EXIT_SUCCESS = 0
EXIT_FAILURE = -1


class ParseOutcome(Enum):
    """
    Conclusion of a parse run.

    Members:
        OK: Every required option is set; the caller continues.
        HELP: Help was requested (or nothing matched); print help and stop.
        VERSION: The version option was given; print the banner and stop.
        ERROR: One or more `ParseError`s were collected.
    """

    OK = "ok"
    HELP = "help"
    VERSION = "version"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseResult:
    """Outcome of `CommandLineParser.parse_args()`."""

    outcome: ParseOutcome
    errors: list[ParseError] = field(default_factory=list)
    any_match: bool = False
    unrecognized: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is ParseOutcome.OK

    @property
    def exit_code(self) -> int:
        """Process status matching this outcome."""
        if self.outcome is ParseOutcome.ERROR:
            return EXIT_FAILURE
        return EXIT_SUCCESS

    @property
    def diagnostics(self) -> list[str]:
        return [error.diagnostic for error in self.errors]


@dataclass(frozen=True)
class OptionHandle:
    """Opaque reference to an option registered with a `CommandLineParser`."""

    id: int
