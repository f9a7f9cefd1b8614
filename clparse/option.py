# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the descriptor of a single command-line flag.

An `Option` carries two kinds of state:

- Declared fields (`form`, `alt_form`, `description`, `default`,
  `requires_value`, `required`, `separator`) which are fixed once the option is
  constructed. Reassigning one raises `AttributeError`.
- Transient parse state (`matched`, `value`, `padding`) which is written by
  `CommandLineParser` while it parses and renders help.

`CommandLineParser` never mutates the instance handed to `add_option()`; it
registers a `clone()` and the caller later looks the registered copy up by
passing the original descriptor back (options compare equal on `form`,
`alt_form` and `description`).

Example:
    output = Option("-o", "--output", "Output file", default="out.txt")
    verbose = Option.flag("-V", "--verbose", "Chatty output")
    blank = Option.make_separator()
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from clparse.exceptions import OptionConfigError

MAX_LINE_LENGTH = 80
ARG_DESC_GAP = 4

_DECLARED_FIELDS = frozenset(
    {
        "form",
        "alt_form",
        "description",
        "default",
        "requires_value",
        "required",
        "separator",
    }
)


@dataclass(eq=False)
class Option:
    """
    Represents one declared command-line option.

    Attributes:
        form (str): Primary spelling, e.g. `-f`. Empty only for separators or
            options matched by their alternate form alone.
        alt_form (str): Alternate spelling, e.g. `--file`. It may list several
            whitespace-separated aliases for display; only the first is matched.
        description (str): Help text.
        default (str | None): Value reported when the option is absent. `None`
            or `""` means there is no default.
        requires_value (bool): True if the next token is consumed as the value.
        required (bool): True if parsing fails when the option is not set.
        separator (bool): True for a blank line in the help listing.
        matched (bool): Set once the option has been seen in the current parse.
        value (str): The token captured for a matched, value-requiring option.
        padding (int): Width of the flags column used when rendering help.
    """

    form: str = ""
    alt_form: str = ""
    description: str = ""
    default: str | None = None
    requires_value: bool = True
    required: bool = False
    separator: bool = False
    matched: bool = field(default=False, init=False, repr=False)
    value: str = field(default="", init=False, repr=False)
    padding: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("form", "alt_form", "description"):
            if not isinstance(getattr(self, name), str):
                raise OptionConfigError(f"Option {name} must be a string")
        if self.default is not None and not isinstance(self.default, str):
            raise OptionConfigError(
                f"Option default must be a string or None, got {type(self.default).__name__}"
            )

        if self.separator:
            if self.form or self.alt_form or self.description or self.default:
                raise OptionConfigError(
                    "A separator cannot declare forms, a description or a default"
                )
            if self.required:
                raise OptionConfigError("A separator cannot be required")
            object.__setattr__(self, "requires_value", False)
        elif not self.form and not self.match_alt_form:
            raise OptionConfigError(
                f"Option {self.description!r} needs a form or an alternate form"
            )

        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: object) -> None:
        if name in _DECLARED_FIELDS and getattr(self, "_sealed", False):
            raise AttributeError(
                f"Option field '{name}' cannot be reassigned after construction"
            )
        super().__setattr__(name, value)

    @classmethod
    def with_default(
        cls,
        form: str,
        alt_form: str,
        description: str,
        default: str,
        required: bool = False,
    ) -> Option:
        """Create a value-requiring option with a default value."""
        return cls(form, alt_form, description, default=default, required=required)

    @classmethod
    def flag(
        cls, form: str, alt_form: str, description: str, required: bool = False
    ) -> Option:
        """Create an option that takes no value."""
        return cls(form, alt_form, description, requires_value=False, required=required)

    @classmethod
    def make_separator(cls) -> Option:
        """Create a separator, rendered as a blank line in the help listing."""
        return cls(separator=True)

    @property
    def match_alt_form(self) -> str:
        """The first whitespace-delimited token of `alt_form`, the one matched."""
        tokens = self.alt_form.split()
        return tokens[0] if tokens else ""

    @property
    def has_default(self) -> bool:
        return bool(self.default)

    def check(self, token: str) -> bool:
        """
        Match `token` against this option.

        An option matches at most once per parse; later calls return False and
        leave the captured value alone.

        Returns:
            bool: True if this call matched the option.
        """
        if self.matched or self.separator:
            return False

        if self.form and self.form == token:
            self.matched = True
        elif self.match_alt_form and self.match_alt_form == token:
            self.matched = True
        return self.matched

    def is_set(self) -> bool:
        """True if the option was matched or carries a default value."""
        return self.matched or self.has_default

    def get_value(self) -> str:
        """The captured value if matched, otherwise the default (or "")."""
        if self.matched:
            return self.value
        return self.default or ""

    def set_value(self, value: str) -> None:
        self.value = value

    def reset(self) -> None:
        """Forget any parse state."""
        self.matched = False
        self.value = ""
        self.padding = 0

    def clone(self) -> Option:
        """Return a copy of the declaration with fresh parse state."""
        return replace(self)

    @property
    def args_text(self) -> str:
        """The flags column text, `"form, alt_form"`."""
        if self.separator:
            return ""
        return f"{self.form}, {self.alt_form}"

    @property
    def args_length(self) -> int:
        return len(self.args_text)

    @property
    def help_text(self) -> str:
        """Description with the required and default annotations appended."""
        text = self.description
        if self.required:
            text += " (required)"
        if self.has_default:
            text += f" DEFAULT: {self.default}"
        return text

    def format_help(self, width: int | None = None) -> str:
        """
        Render this option as it appears in the help listing.

        The flags column is left-justified to `width` (the option's `padding`
        when omitted) and followed by a four-space gutter. The help text wraps at
        the last space that keeps a line within 80 columns; continuation lines are
        indented to the description column. A chunk with no usable space is left
        unwrapped.

        Returns:
            str: One or more newline-terminated lines; a separator is "\\n".
        """
        if self.separator:
            return "\n"

        padding = self.padding if width is None else width
        indent = padding + ARG_DESC_GAP
        limit = max(MAX_LINE_LENGTH - indent, 0)

        prefix = f"{self.args_text:<{padding}}{'':<{ARG_DESC_GAP}}"
        text = self.help_text
        lines = []
        while len(text) + indent > MAX_LINE_LENGTH:
            space = text.rfind(" ", 0, limit + 1)
            if space == -1:
                break
            lines.append(prefix + text[:space])
            prefix = " " * indent
            text = text[space + 1 :]
        lines.append(prefix + text)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format_help()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Option):
            return NotImplemented
        return (
            self.form == other.form
            and self.alt_form == other.alt_form
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.form, self.alt_form, self.description))
