# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration-file loader for clparse parsers.

Options can be declared in a YAML or TOML file instead of Python code:

    program_name: demo
    program_version: "1.0"
    help: true
    version: true
    options:
      - form: -o
        alt_form: --output
        description: Output file
        default: out.txt
      - separator: true
      - form: -n
        alt_form: --name
        description: Name to greet
        required: true
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from clparse.command_line_parser import CommandLineParser
from clparse.exceptions import ConfigLoadError, OptionConfigError
from clparse.logger import logger
from clparse.option import Option

_TEXT_OPTION_KEYS = ("form", "alt_form", "description", "default")


class OptionSpec(BaseModel):
    """One option entry in a declaration file."""

    model_config = ConfigDict(extra="forbid")

    form: str = ""
    alt_form: str = ""
    description: str = ""
    default: str | None = None
    requires_value: bool = True
    required: bool = False
    separator: bool = False

    @model_validator(mode="after")
    def validate_separator(self) -> OptionSpec:
        if self.separator:
            self.requires_value = False
        return self

    def to_option(self) -> Option:
        return Option(
            form=self.form,
            alt_form=self.alt_form,
            description=self.description,
            default=self.default,
            requires_value=self.requires_value,
            required=self.required,
            separator=self.separator,
        )


class FlagOptionSpec(OptionSpec):
    """A help or version option entry; these take no value unless declared."""

    requires_value: bool = False


class ParserConfig(BaseModel):
    """Top-level model of a declaration file."""

    model_config = ConfigDict(extra="forbid")

    program_name: str = ""
    program_version: str = ""
    help: bool | FlagOptionSpec = False
    version: bool | FlagOptionSpec = False
    strict: bool = False
    options: list[OptionSpec] = Field(default_factory=list)

    def to_parser(self, argv: Sequence[str] | None = None) -> CommandLineParser:
        parser = CommandLineParser(
            argv=argv,
            program_name=self.program_name,
            program_version=self.program_version,
            strict=self.strict,
        )
        if self.help:
            parser.add_help_option(
                self.help.to_option() if isinstance(self.help, OptionSpec) else None
            )
        if self.version:
            parser.add_version_option(
                self.version.to_option()
                if isinstance(self.version, OptionSpec)
                else None
            )
        for spec in self.options:
            parser.add_option(spec.to_option())
        return parser


def load_config(file_path: Path | str) -> ParserConfig:
    """
    Read and validate a declaration file.

    Raises:
        ConfigLoadError: If the file is missing, has an unsupported suffix, or
            does not describe a valid parser.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise ConfigLoadError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigLoadError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigLoadError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigLoadError(
            "Configuration file must contain a mapping with a list of options.\n"
            "Example:\n"
            "program_name: 'demo'\n"
            "options:\n"
            "  - form: '-o'\n"
            "    alt_form: '--output'\n"
            "    description: 'Output file'"
        )

    try:
        config = ParserConfig.model_validate(_coerce_scalars(raw_config))
    except ValidationError as error:
        raise ConfigLoadError(f"Invalid config {path}:\n{error}") from error

    logger.debug("Loaded %d option(s) from %s", len(config.options), path)
    return config


def _coerce_option_entry(entry: Any) -> Any:
    if not isinstance(entry, dict):
        return entry
    return {
        key: (
            str(value)
            if key in _TEXT_OPTION_KEYS
            and isinstance(value, (int, float))
            and not isinstance(value, bool)
            else value
        )
        for key, value in entry.items()
    }


def _coerce_scalars(raw_config: dict[str, Any]) -> dict[str, Any]:
    """YAML reads `version: 1.0` or `form: -1` as numbers; these fields are text."""
    config = dict(raw_config)
    for key in ("program_name", "program_version"):
        value = config.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            config[key] = str(value)
    for key in ("help", "version"):
        if key in config:
            config[key] = _coerce_option_entry(config[key])
    options = config.get("options")
    if isinstance(options, list):
        config["options"] = [_coerce_option_entry(entry) for entry in options]
    return config


def loader(
    file_path: Path | str, argv: Sequence[str] | None = None
) -> CommandLineParser:
    """
    Build a `CommandLineParser` from a YAML or TOML declaration file.

    Args:
        file_path (Path | str): Path to the declaration file.
        argv (Sequence[str] | None): Argument vector for the parser, `sys.argv`
            when omitted.

    Returns:
        CommandLineParser: A parser with every declared option registered.

    Raises:
        ConfigLoadError: If the file cannot be loaded or declares invalid options.
    """
    config = load_config(file_path)
    try:
        return config.to_parser(argv)
    except OptionConfigError as error:
        raise ConfigLoadError(f"Invalid option in {file_path}: {error}") from error
