# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option tables and parser settings from YAML or TOML files.

Example (YAML):
    allow_abbrev: true
    options:
      - short: v
        long: verbose
      - short: o
        long: output
        argument: required
        handler: mypkg.cli:on_output
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from gnuopt.exceptions import OptionDefinitionError
from gnuopt.getopt import Getopt
from gnuopt.importer import resolve_handler
from gnuopt.logger import logger
from gnuopt.option import ArgumentMode, Option, OptionHandler


class RawOption(BaseModel):
    """One option entry as written in a config file."""

    short: str | None = None
    long: str | None = None
    argument: ArgumentMode = ArgumentMode.NO_ARGUMENT
    handler: str | None = None

    @field_validator("argument", mode="before")
    @classmethod
    def validate_argument(cls, value: Any) -> ArgumentMode:
        if value is None:
            return ArgumentMode.NO_ARGUMENT
        return ArgumentMode(value)

    @model_validator(mode="after")
    def validate_names(self) -> RawOption:
        if self.short is None and self.long is None:
            raise ValueError("option needs a 'short' or 'long' name")
        return self

    def to_option(self, default_handler: OptionHandler | None = None) -> Option:
        handler = resolve_handler(self.handler) if self.handler else default_handler
        return Option(self.short, self.long, self.argument, handler)


class OptionTableConfig(BaseModel):
    """Parser settings plus the option table, as loaded from a config file."""

    allow_abbrev: bool = False
    allow_alternative: bool = False
    prefer_exact_match: bool = False
    allow_detached_optional: bool = False
    options: list[Any] = Field(default_factory=list)

    def to_getopt(self) -> Getopt:
        return Getopt(
            self.options,
            allow_abbrev=self.allow_abbrev,
            allow_alternative=self.allow_alternative,
            prefer_exact_match=self.prefer_exact_match,
            allow_detached_optional=self.allow_detached_optional,
        )


def convert_options(
    raw_options: list[dict[str, Any]], handler: OptionHandler | None = None
) -> list[Option]:
    options = []
    for position, entry in enumerate(raw_options):
        try:
            raw_option = RawOption(**entry)
        except (TypeError, ValidationError) as error:
            raise OptionDefinitionError(f"Invalid option #{position}: {error}") from error
        try:
            options.append(raw_option.to_option(handler))
        except (ImportError, ValueError) as error:
            raise OptionDefinitionError(f"Invalid option #{position}: {error}") from error
    return options


def load_options(
    file_path: Path | str, handler: OptionHandler | None = None
) -> OptionTableConfig:
    """
    Load an option table from a YAML or TOML file.

    The file should contain a dictionary with an `options` list. Each option
    needs at least a `short` or a `long` name, and may set `argument`
    (`none`, `required`, `optional`) and `handler` (a dotted import path).

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).
        handler (OptionHandler | None): Handler for options that do not name one.

    Returns:
        OptionTableConfig: Parser settings and options; see `to_getopt()`.

    Raises:
        FileNotFoundError: The file does not exist.
        ValueError: The format is unsupported or the content is not a dictionary.
        OptionDefinitionError: An option entry or a parser setting is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "allow_abbrev: true\n"
            "options:\n"
            "  - short: 'v'\n"
            "    long: 'verbose'"
        )

    raw_options = raw_config.get("options", [])
    if not isinstance(raw_options, list):
        raise ValueError("'options' must be a list")

    options = convert_options(raw_options, handler)
    logger.debug("Loaded %d options from %s", len(options), path)
    settings = {key: value for key, value in raw_config.items() if key != "options"}
    try:
        return OptionTableConfig(**settings, options=options)
    except (TypeError, ValidationError) as error:
        raise OptionDefinitionError(f"Invalid parser settings: {error}") from error
