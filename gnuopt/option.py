# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the building blocks of an option table.

- `ArgumentMode`: whether an option takes no argument, a required argument or an
  optional argument. Accepts getopt(3) style aliases (`":"`, `"::"`).
- `NameForm`: which form of an option matched on the command line, passed to
  handlers so they can tell `-v` from `--verbose`.
- `Option`: one declared switch with its short name, long name, argument mode
  and handler.

An option table is any ordered sequence of `Option` objects. It is owned by the
caller and only read during parsing.

Example:
    Option("v", "verbose", handler=on_verbose)
    Option(None, "output", ArgumentMode("required"), handler=on_output)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from gnuopt.exceptions import OptionDefinitionError


class ArgumentMode(Enum):
    """
    Defines whether an option takes an argument.

    Members:
        NO_ARGUMENT: The option never takes an argument.
        REQUIRED_ARGUMENT: The option must have an argument, attached
            (`-ofile`, `-o=file`, `--output=file`) or as the next token.
        OPTIONAL_ARGUMENT: The option may have an attached argument.

    Aliases:
        - "no", "no_argument", "" → "none"
        - "required_argument", ":" → "required"
        - "optional_argument", "::" → "optional"
    """

    NO_ARGUMENT = "none"
    REQUIRED_ARGUMENT = "required"
    OPTIONAL_ARGUMENT = "optional"

    @property
    def takes_argument(self) -> bool:
        return self is not ArgumentMode.NO_ARGUMENT

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "": "none",
            "no": "none",
            "no_argument": "none",
            ":": "required",
            "required_argument": "required",
            "::": "optional",
            "optional_argument": "optional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentMode:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower().replace("-", "_"))
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class NameForm(Enum):
    """Which name of an option matched on the command line."""

    SHORT = "short"
    LONG = "long"

    def __str__(self) -> str:
        return self.value


class OptionHandler(Protocol):
    def __call__(self, option: Option, name_form: NameForm, value: str) -> Any: ...


@dataclass(eq=False)
class Option:
    """
    Represents a recognized command-line switch.

    Options compare by identity.

    Attributes:
        short_name (str | None): Single character used after one dash, or None.
        long_name (str | None): Name used after two dashes, or None.
        argument_mode (ArgumentMode): Whether the option takes an argument.
        handler (OptionHandler | None): Called once per match with
            `(option, name_form, value)`. Anything it raises aborts the parse.
    """

    short_name: str | None = None
    long_name: str | None = None
    argument_mode: ArgumentMode = ArgumentMode.NO_ARGUMENT
    handler: OptionHandler | None = None

    def __post_init__(self) -> None:
        if self.short_name is not None:
            if not isinstance(self.short_name, str) or len(self.short_name) != 1:
                raise OptionDefinitionError(
                    f"short_name must be a single character, got {self.short_name!r}"
                )
            if self.short_name == "-":
                raise OptionDefinitionError("short_name cannot be '-'")
        if self.long_name is not None:
            if not isinstance(self.long_name, str) or not self.long_name:
                raise OptionDefinitionError(
                    f"long_name must be a non-empty string, got {self.long_name!r}"
                )
            if "=" in self.long_name:
                raise OptionDefinitionError(
                    f"long_name cannot contain '=': {self.long_name!r}"
                )
        if not isinstance(self.argument_mode, ArgumentMode):
            try:
                self.argument_mode = ArgumentMode(self.argument_mode)
            except ValueError as error:
                raise OptionDefinitionError(str(error)) from error
        if self.handler is not None and not callable(self.handler):
            raise OptionDefinitionError(f"handler for {self} is not callable")

    @property
    def takes_argument(self) -> bool:
        return self.argument_mode.takes_argument

    @property
    def display_name(self) -> str:
        """Return `--long` if declared, else `-s`."""
        if self.long_name is not None:
            return f"--{self.long_name}"
        if self.short_name is not None:
            return f"-{self.short_name}"
        return "<unnamed>"

    def name_for(self, name_form: NameForm) -> str:
        """Return the option as written for the given name form."""
        if name_form is NameForm.SHORT and self.short_name is not None:
            return f"-{self.short_name}"
        if name_form is NameForm.LONG and self.long_name is not None:
            return f"--{self.long_name}"
        return self.display_name

    def invoke(self, name_form: NameForm, value: str = "") -> None:
        if self.handler is not None:
            self.handler(self, name_form, value)

    def __str__(self) -> str:
        names = "/".join(
            name
            for name in (
                f"-{self.short_name}" if self.short_name is not None else None,
                f"--{self.long_name}" if self.long_name is not None else None,
            )
            if name
        )
        return f"Option({names or '<unnamed>'}, {self.argument_mode})"
