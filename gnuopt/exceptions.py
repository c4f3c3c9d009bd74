# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by gnuopt.

Exception Hierarchy:
- GnuoptError
    ├── OptionDefinitionError
    └── GetoptError
        ├── UnknownOptionError
        ├── AmbiguousOptionError
        └── MissingArgumentError

`GetoptError` and its subclasses are raised by `Getopt.parse()` and abort the
parse immediately. Exceptions raised by option handlers are never wrapped in
any of these; they reach the caller unchanged.
"""


class GnuoptError(Exception):
    """Base exception for gnuopt."""


class OptionDefinitionError(GnuoptError):
    """Exception raised when an option table, option string or config is invalid."""


class GetoptError(GnuoptError):
    """Exception raised when the argument vector cannot be parsed."""

    def __init__(self, message: str, option: str = ""):
        super().__init__(message)
        self.message = message
        self.option = option


class UnknownOptionError(GetoptError):
    """Exception raised when a short or long option is not declared."""


class AmbiguousOptionError(GetoptError):
    """Exception raised when a long option abbreviation matches several options."""

    def __init__(self, message: str, option: str = "", candidates: tuple[str, ...] = ()):
        super().__init__(message, option)
        self.candidates = candidates


class MissingArgumentError(GetoptError):
    """Exception raised when an option requiring an argument has none."""
