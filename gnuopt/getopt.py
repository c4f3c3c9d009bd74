# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Getopt`, a GNU getopt-style tokenizer for command-line
argument vectors.

A short option is a `-` followed by one character. Several short options may
share one dash (`-abc`) as long as only the last takes an argument. A required
argument is written directly after the character (`-ofile`), after an `=`
(`-o=file`) or as the next token (`-o file`). An optional argument must be
attached.

A long option is `--` followed by its name. A required argument is written after
an `=` (`--output=file`) or as the next token. An optional argument must follow
an `=`. Long options may be abbreviated while the abbreviation is unambiguous,
and in alternative mode they may start with a single dash.

Every token that is neither an option nor an option's argument is a positional
parameter. Positional parameters do not stop option scanning; only `--` does,
and every token after it is positional.

Example Usage:
    def on_option(option, name_form, value):
        print(option.name_for(name_form), value)

    getopt = Getopt(
        [
            Option("v", "verbose", handler=on_option),
            Option("o", "output", ArgumentMode.REQUIRED_ARGUMENT, handler=on_option),
        ],
        allow_abbrev=True,
    )
    getopt.parse(["prog", "-vo", "out.txt", "input.txt", "--verb"])
    getopt.args()  # ['input.txt']
"""
from __future__ import annotations

from typing import Sequence

from gnuopt.exceptions import MissingArgumentError
from gnuopt.logger import logger
from gnuopt.option import ArgumentMode, NameForm, Option
from gnuopt.resolver import OptionResolver
from gnuopt.tokens import TokenKind, classify_token, split_on_equals


class Getopt:
    """
    GNU-like parser for command-line arguments.

    Matched options are dispatched to their handlers in command-line order and
    positional parameters are collected for `args()`.

    Attributes:
        options (Sequence[Option]): The option table, read only while parsing.
        allow_abbrev (bool): Long options may be abbreviated while unambiguous.
        allow_alternative (bool): Long options may start with a single `-`. An
            unknown short option character makes the whole token a long option.
        prefer_exact_match (bool): With abbreviations, a name that is declared
            exactly wins over longer names it prefixes instead of being ambiguous.
        allow_detached_optional (bool): Optional arguments may also be taken
            from the next token. Off by default, so `-b -v` gives `b` an empty
            argument and `-v` is parsed as an option, as in GNU getopt. Turning
            it on gives `b` the argument `-v`.

    A single instance must not be shared by concurrent `parse()` calls.
    """

    def __init__(
        self,
        options: Sequence[Option] | None = None,
        allow_abbrev: bool = False,
        allow_alternative: bool = False,
        prefer_exact_match: bool = False,
        allow_detached_optional: bool = False,
    ) -> None:
        self.options: Sequence[Option] = tuple(options or ())
        self.allow_abbrev: bool = allow_abbrev
        self.allow_alternative: bool = allow_alternative
        self.prefer_exact_match: bool = prefer_exact_match
        self.allow_detached_optional: bool = allow_detached_optional
        self._args: list[str] = []

    def args(self) -> list[str]:
        """Return the positional parameters collected by the last `parse()` call."""
        return list(self._args)

    def _resolver(self) -> OptionResolver:
        return OptionResolver(
            self.options,
            allow_abbrev=self.allow_abbrev,
            allow_alternative=self.allow_alternative,
            prefer_exact_match=self.prefer_exact_match,
        )

    def _takes_detached(self, option: Option) -> bool:
        if option.argument_mode is ArgumentMode.REQUIRED_ARGUMENT:
            return True
        return (
            option.argument_mode is ArgumentMode.OPTIONAL_ARGUMENT
            and self.allow_detached_optional
        )

    def _dispatch(self, option: Option, name_form: NameForm, value: str) -> None:
        logger.debug("Matched %s -> %r", option.name_for(name_form), value)
        option.invoke(name_form, value)

    def _parse_short_cluster(
        self, resolver: OptionResolver, argv: Sequence[str], index: int
    ) -> tuple[int, str | None]:
        """
        Process the short option cluster at `argv[index]`.

        Returns:
            tuple[int, str | None]: The index of the last token consumed and,
            when the cluster has to be read as a long option instead, the
            rewritten `--name[=value]` token.
        """
        split = split_on_equals(argv[index])
        cluster = split.name[1:]
        for position, char in enumerate(cluster):
            option = resolver.resolve_short(char)
            if option is None:
                return index, split.rejoin(prefix="-")
            if not option.takes_argument:
                self._dispatch(option, NameForm.SHORT, "")
                continue

            remainder = cluster[position + 1 :]
            if split.has_value:
                value = split.value
            elif remainder:
                value = remainder
            elif index + 1 < len(argv) and self._takes_detached(option):
                index += 1
                value = argv[index]
            elif option.argument_mode is ArgumentMode.REQUIRED_ARGUMENT:
                raise MissingArgumentError(
                    f"option requires an argument -- '{char}'", option=char
                )
            else:
                value = ""
            self._dispatch(option, NameForm.SHORT, value)
            break
        else:
            if split.has_value:
                logger.debug("Dropped '=%s' from %r", split.value, argv[index])
        return index, None

    def _parse_long_option(
        self, resolver: OptionResolver, argv: Sequence[str], index: int, token: str
    ) -> int:
        """Process the long option `token` found at `argv[index]`.

        Returns the index of the last token consumed.
        """
        split = split_on_equals(token)
        option = resolver.resolve_long(split.name[2:])
        value = ""
        if option.takes_argument:
            if split.has_value:
                value = split.value
            elif index + 1 < len(argv) and self._takes_detached(option):
                index += 1
                value = argv[index]
            elif option.argument_mode is ArgumentMode.REQUIRED_ARGUMENT:
                raise MissingArgumentError(
                    f"option '--{option.long_name}' requires an argument",
                    option=option.long_name or "",
                )
        self._dispatch(option, NameForm.LONG, value)
        return index

    def parse(self, argv: Sequence[str]) -> None:
        """
        Parse an argument vector, dispatching matched options to their handlers.

        `argv[0]` is the program name and is skipped. `argv` is not modified.
        On failure, `args()` holds the positional parameters seen before the
        failing token.

        Raises:
            UnknownOptionError: An option is not declared.
            AmbiguousOptionError: A long option abbreviation is ambiguous.
            MissingArgumentError: A required argument is missing.
            Exception: Anything raised by a handler, unchanged.
        """
        self._args = []
        resolver = self._resolver()
        index = 1
        while index < len(argv):
            token = argv[index]
            kind = classify_token(token)
            if kind is TokenKind.TERMINATOR:
                logger.debug("End of options at index %d", index)
                self._args.extend(argv[index + 1 :])
                return

            if kind is TokenKind.SHORT_CLUSTER:
                index, long_token = self._parse_short_cluster(resolver, argv, index)
                if long_token is not None:
                    logger.debug("Reading %r as long option %r", token, long_token)
                    index = self._parse_long_option(resolver, argv, index, long_token)
            elif kind is TokenKind.LONG_OPTION:
                index = self._parse_long_option(resolver, argv, index, token)
            else:
                logger.debug("Positional parameter %r", token)
                self._args.append(token)
            index += 1

    def __str__(self) -> str:
        return (
            f"Getopt(options={len(self.options)}, "
            f"allow_abbrev={self.allow_abbrev}, "
            f"allow_alternative={self.allow_alternative})"
        )

    def __repr__(self) -> str:
        return str(self)
