# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Looks up declared options by short character or long name.

`OptionResolver` scans the option table in declaration order. Short names match
exactly and the first declaration wins. Long names match exactly, or by prefix
when abbreviations are allowed, in which case a prefix shared by two or more
long names is an error naming every candidate.

In alternative mode an unknown short character is not an error:
`resolve_short()` returns None so the caller can retry the whole token as a
long option.
"""
from __future__ import annotations

from typing import Sequence

from gnuopt.exceptions import AmbiguousOptionError, UnknownOptionError
from gnuopt.option import Option


class OptionResolver:
    """Resolves short characters and long name fragments against an option table."""

    def __init__(
        self,
        options: Sequence[Option],
        allow_abbrev: bool = False,
        allow_alternative: bool = False,
        prefer_exact_match: bool = False,
    ) -> None:
        self.options: Sequence[Option] = options
        self.allow_abbrev: bool = allow_abbrev
        self.allow_alternative: bool = allow_alternative
        self.prefer_exact_match: bool = prefer_exact_match

    def resolve_short(self, char: str) -> Option | None:
        """
        Return the first option declaring `char` as its short name.

        Returns:
            Option | None: None only in alternative mode when nothing matches.

        Raises:
            UnknownOptionError: No match and alternative mode is off.
        """
        for option in self.options:
            if option.short_name is not None and option.short_name == char:
                return option
        if self.allow_alternative:
            return None
        raise UnknownOptionError(f"invalid option -- '{char}'", option=char)

    def resolve_long(self, name: str) -> Option:
        """
        Return the option whose long name matches `name`.

        Raises:
            UnknownOptionError: No declared long name matches.
            AmbiguousOptionError: Abbreviations are allowed and `name` is a
                prefix of two or more long names.
        """
        if not self.allow_abbrev:
            for option in self.options:
                if option.long_name is not None and option.long_name == name:
                    return option
            raise UnknownOptionError(f"unrecognized option '--{name}'", option=name)

        candidates = [
            option
            for option in self.options
            if option.long_name is not None and option.long_name.startswith(name)
        ]
        if not candidates:
            raise UnknownOptionError(f"unrecognized option '--{name}'", option=name)
        if len(candidates) == 1:
            return candidates[0]
        if self.prefer_exact_match:
            for option in candidates:
                if option.long_name == name:
                    return option
        names = tuple(option.long_name for option in candidates if option.long_name)
        possibilities = " ".join(f"'--{long_name}'" for long_name in names)
        raise AmbiguousOptionError(
            f"option '--{name}' is ambiguous; possibilities: {possibilities}",
            option=name,
            candidates=names,
        )
