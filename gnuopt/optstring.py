# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds option tables from getopt(3) style option strings.

Short options are written as a string of characters, each optionally followed by
`:` (required argument) or `::` (optional argument), e.g. `"ab:c::"`. Long
options are a list or a comma/space separated string of names with the same
suffixes, e.g. `"alpha,beta:,gamma::"`.

Each short and each long option becomes its own `Option`; the two forms are not
paired, as in getopt(1).
"""
from __future__ import annotations

import re
from typing import Iterable

from gnuopt.exceptions import OptionDefinitionError
from gnuopt.option import ArgumentMode, Option, OptionHandler


def _suffix_mode(suffix: str) -> ArgumentMode:
    try:
        return ArgumentMode(suffix)
    except ValueError as error:
        raise OptionDefinitionError(f"Invalid argument suffix {suffix!r}") from error


def parse_shortopts(shortopts: str) -> list[tuple[str, ArgumentMode]]:
    """Split a short option string into `(char, mode)` pairs."""
    if shortopts[:1] in ("+", "-"):
        raise OptionDefinitionError(
            f"Scanning mode prefix {shortopts[0]!r} is not supported"
        )
    parsed: list[tuple[str, ArgumentMode]] = []
    index = 0
    while index < len(shortopts):
        char = shortopts[index]
        if char in (":", "-", "=") or char.isspace():
            raise OptionDefinitionError(
                f"Invalid short option character {char!r} in {shortopts!r}"
            )
        colons = len(shortopts[index + 1 :]) - len(shortopts[index + 1 :].lstrip(":"))
        if colons > 2:
            raise OptionDefinitionError(f"Too many ':' after {char!r} in {shortopts!r}")
        parsed.append((char, _suffix_mode(":" * colons)))
        index += 1 + colons
    return parsed


def parse_longopts(longopts: str | Iterable[str]) -> list[tuple[str, ArgumentMode]]:
    """Split long option declarations into `(name, mode)` pairs."""
    if isinstance(longopts, str):
        longopts = [longopts]
    entries = [
        entry for item in longopts for entry in re.split(r"[,\s]+", item) if entry
    ]
    parsed: list[tuple[str, ArgumentMode]] = []
    for entry in entries:
        name = entry.rstrip(":")
        suffix = entry[len(name) :]
        if not name or name.startswith("-") or "=" in name:
            raise OptionDefinitionError(f"Invalid long option {entry!r}")
        if len(suffix) > 2:
            raise OptionDefinitionError(f"Too many ':' in long option {entry!r}")
        parsed.append((name, _suffix_mode(suffix)))
    return parsed


def options_from_optstring(
    shortopts: str = "",
    longopts: str | Iterable[str] = (),
    handler: OptionHandler | None = None,
) -> list[Option]:
    """
    Build an option table from getopt(3) notation.

    Args:
        shortopts (str): Short options, e.g. `"ab:c::"`.
        longopts (str | Iterable[str]): Long options, e.g. `"alpha,beta:"`.
        handler (OptionHandler | None): Handler shared by every option.

    Raises:
        OptionDefinitionError: The notation is invalid or declares a name twice.
    """
    options: list[Option] = []
    seen: set[str] = set()
    for char, mode in parse_shortopts(shortopts):
        if f"-{char}" in seen:
            raise OptionDefinitionError(f"Duplicate short option '-{char}'")
        seen.add(f"-{char}")
        options.append(Option(char, None, mode, handler))
    for name, mode in parse_longopts(longopts):
        if f"--{name}" in seen:
            raise OptionDefinitionError(f"Duplicate long option '--{name}'")
        seen.add(f"--{name}")
        options.append(Option(None, name, mode, handler))
    return options
