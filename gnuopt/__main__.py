# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
`gnuopt` command: parse command-line parameters the way getopt(1) does and print
them in normalized form, ready for `eval set -- "$(...)"` in shell scripts.

    gnuopt [OPTIONS] -- PARAMETERS...
    gnuopt [OPTIONS] SHORTOPTS PARAMETERS...

Options are parsed with `gnuopt.Getopt` itself.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Sequence

from rich.markup import escape

from gnuopt.config import load_options
from gnuopt.console import console, error_console
from gnuopt.exceptions import GetoptError, GnuoptError
from gnuopt.getopt import Getopt
from gnuopt.logger import logger
from gnuopt.option import ArgumentMode, NameForm, Option
from gnuopt.optstring import options_from_optstring
from gnuopt.resolver import OptionResolver
from gnuopt.tokens import TokenKind, classify_token, split_on_equals
from gnuopt.utils import setup_logging
from gnuopt.version import __version__

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_TEST = 4

USAGE = """\
Usage:
 gnuopt [options] [--] <optstring> <parameters>
 gnuopt [options] -o|--options <optstring> [options] [--] <parameters>

Parse command options.

Options:
 -a, --alternative             allow long options starting with single -
 -b, --abbrev                  allow long options to be abbreviated
 -c, --config <file>           load options from a YAML or TOML file
 -l, --longoptions <longopts>  the long options to be recognized
 -n, --name <progname>         the name under which errors are reported
 -o, --options <optstring>     the short options to be recognized
 -q, --quiet                   disable error reporting by getopt(3)
 -T, --test                    test for getopt(1) version
 -u, --unquoted                do not quote the output
     --log-mode <mode>         log to stderr as 'cli' or 'json'
     --debug                   log every parsing step
 -h, --help                    display this help
 -V, --version                 display version"""


@dataclass
class Settings:
    alternative: bool = False
    abbrev: bool = False
    config: str | None = None
    longoptions: list[str] = field(default_factory=list)
    name: str = "gnuopt"
    shortopts: str | None = None
    quiet: bool = False
    test: bool = False
    unquoted: bool = False
    log_mode: str | None = None
    debug: bool = False
    help: bool = False
    version: bool = False


def quote(value: str) -> str:
    """Single-quote `value` for a POSIX shell."""
    return "'" + value.replace("'", "'\\''") + "'"


def build_cli_options(settings: Settings) -> list[Option]:
    """Return the option table for gnuopt's own command line."""

    def store_true(option: Option, name_form: NameForm, value: str) -> None:
        setattr(settings, (option.long_name or "").replace("-", "_"), True)

    def store(option: Option, name_form: NameForm, value: str) -> None:
        setattr(settings, (option.long_name or "").replace("-", "_"), value)

    def store_shortopts(option: Option, name_form: NameForm, value: str) -> None:
        settings.shortopts = value

    def append_longopts(option: Option, name_form: NameForm, value: str) -> None:
        settings.longoptions.append(value)

    required = ArgumentMode.REQUIRED_ARGUMENT
    return [
        Option("a", "alternative", handler=store_true),
        Option("b", "abbrev", handler=store_true),
        Option("c", "config", required, handler=store),
        Option("l", "longoptions", required, handler=append_longopts),
        Option("n", "name", required, handler=store),
        Option("o", "options", required, handler=store_shortopts),
        Option("q", "quiet", handler=store_true),
        Option("T", "test", handler=store_true),
        Option("u", "unquoted", handler=store_true),
        Option(None, "log-mode", required, handler=store),
        Option(None, "debug", handler=store_true),
        Option("h", "help", handler=store_true),
        Option("V", "version", handler=store_true),
    ]


def normalize(
    getopt: Getopt, parameters: Sequence[str], unquoted: bool = False
) -> str:
    """
    Parse `parameters` with `getopt` and return them in getopt(1) output form:
    every option followed by its argument, then `--`, then the positional
    parameters.
    """
    words: list[str] = []
    render = (lambda value: value) if unquoted else quote

    def record(option: Option, name_form: NameForm, value: str) -> None:
        words.append(option.name_for(name_form))
        if option.takes_argument:
            words.append(render(value))

    recorded = [
        Option(option.short_name, option.long_name, option.argument_mode, record)
        for option in getopt.options
    ]
    runner = Getopt(
        recorded,
        allow_abbrev=getopt.allow_abbrev,
        allow_alternative=getopt.allow_alternative,
        prefer_exact_match=getopt.prefer_exact_match,
        allow_detached_optional=getopt.allow_detached_optional,
    )
    runner.parse(parameters)
    words.append("--")
    words.extend(render(arg) for arg in runner.args())
    return " " + " ".join(words)


def own_options_end(cli: Getopt, argv: Sequence[str]) -> int:
    """
    Return the index where gnuopt's own options end in `argv`: the first
    positional parameter, or the token after `--`.

    Arguments of `-o`, `-l`, `-n` and `-c` are
    skipped. A token that is not one of gnuopt's options ends the scan after
    itself, leaving the error to `cli.parse()`.
    """
    resolver = OptionResolver(cli.options, allow_abbrev=cli.allow_abbrev)
    index = 1
    while index < len(argv):
        kind = classify_token(argv[index])
        if kind is TokenKind.TERMINATOR:
            return index + 1
        if kind is TokenKind.POSITIONAL:
            return index
        split = split_on_equals(argv[index])
        consumes_next = False
        try:
            if kind is TokenKind.LONG_OPTION:
                option = resolver.resolve_long(split.name[2:])
                consumes_next = option.takes_argument and not split.has_value
            else:
                cluster = split.name[1:]
                for position, char in enumerate(cluster):
                    if resolver.resolve_short(char).takes_argument:
                        consumes_next = (
                            position == len(cluster) - 1 and not split.has_value
                        )
                        break
        except GetoptError:
            return index + 1
        index += 2 if consumes_next else 1
    return len(argv)


def build_target(settings: Settings) -> Getopt:
    if settings.config and (settings.shortopts is not None or settings.longoptions):
        raise ValueError("--config cannot be combined with --options or --longoptions")
    if settings.config:
        target = load_options(settings.config).to_getopt()
    else:
        target = Getopt(
            options_from_optstring(settings.shortopts or "", settings.longoptions)
        )
    if settings.alternative:
        target.allow_alternative = True
    if settings.abbrev:
        target.allow_abbrev = True
    return target


def report(message: str, program: str = "gnuopt", hint: bool = False) -> None:
    error_console.print(
        f"[error]{escape(program)}:[/] {escape(message)}", soft_wrap=True
    )
    if hint:
        error_console.print("Try 'gnuopt --help' for more information.", soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    settings = Settings()
    cli = Getopt(build_cli_options(settings), allow_abbrev=True)
    cut = own_options_end(cli, argv)
    try:
        cli.parse(argv[:cut])
    except GetoptError as error:
        report(str(error), hint=True)
        return EXIT_USAGE_ERROR

    if settings.log_mode or settings.debug:
        try:
            setup_logging(
                mode=settings.log_mode,
                console_log_level=logging.DEBUG if settings.debug else logging.WARNING,
            )
        except ValueError as error:
            report(str(error))
            return EXIT_USAGE_ERROR

    if settings.help:
        console.print(USAGE, markup=False, soft_wrap=True)
        return EXIT_OK
    if settings.version:
        console.print(f"gnuopt {__version__}", markup=False)
        return EXIT_OK
    if settings.test:
        return EXIT_TEST

    parameters = cli.args() + argv[cut:]
    if settings.shortopts is None and not settings.config:
        if not parameters:
            report("missing optstring argument", hint=True)
            return EXIT_USAGE_ERROR
        settings.shortopts, parameters = parameters[0], parameters[1:]

    try:
        target = build_target(settings)
    except (GnuoptError, OSError, ValueError) as error:
        report(str(error))
        return EXIT_USAGE_ERROR

    logger.debug("Parsing %d parameters with %s", len(parameters), target)
    try:
        output = normalize(target, [settings.name, *parameters], settings.unquoted)
    except GetoptError as error:
        if not settings.quiet:
            report(str(error), program=settings.name)
        return EXIT_PARSE_ERROR

    console.print(output, markup=False, soft_wrap=True)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
