import pytest

from gnuopt import AmbiguousOptionError, Option, UnknownOptionError
from gnuopt.resolver import OptionResolver

OPTIONS = [
    Option("h", "help"),
    Option("v", "verbose"),
    Option(None, "version"),
    Option("x", None),
]


def test_resolve_short_returns_table_entry():
    resolver = OptionResolver(OPTIONS)
    assert resolver.resolve_short("v") is OPTIONS[1]
    assert resolver.resolve_short("x") is OPTIONS[3]


def test_resolve_short_unknown():
    resolver = OptionResolver(OPTIONS)
    with pytest.raises(UnknownOptionError, match="invalid option -- 'q'"):
        resolver.resolve_short("q")


def test_resolve_short_unknown_in_alternative_mode():
    resolver = OptionResolver(OPTIONS, allow_alternative=True)
    assert resolver.resolve_short("q") is None


def test_resolve_long_exact():
    resolver = OptionResolver(OPTIONS)
    assert resolver.resolve_long("version") is OPTIONS[2]
    with pytest.raises(UnknownOptionError):
        resolver.resolve_long("vers")


def test_resolve_long_abbrev():
    resolver = OptionResolver(OPTIONS, allow_abbrev=True)
    assert resolver.resolve_long("h") is OPTIONS[0]
    assert resolver.resolve_long("verb") is OPTIONS[1]
    assert resolver.resolve_long("versi") is OPTIONS[2]


def test_resolve_long_ambiguous_names_all_candidates():
    resolver = OptionResolver(OPTIONS, allow_abbrev=True)
    with pytest.raises(AmbiguousOptionError) as excinfo:
        resolver.resolve_long("ver")
    assert excinfo.value.candidates == ("verbose", "version")


def test_resolve_long_empty_fragment():
    resolver = OptionResolver([Option("h", "help")], allow_abbrev=True)
    assert resolver.resolve_long("").long_name == "help"
    with pytest.raises(UnknownOptionError):
        OptionResolver([Option("h", "help")]).resolve_long("")


def test_resolve_long_skips_short_only_options():
    resolver = OptionResolver([Option("x", None)], allow_abbrev=True)
    with pytest.raises(UnknownOptionError):
        resolver.resolve_long("x")
