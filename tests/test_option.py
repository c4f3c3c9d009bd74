import pytest

from gnuopt import ArgumentMode, NameForm, Option, OptionDefinitionError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("none", ArgumentMode.NO_ARGUMENT),
        ("", ArgumentMode.NO_ARGUMENT),
        ("no_argument", ArgumentMode.NO_ARGUMENT),
        ("Required", ArgumentMode.REQUIRED_ARGUMENT),
        (":", ArgumentMode.REQUIRED_ARGUMENT),
        ("required-argument", ArgumentMode.REQUIRED_ARGUMENT),
        ("::", ArgumentMode.OPTIONAL_ARGUMENT),
        ("optional", ArgumentMode.OPTIONAL_ARGUMENT),
    ],
)
def test_argument_mode_aliases(value, expected):
    assert ArgumentMode(value) is expected


def test_argument_mode_invalid():
    with pytest.raises(ValueError, match="Must be one of: none, required, optional"):
        ArgumentMode("sometimes")
    with pytest.raises(ValueError):
        ArgumentMode(3)


def test_argument_mode_takes_argument():
    assert not ArgumentMode.NO_ARGUMENT.takes_argument
    assert ArgumentMode.REQUIRED_ARGUMENT.takes_argument
    assert ArgumentMode.OPTIONAL_ARGUMENT.takes_argument
    assert str(ArgumentMode.OPTIONAL_ARGUMENT) == "optional"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"short_name": "ab"},
        {"short_name": ""},
        {"short_name": "-"},
        {"long_name": ""},
        {"long_name": "a=b"},
        {"long_name": "x", "argument_mode": "maybe"},
        {"long_name": "x", "handler": "not callable"},
    ],
)
def test_invalid_option(kwargs):
    with pytest.raises(OptionDefinitionError):
        Option(**kwargs)


def test_option_names():
    both = Option("v", "verbose", "required")
    short = Option("x")
    unnamed = Option()
    assert both.argument_mode is ArgumentMode.REQUIRED_ARGUMENT
    assert both.display_name == "--verbose"
    assert both.name_for(NameForm.SHORT) == "-v"
    assert both.name_for(NameForm.LONG) == "--verbose"
    assert short.display_name == "-x"
    assert short.name_for(NameForm.LONG) == "-x"
    assert unnamed.display_name == "<unnamed>"
    assert str(both) == "Option(-v/--verbose, required)"
    assert str(unnamed) == "Option(<unnamed>, none)"


def test_options_compare_by_identity():
    assert Option("v", "verbose") != Option("v", "verbose")


def test_invoke_without_handler():
    Option("v").invoke(NameForm.SHORT)
