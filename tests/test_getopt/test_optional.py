import pytest

from gnuopt import ArgumentMode, Getopt, Option


def make_getopt(recorder, **kwargs) -> Getopt:
    return Getopt(
        [
            Option("h", "help", ArgumentMode.NO_ARGUMENT, recorder),
            Option("v", "verbose", ArgumentMode.NO_ARGUMENT, recorder),
            Option("a", "daa", ArgumentMode.NO_ARGUMENT, recorder),
            Option("b", "cba", ArgumentMode.OPTIONAL_ARGUMENT, recorder),
        ],
        allow_abbrev=True,
        **kwargs,
    )


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["PROG", "--cba"], ["--cba", "{}", "--"]),
        (["PROG", "-b"], ["-b", "{}", "--"]),
        (["PROG", "-b", "-v"], ["-b", "{}", "-v", "--"]),
        (["PROG", "-b", "value"], ["-b", "{}", "--", "{value}"]),
        (["PROG", "--cba", "value"], ["--cba", "{}", "--", "{value}"]),
        (["PROG", "-bvalue"], ["-b", "{value}", "--"]),
        (["PROG", "-b=value"], ["-b", "{value}", "--"]),
        (["PROG", "-ab="], ["-a", "-b", "{}", "--"]),
        (["PROG", "--cba=value"], ["--cba", "{value}", "--"]),
        (["PROG", "--cb="], ["--cba", "{}", "--"]),
    ],
)
def test_optional_argument(recorder, argv, expected):
    getopt = make_getopt(recorder)
    getopt.parse(argv)
    assert recorder.result(getopt) == expected


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["PROG", "-b", "-v"], ["-b", "{-v}", "--"]),
        (["PROG", "--cba", "value"], ["--cba", "{value}", "--"]),
        (["PROG", "-b"], ["-b", "{}", "--"]),
        (["PROG", "-bvalue", "next"], ["-b", "{value}", "--", "{next}"]),
    ],
)
def test_detached_optional_argument(recorder, argv, expected):
    getopt = make_getopt(recorder, allow_detached_optional=True)
    getopt.parse(argv)
    assert recorder.result(getopt) == expected


def test_detached_optional_is_off_by_default(recorder):
    """`-b -v` parses `-v` as an option unless detached optionals are enabled."""
    assert Getopt().allow_detached_optional is False
    getopt = make_getopt(recorder)
    getopt.parse(["PROG", "-b", "-v", "--cba", "-v"])
    assert recorder.result(getopt) == ["-b", "{}", "-v", "--cba", "{}", "-v", "--"]
