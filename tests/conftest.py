import logging

import pytest

from gnuopt import Getopt, NameForm, Option


class Recorder:
    """Records handler calls as `-x` / `--name` followed by `{value}` for
    options that take an argument, then `--` and `{positional}` entries."""

    def __init__(self) -> None:
        self.events: list[str] = []

    def __call__(self, option: Option, name_form: NameForm, value: str) -> None:
        if name_form is NameForm.SHORT:
            self.events.append(f"-{option.short_name}")
        else:
            self.events.append(f"--{option.long_name}")
        if option.takes_argument:
            self.events.append(f"{{{value}}}")

    def result(self, getopt: Getopt) -> list[str]:
        return [*self.events, "--", *(f"{{{arg}}}" for arg in getopt.args())]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def restore_root_logger():
    """Undo `setup_logging()` changes to the root logger after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
