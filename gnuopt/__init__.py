"""
gnuopt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import OptionTableConfig, load_options
from .exceptions import (
    AmbiguousOptionError,
    GetoptError,
    GnuoptError,
    MissingArgumentError,
    OptionDefinitionError,
    UnknownOptionError,
)
from .getopt import Getopt
from .logger import logger
from .option import ArgumentMode, NameForm, Option, OptionHandler
from .optstring import options_from_optstring
from .version import __version__

__all__ = [
    "Getopt",
    "Option",
    "OptionHandler",
    "ArgumentMode",
    "NameForm",
    "GnuoptError",
    "GetoptError",
    "UnknownOptionError",
    "AmbiguousOptionError",
    "MissingArgumentError",
    "OptionDefinitionError",
    "options_from_optstring",
    "load_options",
    "OptionTableConfig",
    "logger",
    "__version__",
]
