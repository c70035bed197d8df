"""
Optbuilder CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ConversionError,
    DuplicateOptionError,
    InvalidOptionError,
    MissingArgumentError,
    OptbuilderError,
    ParseError,
    RegistryFrozenError,
    UnexpectedValueError,
    UnknownOptionError,
    UsageTemplateError,
)
from .logger import logger
from .parser import Arity, Option, OptionParser, ParseResult, UsageMessage
from .version import __version__

__all__ = [
    "Arity",
    "ConversionError",
    "DuplicateOptionError",
    "InvalidOptionError",
    "MissingArgumentError",
    "OptbuilderError",
    "Option",
    "OptionParser",
    "ParseError",
    "ParseResult",
    "RegistryFrozenError",
    "UnexpectedValueError",
    "UnknownOptionError",
    "UsageMessage",
    "UsageTemplateError",
    "logger",
    "__version__",
]
