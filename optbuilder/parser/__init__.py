"""
Optbuilder CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arity import Arity, ArityKind
from .option import Option
from .option_parser import OptionParser
from .parser_types import OptionValue, ValueKind
from .registry import OptionRegistry
from .result import ParseResult, ResultBuilder
from .tokenizer import Tokenizer
from .usage import UsageMessage, UsageRenderer

__all__ = [
    "Arity",
    "ArityKind",
    "Option",
    "OptionParser",
    "OptionRegistry",
    "OptionValue",
    "ParseResult",
    "ResultBuilder",
    "Tokenizer",
    "UsageMessage",
    "UsageRenderer",
    "ValueKind",
]
