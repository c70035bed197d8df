# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `Tokenizer`, which walks an argument vector against an
`OptionRegistry` and collects raw, uncoerced values per option.

Supported forms:
- `--name value`, `--name=value`
- `-x value`, `-xvalue`, `-x=value`
- POSIX bundling of flags, optionally ending in a value-taking option
  (`-abc`, `-abcvalue`, `-abc value`)
- Value separators (`-x1,2,3`), fixed and variable arities, optional values
- `--` to end option scanning

Tokens that are not options, tokens after `--`, negative numbers and
long names written with a single hyphen (`-name` when `--name` is declared,
even if `-n` is too) are collected as the remainder. Unknown options raise
`UnknownOptionError` unless the tokenizer runs with `unknown_as_remainder`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

from optbuilder.exceptions import (
    MissingArgumentError,
    UnexpectedValueError,
    UnknownOptionError,
)
from optbuilder.logger import logger
from optbuilder.parser.arity import ArityKind
from optbuilder.parser.option import Option
from optbuilder.parser.parser_types import Occurrence
from optbuilder.parser.registry import OptionRegistry
from optbuilder.parser.utils import split_values

END_OF_OPTIONS = "--"
NEGATIVE_NUMBER = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


@dataclass
class TokenizedArgs:
    """Raw values per option (keyed by dest, in order of first appearance) and the remainder."""

    occurrences: dict[str, Occurrence] = field(default_factory=dict)
    remainder: list[str] = field(default_factory=list)

    def _occurrence(self, option: Option) -> Occurrence:
        occurrence = self.occurrences.get(option.dest)
        if occurrence is None:
            occurrence = self.occurrences[option.dest] = Occurrence(option)
        return occurrence

    def add(self, option: Option, values: list[str]) -> None:
        self._occurrence(option).add(values)

    def add_bare(self, option: Option) -> None:
        self._occurrence(option).add_bare()


class Tokenizer:
    """
    Consumes an argument vector against a registry.

    Args:
        registry (OptionRegistry): The declared options.
        accept_single_hyphen_long (bool): Match long names written with one
            hyphen (`-name`) as long options.
        unknown_as_remainder (bool): Pass unknown options through as remainder
            instead of raising `UnknownOptionError`.
        stop_at_non_option (bool): Treat the first non-option token and every
            token after it as remainder.
    """

    def __init__(
        self,
        registry: OptionRegistry,
        accept_single_hyphen_long: bool = False,
        unknown_as_remainder: bool = False,
        stop_at_non_option: bool = False,
    ) -> None:
        self.registry = registry
        self.accept_single_hyphen_long = accept_single_hyphen_long
        self.unknown_as_remainder = unknown_as_remainder
        self.stop_at_non_option = stop_at_non_option

    def _single_hyphen_long(self, token: str) -> Option | None:
        return self.registry.lookup_long(token[1:].partition("=")[0])

    def is_option_token(self, token: str) -> bool:
        """Return True if `token` would be consumed as a declared option."""
        if token == END_OF_OPTIONS:
            return True
        if token.startswith("--"):
            return self.registry.lookup_long(token[2:].partition("=")[0]) is not None
        if token.startswith("-") and len(token) > 1:
            if self._single_hyphen_long(token):
                return self.accept_single_hyphen_long
            return self.registry.lookup_short(token[1]) is not None
        return False

    def _count_available(self, args: Sequence[str], start: int) -> int:
        """Count the consecutive tokens from `start` usable as option values."""
        count = 0
        for token in args[start:]:
            if self.is_option_token(token):
                break
            count += 1
        return count

    def _unknown(self, token: str, option_text: str, result: TokenizedArgs) -> None:
        if self.unknown_as_remainder:
            logger.debug("Passing unknown option '%s' through as remainder", token)
            result.remainder.append(token)
            return
        prefix = option_text.lstrip("-")
        candidates = [
            f"--{name}" for name in self.registry.long_names if name.startswith(prefix)
        ]
        if candidates and option_text.startswith("--"):
            message = (
                f"Unrecognized option '{option_text}'. "
                f"Did you mean one of: {', '.join(candidates)}?"
            )
        else:
            message = f"Unrecognized option '{option_text}' in '{token}'"
        raise UnknownOptionError(option_text, message)

    def _add_attached(self, option: Option, attached: str, result: TokenizedArgs) -> None:
        if not attached and (option.optional_arg or option.arity.kind == ArityKind.ANY):
            result.add_bare(option)
        else:
            result.add(option, split_values(attached, option.value_separator))

    def _consume(
        self,
        option: Option,
        flag: str,
        args: Sequence[str],
        start: int,
        result: TokenizedArgs,
    ) -> int:
        """Consume the values of `option` from whole tokens following it."""
        separator = option.value_separator
        kind = option.arity.kind
        available = self._count_available(args, start)

        if kind == ArityKind.ONE and available:
            result.add(option, split_values(args[start], separator))
            return start + 1
        elif kind == ArityKind.FIXED:
            assert option.arity.count is not None
            needed = option.arity.count
            if available and separator and separator in args[start]:
                result.add(option, split_values(args[start], separator))
                return start + 1
            if available >= needed:
                result.add(option, list(args[start : start + needed]))
                return start + needed
            raise MissingArgumentError(
                flag, f"Option '{flag}' expects {needed} values, got {available}"
            )
        elif option.arity.is_variable and available:
            values: list[str] = []
            for token in args[start : start + available]:
                values.extend(split_values(token, separator))
            result.add(option, values)
            return start + available

        if option.optional_arg or kind == ArityKind.ANY:
            result.add_bare(option)
            return start
        raise MissingArgumentError(flag)

    def _handle_long(
        self, token: str, prefix_length: int, args: Sequence[str], i: int, result: TokenizedArgs
    ) -> int:
        name, separator, attached = token[prefix_length:].partition("=")
        option = self.registry.lookup_long(name)
        flag = f"{token[:prefix_length]}{name}"
        if option is None:
            self._unknown(token, flag, result)
            return i + 1
        if option.is_flag:
            if separator:
                raise UnexpectedValueError(flag, attached)
            result.add(option, [])
            return i + 1
        if separator:
            self._add_attached(option, attached, result)
            return i + 1
        return self._consume(option, flag, args, i + 1, result)

    def _handle_short(
        self, token: str, args: Sequence[str], i: int, result: TokenizedArgs
    ) -> int:
        if self._single_hyphen_long(token):
            if self.accept_single_hyphen_long:
                return self._handle_long(token, 1, args, i, result)
            logger.debug("Passing '%s' through as remainder", token)
            result.remainder.append(token)
            return i + 1

        body = token[1:]
        if self.registry.lookup_short(body[0]) is None:
            if NEGATIVE_NUMBER.match(token):
                logger.debug("Passing '%s' through as remainder", token)
                result.remainder.append(token)
            else:
                self._unknown(token, f"-{body[0]}", result)
            return i + 1

        for position, char in enumerate(body):
            option = self.registry.lookup_short(char)
            if option is None:
                if char == "=":
                    raise UnexpectedValueError(f"-{body[position - 1]}", body[position + 1 :])
                raise UnknownOptionError(
                    f"-{char}", f"Unrecognized option '-{char}' in '{token}'"
                )
            if option.is_flag:
                result.add(option, [])
                continue
            attached = body[position + 1 :]
            if attached:
                if attached.startswith("="):
                    attached = attached[1:]
                self._add_attached(option, attached, result)
                return i + 1
            return self._consume(option, f"-{char}", args, i + 1, result)
        return i + 1

    def tokenize(self, args: Sequence[str]) -> TokenizedArgs:
        """
        Walk `args` left to right and collect raw option values and the remainder.

        Raises:
            UnknownOptionError: For undeclared options (unless lenient).
            MissingArgumentError: If an option cannot collect its values.
            UnexpectedValueError: If a value is attached to a flag.
        """
        result = TokenizedArgs()
        i = 0
        while i < len(args):
            token = args[i]
            if token == END_OF_OPTIONS:
                result.remainder.extend(args[i + 1 :])
                break
            if token.startswith("--"):
                i = self._handle_long(token, 2, args, i, result)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short(token, args, i, result)
            elif self.stop_at_non_option:
                result.remainder.extend(args[i:])
                break
            else:
                result.remainder.append(token)
                i += 1
        return result
