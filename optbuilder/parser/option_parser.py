# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the declarative entry point of optbuilder.
It ties together option registration, tokenizing, coercion and usage rendering.

Key Features:
- Declarative option registration via `add_option()`
- Short, long and single-hyphen long names (`-v`, `--verbose`, `-logfile`)
- Fixed and variable arities, optional values and value separators
- Type coercion to scalars, arrays (`list[int]`) and maps (`dict[str, int]`)
- Custom per-value converters and raw-string defaults
- POSIX-style bundling of single-character flags (`-abc`)
- Configurable handling of unknown options and of the first non-option token
- Plain-text usage rendering with synopsis, headings and a wrapped option table

Public Interface:
- `add_option(...)`: Declare an option.
- `register(option)`: Register a prebuilt `Option`.
- `parse(args)`: Parse an argument vector into a `ParseResult`.
- `get_usage()`: Render the usage message as a string.
- `print_usage(file)`: Write the usage message to a text sink.

Example Usage:
    parser = OptionParser(name="greeter")
    parser.add_option("-h", "--help", help="display usage")
    parser.add_option("-a", "--audience", help="greeting audience")

    result = parser.parse(["--audience", "Groovologist", "foo"])

    # result.value("audience") == "Groovologist"
    # result.arguments() == ["foo"]

Options may be added until the first call to `parse()`; the registry is frozen
from then on so that every parse sees the same declarations.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence, TextIO

from optbuilder.console import get_console
from optbuilder.exceptions import InvalidOptionError, OptbuilderError
from optbuilder.logger import logger
from optbuilder.parser.arity import Arity
from optbuilder.parser.option import Option
from optbuilder.parser.registry import OptionRegistry
from optbuilder.parser.result import ParseResult, ResultBuilder
from optbuilder.parser.tokenizer import Tokenizer
from optbuilder.parser.usage import UsageMessage, UsageRenderer
from optbuilder.utils import get_program_invocation


class OptionParser:
    """
    Declarative command-line option parser.

    Args:
        name (str | None): Command name shown in the synopsis. Defaults to the
            program invocation.
        usage (str | None): Template replacing the generated synopsis.
        usage_message (UsageMessage | None): Headings, text sections and layout.
        header (Sequence[str] | str | None): Shorthand for `usage_message.header`.
        description (Sequence[str] | str | None): Shorthand for
            `usage_message.description`.
        footer (Sequence[str] | str | None): Shorthand for `usage_message.footer`.
        sort_options (bool | None): Sort the option table alphabetically.
        width (int | None): Total width of the usage message.
        accept_single_hyphen_long (bool): Accept `-name` for long options.
        unknown_as_remainder (bool): Pass unknown options through as remainder.
        stop_at_non_option (bool): Stop option scanning at the first non-option.
    """

    def __init__(
        self,
        name: str | None = None,
        usage: str | None = None,
        usage_message: UsageMessage | None = None,
        header: Sequence[str] | str | None = None,
        description: Sequence[str] | str | None = None,
        footer: Sequence[str] | str | None = None,
        sort_options: bool | None = None,
        width: int | None = None,
        accept_single_hyphen_long: bool = False,
        unknown_as_remainder: bool = False,
        stop_at_non_option: bool = False,
    ) -> None:
        self.name: str = name if name is not None else get_program_invocation()
        self.usage: str | None = usage
        self.usage_message: UsageMessage = usage_message or UsageMessage()
        if header is not None:
            self.usage_message.header = header
        if description is not None:
            self.usage_message.description = description
        if footer is not None:
            self.usage_message.footer = footer
        if sort_options is not None:
            self.usage_message.sort_options = sort_options
        if width is not None:
            self.usage_message.width = width
        self.accept_single_hyphen_long = accept_single_hyphen_long
        self.registry: OptionRegistry = OptionRegistry()
        self.tokenizer = Tokenizer(
            self.registry,
            accept_single_hyphen_long=accept_single_hyphen_long,
            unknown_as_remainder=unknown_as_remainder,
            stop_at_non_option=stop_at_non_option,
        )
        self.result_builder = ResultBuilder(self.registry)

    def _get_names_from_flags(self, flags: tuple[str, ...]) -> tuple[str | None, str | None]:
        """Convert flags to a (short, long) name pair."""
        if not flags:
            raise InvalidOptionError("No flags provided")
        short: str | None = None
        long: str | None = None
        for flag in flags:
            if not isinstance(flag, str) or not flag.strip("-"):
                raise InvalidOptionError(f"Flag {flag!r} must be a non-empty string")
            name = flag[2:] if flag.startswith("--") else flag.lstrip("-")
            if len(name) == 1 and not flag.startswith("--"):
                if short is not None:
                    raise InvalidOptionError(f"Option already has short name '-{short}'")
                short = name
            else:
                if long is not None:
                    raise InvalidOptionError(f"Option already has long name '{long}'")
                long = name
        return short, long

    def _resolve_arity(
        self, arity: Any, type: Any, takes_value: bool
    ) -> tuple[Arity, Any]:
        """Infer the arity and type of an option from what was declared."""
        if arity is None:
            if type in (None, bool) and not takes_value:
                return Arity.ZERO, bool
            return Arity.ONE, str if type is None else type
        resolved = Arity.parse(arity)
        if type is None:
            type = bool if resolved == Arity.ZERO else str
        return resolved, type

    def add_option(
        self,
        *flags: str,
        help: str = "",
        arity: int | str | Arity | None = None,
        optional_arg: bool = False,
        value_separator: str | None = None,
        type: Any = None,
        converter: Callable[[str], Any] | None = None,
        default: str | None = None,
        arg_name: str | None = None,
        dest: str | None = None,
    ) -> Option:
        """
        Declare a new option.

        An option declared with only names and help (or with `type=bool`) is a
        flag. Any other declaration takes one value per occurrence unless
        `arity` says otherwise.

        Args:
            *flags (str): Short and/or long names (e.g. "-v", "--verbose").
            help (str): Description for the usage message.
            arity (int | str | Arity | None): Values per occurrence: an integer,
                "+" (one or more) or "*" (zero or more).
            optional_arg (bool): Whether the value may be omitted.
            value_separator (str | None): Character splitting a token into values.
            type (Any): Target type (`int`, `Path`, `list[int]`, `dict[str, int]`, ...).
            converter (Callable[[str], Any] | None): Replaces default coercion.
            default (str | None): Raw value used when the option is absent.
            arg_name (str | None): Parameter label in the usage message.
            dest (str | None): Key of the option in `ParseResult.as_dict()`.

        Returns:
            Option: The registered declaration.
        """
        short, long = self._get_names_from_flags(flags)
        takes_value = any(
            (converter, default is not None, optional_arg, value_separator, arg_name)
        )
        resolved_arity, resolved_type = self._resolve_arity(arity, type, takes_value)
        option = Option(
            short=short,
            long=long,
            help=help,
            arity=resolved_arity,
            optional_arg=optional_arg,
            value_separator=value_separator,
            type=resolved_type,
            converter=converter,
            default=default,
            arg_name=arg_name,
            dest=dest or "",
        )
        return self.registry.register(option)

    def register(self, option: Option) -> Option:
        """Register a prebuilt `Option`."""
        return self.registry.register(option)

    def get_option(self, name: str) -> Option | None:
        """Return the option answering to `name` (`v`, `-v` or `--verbose`)."""
        return self.registry.lookup(name)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector.

        Args:
            args (Sequence[str] | None): The arguments; defaults to `sys.argv[1:]`.

        Returns:
            ParseResult: Typed option values and the remainder.

        Raises:
            UnknownOptionError, MissingArgumentError, UnexpectedValueError:
                If the arguments do not match the declarations.
            ConversionError: If a value cannot be coerced.
        """
        if args is None:
            args = sys.argv[1:]
        self.registry.freeze()
        try:
            tokenized = self.tokenizer.tokenize(list(args))
            result = self.result_builder.build(tokenized)
        except OptbuilderError as error:
            logger.debug("[%s] Failed to parse %s: %s", self.name, list(args), error)
            raise
        logger.debug("[%s] Parsed %s -> %r", self.name, list(args), result)
        return result

    def get_usage(self) -> str:
        """Render the usage message."""
        renderer = UsageRenderer(
            self.registry,
            self.usage_message,
            name=self.name,
            usage=self.usage,
            long_prefix="-" if self.accept_single_hyphen_long else "--",
        )
        return renderer.render()

    def print_usage(self, file: TextIO | None = None) -> None:
        """Write the usage message to `file`, or to the console."""
        get_console(file).print(
            self.get_usage(),
            end="",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert option metadata into a list of dicts.

        Returns:
            List of definitions for introspection or documentation.
        """
        return [
            {
                "short": option.short,
                "long": option.long,
                "dest": option.dest,
                "arity": str(option.arity),
                "optional_arg": option.optional_arg,
                "value_separator": option.value_separator,
                "type": option.type,
                "default": option.default,
                "help": option.help,
            }
            for option in self.registry.all()
        ]

    def __str__(self) -> str:
        flags = sum(option.is_flag for option in self.registry.all())
        return (
            f"OptionParser(name={self.name!r}, options={len(self.registry)}, "
            f"flags={flags}, frozen={self.registry.frozen})"
        )

    def __repr__(self) -> str:
        return str(self)
