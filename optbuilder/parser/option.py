# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the immutable declaration of one command-line
option.

An `Option` describes the names an option answers to, how many values it
consumes (`Arity`), how raw strings are split and coerced, and the text used to
render it in a usage message. Options are usually created through
`OptionParser.add_option()`, but can also be built directly and handed to
`OptionRegistry.register()`.

Key Attributes:
- `short` / `long`: Single-character and long names (without dashes)
- `arity`: Values consumed per occurrence
- `optional_arg`: Whether the value may be omitted
- `value_separator`: Character splitting one token into several values
- `type`: Target type (scalar, `list[T]`, `dict[K, V]`, ...)
- `converter`: Callable replacing default coercion for each raw value
- `default`: Raw string applied when the option is absent
- `arg_name`: Parameter label shown in usage text
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from optbuilder.parser.arity import Arity, ArityKind
from optbuilder.parser.parser_types import ValueKind
from optbuilder.parser.utils import resolve_kind


@dataclass(frozen=True)
class Option:
    """
    Represents a command-line option declaration.

    Attributes:
        short (str | None): Single-character name, used as `-x`.
        long (str | None): Long name, used as `--name`.
        help (str): Description shown in the usage message.
        arity (Arity): Number of values consumed per occurrence.
        optional_arg (bool): True if the value may be omitted.
        value_separator (str | None): Character splitting a token into values.
        type (Any): Target type the raw values are coerced to.
        converter (Callable[[str], Any] | None): Custom per-value conversion.
        default (str | None): Raw value used when the option is absent.
        arg_name (str | None): Parameter label for usage rendering.
        dest (str): Key of the option in `ParseResult.as_dict()`.
    """

    short: str | None = None
    long: str | None = None
    help: str = ""
    arity: Arity = Arity.ONE
    optional_arg: bool = False
    value_separator: str | None = None
    type: Any = str
    converter: Callable[[str], Any] | None = None
    default: str | None = None
    arg_name: str | None = None
    dest: str = ""

    def __post_init__(self) -> None:
        if not self.dest:
            name = self.long or self.short or ""
            object.__setattr__(self, "dest", name.replace("-", "_"))

    @property
    def names(self) -> tuple[str, ...]:
        """All names of the option, short name first."""
        return tuple(name for name in (self.short, self.long) if name)

    @property
    def name(self) -> str:
        """Preferred display name: the short name if there is one."""
        return self.short or self.long or ""

    @property
    def kind(self) -> ValueKind:
        return resolve_kind(self.type)

    @property
    def is_flag(self) -> bool:
        return self.arity.kind == ArityKind.ZERO

    def get_flag_text(self, long_prefix: str = "--") -> str:
        """Return the option as typed on the command line, short form preferred."""
        if self.short:
            return f"-{self.short}"
        return f"{long_prefix}{self.long}"

    def get_param_label(self) -> str:
        """Get the placeholder for a single value."""
        if self.arg_name:
            return f"<{self.arg_name}>"
        return "PARAM"

    def get_param_text(self) -> str:
        """
        Get the parameter text for the option's values.

        Returns an empty string for flags, a bracketed text for options whose
        value may be omitted.
        """
        if self.is_flag:
            return ""
        label = self.get_param_label()
        separator = self.value_separator
        kind = self.arity.kind
        if kind == ArityKind.FIXED:
            assert self.arity.count is not None
            text = (separator or " ").join([label] * self.arity.count)
        elif kind == ArityKind.AT_LEAST_ONE:
            text = f"{label}[{separator}{label}...]" if separator else f"{label}..."
        elif kind == ArityKind.ANY:
            return f"[{label}...]"
        else:
            text = label
        if self.optional_arg:
            return f"[{text}]"
        return text

    def get_attached_text(self, flag: str) -> str:
        """Render `flag` with its parameter attached (`-d=<data>`, `-c[=PARAM]`)."""
        param = self.get_param_text()
        if not param:
            return flag
        if param.startswith("[") and param.endswith("]"):
            return f"{flag}[={param[1:-1]}]"
        return f"{flag}={param}"

    def __str__(self) -> str:
        names = "/".join(self.names)
        type_text = getattr(self.type, "__name__", self.type)
        return f"Option({names}, arity={self.arity}, type={type_text})"
