# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders plain-text usage messages from an `OptionRegistry`.

A usage message is made of optional free-text sections around a synopsis and a
two-column option table:

    <header heading><header lines>
    <synopsis heading><synopsis>
    <description heading><description lines>
    <option list heading><option table>
    <footer heading><footer lines>

Headings, text lines and the usage template accept `%n` for a newline and
`{name}` / `{width}` placeholders. An unresolvable placeholder raises
`UsageTemplateError`; use `{{` and `}}` for literal braces.

The synopsis clusters single-character flags (`[-ab]`), then lists long-only
flags, long-only options with values and finally options with a short name in
their short form. The option table aligns descriptions in one column, wraps
them to the configured width and moves the description to its own line when the
option text is too wide.
"""
from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from typing import Sequence

from optbuilder.exceptions import UsageTemplateError
from optbuilder.parser.option import Option
from optbuilder.parser.parser_types import ValueKind
from optbuilder.parser.registry import OptionRegistry

COLUMN_GAP = 3


@dataclass
class UsageMessage:
    """Free-text sections and layout settings of a usage message."""

    header_heading: str = ""
    header: Sequence[str] | str = field(default_factory=list)
    synopsis_heading: str = "Usage: "
    description_heading: str = ""
    description: Sequence[str] | str = field(default_factory=list)
    option_list_heading: str = ""
    footer_heading: str = ""
    footer: Sequence[str] | str = field(default_factory=list)
    sort_options: bool = True
    width: int = 80
    long_options_max_width: int = 20


class UsageRenderer:
    """
    Formats the usage message of a registry.

    Args:
        registry (OptionRegistry): The declared options. Only read.
        message (UsageMessage | None): Text sections and layout settings.
        name (str): Command name shown at the start of the synopsis.
        usage (str | None): Template replacing the generated synopsis.
        long_prefix (str): Prefix used when rendering long names.
    """

    def __init__(
        self,
        registry: OptionRegistry,
        message: UsageMessage | None = None,
        name: str = "",
        usage: str | None = None,
        long_prefix: str = "--",
    ) -> None:
        self.registry = registry
        self.message = message or UsageMessage()
        self.name = name
        self.usage = usage
        self.long_prefix = long_prefix

    def _format(self, template: str) -> str:
        context = {"name": self.name, "width": self.message.width}
        try:
            return template.replace("%n", "\n").format_map(context)
        except (KeyError, IndexError, ValueError) as error:
            raise UsageTemplateError(
                f"Cannot render usage template {template!r}: {error!r}"
            ) from error

    def _format_lines(self, lines: Sequence[str] | str) -> str:
        if isinstance(lines, str):
            lines = [lines]
        return "".join(f"{self._format(line)}\n" for line in lines)

    def get_options(self) -> list[Option]:
        """Return the options in rendering order."""
        options = list(self.registry.all())
        if self.message.sort_options:
            options.sort(key=lambda option: (option.name.casefold(), option.name))
        return options

    def _synopsis_entry(self, option: Option) -> str:
        text = f"[{option.get_attached_text(option.get_flag_text(self.long_prefix))}]"
        if option.arity.is_variable or option.kind != ValueKind.SCALAR:
            text = f"{text}..."
        return text

    def get_synopsis(self) -> str:
        """Render the one-line synopsis, or the formatted `usage` template."""
        if self.usage is not None:
            return self._format(self.usage)
        options = self.get_options()
        parts = [self.name] if self.name else []

        cluster = "".join(option.short for option in options if option.is_flag and option.short)
        if cluster:
            parts.append(f"[-{cluster}]")
        parts.extend(
            f"[{self.long_prefix}{option.long}]"
            for option in options
            if option.is_flag and not option.short
        )
        long_values = [o for o in options if not o.is_flag and not o.short]
        short_values = [o for o in options if not o.is_flag and o.short]
        parts.extend(self._synopsis_entry(option) for option in long_values + short_values)
        return " ".join(parts)

    def _option_columns(self, option: Option) -> tuple[str, str]:
        """Split an option into its short-name columns and its long column."""
        short = f"-{option.short}" if option.short else "  "
        param = option.get_param_text()
        if option.short and option.long:
            separator = ","
            long_text = option.get_attached_text(f"{self.long_prefix}{option.long}")
        elif option.short:
            separator = "=" if param else " "
            long_text = param
        else:
            separator = " "
            long_text = option.get_attached_text(f"{self.long_prefix}{option.long}")
        return f"  {short}{separator} ", long_text

    def render_option_table(self) -> str:
        """Render the option table, one or more lines per option."""
        rows = [
            (*self._option_columns(option), option.help or "")
            for option in self.get_options()
        ]
        if not rows:
            return ""
        max_width = self.message.long_options_max_width
        long_width = max(
            (len(long_text) for _, long_text, _ in rows if len(long_text) <= max_width),
            default=0,
        )
        description_column = len(rows[0][0]) + long_width + COLUMN_GAP
        text_width = max(self.message.width - description_column, 10)
        indent = " " * description_column

        lines: list[str] = []
        for prefix, long_text, help_text in rows:
            wrapped = textwrap.wrap(
                help_text,
                width=text_width,
                subsequent_indent="  ",
                break_on_hyphens=False,
            )
            left = f"{prefix}{long_text}"
            if len(long_text) > long_width:
                lines.append(left.rstrip())
                lines.extend(f"{indent}{line}" for line in wrapped)
            else:
                first = wrapped[0] if wrapped else ""
                lines.append(f"{left.ljust(description_column)}{first}".rstrip())
                lines.extend(f"{indent}{line}" for line in wrapped[1:])
        return "".join(f"{line}\n" for line in lines)

    def render(self) -> str:
        """Render the complete usage message."""
        message = self.message
        parts = [
            self._format(message.header_heading),
            self._format_lines(message.header),
            f"{self._format(message.synopsis_heading)}{self.get_synopsis()}\n",
            self._format(message.description_heading),
            self._format_lines(message.description),
            self._format(message.option_list_heading),
            self.render_option_table(),
            self._format(message.footer_heading),
            self._format_lines(message.footer),
        ]
        return "".join(parts)
