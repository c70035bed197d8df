# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""Console helpers for writing plain usage text to any text sink."""
from typing import TextIO

from rich.console import Console

console = Console(color_system=None, highlight=False)


def get_console(file: TextIO | None = None) -> Console:
    """Return the shared console, or a plain console bound to `file`."""
    if file is None:
        return console
    return Console(file=file, color_system=None, highlight=False)
