# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Returns the program name used when a parser is not given one."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {os.path.basename(script)}"
    return script


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _json_formatter() -> pythonjsonlogger.json.JsonFormatter:
    return pythonjsonlogger.json.JsonFormatter(LOG_FORMAT)


def _console_handler(mode: str, level: int) -> logging.Handler:
    """Rich output for people, JSON lines for log collectors."""
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(_json_formatter())
    handler.setLevel(level)
    return handler


def _file_handler(filename: str, level: int, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    handler.setLevel(level)
    if as_json:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "optbuilder.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure root logging for command-line tools built on optbuilder.

    Parser debug output goes to the `optbuilder` logger and reaches the handlers
    installed here.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for JSON lines.
            Defaults to the `OPTBUILDER_LOG_MODE` environment variable, then to
            "json" inside a container and "cli" elsewhere.
        log_filename (str | None): Log file path. `None` disables file logging.
        json_log_to_file (bool): Write the log file as JSON lines.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is not one of "cli" or "json".
    """
    if not mode:
        mode = os.getenv("OPTBUILDER_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(_console_handler(mode, console_log_level))
    if log_filename:
        root.addHandler(_file_handler(log_filename, file_log_level, json_log_to_file))

    logging.getLogger("optbuilder").debug("Logging initialized in '%s' mode.", mode)
