"""Console output: the package logger and coloured section headers."""

from __future__ import annotations

import logging
import sys

from colored import Fore, Style

LOGGER_NAME = "tour"

COLORS_FOR_SECTIONS = {
    "simple_values": Fore.yellow,
    "control_flow": Fore.green,
    "functions_closures": Fore.cyan,
    "objects_classes": Fore.magenta,
    "enums_structs": Fore.blue,
    "concurrency": Fore.cyan,
    "protocols_extensions": Fore.green,
    "error_handling": Fore.red,
    "generics": Fore.blue,
}
DEFAULT_COLOR = Fore.white
RESET = Style.reset


class MaxLevelFilter(logging.Filter):
    """Allow log records up to a specific level."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``tour`` logger to write to stdout and stderr.

    Records up to INFO go to stdout, WARNING and above to stderr. Calling
    again replaces the handlers, so the streams current at call time win.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(MaxLevelFilter(logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    formatter = logging.Formatter("%(levelname)s:%(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger


def section_header(name: str, color: bool = False) -> str:
    text = f"== Running {name} =="
    if not color:
        return text
    return f"{COLORS_FOR_SECTIONS.get(name, DEFAULT_COLOR)}{text}{RESET}"
