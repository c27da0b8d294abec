"""typedprompt.logger"""

import logging
from rich.logging import RichHandler
from rich.console import Console
from rich.markup import escape
from typing import Literal

# NOTE:
# the logger writes to stderr so it never interleaves
# with the prompt itself on stdout.

_console = Console(stderr=True)


class RichMarkupFilter(logging.Filter):
    """Colours records by level. The message itself is escaped, since it
    often carries user input or type descriptors such as `regex:^[a-z]+$`
    that would otherwise be read as markup."""

    STYLES = (
        (logging.CRITICAL, "bold red"),
        (logging.ERROR, "italic red"),
        (logging.WARNING, "italic yellow"),
        (logging.INFO, "white"),
        (logging.DEBUG, "italic dim"),
    )

    def filter(self, record):
        for level, style in self.STYLES:
            if record.levelno >= level:
                record.msg = f"[{style}]{escape(record.getMessage())}[/{style}]"
                record.args = ()
                break
        return True


def _setup_logging() -> logging.Logger:
    logger = logging.getLogger("typedprompt")

    handler = RichHandler(
        level=logging.WARNING,
        console=_console,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        markup=True,
    )
    formatter = logging.Formatter("| [bold]{name}[/bold] - {message}", style="{")
    handler.setFormatter(formatter)
    handler.addFilter(RichMarkupFilter())
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    return logger


def _get_logger(module: str | None = None) -> logging.Logger:
    if module is None:
        return _logger
    # accept both "dispatch" and "typedprompt.dispatch"
    if module.startswith(f"{_logger.name}."):
        module = module[len(_logger.name) + 1 :]
    return _logger.getChild(module)


def verbosity(
    level: Literal["debug", "info", "warning", "error", "critical"],
) -> None:
    logger = _get_logger()
    logger.setLevel(level.upper())
    # Update all handlers' levels to match
    for handler in logger.handlers:
        handler.setLevel(level.upper())


_logger = _setup_logging()
"""Singleton logger for the typedprompt library."""


__all__ = [
    "verbosity",
    "_get_logger",
]
