"""
Logging setup for framebridge.

Every module logs under the `framebridge` namespace. The package stays silent
until an application calls [`setup_logging`][framebridge.logging_config.setup_logging];
after that, registry activity (debug) and dispatch failures (error) are printed.
"""

import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


_ROOT_LOGGER_NAME = "framebridge"


def _rich_handler(level, console: Optional[Console]) -> root_logging.Handler:
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=True,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(
        root_logging.Formatter(fmt="[dim white]%(name)s[/dim white]: %(message)s")
    )
    return handler


def _stream_handler() -> root_logging.Handler:
    handler = root_logging.StreamHandler(sys.stderr)
    # Time [Level] Name: Message
    handler.setFormatter(
        root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def setup_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Attaches a single output handler to the `framebridge` logger.

    Calling it again replaces the previous handler, so the level or the output
    mode can be switched at any time without duplicating records.

    Args:
        level: Threshold name or number, e.g. `"DEBUG"` to see adapter registration.
        pretty: Use a `rich` handler (colors, rich tracebacks) instead of a plain
            stderr stream.
        console: Console the rich handler writes to. Ignored unless `pretty`.
        propagate: Let records reach the root logger as well.
    """
    logger = root_logging.getLogger(_ROOT_LOGGER_NAME)
    logger.handlers.clear()

    if pretty:
        handler = _rich_handler(level, console)
        init_message = f"Logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = _stream_handler()
        init_message = f"Logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None) -> root_logging.Logger:
    """Returns the logger `name`, or the `framebridge` package logger when omitted."""
    if name is not None:
        return root_logging.getLogger(name=name)
    return root_logging.getLogger(_ROOT_LOGGER_NAME)
