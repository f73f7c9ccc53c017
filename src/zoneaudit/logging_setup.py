"""Logging configuration for the zoneaudit CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "zoneaudit"
NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore")


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a single rich handler to the ``zoneaudit`` logger.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setLevel(level)
    root.addHandler(handler)
    root.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
