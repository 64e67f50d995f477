"""
Logging setup for Complexity Insight.

Everything under the ``complexity_insight`` logger goes to stderr through
rich, so stdout stays clean for json/text reports.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "complexity_insight"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger, replacing any from earlier calls.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or
            "verbose" (debug, with timestamps and source locations)
        log_file: Optional path that also receives every record

    Returns:
        The complexity_insight logger
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    verbose = verbosity == "verbose"

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(LEVELS[verbosity])
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbose))
    if log_file:
        logger.addHandler(_file_handler(log_file))
    # records stop here instead of reaching whatever the host app put on root
    logger.propagate = False
    return logger


def _console_handler(verbose: bool) -> logging.Handler:
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )


def _file_handler(path: str) -> logging.Handler:
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the package namespace; short names are prefixed."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
