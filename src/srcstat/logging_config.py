"""
Logging for srcstat.

Everything is logged under the ``srcstat`` logger and written to stderr
through rich, so diagnostics never interleave with the report on stdout.
Per-file problems (undecodable files, unreadable directory entries) are
logged and the scan goes on.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "srcstat"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def level_for(verbosity: str) -> int:
    """Map a verbosity name to a logging level; unknown names mean normal."""
    return _LEVELS.get(verbosity, logging.WARNING)


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route srcstat log records to stderr (and optionally a file).

    Args:
        verbosity: ``quiet`` (errors only), ``normal`` (warnings) or
            ``verbose`` (debug, with timestamps and source locations)
        log_file: Optional file path to append plain-text records to

    Returns:
        The ``srcstat`` logger
    """
    level = level_for(verbosity)
    verbose = level <= logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a module, always nested under ``srcstat``.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; a bare name such as ``"walker"`` becomes ``srcstat.walker``.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
