"""Logging for codeshape.

Every module logs through ``get_logger(__name__)``, which files the logger
under the ``codeshape`` namespace. ``setup_logging`` is called once per
``analyze()`` run and maps the configured verbosity onto that namespace.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "codeshape"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", console: Optional[Console] = None) -> logging.Logger:
    """Route codeshape records to a rich handler on stderr.

    The handler is installed through ``logging.basicConfig``, so a host
    application that already configured the root logger keeps its own
    handlers. The level is always applied to the ``codeshape`` logger.

    Args:
        verbosity: One of "quiet", "normal", "verbose"
        console: Console to log to (default: a new stderr console)

    Returns:
        The ``codeshape`` logger
    """
    level = _LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    logging.basicConfig(format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a codeshape module; ``None`` gives the package logger.

    Names outside the namespace are prefixed, so ``get_logger("scanning")``
    and ``get_logger("codeshape.scanning")`` return the same logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
