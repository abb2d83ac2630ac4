# src/fastqpreprocessing/utils/logging.py
"""
Log setup shared by ``fastqpp`` and the per-tool console scripts.

Help text and validation messages are written to stdout for the calling
scripts to read, so log records go to stderr only, and only records from
the ``fastqpreprocessing`` logger tree are handled here.
"""
from __future__ import annotations
import logging
from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "fastqpreprocessing"
_LOG_FORMAT = "%(name)s: %(message)s"
_DEF_LEVEL = logging.WARNING


def setup_logging(verbosity: int = 0) -> logging.Logger:
    level = _DEF_LEVEL
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    # one handler per process, even when entry points run repeatedly (pytest)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=verbosity >= 2,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger inside the package tree; bare names are nested under it."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
