"""
Logging configuration for git-dig.

Log records go to stderr through rich so they never mix with report output
written to stdout. Handlers are attached to the ``git_dig`` logger rather
than the root logger, so repeated setup (tests, embedding) replaces them.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "git_dig"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the git_dig logger.

    Args:
        verbosity: One of "quiet", "normal", "verbose"
        log_file: Optional file path to append logs to

    Returns:
        Configured logger instance for git_dig

    Raises:
        ValueError: If verbosity is not recognized
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the git_dig namespace.

    Args:
        name: Module name (e.g. 'git_dig.analysis.coupling' or
              'analysis.coupling'). If None, returns the git_dig logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
