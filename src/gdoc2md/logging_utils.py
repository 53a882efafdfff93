#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/logging_utils.py
"""Logging setup for the gdoc2md command-line interface.

Library modules only create loggers under the ``gdoc2md`` namespace. The CLI
attaches handlers to that package logger, leaving the root logger and any
handlers installed by a host program untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "gdoc2md"

# Marks handlers installed here so a repeated call replaces only its own
_HANDLER_MARKER = "_gdoc2md_cli_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the ``gdoc2md`` logger.

    Handlers from an earlier call are closed and replaced. The package logger
    stops propagating so records are not printed twice when the host program
    has its own root handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "INFO")
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in each record
    stream : TextIO, optional
        Console stream; stderr when omitted

    Returns
    -------
    logging.Logger
        The configured ``gdoc2md`` package logger

    """
    level = _resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = _mark(logging.StreamHandler(stream or sys.stderr))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(_mark(file_handler))
            logger.debug("Logging to file: %s", log_file)

    return logger
