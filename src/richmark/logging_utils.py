"""Handler setup for the ``richmark`` logger namespace.

Library modules only call ``logging.getLogger(__name__)``; nothing below
``richmark`` installs handlers on import. The command-line entry point calls
``configure_logging`` once so that rendering diagnostics (unexpected nodes,
skipped blocks) reach stderr, and optionally a file. The root logger and
handlers installed by the embedding application are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from richmark.constants import LOG_FORMAT, LOGGER_NAMESPACE, TRACE_LOG_FORMAT


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send richmark diagnostics to stderr and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name (``"WARNING"``); unknown names mean INFO
    log_file : str, optional
        File that receives a copy of the output, opened for appending
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting logger's name

    Returns
    -------
    logging.Logger
        The ``richmark`` logger

    """
    level = _resolve_level(log_level)
    richmark_logger = logging.getLogger(LOGGER_NAMESPACE)
    richmark_logger.setLevel(level)
    for handler in richmark_logger.handlers[:]:
        richmark_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        TRACE_LOG_FORMAT if trace_mode else LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    richmark_logger.addHandler(stderr_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            richmark_logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            richmark_logger.addHandler(file_handler)
            richmark_logger.debug("Writing log output to %s", log_file)

    return richmark_logger
