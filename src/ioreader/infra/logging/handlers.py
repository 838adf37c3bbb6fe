from __future__ import annotations

"""
Logging Handler Factories.

Builds the handlers attached by configure_logging() and tags them, so a
later re-configuration removes only what this library installed and
never touches handlers owned by the host application.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Attribute marking handlers installed by this library
_HANDLER_TAG_ATTR: str = "_ioreader_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler.

    Returns None (after a stderr warning) when the file cannot be opened,
    so a bad log path never breaks a read.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        if parent:
            os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: ioreader log file unavailable at '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
