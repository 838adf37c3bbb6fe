from __future__ import annotations

"""
Logging Configuration Models.

Defines the immutable description of how the library's diagnostics are
emitted, plus the severity level mapping used to parse it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the library logger.

    Attributes:
        level: Minimum severity captured by the 'ioreader' logger.
        console: Emit to stderr.
        log_file: Optional path for a rotating log file.
        max_bytes: Segment size before rotation.
        backup_count: Rotated segments to keep.
        propagate: Let records also reach the application's root handlers.
        console_fmt: Format for stderr output.
        file_fmt: Format for file entries.
        datefmt: Timestamp format for file entries.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2
    propagate: bool = False

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
