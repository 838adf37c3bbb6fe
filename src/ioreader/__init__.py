from __future__ import annotations

"""
ioreader: read files and streams into strings, or walk them line by line.
"""

import logging

from ioreader.core.content import get_content, read_file_to_string
from ioreader.core.encoding import resolve_encoding
from ioreader.core.lines import LineHandler, read_lines, resolver_file
from ioreader.domain.config import ReaderSettings, get_default_settings, validate_settings
from ioreader.domain.constants import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING
from ioreader.domain.errors import (
    InvalidArgumentError,
    IOReaderError,
    ReadIOError,
    UnsupportedEncodingError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_ENCODING",
    "IOReaderError",
    "InvalidArgumentError",
    "LineHandler",
    "ReadIOError",
    "ReaderSettings",
    "UnsupportedEncodingError",
    "get_content",
    "get_default_settings",
    "read_file_to_string",
    "read_lines",
    "resolve_encoding",
    "resolver_file",
    "validate_settings",
]
