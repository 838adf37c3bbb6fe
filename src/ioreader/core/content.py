from __future__ import annotations

"""
Whole-Source Content Reading.

Materializes an entire file or stream as a single string. Both entry
points converge on get_content(), which owns the read loop and always
releases the stream before returning or raising.
"""

import logging
from typing import Any, Optional

from ioreader.core.encoding import (
    is_path_like,
    require_not_blank,
    require_readable,
    resolve_encoding,
    resolve_errors,
)
from ioreader.core.streams import (
    PathSource,
    close_quietly,
    describe_source,
    iter_text_chunks,
    open_source,
)
from ioreader.domain.config import DEFAULT_SETTINGS, ReaderSettings
from ioreader.domain.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_file_to_string(
        path: PathSource,
        encoding: Optional[str] = None,
        *,
        errors: Optional[str] = None,
        settings: Optional[ReaderSettings] = None,
) -> str:
    """
    Read a whole file into a string.

    The file handle is opened and closed internally. The encoding is
    resolved before the file is touched.

    Args:
        path: File path as str or PathLike.
        encoding: Codec name; None or '' means the default (UTF-8).
        errors: Decode-error policy; defaults to the settings policy.
        settings: Optional tuning overrides.

    Returns:
        str: The decoded file content, unmodified.

    Raises:
        InvalidArgumentError: If ``path`` is None, blank, or not a path.
        UnsupportedEncodingError: If ``encoding`` is unknown.
        ReadIOError: If the file cannot be opened or read.
    """
    require_not_blank(path, "path")
    if not is_path_like(path):
        raise InvalidArgumentError(f"path must be str or PathLike, got {type(path).__name__}")

    settings = settings or DEFAULT_SETTINGS
    codec = resolve_encoding(encoding, settings.default_encoding)
    policy = resolve_errors(errors, settings.decode_errors)

    with open_source(path) as stream:
        return get_content(stream, codec, errors=policy, settings=settings)


def get_content(
        stream: Any,
        encoding: Optional[str] = None,
        *,
        errors: Optional[str] = None,
        settings: Optional[ReaderSettings] = None,
) -> str:
    """
    Read a byte or character stream to exhaustion and return its text.

    The stream is always closed when this returns or raises; callers never
    close it themselves. Any partially read buffer is discarded on failure.

    Args:
        stream: Binary or text stream exposing ``read(size)``.
        encoding: Codec for byte streams; None or '' means UTF-8. It is
            validated for text streams too.
        errors: Decode-error policy ('strict', 'replace', 'ignore').
        settings: Optional tuning overrides.

    Returns:
        str: Full decoded content.

    Raises:
        InvalidArgumentError: If ``stream`` is None.
        UnsupportedEncodingError: If ``encoding`` is unknown.
        ReadIOError: If the stream is closed or a read fails.
        UnicodeDecodeError: If bytes are malformed under 'strict'.
    """
    require_readable(stream, "stream")
    settings = settings or DEFAULT_SETTINGS

    try:
        codec = resolve_encoding(encoding, settings.default_encoding)
        policy = resolve_errors(errors, settings.decode_errors)

        content = "".join(iter_text_chunks(stream, codec, policy, settings.chunk_size))
        logger.debug("Read %d chars from %s [%s]", len(content), describe_source(stream), codec)
        return content
    finally:
        close_quietly(stream)
