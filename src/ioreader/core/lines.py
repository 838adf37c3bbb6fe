from __future__ import annotations

"""
Line-Oriented Resolution.

Walks a text source line by line and hands each line to a caller-owned
handler. The handler's return value is the only flow control: a falsy
result stops the walk without reading any further.
"""

import logging
from typing import Any, List, Optional, Protocol

from ioreader.core.encoding import (
    is_path_like,
    require_not_blank,
    require_not_none,
    require_readable,
    resolve_encoding,
    resolve_errors,
)
from ioreader.core.streams import (
    close_quietly,
    describe_source,
    iter_lines,
    iter_text_chunks,
    open_source,
)
from ioreader.domain.config import DEFAULT_SETTINGS, ReaderSettings
from ioreader.domain.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class LineHandler(Protocol):
    """Callback receiving ``(line_number, line)``; return False to stop."""

    def __call__(self, line_number: int, line: str) -> bool:
        ...


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolver_file(
        source: Any,
        handler: LineHandler,
        *,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
        settings: Optional[ReaderSettings] = None,
) -> None:
    """
    Feed every line of a source to ``handler`` until it returns a falsy value.

    Accepts a path (str or PathLike), a text stream, or a binary stream.
    Line numbers start at 1. CR, LF and CRLF all end a line and are not
    included in the line text. The source is closed on every exit path,
    including streams supplied by the caller.

    Exceptions raised by the handler propagate unchanged.

    Args:
        source: Path or open stream.
        handler: Callable ``(line_number, line) -> bool``.
        encoding: Codec for paths and binary streams; None or '' means UTF-8.
        errors: Decode-error policy.
        settings: Optional tuning overrides.

    Raises:
        InvalidArgumentError: If ``source`` or ``handler`` is None, the path is
            blank, or the handler is not callable.
        UnsupportedEncodingError: If ``encoding`` is unknown.
        ReadIOError: If the source cannot be opened or read.
    """
    require_not_none(source, "source")
    require_not_none(handler, "handler")
    if not callable(handler):
        raise InvalidArgumentError(f"handler must be callable, got {type(handler).__name__}")
    require_not_blank(source, "source")

    settings = settings or DEFAULT_SETTINGS

    if is_path_like(source):
        # Fail on a bad codec before the file is opened
        resolve_encoding(encoding, settings.default_encoding)
        resolve_errors(errors, settings.decode_errors)
        source = open_source(source)
    else:
        require_readable(source, "source")

    _walk(source, handler, encoding, errors, settings)


def read_lines(
        source: Any,
        *,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
        settings: Optional[ReaderSettings] = None,
) -> List[str]:
    """Collect every line of ``source`` into a list, terminators stripped."""
    lines: List[str] = []

    def _collect(line_number: int, line: str) -> bool:
        lines.append(line)
        return True

    resolver_file(source, _collect, encoding=encoding, errors=errors, settings=settings)
    return lines


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _walk(
        stream: Any,
        handler: LineHandler,
        encoding: Optional[str],
        errors: Optional[str],
        settings: ReaderSettings,
) -> None:
    try:
        codec = resolve_encoding(encoding, settings.default_encoding)
        policy = resolve_errors(errors, settings.decode_errors)

        chunks = iter_text_chunks(stream, codec, policy, settings.chunk_size)
        line_number = 0
        for line_number, line in enumerate(iter_lines(chunks), start=1):
            if not handler(line_number, line):
                logger.debug("Handler stopped at line %d of %s", line_number, describe_source(stream))
                return

        logger.debug("Resolved %d lines from %s", line_number, describe_source(stream))
    finally:
        close_quietly(stream)
