from __future__ import annotations

"""
Low-Level Stream Primitives.

Shared plumbing for the content and line readers: opening path sources,
chunked reading with a single incremental decoder that survives chunk
boundaries, universal-newline splitting and best-effort closing.
"""

import codecs
import logging
import os
import re
from typing import IO, Any, Iterable, Iterator, List, Optional, Union

from ioreader.domain.errors import ReadIOError

logger = logging.getLogger(__name__)

PathSource = Union[str, "os.PathLike[str]"]

# CRLF must come first so a pair is consumed as one terminator
_NEWLINE = re.compile(r"\r\n|\r|\n")

# -----------------------------------------------------------------------------
# HANDLE LIFECYCLE
# -----------------------------------------------------------------------------

def open_source(path: PathSource) -> IO[bytes]:
    """
    Open a path for binary reading.

    Args:
        path: Filesystem path (str or PathLike).

    Returns:
        IO[bytes]: Open binary handle owned by the caller.

    Raises:
        ReadIOError: If the file is missing, a directory, or unreadable.
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise ReadIOError(e, source=os.fspath(path)) from e


def close_quietly(stream: Any) -> None:
    """Close a stream, logging and suppressing any failure."""
    if stream is None:
        return
    try:
        stream.close()
    except Exception:
        logger.debug("Suppressed failure while closing %s", describe_source(stream), exc_info=True)


def describe_source(stream: Any) -> str:
    name = getattr(stream, "name", None)
    if isinstance(name, str):
        return name
    if isinstance(name, (bytes, os.PathLike)):
        return os.fsdecode(name)
    return f"<{type(stream).__name__}>"


# -----------------------------------------------------------------------------
# CHUNKED DECODING
# -----------------------------------------------------------------------------

def iter_text_chunks(
        stream: Any,
        encoding: str,
        errors: str,
        chunk_size: int,
) -> Iterator[str]:
    """
    Yield decoded text from a byte or character stream, one chunk at a time.

    Byte chunks go through one incremental decoder for the whole stream and
    the decoder is flushed at EOF, so a multi-byte sequence split across two
    reads is reassembled instead of corrupted. Character chunks pass through.

    Args:
        stream: Object exposing ``read(size)`` returning bytes or str.
        encoding: Resolved codec name.
        errors: Decode-error policy.
        chunk_size: Units requested per read call.

    Yields:
        str: Decoded text fragments (never empty).

    Raises:
        ReadIOError: If the stream is already closed or a read fails.
        UnicodeDecodeError: On malformed bytes under the 'strict' policy.
    """
    if getattr(stream, "closed", False):
        raise ReadIOError(ValueError("I/O operation on closed stream."), source=describe_source(stream))

    decoder: Optional[codecs.IncrementalDecoder] = None

    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            raise ReadIOError(e, source=describe_source(stream)) from e

        if not chunk:
            break

        if isinstance(chunk, str):
            yield chunk
            continue

        if decoder is None:
            decoder = codecs.getincrementaldecoder(encoding)(errors=errors)
        text = decoder.decode(bytes(chunk))
        if text:
            yield text

    if decoder is not None:
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail


# -----------------------------------------------------------------------------
# LINE SPLITTING
# -----------------------------------------------------------------------------

def iter_lines(chunks: Iterable[str]) -> Iterator[str]:
    """
    Split a stream of text chunks into lines.

    CR, LF and CRLF all terminate a line (a CRLF pair split across two
    chunks still counts once). Terminators are dropped; trailing text with
    no terminator is yielded as the final line.
    """
    pieces: List[str] = []
    skip_lf = False

    for chunk in chunks:
        if skip_lf and chunk.startswith("\n"):
            chunk = chunk[1:]
        skip_lf = chunk.endswith("\r")

        start = 0
        for match in _NEWLINE.finditer(chunk):
            pieces.append(chunk[start:match.start()])
            yield "".join(pieces)
            pieces = []
            start = match.end()

        if start < len(chunk):
            pieces.append(chunk[start:])

    if pieces:
        yield "".join(pieces)
