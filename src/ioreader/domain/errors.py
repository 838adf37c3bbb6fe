from __future__ import annotations

"""
Error Hierarchy.

Every failure raised by the library derives from IOReaderError so callers
can catch the whole family at once, while the concrete subclasses also
inherit from the closest builtin (ValueError, LookupError) to keep
generic handlers working.
"""

from typing import Optional


class IOReaderError(Exception):
    """Base class for all library errors."""


class InvalidArgumentError(IOReaderError, ValueError):
    """A required argument is missing, blank or of the wrong kind."""


class UnsupportedEncodingError(IOReaderError, LookupError):
    """
    The requested encoding name does not resolve to a known codec.

    Attributes:
        encoding: The name exactly as the caller supplied it.
    """

    def __init__(self, encoding: object) -> None:
        super().__init__(f"Unsupported encoding: {encoding!r}")
        self.encoding = encoding


class ReadIOError(IOReaderError):
    """
    Opening or reading a source failed.

    The low-level exception is kept on ``cause`` and is also chained as
    ``__cause__`` by the raising site.

    Attributes:
        cause: The original exception (usually an OSError).
        source: Description of the source that failed, if known.
    """

    def __init__(self, cause: BaseException, source: Optional[str] = None) -> None:
        where = f" ({source})" if source else ""
        super().__init__(f"I/O failure{where}: {cause}")
        self.cause = cause
        self.source = source
