from __future__ import annotations

"""
Unit tests for the low-level stream primitives.

Verifies:
1. Incremental decoding across chunk boundaries.
2. Universal newline splitting, including CRLF split over two chunks.
3. Quiet closing and wrapped open failures.
"""

import io

import pytest

from ioreader.core.streams import (
    close_quietly,
    describe_source,
    iter_lines,
    iter_text_chunks,
    open_source,
)
from ioreader.domain.errors import ReadIOError

# -----------------------------------------------------------------------------
# CHUNKED DECODING
# -----------------------------------------------------------------------------

def test_multibyte_characters_survive_tiny_chunks() -> None:
    """Every 3-byte character is split across reads when chunk_size=1."""
    text = "我爱你 ñandú €uro"
    stream = io.BytesIO(text.encode("utf-8"))

    decoded = "".join(iter_text_chunks(stream, "utf-8", "strict", 1))

    assert decoded == text


def test_utf16_with_bom_across_chunks() -> None:
    text = "line one\nline two"
    stream = io.BytesIO(text.encode("utf-16"))

    assert "".join(iter_text_chunks(stream, "utf-16", "strict", 3)) == text


def test_text_stream_passes_through() -> None:
    stream = io.StringIO("already text\n")
    assert list(iter_text_chunks(stream, "utf-8", "strict", 4)) == ["alre", "ady ", "text", "\n"]


def test_empty_stream_yields_nothing() -> None:
    assert list(iter_text_chunks(io.BytesIO(b""), "utf-8", "strict", 8)) == []


def test_strict_policy_raises_on_malformed_bytes() -> None:
    stream = io.BytesIO(b"ok\n\x80\xff\n")
    with pytest.raises(UnicodeDecodeError):
        list(iter_text_chunks(stream, "utf-8", "strict", 64))


def test_truncated_sequence_at_eof_raises_on_flush() -> None:
    stream = io.BytesIO("abc我".encode("utf-8")[:-1])
    with pytest.raises(UnicodeDecodeError):
        list(iter_text_chunks(stream, "utf-8", "strict", 2))


def test_replace_policy_substitutes() -> None:
    stream = io.BytesIO(b"a\x80b")
    assert "".join(iter_text_chunks(stream, "utf-8", "replace", 64)) == "a�b"


def test_closed_stream_raises_read_io_error() -> None:
    stream = io.BytesIO(b"data")
    stream.close()

    with pytest.raises(ReadIOError) as exc_info:
        list(iter_text_chunks(stream, "utf-8", "strict", 8))

    assert isinstance(exc_info.value.cause, ValueError)


def test_read_failure_is_wrapped(read_failing_stream) -> None:
    with pytest.raises(ReadIOError) as exc_info:
        list(iter_text_chunks(read_failing_stream, "utf-8", "strict", 8))

    assert isinstance(exc_info.value.cause, OSError)
    assert exc_info.value.__cause__ is exc_info.value.cause


# -----------------------------------------------------------------------------
# LINE SPLITTING
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "chunks, expected",
    [
        (["a\nb\nc"], ["a", "b", "c"]),
        (["a\nb\nc\n"], ["a", "b", "c"]),
        (["a\r\nb\rc\n"], ["a", "b", "c"]),
        (["a\r", "\nb"], ["a", "b"]),
        (["a\r", "\r\n"], ["a", ""]),
        (["ab", "cd\n", "e"], ["abcd", "e"]),
        (["\n\n"], ["", ""]),
        (["\r", "\n", "\n"], ["", ""]),
        ([], []),
    ],
)
def test_iter_lines(chunks, expected) -> None:
    assert list(iter_lines(chunks)) == expected


def test_iter_lines_keeps_other_separators() -> None:
    """Only CR and LF end a line; form feeds and unicode separators are content."""
    assert list(iter_lines(["a\x0cb c\n"])) == ["a\x0cb c"]


# -----------------------------------------------------------------------------
# HANDLE LIFECYCLE
# -----------------------------------------------------------------------------

def test_close_quietly_suppresses_errors(close_failing_stream) -> None:
    close_quietly(close_failing_stream)
    assert close_failing_stream.closed


def test_close_quietly_accepts_none() -> None:
    close_quietly(None)


def test_open_source_missing_file(tmp_path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(ReadIOError) as exc_info:
        open_source(missing)

    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert exc_info.value.source == str(missing)


def test_describe_source(tmp_path) -> None:
    f = tmp_path / "named.txt"
    f.write_text("x", encoding="utf-8")

    with open(f, "rb") as handle:
        assert describe_source(handle) == str(f)
    assert describe_source(io.BytesIO()) == "<BytesIO>"
