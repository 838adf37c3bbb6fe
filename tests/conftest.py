from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample files and stream doubles.
"""

import io
import os
import sys
from typing import List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class CloseFailingStream(io.BytesIO):
    """BytesIO whose close() raises, while still marking itself closed."""

    def close(self) -> None:
        super().close()
        raise OSError("close failed")


class ReadFailingStream(io.BytesIO):
    """BytesIO that raises an OSError on the first read."""

    def read(self, size: int = -1) -> bytes:
        raise OSError("device error")


@pytest.fixture
def sample_text() -> str:
    """Multilingual UTF-8 text ending with a newline."""
    return "hello 我爱你\nsecond line ñ\n"


@pytest.fixture
def sample_file(tmp_path, sample_text):
    f = tmp_path / "sample.txt"
    f.write_bytes(sample_text.encode("utf-8"))
    return f


@pytest.fixture
def recorder():
    """Return (calls, handler) where handler records and always continues."""
    calls: List[Tuple[int, str]] = []

    def handler(line_number: int, line: str) -> bool:
        calls.append((line_number, line))
        return True

    return calls, handler


@pytest.fixture
def close_failing_stream() -> CloseFailingStream:
    return CloseFailingStream(b"alpha\nbeta\n")


@pytest.fixture
def read_failing_stream() -> ReadFailingStream:
    return ReadFailingStream(b"never read")
