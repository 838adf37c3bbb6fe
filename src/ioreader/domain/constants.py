from __future__ import annotations

"""
Domain Constants.

Centralizes the defaults shared by every reading operation: the fallback
text encoding, the chunk size used for bulk reads, and the decode-error
policies accepted by the decoders.
"""

from typing import FrozenSet

DEFAULT_ENCODING = "utf-8"

# Bulk reads pull this many bytes (or characters) per call
DEFAULT_CHUNK_SIZE = 186140

DEFAULT_DECODE_ERRORS = "strict"
DECODE_ERROR_POLICIES: FrozenSet[str] = frozenset({"strict", "replace", "ignore"})
