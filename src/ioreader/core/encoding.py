from __future__ import annotations

"""
Encoding Resolution and Argument Guards.

Every public read operation validates its arguments and resolves its
codec here, before any handle is opened, so caller faults never cost an
I/O round-trip.
"""

import codecs
import os
from typing import Any, Optional

from ioreader.domain.constants import (
    DECODE_ERROR_POLICIES,
    DEFAULT_DECODE_ERRORS,
    DEFAULT_ENCODING,
)
from ioreader.domain.errors import InvalidArgumentError, UnsupportedEncodingError

# -----------------------------------------------------------------------------
# ENCODING API
# -----------------------------------------------------------------------------

def resolve_encoding(name: Optional[str], default: str = DEFAULT_ENCODING) -> str:
    """
    Resolve an encoding name to its canonical codec name.

    A None or empty name silently falls back to ``default``. Anything
    else must be known to the codec registry.

    Args:
        name: Encoding requested by the caller.
        default: Encoding used when ``name`` is None or empty.

    Returns:
        str: Canonical codec name (e.g. 'utf-8' for 'UTF8').

    Raises:
        UnsupportedEncodingError: If the name is not a registered text codec.
    """
    if name is None or name == "":
        name = default

    try:
        info = codecs.lookup(name.strip())
    except (LookupError, TypeError, AttributeError):
        raise UnsupportedEncodingError(name) from None

    # bytes-to-bytes and str-to-str codecs (base64, zlib, rot13) cannot decode text
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(name)
    return info.name


def resolve_errors(policy: Optional[str], default: str = DEFAULT_DECODE_ERRORS) -> str:
    """Validate a decode-error policy, falling back to ``default`` when unset."""
    if policy is None or policy == "":
        return default
    if not isinstance(policy, str) or policy not in DECODE_ERROR_POLICIES:
        raise InvalidArgumentError(
            f"errors must be one of {sorted(DECODE_ERROR_POLICIES)}, got {policy!r}"
        )
    return policy


# -----------------------------------------------------------------------------
# ARGUMENT GUARDS
# -----------------------------------------------------------------------------

def require_not_none(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} can't be None!")


def require_not_blank(value: Any, name: str) -> None:
    """Reject None, and reject str values that are empty or whitespace only."""
    require_not_none(value, name)
    if isinstance(value, str) and not value.strip():
        raise InvalidArgumentError(f"{name} can't be blank!")


def is_path_like(value: Any) -> bool:
    return isinstance(value, (str, os.PathLike))


def require_readable(value: Any, name: str) -> None:
    require_not_none(value, name)
    if not callable(getattr(value, "read", None)):
        raise InvalidArgumentError(f"{name} must expose read(), got {type(value).__name__}")
