from __future__ import annotations

"""
Reader Settings Domain.

Holds the immutable tuning knobs shared by every read operation and the
schema validation used to build them from loosely-typed input (dicts
coming from an application's own configuration layer).
"""

import codecs
import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Tuple

from ioreader.domain.constants import (
    DECODE_ERROR_POLICIES,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DECODE_ERRORS,
    DEFAULT_ENCODING,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Settings Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReaderSettings:
    """
    Immutable read configuration.

    Attributes:
        default_encoding: Codec used when the caller passes no encoding.
        chunk_size: Bytes (or characters) pulled per read call.
        decode_errors: Policy for malformed input ('strict', 'replace', 'ignore').
    """
    default_encoding: str = DEFAULT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE
    decode_errors: str = DEFAULT_DECODE_ERRORS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = ReaderSettings()


def get_default_settings() -> ReaderSettings:
    """Return the library defaults."""
    return DEFAULT_SETTINGS


# -----------------------------------------------------------------------------
# Validation API
# -----------------------------------------------------------------------------

def validate_settings(
        raw: Any,
        *,
        strict: bool = False,
) -> Tuple[ReaderSettings, List[str]]:
    """
    Validate and normalize a settings payload.

    Never touches the filesystem. Values are merged over the defaults, so a
    partial dict is valid.

    strict=False:
      - Bad values are replaced by their default and a warning is recorded.
      - A payload that is not a dict falls back to the defaults.

    strict=True:
      - Bad values raise TypeError/ValueError.

    Args:
        raw: A dict of settings or an existing ReaderSettings instance.
        strict: Raise instead of correcting.

    Returns:
        Tuple[ReaderSettings, List[str]]: (normalized settings, warnings).
    """
    warnings: List[str] = []
    defaults = get_default_settings()

    if isinstance(raw, ReaderSettings):
        raw = raw.to_dict()

    if raw is None:
        return defaults, warnings

    if not isinstance(raw, dict):
        msg = f"Invalid settings: expected dict, got {type(raw).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + " Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    known = {f.name for f in fields(ReaderSettings)}
    for key in sorted(set(raw) - known, key=str):
        msg = f"Unknown settings key '{key}' ignored."
        warnings.append(msg)
        logger.warning(msg)

    settings = ReaderSettings(
        default_encoding=_as_encoding(
            raw.get("default_encoding"), defaults.default_encoding, warnings, strict
        ),
        chunk_size=_as_positive_int(
            raw.get("chunk_size"), defaults.chunk_size, "chunk_size", warnings, strict
        ),
        decode_errors=_as_policy(
            raw.get("decode_errors"), defaults.decode_errors, warnings, strict
        ),
    )
    return settings, warnings


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _as_encoding(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = f"Field 'default_encoding' invalid: expected str, got {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + " Using fallback.")
        logger.warning(msg)
        return fallback

    v = value.strip()
    if not v:
        return fallback
    try:
        info = codecs.lookup(v)
        if not getattr(info, "_is_text_encoding", True):
            raise LookupError(v)
        return info.name
    except LookupError:
        msg = f"Field 'default_encoding' invalid: unknown text codec '{value}'."
        if strict:
            raise ValueError(msg)
        warnings.append(msg + " Using fallback.")
        logger.warning(msg)
        return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback

    # bool is an int subclass; never accept it as a size
    if isinstance(value, int) and not isinstance(value, bool):
        if value > 0:
            return value
        msg = f"Field '{field}' invalid: must be > 0, got {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(msg + " Using fallback.")
        logger.warning(msg)
        return fallback

    if not strict and isinstance(value, str) and value.strip().isdigit():
        converted = int(value.strip())
        if converted > 0:
            warnings.append(f"Field '{field}' converted from str '{value}' to int.")
            return converted

    msg = f"Field '{field}' invalid: expected int, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + " Using fallback.")
    logger.warning(msg)
    return fallback


def _as_policy(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip().lower()
        if v in DECODE_ERROR_POLICIES:
            return v
        msg = f"decode_errors invalid: '{value}'. Allowed: {sorted(DECODE_ERROR_POLICIES)}."
        if strict:
            raise ValueError(msg)
        warnings.append(msg + f" Using fallback '{fallback}'.")
        logger.warning(msg)
        return fallback

    msg = f"decode_errors invalid: expected str, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + f" Using fallback '{fallback}'.")
    logger.warning(msg)
    return fallback
