from __future__ import annotations

"""
Library Logging Setup.

The package logger ships with a NullHandler only; applications that want
to see the library's diagnostics call configure_logging(). Configuration
is idempotent and scoped to the 'ioreader' logger, leaving the root
logger to the host application.
"""

import logging
import sys
from typing import List

from ioreader.infra.logging.config import _LEVEL_MAP, LoggingConfig
from ioreader.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

PACKAGE_LOGGER_NAME = "ioreader"

_CONFIGURED_FLAG_ATTR: str = "_ioreader_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach console and/or rotating file handlers to the package logger.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    previously installed handlers are closed and replaced.

    Args:
        cfg: Logging specification.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The 'ioreader' logger.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER_NAME)

    if getattr(pkg, _CONFIGURED_FLAG_ATTR, False) and not force:
        return pkg

    try:
        level_int = _parse_level(cfg.level)
        _remove_our_handlers(pkg)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            handlers_list.append(
                _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
            )

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        for h in handlers_list:
            pkg.addHandler(h)

        pkg.setLevel(level_int)
        pkg.propagate = cfg.propagate
        setattr(pkg, _CONFIGURED_FLAG_ATTR, True)
        return pkg

    # Logging must never break a read; degrade to a bare stderr handler
    except Exception:
        _remove_our_handlers(pkg)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        pkg.addHandler(sh)
        pkg.warning("ioreader logging setup failed. Using fallback console handler.")
        return pkg


def get_logger(name: str) -> logging.Logger:
    """Return a logger, nesting bare names under the package logger."""
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Detach every handler this module installed and restore defaults."""
    pkg = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_our_handlers(pkg)
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True
    if hasattr(pkg, _CONFIGURED_FLAG_ATTR):
        delattr(pkg, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if _is_our_handler(h):
            logger.removeHandler(h)
            try:
                h.close()
            except Exception:
                pass
