"""
utils/logging_setup.py
----------------------

Central logging configuration for the prakriya engine.

Goals:
- Provide a single place to configure logging format and level.
- Make it easy to get a logger in any module:
      from utils.logging_setup import get_logger
      log = get_logger(__name__)
- Route structlog events through the standard library so that one
  handler set serves both.
- Take defaults from the engine settings, so that the environment or a
  .env file can set them:
      PRAKRIYA_LOG_LEVEL    (e.g. DEBUG, INFO, WARNING, ERROR)
      PRAKRIYA_LOG_FORMAT   (console or json)

Usage
=====

In your module:

    from utils.logging_setup import get_logger

    log = get_logger(__name__)

    log.info("derivation_started", dhatu="BU", lakara="lat")

In your CLI script:

    from utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()  # ensures consistent global config

Implementation notes
====================

- `init_logging` is idempotent; calling it multiple times is safe.
- Engine modules get their loggers from `get_logger`, so the first import
  of the engine configures logging at the settings level (INFO unless
  overridden). Debug events stay silent and nothing is written to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

import structlog

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "iso"


def _get_settings_log_level() -> int:
    """
    Read LOG_LEVEL from the engine settings and map it to a logging level.
    Defaults to logging.INFO if invalid.
    """
    # Imported here: engine modules import this one while prakriya loads.
    from prakriya.config import settings

    return _coerce_level(settings.LOG_LEVEL)


def _settings_want_json() -> bool:
    from prakriya.config import LogFormat, settings

    return settings.LOG_FORMAT == LogFormat.JSON


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def init_logging(
    level: Optional[Union[int, str]] = None,
    *,
    json_output: Optional[bool] = None,
    force: bool = False,
) -> None:
    """
    Initialize root logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG or "DEBUG"). If None, it is
            read from settings.LOG_LEVEL (PRAKRIYA_LOG_LEVEL in the
            environment or .env), defaulting to INFO.
        json_output:
            Render events as JSON lines instead of the console format. If
            None, settings.LOG_FORMAT decides.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    level = _get_settings_log_level() if level is None else _coerce_level(level)
    if json_output is None:
        json_output = _settings_want_json()

    # Logs go to stderr so that derived forms on stdout stay clean.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structlog logger bound to ``name``, ensuring logging is initialized.

    If logging has not been initialized yet, this will initialize it with
    default settings (level from settings.LOG_LEVEL, stderr output only).
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
