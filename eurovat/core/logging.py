"""Logging setup for applications and scripts embedding the engine.

The library itself only creates module loggers; handlers are attached here,
on demand, by the host process.
"""
import logging
import sys
from typing import Optional

from eurovat.core.config import settings

DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Console logging on the root logger. Returns root logger.

    Level defaults to ``settings.log_level``. Calling it twice replaces the
    previous handlers instead of stacking them.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    for h in list(root.handlers):
        root.removeHandler(h)
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(settings.log_format, datefmt=DATE_FMT))
    root.addHandler(ch)
    return root
