"""Logging utilities for planeseg.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All planeseg code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'planeseg'


def _ensure_planeseg_root() -> logging.Logger:
    """Ensure the 'planeseg' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'planeseg' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    # The package __init__ only adds a NullHandler; swap it for a StreamHandler
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'planeseg' logger family level.

    This does NOT modify the process root logger. With ``mute_external`` the
    numba compiler loggers are held at INFO so DEBUG runs stay readable.
    """
    root = _ensure_planeseg_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('numba', 'numba.core'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'planeseg' namespace.

    Without a level the logger is NOTSET and inherits from the 'planeseg'
    parent configured via configure_logging().
    """
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
