"""Logging utilities for ovalmesh.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All ovalmesh code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER = 'ovalmesh'

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_root() -> logging.Logger:
    """Ensure the 'ovalmesh' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'ovalmesh' logger.
    """
    root = logging.getLogger(ROOT_LOGGER)
    # Replace the NullHandler added by the package __init__ with a real handler
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
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
    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, int):
        return resolved
    return default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the 'ovalmesh' logger family level.

    This does NOT modify the process root logger.
    """
    root = _ensure_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'ovalmesh' namespace.

    Names outside the namespace are prefixed so every logger inherits the
    handler and level set by configure_logging(). If a level is provided it is
    set on the logger; otherwise the logger is left at NOTSET and inherits.
    Handlers are only attached by configure_logging(), so importing the
    package stays silent.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + '.'):
        name = f'{ROOT_LOGGER}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_LOGGER']
