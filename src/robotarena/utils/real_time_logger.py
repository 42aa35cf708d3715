"""Package logger for console sessions and batch runs.

Modules ask for a named child (``get_logger("arena")`` gives
``robotarena.arena``) so load warnings and file errors say where they came
from. The level comes from ``ROBOTARENA_LOG_LEVEL`` and defaults to INFO.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "robotarena"
LEVEL_ENV_VAR = "ROBOTARENA_LOG_LEVEL"

_ROOT: Optional[logging.Logger] = None


def level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get(LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``robotarena`` logger, or its child ``name``, configured once for console output."""

    global _ROOT
    if _ROOT is None:
        _ROOT = logging.getLogger(ROOT_LOGGER_NAME)
        if not _ROOT.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
            _ROOT.addHandler(handler)
        _ROOT.setLevel(level_from_env())
    return _ROOT.getChild(name) if name else _ROOT
