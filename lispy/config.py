from __future__ import annotations
import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_HISTORY_FILE = "history.txt"
_DEFAULT_PROMPT = "lispy> "
_DEFAULT_LOG_LEVEL = "WARNING"
# Each Lisp call costs several Python frames
_DEFAULT_RECURSION_LIMIT = 20000


def get_history_file() -> Path:
    return Path(os.environ.get("LISPY_HISTORY_FILE") or _DEFAULT_HISTORY_FILE)


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT") or _DEFAULT_PROMPT


def get_log_level() -> str:
    return (os.environ.get("LISPY_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    """Return LISPY_RECURSION_LIMIT as an int; the default when unset or invalid."""
    raw = os.environ.get("LISPY_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer LISPY_RECURSION_LIMIT=%r", raw)
        return _DEFAULT_RECURSION_LIMIT
    if limit <= 0:
        logger.warning("Ignoring non-positive LISPY_RECURSION_LIMIT=%r", raw)
        return _DEFAULT_RECURSION_LIMIT
    return limit
