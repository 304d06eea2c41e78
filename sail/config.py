from __future__ import annotations
import logging
import os
import sys
from typing import Optional

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> Optional[int]:
    """Native recursion limit requested by SAIL_RECURSION_LIMIT, or None."""
    limit = int_from_env('SAIL_RECURSION_LIMIT')
    if limit is not None and limit <= 0:
        raise ValueError(f"SAIL_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def apply_recursion_limit() -> int:
    """
    Raise the process-wide native recursion limit to SAIL_RECURSION_LIMIT.

    Hosts call this once at startup; it never lowers the current limit.
    Returns the limit now in effect.
    """
    limit = get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        logger.debug("Raising native recursion limit to %d", limit)
        sys.setrecursionlimit(limit)
    return sys.getrecursionlimit()


def get_log_level() -> str:
    return os.environ.get('SAIL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str | int] = None) -> None:
    """Install a basic stderr handler for hosts that have not configured logging."""
    if level is None:
        level = get_log_level()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
