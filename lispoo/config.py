from __future__ import annotations
import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_RECURSION_LIMIT = 10000


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_log_level() -> int:
    name = os.environ.get("LISPOO_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    return max(int_from_env("LISPOO_RECURSION_LIMIT", DEFAULT_RECURSION_LIMIT), 100)


def strict_unbound() -> bool:
    return flag_from_env("LISPOO_STRICT_UNBOUND")
