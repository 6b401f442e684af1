from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    return int_from_env('THETA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> int:
    raw = os.environ.get('THETA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING
