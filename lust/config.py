from __future__ import annotations
import logging
import os


_DEFAULT_NAMESPACE = "user"
_DEFAULT_MAX_DEPTH = 64
_DEFAULT_LOG_LEVEL = "WARNING"

SCRIPT_SUFFIX = ".ls"


def _int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_default_namespace() -> str:
    return os.environ.get("LUST_DEFAULT_NAMESPACE", "").strip() or _DEFAULT_NAMESPACE


def get_max_depth() -> int:
    """Deepest allowed chain of nested let/fn/macro scopes."""
    return _int_from_env("LUST_MAX_DEPTH", _DEFAULT_MAX_DEPTH)


def get_log_level() -> int:
    name = os.environ.get("LUST_LOG_LEVEL", "").strip().upper() or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
