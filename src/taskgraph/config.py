"""taskgraph runtime configuration helpers."""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, replace
from functools import lru_cache

_VERIFY_ENV = "TASKGRAPH_VERIFY_INVARIANTS"
_LOG_LEVEL_ENV = "TASKGRAPH_LOG_LEVEL"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

LOGGER = logging.getLogger(__name__)


def _env_str(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip() or None


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in {"", "0", "false", "no"}:
        return False
    if raw in {"1", "true", "yes"}:
        return True
    return default


@dataclass(frozen=True)
class Settings:
    """Pipeline settings resolved from the environment."""

    verify_invariants: bool = True
    log_level: str = "WARNING"

    def with_overrides(self, *, verify_invariants: bool | None = None, log_level: str | None = None) -> "Settings":
        updated = self
        if verify_invariants is not None:
            updated = replace(updated, verify_invariants=verify_invariants)
        if log_level is not None:
            updated = replace(updated, log_level=normalize_log_level(log_level))
        return updated


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level '{value}'. Choose one of: {', '.join(_LOG_LEVELS)}.")
    return level


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Resolve settings from ``TASKGRAPH_*`` environment variables."""

    verify = _env_bool(_VERIFY_ENV, default=True)
    raw_level = _env_str(_LOG_LEVEL_ENV)
    try:
        level = normalize_log_level(raw_level) if raw_level else "WARNING"
    except ValueError:
        LOGGER.warning("Ignoring %s=%r; falling back to WARNING.", _LOG_LEVEL_ENV, raw_level)
        level = "WARNING"
    LOGGER.debug("load_settings verify_invariants=%s log_level=%s", verify, level)
    return Settings(verify_invariants=verify, log_level=level)


__all__ = [
    "Settings",
    "load_settings",
    "normalize_log_level",
    "_VERIFY_ENV",
    "_LOG_LEVEL_ENV",
]
