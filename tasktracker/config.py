"""
Runtime configuration read from environment variables.

Invalid values never stop the service: they are logged and replaced by the
default, so a typo in ``PORT`` still gives a server on 8080.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _int_env(env: Mapping[str, str], name: str, default: int, minimum: int, maximum: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value < minimum or value > maximum:
        logger.warning(
            f"{name} value {value} is outside {minimum}-{maximum}. Using default: {default}"
        )
        return default
    return value


def _bool_env(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} value: {raw}. Using default: {default}")
    return default


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    seed_tasks: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            host=env.get("HOST", "").strip() or DEFAULT_HOST,
            port=_int_env(env, "PORT", DEFAULT_PORT, 1, 65535),
            log_level=env.get("LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL,
            log_file=env.get("LOG_FILE") or None,
            seed_tasks=_bool_env(env, "SEED_TASKS", False),
        )
