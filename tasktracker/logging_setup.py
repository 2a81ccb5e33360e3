from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import Settings

# Numeric levels kept for parity with the CLI-style 0/1/2 verbosity knob.
_NUMERIC_LEVELS = {
    0: logging.CRITICAL + 1,
    1: logging.INFO,
    2: logging.DEBUG,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(raw: Optional[str]) -> int:
    if raw is None:
        return logging.INFO
    raw = raw.strip()
    if raw.isdigit():
        return _NUMERIC_LEVELS.get(int(raw), logging.ERROR)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> logging.Handler:
    level = resolve_level(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    root_logger.addHandler(handler)
    return handler
