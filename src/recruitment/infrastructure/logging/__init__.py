"""
Process-wide logging setup.

Stores log through the standard ``logging`` module; workflow audit lines go
through loguru. ``configure_logging`` points both at the same level and,
optionally, the same file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from recruitment.config import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None, *, force: bool = False) -> logging.Logger:
    config = config or LoggingConfig()
    level = getattr(logging, str(config.level).upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        Path(config.file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    logging.basicConfig(level=level, format=config.format, handlers=handlers, force=force)

    logger.remove()
    logger.add(sys.stderr, level=logging.getLevelName(level))
    if config.file:
        logger.add(config.file, level=logging.getLevelName(level), encoding="utf-8")

    return logging.getLogger("recruitment")


__all__ = ["configure_logging"]
