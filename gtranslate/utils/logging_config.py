from __future__ import annotations

import logging
from pathlib import Path

from loguru import logger


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).bind(name=record.name).log(level, record.getMessage())


def configure_logging(log_file: Path | None = None, *, verbose: bool = False) -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level="DEBUG" if verbose else "INFO")
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=5)
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.DEBUG if verbose else logging.INFO, force=True)
