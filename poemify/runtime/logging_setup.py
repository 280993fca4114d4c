"""Logging configuration for the poemify command-line tools."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
