"""Centralized logging configuration."""

import sys
from typing import Any

from loguru import logger

from worker_nodes.core.config import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the logging system.

    Also enables the package logs, which are disabled on import.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.

    """
    config = config or LoggingConfig()
    logger.remove()
    logger.configure(extra={"name": "worker_nodes"})
    logger.add(sys.stderr, level=config.level, format=config.format)
    logger.enable("worker_nodes")


def get_logger(name: str) -> Any:  # Loguru type stubs are incomplete
    """Get a logger instance bound to the given name."""
    return logger.bind(name=name)
