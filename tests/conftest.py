"""Fixtures for the test suite."""

from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def clean_logger() -> Generator[None, None, None]:
    """Reset logger sinks and the package log switch around each test."""
    logger.remove()
    logger.disable("worker_nodes")
    yield
    logger.remove()
    logger.disable("worker_nodes")


@pytest.fixture
def options_file(tmp_path: Path) -> Path:
    """Provide an options file with a few non-default values."""
    path = tmp_path / "options.yaml"
    path.write_text(
        "autoStart: true\n"
        "maxWorkers: 4\n"
        "maxTasksPerWorker: '2'\n"
        "taskTimeout: 5000\n"
        "workerEndurance: 100\n"
        "resourceLimits:\n"
        "  stackSizeMb: 4\n",
        encoding="utf-8",
    )
    return path
