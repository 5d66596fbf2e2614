"""Loading pool options from YAML files."""

import os
from pathlib import Path

import yaml

from worker_nodes.core.config import CONSTANTS
from worker_nodes.core.exceptions import ConfigurationError
from worker_nodes.core.logging import get_logger
from worker_nodes.core.options import WorkerNodesOptions

logger = get_logger(__name__)


def _check_file_size(file_size: int) -> None:
    """Check if file size exceeds limit."""
    if file_size > CONSTANTS.max_config_size:
        msg = f"Configuration file too large: {file_size} bytes (max {CONSTANTS.max_config_size})"
        raise ConfigurationError(msg, details={"size": file_size})


def load_options(path: Path) -> WorkerNodesOptions:
    """Load pool options from a YAML file.

    The file holds a flat mapping of options, as accepted by ``WorkerNodesOptions``.
    An empty file yields the defaults.

    Args:
        path: Path to the YAML options file.

    Returns:
        Resolved WorkerNodesOptions object.

    Raises:
        ConfigurationError: If the file cannot be read or does not hold a mapping.

    """
    if not path.exists() or not path.is_file():
        msg = f"Configuration file not found or invalid: {path.name}"
        raise ConfigurationError(msg)

    if not os.access(path, os.R_OK):
        msg = f"Permission denied: {path.name}"
        raise ConfigurationError(msg)

    try:
        _check_file_size(path.stat().st_size)
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML configuration: {e}"
        raise ConfigurationError(msg, details={"original_error": str(e)}) from e
    except OSError as e:
        msg = f"Error reading configuration file: {e}"
        raise ConfigurationError(msg, details={"filename": path.name}) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Configuration file must contain a YAML dictionary."
        raise ConfigurationError(msg, details={"actual_type": type(data).__name__})

    logger.debug(f"Loaded {len(data)} options from {path.name}")
    return WorkerNodesOptions.from_mapping(data)
