import importlib.metadata

from loguru import logger

from worker_nodes.core.options import UNBOUNDED, WorkerNodesOptions, WorkerOptions

try:
    __version__ = importlib.metadata.version("worker-nodes")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

# Silent as a library until the application calls setup_logging.
logger.disable("worker_nodes")

__all__ = ["UNBOUNDED", "WorkerNodesOptions", "WorkerOptions", "__version__"]
