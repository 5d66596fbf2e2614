"""CLI entry point for worker-nodes."""

from pathlib import Path
from typing import Any, NoReturn

import typer
import yaml
from loguru import logger

from worker_nodes.core.config import LoggingConfig
from worker_nodes.core.config_loader import load_options
from worker_nodes.core.exceptions import WorkerNodesError
from worker_nodes.core.logging import setup_logging
from worker_nodes.core.options import WorkerNodesOptions

app = typer.Typer(help="worker-nodes: inspect worker pool options")


@app.callback()
def callback() -> None:
    """worker-nodes CLI."""


def _handle_error(e: Exception) -> NoReturn:
    """Handle exceptions and exit."""
    if isinstance(e, WorkerNodesError):
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    logger.exception("An unexpected error occurred")
    typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from e


def _load(config_path: Path, strict: bool, verbose: bool) -> WorkerNodesOptions:
    setup_logging(LoggingConfig(level="DEBUG" if verbose else "WARNING"))
    options = load_options(config_path)
    if strict:
        options.ensure_valid()
    return options


def _echo_yaml(data: dict[str, Any]) -> None:
    typer.echo(yaml.safe_dump(data, sort_keys=False), nl=False)


@app.command()
def show(
    config_path: Path = typer.Argument(  # noqa: B008
        ..., help="Path to the options file", exists=True, dir_okay=False
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on options that are not numbers"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the resolved pool options."""
    try:
        options = _load(config_path, strict, verbose)
        _echo_yaml(options.to_dict())
    except Exception as e:
        _handle_error(e)


@app.command()
def worker(
    config_path: Path = typer.Argument(  # noqa: B008
        ..., help="Path to the options file", exists=True, dir_okay=False
    ),
    src_file_path: str = typer.Argument(..., help="Entry file the worker loads"),
    strict: bool = typer.Option(False, "--strict", help="Fail on options that are not numbers"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the options a worker loading SRC_FILE_PATH would receive."""
    try:
        options = _load(config_path, strict, verbose)
        _echo_yaml(options.get_worker_options(src_file_path).to_dict())
    except Exception as e:
        _handle_error(e)
