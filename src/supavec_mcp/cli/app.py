"""Main CLI application.

``supavec-mcp`` resolves the Supavec API key, configures logging and
serves the MCP tools on stdio.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, Any

import click

from supavec_mcp import __version__
from supavec_mcp.config.loader import load_config, require_api_key
from supavec_mcp.core.errors import ConfigError

if TYPE_CHECKING:
    from supavec_mcp.config.schema import LoggingConfig, SupavecConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(
    config_path: str | None,
    overrides: dict[str, Any] | None = None,
) -> SupavecConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path, overrides=overrides)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _setup_logging(config: LoggingConfig) -> None:
    """Configure root logging on stderr; stdout carries the MCP stream."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))
    logging.basicConfig(
        level=config.level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ── CLI ──────────────────────────────────────────────────────────


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="supavec-mcp")
@click.option(
    "--api-key",
    default=None,
    help="Supavec API key (overrides SUPAVEC_API_KEY).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (overrides config).",
)
def cli(api_key: str | None, config_path: str | None, log_level: str | None) -> None:
    """Supavec MCP Server.

    Exposes Supavec embeddings search and file listing as MCP tools
    over stdio.  The API key comes from --api-key or the SUPAVEC_API_KEY
    environment variable.
    """
    overrides: dict[str, Any] = {}
    if api_key:
        overrides["api"] = {"api_key": api_key}
    if log_level:
        overrides["logging"] = {"level": log_level}

    config = _load_config(config_path, overrides)
    try:
        require_api_key(config)
    except ConfigError as e:
        _error(str(e))

    _setup_logging(config.logging)

    from supavec_mcp.mcp.server import run_server

    asyncio.run(run_server(config))
