"""Logging setup and object graph wiring for the stdio server.

Usage:
    log_file = configure_server_logging(Path("mcp-server.log"))
    server = build_server(config)
    await server.run()
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

from simplemcp.config.schema import Config
from simplemcp.rpc.dispatcher import Dispatcher
from simplemcp.rpc.stdio import StdioServer
from simplemcp.skill.builtin import register_builtin_skills
from simplemcp.skill.registry import SkillRegistry

logger = logging.getLogger(__name__)

LOGGER_NAME = "simplemcp"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_server_logging(
    log_file: Path,
    level: int = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> Path | None:
    """Configure append-only file logging for the simplemcp namespace.

    stdout carries the protocol, so nothing is ever logged there. If the log
    file cannot be opened, logging falls back to stderr and the server keeps
    running.

    Args:
        log_file: Path of the log file. Parent directories are created.
        level: Logging level (default INFO).
        max_bytes: Rotate once the file reaches this size.
        backup_count: Number of rotated files to keep.

    Returns:
        Path to the log file, or None if the stderr fallback is in use.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler: logging.Handler
    configured: Path | None
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            mode="a",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        configured = log_file
    except OSError as e:
        handler = logging.StreamHandler(sys.stderr)
        configured = None
        print(f"simplemcp: cannot open log file {log_file}: {e}", file=sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    package_logger.addHandler(handler)
    package_logger.propagate = False

    logger.info("Server logging configured: %s", configured or "stderr")
    return configured


def build_server(
    config: Config,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> StdioServer:
    """Create the registry, dispatcher and stdio loop for a config.

    Args:
        config: Loaded configuration.
        input_stream: Request stream (stdin by default).
        output_stream: Response stream (stdout by default).

    Returns:
        A StdioServer ready to run.
    """
    registry = SkillRegistry()
    register_builtin_skills(registry, config.fetch)
    dispatcher = Dispatcher(registry, config.server)
    return StdioServer(dispatcher, input_stream, output_stream)
