"""Argument parsing for the simplemcp CLI."""

import argparse
from collections.abc import Sequence
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="simplemcp",
        description="Line-delimited JSON-RPC tool server over stdin/stdout",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        metavar="PATH",
        help="Config file (default: ./simplemcp.json if present)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Append log to PATH (default: mcp-server.log)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level for the log file (default: INFO)",
    )
    parser.add_argument(
        "--fetch-timeout",
        type=float,
        metavar="SECONDS",
        help="Timeout for fetch_webpage requests (default: 30)",
    )
    return parser.parse_args(argv)
