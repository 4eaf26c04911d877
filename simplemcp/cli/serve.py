"""stdio server mode for simplemcp.

Reads one JSON-RPC request per line from stdin and writes one response per
line to stdout. All diagnostics go to the log file.

Example:
    simplemcp --log-file /tmp/mcp.log
    python -m simplemcp
"""

import argparse
import asyncio
import io
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from simplemcp.cli.arg_parser import parse_args
from simplemcp.config.loader import load_config
from simplemcp.config.schema import Config
from simplemcp.core.errors import SimpleMcpError
from simplemcp.rpc.bootstrap import build_server, configure_server_logging

logger = logging.getLogger(__name__)


def configure_protocol_streams() -> None:
    """Put the std streams into UTF-8 mode for line-delimited JSON.

    Undecodable input bytes and unencodable output characters are replaced
    instead of raising mid-request. stdout always ends lines with "\\n".
    """
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace", newline="\n")
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(encoding="utf-8", errors="backslashreplace")


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of config with command line flags applied."""
    logging_update: dict[str, object] = {}
    if args.log_file is not None:
        logging_update["file"] = str(args.log_file)
    if args.log_level is not None:
        logging_update["level"] = args.log_level

    fetch_update: dict[str, object] = {}
    if args.fetch_timeout is not None:
        fetch_update["timeout"] = args.fetch_timeout

    return config.model_copy(update={
        "logging": config.logging.model_copy(update=logging_update),
        "fetch": config.fetch.model_copy(update=fetch_update),
    })


async def run_serve(config: Config) -> None:
    """Run the stdio server until stdin is closed.

    Args:
        config: Loaded configuration.
    """
    configure_server_logging(
        Path(config.logging.file),
        level=getattr(logging, config.logging.level),
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
    )

    server = build_server(config)
    await server.run()


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point."""
    configure_protocol_streams()
    load_dotenv()

    args = parse_args(argv)

    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except SimpleMcpError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    if args.fetch_timeout is not None and args.fetch_timeout <= 0:
        print("Configuration error: --fetch-timeout must be positive", file=sys.stderr)
        return 1

    try:
        asyncio.run(run_serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0
