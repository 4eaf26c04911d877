"""Newline-delimited JSON-RPC over stdin/stdout.

One request per input line, one response per output line. Lines are handled
strictly in order: a line is parsed, dispatched and answered before the next
one is read. Lines that cannot be parsed as a request are logged and dropped
without a response.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TextIO

from simplemcp.rpc.dispatcher import Dispatcher
from simplemcp.rpc.protocol import ParseError, parse_request, serialize_response

logger = logging.getLogger(__name__)


class StdioServer:
    """Read loop binding a Dispatcher to a pair of text streams.

    Attributes:
        _dispatcher: Routes parsed requests.
        _input: Stream requests are read from (stdin by default).
        _output: Stream responses are written to (stdout by default).
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

    async def handle_line(self, line: str) -> str | None:
        """Handle a single input line.

        Args:
            line: One line of input, without the trailing newline.

        Returns:
            The serialized response, or None if the line was dropped.
        """
        logger.info("Received: %s", line)

        try:
            request = parse_request(line)
        except ParseError as e:
            logger.warning("Error parsing request: %s", e.message)
            return None

        response = await self._dispatcher.dispatch(request)
        output = serialize_response(response)
        logger.info("Sending: %s", output)
        return output

    def _write(self, output: str) -> None:
        self._output.write(output + "\n")
        self._output.flush()

    async def run(self) -> None:
        """Serve requests until the input stream is closed."""
        logger.info("MCP server started")

        while True:
            try:
                # Blocking read, run in thread
                line = await asyncio.to_thread(self._input.readline)
            except (OSError, ValueError) as e:
                logger.error("Input stream error: %s", e)
                break

            if not line:
                break

            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            output = await self.handle_line(line)
            if output is not None:
                self._write(output)

        logger.info("Input closed, MCP server stopping")
