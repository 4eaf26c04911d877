"""JSON-RPC method routing for the tool server.

The Dispatcher maps protocol methods to handler coroutines and converts
handler outcomes into Response objects:

- initialize: fixed protocol/capability/server-identity descriptor
- ping: empty result, for liveness checks
- tools/list: descriptors of every registered tool
- tools/call: argument hand-off to a registered tool

Every parsed request gets exactly one response, including requests whose id
is null.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from simplemcp.config.schema import ServerConfig
from simplemcp.core.errors import SimpleMcpError
from simplemcp.rpc.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    make_error_response,
    make_success_response,
)
from simplemcp.rpc.types import CallToolParams, Request, Response
from simplemcp.skill.errors import InvalidArgumentsError, ToolNotFoundError
from simplemcp.skill.registry import SkillRegistry

logger = logging.getLogger(__name__)

# Type alias for handler functions
Handler = Callable[[Any], Coroutine[Any, Any, dict[str, Any]]]


class InvalidParamsError(SimpleMcpError):
    """Raised when method parameters are invalid."""


def parse_call_params(params: Any) -> CallToolParams:
    """Parse tools/call params into a CallToolParams.

    Args:
        params: Raw params from the request.

    Returns:
        The tool name and its raw argument payload.

    Raises:
        InvalidParamsError: If params is not an object or name is not a string.
    """
    if not isinstance(params, dict):
        raise InvalidParamsError(
            f"Invalid params: expected object, got {type(params).__name__}"
        )

    name = params.get("name", "")
    if not isinstance(name, str):
        raise InvalidParamsError(
            f"Invalid params: name must be a string, got {type(name).__name__}"
        )

    return CallToolParams(name=name, arguments=params.get("arguments"))


class Dispatcher:
    """Routes JSON-RPC requests to protocol handlers and registered tools.

    Attributes:
        _registry: Tool registry consulted by tools/list and tools/call.
        _server: Server identity advertised by initialize.
        _handlers: Mapping of method names to handler coroutines.
    """

    def __init__(
        self,
        registry: SkillRegistry,
        server: ServerConfig | None = None,
    ) -> None:
        self._registry = registry
        self._server = server or ServerConfig()
        self._handlers: dict[str, Handler] = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    async def dispatch(self, request: Request) -> Response:
        """Dispatch a request to the appropriate handler.

        Args:
            request: The parsed JSON-RPC request.

        Returns:
            A Response carrying either the handler result or an error.
        """
        handler = self._handlers.get(request.method)
        if handler is None:
            return make_error_response(
                request.id,
                METHOD_NOT_FOUND,
                f"Method not found: {request.method}",
            )

        try:
            result = await handler(request.params)
            return make_success_response(request.id, result)

        except (InvalidParamsError, InvalidArgumentsError) as e:
            return make_error_response(request.id, INVALID_PARAMS, e.message)

        except ToolNotFoundError as e:
            return make_error_response(request.id, METHOD_NOT_FOUND, e.message)

        except SimpleMcpError as e:
            return make_error_response(request.id, INTERNAL_ERROR, e.message)

        except Exception as e:
            logger.error(
                "Unexpected error dispatching method '%s': %s",
                request.method,
                e,
                exc_info=True,
            )
            return make_error_response(
                request.id,
                INTERNAL_ERROR,
                f"Internal error: {type(e).__name__}: {e}",
            )

    async def _handle_initialize(self, params: Any) -> dict[str, Any]:
        return {
            "protocolVersion": self._server.protocol_version,
            "capabilities": {
                "tools": {},
            },
            "serverInfo": {
                "name": self._server.name,
                "version": self._server.version,
            },
        }

    async def _handle_ping(self, params: Any) -> dict[str, Any]:
        return {}

    async def _handle_tools_list(self, params: Any) -> dict[str, Any]:
        return {"tools": self._registry.get_definitions()}

    async def _handle_tools_call(self, params: Any) -> dict[str, Any]:
        """Run a registered tool.

        Raises:
            InvalidParamsError: If params cannot be read as a tool invocation.
            ToolNotFoundError: If no tool is registered under the given name.
            InvalidArgumentsError: If the tool rejects its arguments.
            ToolExecutionError: If the tool fails.
        """
        call = parse_call_params(params)

        skill = self._registry.get(call.name)
        if skill is None:
            raise ToolNotFoundError(call.name)

        logger.debug("Calling tool %s", call.name)
        result = await skill.execute(call.arguments)
        return result.to_dict()
