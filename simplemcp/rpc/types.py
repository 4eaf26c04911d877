"""JSON-RPC 2.0 and tool-call types for simplemcp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Request identifiers are echoed back verbatim, never interpreted
RequestId = Any


@dataclass(frozen=True)
class Request:
    """JSON-RPC 2.0 request.

    Attributes:
        jsonrpc: Protocol version as sent by the client (normally "2.0").
        method: Name of the method to invoke.
        params: Raw parameters. Their structure is checked by the method handler.
        id: Request identifier, copied unchanged into the response.
    """

    jsonrpc: Any
    method: str
    params: Any = None
    id: RequestId = None


@dataclass
class Response:
    """JSON-RPC 2.0 response.

    Attributes:
        jsonrpc: Protocol version, always "2.0".
        id: Request identifier from the original request.
        result: Result of the method call (mutually exclusive with error).
        error: Error object if method failed (mutually exclusive with result).
    """

    jsonrpc: str
    id: RequestId
    result: Any | None = None
    error: dict[str, Any] | None = None


@dataclass(frozen=True)
class CallToolParams:
    """Parameters of a tools/call request.

    Attributes:
        name: Registered tool name.
        arguments: Raw argument payload, validated by the tool itself.
    """

    name: str
    arguments: Any = None
