"""JSON-RPC 2.0 protocol parsing and serialization."""

import json
from typing import Any

from simplemcp.core.errors import SimpleMcpError
from simplemcp.rpc.types import Request, RequestId, Response


class ParseError(SimpleMcpError):
    """Raised when JSON-RPC request parsing fails."""


JSONRPC_VERSION = "2.0"

# JSON-RPC 2.0 error codes
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def parse_request(line: str) -> Request:
    """Parse a JSON line into a JSON-RPC 2.0 Request.

    Only undecodable JSON and non-object values are rejected. The rest of
    the envelope is taken as sent: params and id are kept as-is, jsonrpc is
    not checked, and a missing or non-string method becomes "" so the
    request is answered with method-not-found.

    Args:
        line: A single line of JSON text.

    Returns:
        A parsed Request object.

    Raises:
        ParseError: If the line is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Request must be a JSON object")

    method = data.get("method")
    if not isinstance(method, str):
        method = ""

    return Request(
        jsonrpc=data.get("jsonrpc", JSONRPC_VERSION),
        method=method,
        params=data.get("params"),
        id=data.get("id"),
    )


def serialize_response(response: Response) -> str:
    """Serialize a Response to a JSON line.

    Args:
        response: The Response object to serialize.

    Returns:
        A single line of JSON text (no trailing newline).
    """
    data: dict[str, Any] = {
        "jsonrpc": response.jsonrpc,
        "id": response.id,
    }

    if response.error is not None:
        data["error"] = response.error
    else:
        data["result"] = response.result

    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def make_error_response(
    request_id: RequestId,
    code: int,
    message: str,
) -> Response:
    """Create an error response.

    Args:
        request_id: The id from the original request.
        code: JSON-RPC error code.
        message: Human-readable error message.

    Returns:
        A Response with the error field populated.
    """
    return Response(
        jsonrpc=JSONRPC_VERSION,
        id=request_id,
        error={"code": code, "message": message},
    )


def make_success_response(request_id: RequestId, result: Any) -> Response:
    """Create a success response.

    Args:
        request_id: The id from the original request.
        result: The result of the method call.

    Returns:
        A Response with the result field populated.
    """
    return Response(
        jsonrpc=JSONRPC_VERSION,
        id=request_id,
        result=result,
    )
