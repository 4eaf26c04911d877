"""JSON-RPC 2.0 over stdio for simplemcp.

Example usage:
    echo '{"jsonrpc":"2.0","method":"tools/list","id":1}' | simplemcp
"""

from simplemcp.rpc.dispatcher import Dispatcher, InvalidParamsError, parse_call_params
from simplemcp.rpc.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ParseError,
    make_error_response,
    make_success_response,
    parse_request,
    serialize_response,
)
from simplemcp.rpc.stdio import StdioServer
from simplemcp.rpc.types import CallToolParams, Request, Response

__all__ = [
    "Dispatcher",
    "InvalidParamsError",
    "parse_call_params",
    "StdioServer",
    "CallToolParams",
    "Request",
    "Response",
    "ParseError",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "parse_request",
    "serialize_response",
    "make_error_response",
    "make_success_response",
]
