"""Unit tests for the JSON-RPC Dispatcher."""

from typing import Any

import pytest

from simplemcp.config.schema import ServerConfig
from simplemcp.core.types import ToolResult
from simplemcp.rpc.dispatcher import Dispatcher, InvalidParamsError, parse_call_params
from simplemcp.rpc.types import Request
from simplemcp.skill.base import BaseSkill, object_schema
from simplemcp.skill.registry import SkillRegistry


class ExplodingSkill(BaseSkill):
    """Skill that fails with an unexpected exception."""

    def __init__(self) -> None:
        super().__init__("explode", "Always fails", object_schema({}))

    async def run(self, **kwargs: Any) -> ToolResult:
        raise RuntimeError("kaboom")


def call(name: Any, arguments: Any = None, request_id: Any = 1) -> Request:
    params: dict[str, Any] = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return Request(jsonrpc="2.0", method="tools/call", params=params, id=request_id)


class TestProtocolMethods:
    """Tests for initialize, ping, tools/list and unknown methods."""

    @pytest.mark.asyncio
    async def test_initialize(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(Request("2.0", "initialize", {}, 1))

        assert response.error is None
        assert response.result["protocolVersion"] == "2024-11-05"
        assert response.result["capabilities"] == {"tools": {}}
        assert response.result["serverInfo"]["name"] == "simplemcp"
        assert response.result["serverInfo"]["version"]

    @pytest.mark.asyncio
    async def test_initialize_uses_server_config(self, registry: SkillRegistry) -> None:
        dispatcher = Dispatcher(registry, ServerConfig(name="custom", version="9.9"))
        response = await dispatcher.dispatch(Request("2.0", "initialize", None, 1))

        assert response.result["serverInfo"] == {"name": "custom", "version": "9.9"}

    @pytest.mark.asyncio
    async def test_ping(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(Request("2.0", "ping", None, 1))
        assert response.result == {}

    @pytest.mark.asyncio
    async def test_unknown_method(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(Request("2.0", "resources/list", None, 5))

        assert response.result is None
        assert response.error == {
            "code": -32601,
            "message": "Method not found: resources/list",
        }

    @pytest.mark.asyncio
    async def test_tools_list_matches_registry(
        self, dispatcher: Dispatcher, registry: SkillRegistry
    ) -> None:
        response = await dispatcher.dispatch(Request("2.0", "tools/list", None, 2))
        tools = response.result["tools"]

        assert [t["name"] for t in tools] == registry.names
        for tool in tools:
            schema = tool["inputSchema"]
            assert tool["description"]
            assert schema["type"] == "object"
            assert isinstance(schema["properties"], dict)
            assert set(schema["required"]) <= set(schema["properties"])
            for prop in schema["properties"].values():
                assert prop["type"]
                assert prop["description"]

    @pytest.mark.asyncio
    async def test_tools_list_empty_registry(self) -> None:
        dispatcher = Dispatcher(SkillRegistry())
        response = await dispatcher.dispatch(Request("2.0", "tools/list", None, 2))
        assert response.result == {"tools": []}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("request_id", [None, 0, 42, -1, 2.5, "", "abc-123"])
    async def test_id_round_trips(self, dispatcher: Dispatcher, request_id: Any) -> None:
        ok = await dispatcher.dispatch(Request("2.0", "ping", None, request_id))
        err = await dispatcher.dispatch(Request("2.0", "nope", None, request_id))

        assert ok.id == request_id
        assert err.id == request_id


class TestToolsCall:
    """Tests for tools/call routing and error-code mapping."""

    @pytest.mark.asyncio
    async def test_success(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("calculate", {"expression": "2 + 2"}))

        assert response.error is None
        content = response.result["content"]
        assert content[0]["type"] == "text"
        assert "4.00" in content[0]["text"]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("does_not_exist", {}))

        assert response.result is None
        assert response.error["code"] == -32601
        assert "does_not_exist" in response.error["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [None, [], "calculate", 12, {"name": 5}])
    async def test_unparsable_params(self, dispatcher: Dispatcher, params: Any) -> None:
        response = await dispatcher.dispatch(Request("2.0", "tools/call", params, 1))

        assert response.result is None
        assert response.error["code"] == -32602

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("calculate", {"expression": 5}))

        assert response.error["code"] == -32602
        assert "invalid arguments" in response.error["message"]

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("get_weather", "London"))
        assert response.error["code"] == -32602

    @pytest.mark.asyncio
    async def test_division_by_zero(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("calculate", {"expression": "10 / 0"}))

        assert response.result is None
        assert response.error["code"] == -32603
        assert "division by zero" in response.error["message"]

    @pytest.mark.asyncio
    async def test_unsupported_expression(self, dispatcher: Dispatcher) -> None:
        response = await dispatcher.dispatch(call("calculate", {"expression": "abc + 2"}))

        assert response.error["code"] == -32603
        assert "unsupported expression format" in response.error["message"]

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_internal_error(self) -> None:
        registry = SkillRegistry()
        registry.register("explode", ExplodingSkill())
        dispatcher = Dispatcher(registry)

        response = await dispatcher.dispatch(call("explode", {}))

        assert response.error["code"] == -32603
        assert "RuntimeError" in response.error["message"]
        assert "kaboom" in response.error["message"]

    @pytest.mark.asyncio
    async def test_missing_arguments_for_optional_schema(self, dispatcher: Dispatcher) -> None:
        """get_time has no required arguments, so no payload is fine."""
        response = await dispatcher.dispatch(call("get_time", request_id="t"))

        assert response.error is None
        assert response.result["content"][0]["text"].startswith("Current time in Local:")


class TestParseCallParams:
    """Tests for parse_call_params()."""

    def test_name_and_arguments(self) -> None:
        params = parse_call_params({"name": "calculate", "arguments": {"expression": "1+1"}})
        assert params.name == "calculate"
        assert params.arguments == {"expression": "1+1"}

    def test_arguments_optional(self) -> None:
        assert parse_call_params({"name": "get_time"}).arguments is None

    def test_missing_name_is_empty(self) -> None:
        assert parse_call_params({}).name == ""

    def test_not_an_object(self) -> None:
        with pytest.raises(InvalidParamsError, match="Invalid params"):
            parse_call_params(["calculate"])
