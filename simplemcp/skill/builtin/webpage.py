"""Fetch a webpage and return its readable text."""

from typing import Any

import httpx

from simplemcp.config.schema import DEFAULT_USER_AGENT
from simplemcp.core.types import ToolResult
from simplemcp.skill.base import BaseSkill, object_schema, string_property
from simplemcp.skill.errors import InvalidArgumentsError, ToolExecutionError
from simplemcp.web.extract import DEFAULT_MAX_LENGTH
from simplemcp.web.fetch import (
    DEFAULT_TIMEOUT,
    FetchError,
    InvalidUrlError,
    fetch_page,
    format_page,
)


class WebPageSkill(BaseSkill):
    """Download a page over HTTP(S) and extract its text.

    Attributes:
        _timeout: Request timeout in seconds.
        _user_agent: User-Agent header sent with every request.
        _max_content_length: Cap on extracted HTML text.
        _client: Optional shared httpx client (used by tests).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        max_content_length: int = DEFAULT_MAX_LENGTH,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            name="fetch_webpage",
            description="Fetch and extract text content from a webpage",
            parameters=object_schema(
                {"url": string_property("URL of the webpage to fetch")},
                required=["url"],
            ),
        )
        self._timeout = timeout
        self._user_agent = user_agent
        self._max_content_length = max_content_length
        self._client = client

    async def run(self, url: str = "", **kwargs: Any) -> ToolResult:
        try:
            page = await fetch_page(
                url,
                timeout=self._timeout,
                user_agent=self._user_agent,
                client=self._client,
            )
        except InvalidUrlError as e:
            raise InvalidArgumentsError(self.name, e.message) from e
        except FetchError as e:
            raise ToolExecutionError(self.name, f"failed to fetch page: {e.message}") from e

        return ToolResult.from_text(format_page(page, self._max_content_length))
