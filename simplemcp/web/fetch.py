"""HTTP GET for the fetch_webpage tool.

fetch_page() downloads a URL with a bounded timeout; format_page() renders
the response as text for the client:

- HTML is reduced to its title and readable text
- other text/* content is returned verbatim with its content type
- anything else is summarized by size only
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from simplemcp.config.schema import DEFAULT_USER_AGENT
from simplemcp.core.errors import SimpleMcpError
from simplemcp.web.extract import DEFAULT_MAX_LENGTH, extract_page

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

ALLOWED_URL_PREFIXES = ("http://", "https://")


class FetchError(SimpleMcpError):
    """Raised when a page cannot be fetched (network error, timeout, HTTP status)."""


class InvalidUrlError(FetchError):
    """Raised when a URL is rejected before any network access."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)


@dataclass(frozen=True)
class FetchedPage:
    """A successful HTTP response.

    Attributes:
        url: The requested URL.
        status_code: HTTP status code (2xx).
        content_type: Value of the Content-Type header, "" if absent.
        content: Raw response body.
        text: Response body decoded with the declared (or detected) charset.
    """

    url: str
    status_code: int
    content_type: str
    content: bytes
    text: str


def validate_url(url: str) -> None:
    """Reject URLs that are not http(s).

    Raises:
        InvalidUrlError: If the URL does not start with http:// or https://.
    """
    if not url.startswith(ALLOWED_URL_PREFIXES):
        raise InvalidUrlError(url, "URL must start with http:// or https://")


async def fetch_page(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    client: httpx.AsyncClient | None = None,
) -> FetchedPage:
    """GET a URL and return the response body.

    Args:
        url: http:// or https:// URL.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        client: Optional client to reuse (tests inject a mock transport here).

    Returns:
        The fetched page.

    Raises:
        InvalidUrlError: If the URL is not http(s) or is malformed.
        FetchError: On network failure, timeout, or a non-2xx status.
    """
    validate_url(url)

    headers = {"User-Agent": user_agent}
    logger.info("Fetching %s", url)

    try:
        if client is not None:
            response = await client.get(
                url, headers=headers, timeout=timeout, follow_redirects=True
            )
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
                response = await owned.get(url, headers=headers)
    except httpx.InvalidURL as e:
        raise InvalidUrlError(url, f"invalid URL: {e}") from e
    except httpx.TimeoutException as e:
        raise FetchError(f"request timed out after {timeout:g}s") from e
    except httpx.HTTPError as e:
        raise FetchError(f"{type(e).__name__}: {e}") from e

    if not response.is_success:
        raise FetchError(f"HTTP {response.status_code}: {response.reason_phrase}")

    return FetchedPage(
        url=url,
        status_code=response.status_code,
        content_type=response.headers.get("content-type", ""),
        content=response.content,
        text=response.text,
    )


def format_page(page: FetchedPage, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Render a fetched page as client-facing text.

    Args:
        page: The fetched page.
        max_length: Cap on extracted HTML text.

    Returns:
        A text block starting with a "URL:" header line.
    """
    content_type = page.content_type.lower()

    if "text/html" in content_type:
        extracted = extract_page(page.text, max_length)
        return (
            f"URL: {page.url}\n"
            f"Title: {extracted.title}\n\n"
            f"Content:\n{extracted.text}"
        )

    if "text/" in content_type:
        return (
            f"URL: {page.url}\n"
            f"Content-Type: {page.content_type}\n\n"
            f"Content:\n{page.text}"
        )

    return (
        f"URL: {page.url}\n"
        f"Content-Type: {page.content_type}\n"
        f"Size: {len(page.content)} bytes\n\n"
        "[Binary content not displayed]"
    )
