"""Webpage fetching and HTML text extraction."""

from simplemcp.web.extract import (
    NO_TITLE,
    TRUNCATION_NOTICE,
    DomTree,
    ExtractedPage,
    extract_page,
    extract_text,
    extract_title,
)
from simplemcp.web.fetch import FetchedPage, FetchError, InvalidUrlError, fetch_page, format_page

__all__ = [
    "NO_TITLE",
    "TRUNCATION_NOTICE",
    "DomTree",
    "ExtractedPage",
    "extract_page",
    "extract_text",
    "extract_title",
    "FetchedPage",
    "FetchError",
    "InvalidUrlError",
    "fetch_page",
    "format_page",
]
