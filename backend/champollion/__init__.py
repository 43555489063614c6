"""Champollion: thin client for a self-hosted SearXNG instance."""

from .config import DEFAULT_SEARXNG_URL, SEARXNG_URL_ENV, Settings, get_var
from .search import (
    InvalidBaseURLError,
    SearchDecodeError,
    SearchOptions,
    SearchResponse,
    SearchResult,
    SearchTransportError,
    SearxngClient,
    SearxngError,
)

__all__ = [
    "get_var",
    "Settings",
    "SEARXNG_URL_ENV",
    "DEFAULT_SEARXNG_URL",
    "SearxngClient",
    "SearchOptions",
    "SearchResult",
    "SearchResponse",
    "SearxngError",
    "InvalidBaseURLError",
    "SearchTransportError",
    "SearchDecodeError",
]
