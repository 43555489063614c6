"""SearXNG search: request construction, transport and response mapping."""

from .errors import InvalidBaseURLError, SearchDecodeError, SearchTransportError, SearxngError
from .schemas import SearchOptions, SearchResponse, SearchResult
from .searxng import SearxngClient, search

__all__ = [
    "search",
    "SearxngClient",
    "SearchOptions",
    "SearchResult",
    "SearchResponse",
    "SearxngError",
    "InvalidBaseURLError",
    "SearchTransportError",
    "SearchDecodeError",
]
