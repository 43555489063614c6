"""
SearXNG search API client. Base URL from SEARXNG_URL (default http://localhost:8080).

One synchronous GET per call: no cache, no retry, no timeout. The HTTP status is
not inspected; whatever body comes back is decoded as JSON.
"""

import logging
from typing import Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from pydantic import ValidationError

from champollion.config import Settings
from champollion.search.errors import InvalidBaseURLError, SearchDecodeError, SearchTransportError
from champollion.search.schemas import SearchOptions, SearchResponse

logger = logging.getLogger(__name__)

SEARCH_PATH = "search"


class SearxngClient:
    """Client bound to a single SearXNG instance.

    The base URL is not validated until a search is made. Pass a
    ``requests.Session`` to control the transport (adapters, proxies, timeouts);
    otherwise every call opens an independent request.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self._base_url = base_url
        self._session = session

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, query: str, options: Optional[SearchOptions] = None) -> str:
        """
        Full request URL: <base>/search?<params>, params sorted by key.

        Raises InvalidBaseURLError if the base URL has no scheme or host, so
        "" and bare hosts such as "localhost" fail here before any request is
        made instead of failing later in the transport.
        """
        try:
            parts = urlsplit(self._base_url)
            parts.port  # validates the port component
        except ValueError as e:
            raise InvalidBaseURLError(f"invalid base URL {self._base_url!r}: {e}") from e
        if not parts.scheme or not parts.netloc:
            raise InvalidBaseURLError(f"invalid base URL {self._base_url!r}: missing scheme or host")

        params = {"format": "json", "q": query}
        if options is not None:
            params.update(options.to_params())

        path = parts.path.rstrip("/") + "/" + SEARCH_PATH
        return urlunsplit((parts.scheme, parts.netloc, path, urlencode(sorted(params.items())), ""))

    def search(self, query: str, options: Optional[SearchOptions] = None) -> SearchResponse:
        url = self.build_url(query, options)
        logger.debug("SearXNG search: %s", url)

        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, stream=True)
        except requests.exceptions.RequestException as e:
            logger.warning("SearXNG request failed for query '%s': %s", query, e)
            raise SearchTransportError(f"request to {url} failed: {e}") from e

        with response:
            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                logger.warning("SearXNG body read failed for query '%s': %s", query, e)
                raise SearchDecodeError(f"could not read response body: {e}") from e

        try:
            result = SearchResponse.model_validate_json(body)
        except ValidationError as e:
            logger.warning(
                "SearXNG returned an undecodable body for query '%s' (HTTP %s)",
                query,
                response.status_code,
            )
            raise SearchDecodeError(f"could not decode response body: {e}") from e

        logger.debug("SearXNG returned %d results for query '%s'", len(result.results), query)
        return result


def search(
    query: str,
    options: Optional[SearchOptions] = None,
    base_url: Optional[str] = None,
) -> SearchResponse:
    """One-shot search against SEARXNG_URL (or `base_url` when given)."""
    if base_url is None:
        base_url = Settings().searxng_url
    return SearxngClient(base_url).search(query, options)
