"""Pytest fixtures for the SearXNG client tests."""

from unittest.mock import MagicMock

import pytest

from champollion.search.schemas import SearchOptions


@pytest.fixture
def base_url():
    return "http://localhost:8080"


@pytest.fixture
def golang_body():
    """Minimal valid body as returned by SearXNG."""
    return b'{"results":[{"title":"Go","url":"https://go.dev"}],"suggestions":["golang tutorial"]}'


@pytest.fixture
def full_body():
    """Body with every result field plus keys the client does not map."""
    return b'''{
        "query": "cats",
        "number_of_results": 2,
        "results": [
            {"title": "Cat", "url": "https://example.com/cat", "img_src": "https://example.com/cat.jpg",
             "thumbnail_src": "https://example.com/t.jpg", "thumbnail": "https://example.com/t2.jpg",
             "content": "A small feline.", "author": "Jane", "iframe_src": "https://example.com/embed",
             "engine": "bing", "score": 1.5},
            {"title": "Kitten", "url": "https://example.com/kitten"}
        ],
        "answers": [],
        "suggestions": ["cats video", "cat breeds"]
    }'''


@pytest.fixture
def full_options():
    return SearchOptions(categories=["general", "images"], engines=["bing", "ddg"], language="en-US", pageno=2)


@pytest.fixture
def make_response():
    """Factory for a fake requests.Response carrying `body`."""

    def _make(body: bytes, status_code: int = 200):
        response = MagicMock()
        response.content = body
        response.status_code = status_code
        response.__enter__.return_value = response
        return response

    return _make
