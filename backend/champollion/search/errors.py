"""Errors raised by the SearXNG client. None of them are retried."""


class SearxngError(Exception):
    """Base class for every client error."""


class InvalidBaseURLError(SearxngError, ValueError):
    """The bound base URL could not be parsed; no request was sent."""


class SearchTransportError(SearxngError):
    """The GET request could not be completed (DNS, refused, timeout, ...)."""


class SearchDecodeError(SearxngError):
    """The body could not be read or is not the expected JSON shape."""
