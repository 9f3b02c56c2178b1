"""Error taxonomy for the lookup pipeline.

Request-scoped errors (`InvalidInput`, `UpstreamError`) are caught at the
pipeline boundary and turned into a `{message}` body plus a status code.
`MissingHandler` is a wiring bug and is never caught there.
"""

from __future__ import annotations


class NikProxyError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(NikProxyError, ValueError):
    """The caller sent a malformed request (headers or `nik` parameter)."""


class UpstreamError(NikProxyError):
    """The KPU endpoint could not be reached or answered with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamTransportError(UpstreamError):
    """Client-class failure: network error, timeout, or a 4xx from upstream."""


class UpstreamServerError(UpstreamError):
    """Server-class failure: upstream answered with a 5xx."""


class MissingHandler(NikProxyError, RuntimeError):
    """No response serializer was configured."""
