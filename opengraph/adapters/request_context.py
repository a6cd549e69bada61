from __future__ import annotations

from typing import TYPE_CHECKING

from opengraph.components.graph.models import RequestUrl

if TYPE_CHECKING:
    from starlette.requests import Request


class NullRequestContext:
    """Stand-in used outside of a request. url() falls back to localhost."""

    def get_request_url(self) -> RequestUrl | None:
        return None


class StaticRequestContext:
    """Request context with a fixed URL, for scripts and tests."""

    def __init__(self, scheme: str, host: str, path: str = "/") -> None:
        self._request_url = RequestUrl(scheme=scheme, host=host, path=path)

    def get_request_url(self) -> RequestUrl | None:
        return self._request_url


class StarletteRequestContext:
    """Request context read from a Starlette/FastAPI request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def get_request_url(self) -> RequestUrl | None:
        url = self._request.url
        return RequestUrl(scheme=url.scheme, host=url.netloc, path=url.path or "/")
