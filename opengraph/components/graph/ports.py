"""
Graph component port definitions.

The builder never touches the web framework or the process environment
directly; callers hand it these collaborators.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .models import RequestUrl

AssetUrlResolver = Callable[[str], str]
"""Turns a relative asset path into an absolute URL."""


class RequestContextPort(Protocol):
    """Port for the in-flight request."""

    def get_request_url(self) -> RequestUrl | None:
        """Get scheme, host and path of the current request, or None outside a request."""
        ...


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...
