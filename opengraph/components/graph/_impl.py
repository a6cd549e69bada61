"""
Graph rules - enumerations, attribute allowlists and value helpers.

Pure functions used by the OpenGraph builder. Nothing here keeps state or
performs I/O.

Key behaviors:
- Allowlists depend on the declared type (the latest "type" tag)
- Descriptions are cleaned and truncated by code points, not bytes
- URLs are checked for a scheme and host
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote, urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

from opengraph.domain.sanitize import escape_path, strip_tags

from .models import RequestUrl

# --- Enumerations ---

OBJECT_TYPES: tuple[str, ...] = (
    "music.song",
    "music.album",
    "music.playlist",
    "music.radio_station",
    "video.movie",
    "video.episode",
    "video.tv_show",
    "video.other",
    "article",
    "book",
    "profile",
    "website",
)

DETERMINERS: tuple[str, ...] = ("a", "an", "the", "auto", "")

DEFAULT_TEMPLATE = '<meta property="{name}" content="{value}" />\n'
DEFAULT_DESCRIPTION_MAX_LENGTH = 250
DEFAULT_URL = "http://localhost/"
ELLIPSIS = "..."
SCHEME_SEPARATOR = "://"

# --- Attribute Allowlists ---

BASE_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "image": ("secure_url", "type", "width", "height"),
    "audio": ("secure_url", "type"),
    "video": ("secure_url", "type", "width", "height"),
    "article": (
        "published_time",
        "modified_time",
        "expiration_time",
        "author",
        "section",
        "tag",
    ),
    "book": ("author", "isbn", "release_date", "tag"),
    "profile": ("first_name", "last_name", "username", "gender"),
}

AUDIO_TYPE_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "music.song": ("duration", "album", "album:disc", "album:track", "musician"),
    "music.album": ("song", "song:disc", "song:track", "musician", "release_date"),
    "music.playlist": ("song", "song:disc", "song:track", "creator"),
    "music.radio_station": ("creator",),
}

VIDEO_TYPE_ATTRIBUTES: tuple[str, ...] = (
    "actor",
    "role",
    "director",
    "writer",
    "duration",
    "release_date",
    "tag",
)

EPISODE_ATTRIBUTES: tuple[str, ...] = ("video:series",)


def allowed_attributes(kind: str, declared_type: str | None = None) -> tuple[str, ...]:
    """
    Attribute names allowed under a base tag.

    Args:
        kind: Base tag name (image, audio, video, article, book, profile)
        declared_type: Value of the latest "type" tag, if any

    Returns:
        Allowed names in declaration order

    Raises:
        KeyError: If kind has no allowlist
    """
    allowed = BASE_ATTRIBUTES[kind]

    if kind == "audio" and declared_type:
        allowed = allowed + AUDIO_TYPE_ATTRIBUTES.get(declared_type, ())
    elif kind == "video" and declared_type and declared_type.startswith("video."):
        allowed = allowed + VIDEO_TYPE_ATTRIBUTES
        if declared_type == "video.episode":
            allowed = allowed + EPISODE_ATTRIBUTES

    return allowed


def first_invalid_attribute(
    attributes: Mapping[str, Any],
    valid: tuple[str, ...] | list[str] | frozenset[str],
) -> str | None:
    """Return the first attribute name outside valid, or None if all pass."""
    if not valid:
        return None
    for name in attributes:
        if name not in valid:
            return name
    return None


# --- Value Helpers ---


def clean_description(text: str, max_length: int) -> str:
    """
    Clean and shorten a description.

    Strips markup, trims whitespace and removes line breaks, then cuts the
    text to max_length code points. A cut text gets an ellipsis appended.
    """
    text = strip_tags(text).strip()
    text = text.replace("\r", "").replace("\n", "")

    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def has_scheme(url: str) -> bool:
    return SCHEME_SEPARATOR in url


_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_valid_url(url: str) -> bool:
    """
    Check that url is an absolute URL with a scheme and host.

    Whitespace or a backslash anywhere in the URL makes it invalid, and the
    host must follow "//" as written: pydantic repairs "http:example.org"
    into a valid URL, but the unrepaired text is what gets rendered.
    """
    if not url or any(c.isspace() or c == "\\" for c in url):
        return False
    if not has_scheme(url):
        return False
    try:
        if not urlsplit(url).netloc:
            return False
        parsed = _URL_ADAPTER.validate_python(url)
    except (ValueError, ValidationError):
        return False
    return bool(parsed.host)


def build_request_url(request_url: RequestUrl) -> str:
    """
    Build a page URL from the current request.

    The path is percent-decoded, stripped of markup and HTML-escaped before
    it is joined to scheme and host.
    """
    path = escape_path(unquote(request_url.path or ""))
    return f"{request_url.scheme}://{request_url.host}{path}"
