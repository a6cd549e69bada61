"""
Graph component models - tag value object, request URL, error types.

An OpenGraphTag holds one name/value/prefix triple. Every assignment coerces
its field, so the name and value are always text and the prefix flag is
always a bool.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

NAME_PREFIX = "og:"

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def to_text(value: Any) -> str:
    """Coerce a tag value to its textual form."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.strftime(ISO8601_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


# --- Tag ---


class OpenGraphTag:
    """
    One Open Graph tag.

    Attributes:
        name: Tag name without namespace prefix, e.g. "image:width"
        value: Tag content, always text
        prefixed: Whether the rendered name receives the "og:" prefix
    """

    __slots__ = ("_name", "_value", "_prefixed")

    def __init__(self, name: Any, value: Any, prefixed: Any = True) -> None:
        self.name = name
        self.value = value
        self.prefixed = prefixed

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: Any) -> None:
        self._name = to_text(name)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = to_text(value)

    @property
    def prefixed(self) -> bool:
        return self._prefixed

    @prefixed.setter
    def prefixed(self, prefixed: Any) -> None:
        self._prefixed = bool(prefixed)

    def rendered_name(self, prefix: str = NAME_PREFIX) -> str:
        """Name as it appears in markup."""
        return f"{prefix}{self._name}" if self._prefixed else self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpenGraphTag):
            return NotImplemented
        return (self._name, self._value, self._prefixed) == (
            other._name,
            other._value,
            other._prefixed,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"OpenGraphTag(name={self._name!r}, value={self._value!r}, "
            f"prefixed={self._prefixed!r})"
        )


# --- Request URL ---


@dataclass(frozen=True)
class RequestUrl:
    """Parts of the in-flight request URL."""

    scheme: str
    host: str
    path: str = "/"


# --- Error Types ---


class OpenGraphError(Exception):
    """Base Open Graph error."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Open Graph: Invalid {field} '{value}' ({reason})")


class InvalidTitleError(OpenGraphError):
    """Title is empty."""

    def __init__(self, value: str) -> None:
        super().__init__("title", value, "empty")


class InvalidTypeError(OpenGraphError):
    """Type is not one of the protocol's object types."""

    def __init__(self, value: str) -> None:
        super().__init__("type", value, "unknown type")


class InvalidImageUrlError(OpenGraphError):
    """Image URL is empty or malformed."""

    def __init__(self, value: str, reason: str = "malformed URL") -> None:
        super().__init__("image URL", value, reason)


class InvalidAudioUrlError(OpenGraphError):
    """Audio URL is empty or malformed."""

    def __init__(self, value: str, reason: str = "malformed URL") -> None:
        super().__init__("audio URL", value, reason)


class InvalidVideoUrlError(OpenGraphError):
    """Video URL is empty or malformed."""

    def __init__(self, value: str, reason: str = "malformed URL") -> None:
        super().__init__("video URL", value, reason)


class InvalidUrlError(OpenGraphError):
    """Page URL is malformed."""

    def __init__(self, value: str) -> None:
        super().__init__("URL", value, "malformed URL")


class InvalidLocaleError(OpenGraphError):
    """Locale is empty."""

    def __init__(self, value: str, position: int | None = None) -> None:
        self.position = position
        reason = "empty" if position is None else f"empty, item position: {position}"
        super().__init__("locale", value, reason)


class InvalidSiteNameError(OpenGraphError):
    """Site name is empty."""

    def __init__(self, value: str) -> None:
        super().__init__("site_name", value, "empty")


class InvalidDeterminerError(OpenGraphError):
    """Determiner is not an allowed value."""

    def __init__(self, value: str) -> None:
        super().__init__("determiner", value, "unknown value")


class InvalidAttributeError(OpenGraphError):
    """Attribute name is not allowed for the tag."""

    def __init__(self, tag_name: str, attribute: str) -> None:
        self.tag_name = tag_name
        super().__init__("attribute", attribute, f"not allowed for '{tag_name}'")


class InvalidStateError(OpenGraphError):
    """Declared type does not permit the requested attributes."""

    def __init__(self, required_type: str, declared_type: str | None) -> None:
        self.required_type = required_type
        self.declared_type = declared_type
        super().__init__(
            "type",
            declared_type or "",
            f"type has to be '{required_type}' to add {required_type} attributes",
        )
