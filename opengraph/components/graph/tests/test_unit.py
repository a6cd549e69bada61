"""
Unit tests for the graph component's pure helpers and tag model.

Tests:
- Attribute allowlists per base tag and declared type
- Description cleaning and truncation
- URL checks and request URL building
- OpenGraphTag coercion
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from opengraph.components.graph._impl import (
    allowed_attributes,
    build_request_url,
    clean_description,
    first_invalid_attribute,
    has_scheme,
    is_valid_url,
)
from opengraph.components.graph.models import (
    InvalidLocaleError,
    InvalidStateError,
    OpenGraphTag,
    RequestUrl,
    to_text,
)

# --- Allowlist Tests ---


class TestAllowedAttributes:
    """Tests for the allowlist lookup."""

    def test_image(self) -> None:
        assert allowed_attributes("image") == ("secure_url", "type", "width", "height")

    def test_image_ignores_declared_type(self) -> None:
        assert allowed_attributes("image", "video.movie") == allowed_attributes("image")

    def test_audio_without_type(self) -> None:
        assert allowed_attributes("audio") == ("secure_url", "type")

    @pytest.mark.parametrize(
        ("declared", "extra"),
        [
            ("music.song", {"duration", "album", "album:disc", "album:track", "musician"}),
            ("music.album", {"song", "song:disc", "song:track", "musician", "release_date"}),
            ("music.playlist", {"song", "song:disc", "song:track", "creator"}),
            ("music.radio_station", {"creator"}),
            ("article", set()),
        ],
    )
    def test_audio_by_type(self, declared: str, extra: set[str]) -> None:
        """Audio allowlist is extended by the declared music type."""
        assert set(allowed_attributes("audio", declared)) == {"secure_url", "type"} | extra

    def test_video_without_type(self) -> None:
        assert allowed_attributes("video") == ("secure_url", "type", "width", "height")

    def test_video_type(self) -> None:
        allowed = allowed_attributes("video", "video.tv_show")

        assert "director" in allowed
        assert "tag" in allowed
        assert "video:series" not in allowed

    def test_video_episode(self) -> None:
        assert "video:series" in allowed_attributes("video", "video.episode")

    def test_video_music_type_adds_nothing(self) -> None:
        assert allowed_attributes("video", "music.song") == allowed_attributes("video")

    def test_article_book_profile(self) -> None:
        assert "published_time" in allowed_attributes("article")
        assert "isbn" in allowed_attributes("book")
        assert "username" in allowed_attributes("profile")

    def test_unknown_kind(self) -> None:
        with pytest.raises(KeyError):
            allowed_attributes("website")


class TestFirstInvalidAttribute:
    def test_all_valid(self) -> None:
        assert first_invalid_attribute({"width": 1}, ("width", "height")) is None

    def test_reports_first(self) -> None:
        attrs = {"width": 1, "foo": 2, "bar": 3}
        assert first_invalid_attribute(attrs, ("width",)) == "foo"

    def test_empty_valid_allows_all(self) -> None:
        assert first_invalid_attribute({"foo": 1}, ()) is None


# --- Description Tests ---


class TestCleanDescription:
    def test_within_limit(self) -> None:
        assert clean_description("Hello world", 20) == "Hello world"

    def test_truncated(self) -> None:
        assert clean_description("Hello world", 5) == "Hello..."

    def test_markup_removed_before_counting(self) -> None:
        assert clean_description("<em>Hello</em>", 5) == "Hello"

    def test_line_breaks_removed(self) -> None:
        assert clean_description("a\nb\rc", 10) == "abc"

    def test_emoji_is_one_code_point(self) -> None:
        assert clean_description("🍪🍪🍪", 2) == "🍪🍪..."


# --- URL Tests ---


class TestUrls:
    @pytest.mark.parametrize(
        "url",
        [
            "http://example.org/",
            "https://example.org/apple.jpg",
            "http://localhost/",
            "https://example.org:8443/a?b=c#d",
        ],
    )
    def test_valid(self, url: str) -> None:
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "example.org",
            "/relative/path.jpg",
            "http://",
            "http://exa mple.org/",
            "apple",
            "http:example.org",
            "http:/example.org",
            "https:\\\\example.org",
            "http://example.org\\x",
            "http://[::1",
        ],
    )
    def test_invalid(self, url: str) -> None:
        assert is_valid_url(url) is False

    def test_has_scheme(self) -> None:
        assert has_scheme("http://example.org")
        assert not has_scheme("img/apple.jpg")

    def test_build_request_url(self) -> None:
        url = build_request_url(RequestUrl(scheme="https", host="example.org", path="/a/b"))
        assert url == "https://example.org/a/b"

    def test_build_request_url_escapes_quotes(self) -> None:
        url = build_request_url(RequestUrl(scheme="http", host="example.org", path='/"x"'))
        assert url == "http://example.org/&quot;x&quot;"

    def test_build_request_url_empty_path(self) -> None:
        assert build_request_url(RequestUrl("http", "example.org", "")) == "http://example.org"


# --- Tag Model Tests ---


class TestOpenGraphTag:
    def test_fields(self) -> None:
        tag = OpenGraphTag("title", "Apple Cookie")

        assert tag.name == "title"
        assert tag.value == "Apple Cookie"
        assert tag.prefixed is True

    def test_value_coerced_on_construction(self) -> None:
        tag = OpenGraphTag("image:width", 800, 0)

        assert tag.value == "800"
        assert tag.prefixed is False

    def test_coercion_on_assignment(self) -> None:
        tag = OpenGraphTag("image:width", "1")

        tag.value = 1.5
        tag.prefixed = ""
        tag.name = 42

        assert tag.value == "1.5"
        assert tag.prefixed is False
        assert tag.name == "42"

    def test_rendered_name(self) -> None:
        assert OpenGraphTag("title", "x").rendered_name() == "og:title"
        assert OpenGraphTag("article:tag", "x", False).rendered_name() == "article:tag"
        assert OpenGraphTag("title", "x").rendered_name("fb:") == "fb:title"

    def test_equality(self) -> None:
        assert OpenGraphTag("a", 1) == OpenGraphTag("a", "1")
        assert OpenGraphTag("a", 1) != OpenGraphTag("a", 1, False)

    def test_unknown_attribute_rejected(self) -> None:
        tag = OpenGraphTag("a", "b")
        with pytest.raises(AttributeError):
            tag.other = "x"  # type: ignore[attr-defined]


class TestToText:
    def test_none(self) -> None:
        assert to_text(None) == ""

    def test_bool(self) -> None:
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_aware_datetime_keeps_offset(self) -> None:
        value = datetime(2020, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_text(value) == "2020-01-01T12:00:00+0200"

    def test_naive_datetime_is_utc(self) -> None:
        assert to_text(datetime(2020, 1, 1)) == "2020-01-01T00:00:00+0000"

    def test_utc_datetime(self) -> None:
        assert to_text(datetime(2020, 1, 1, tzinfo=UTC)) == "2020-01-01T00:00:00+0000"

    def test_date(self) -> None:
        assert to_text(date(2020, 2, 29)) == "2020-02-29"


# --- Error Tests ---


class TestErrors:
    def test_message_names_field_and_value(self) -> None:
        error = InvalidLocaleError("", 2)

        assert error.field == "locale"
        assert error.position == 2
        assert "item position: 2" in str(error)

    def test_state_error(self) -> None:
        error = InvalidStateError("article", None)

        assert error.declared_type is None
        assert "type has to be 'article'" in str(error)
