"""
Graph component - Open Graph tag builder and renderer.

Open Graph protocol docs: http://ogp.me/

Collects tags in insertion order, validates them on request and renders them
as markup.

Invariants:
- Singleton fields (title, type, image, description, url, locale, site_name)
  keep only their latest tag
- Repeatable fields (tag, locale:alternate, determiner, attributes) keep every tag
- The declared type is the value of the most recent "type" tag
- With validation on, a failing call appends nothing
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from opengraph.adapters.assets import BaseUrlAssetResolver
from opengraph.domain.sanitize import strip_tags

from ._impl import (
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    DEFAULT_TEMPLATE,
    DEFAULT_URL,
    DETERMINERS,
    OBJECT_TYPES,
    allowed_attributes,
    build_request_url,
    clean_description,
    first_invalid_attribute,
    has_scheme,
    is_valid_url,
)
from .models import (
    NAME_PREFIX,
    InvalidAttributeError,
    InvalidAudioUrlError,
    InvalidDeterminerError,
    InvalidImageUrlError,
    InvalidLocaleError,
    InvalidSiteNameError,
    InvalidStateError,
    InvalidTitleError,
    InvalidTypeError,
    InvalidUrlError,
    InvalidVideoUrlError,
    OpenGraphError,
    OpenGraphTag,
)
from .ports import AssetUrlResolver, EnvironmentPort, RequestContextPort

if TYPE_CHECKING:
    from opengraph.rules.models import OpenGraphRules

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL_ENV = "APP_URL"

# Single pass, so a value containing "{name}" is not substituted again
_TEMPLATE_SLOT = re.compile(r"\{(name|value)\}")

_MEDIA_ERRORS: dict[str, Callable[..., OpenGraphError]] = {
    "image": InvalidImageUrlError,
    "audio": InvalidAudioUrlError,
    "video": InvalidVideoUrlError,
}


class OpenGraph:
    """
    Builder for Open Graph meta tags.

    Every mutating method returns the builder, so calls can be chained:

        og = OpenGraph().title("Apple Cookie").type("article").url("http://example.org/")
        html = og.render_tags()
    """

    def __init__(
        self,
        validate: bool = False,
        *,
        template: str = DEFAULT_TEMPLATE,
        name_prefix: str = NAME_PREFIX,
        description_max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH,
        asset_resolver: AssetUrlResolver | None = None,
        request_context: RequestContextPort | None = None,
        environment: EnvironmentPort | None = None,
        base_url_env: str = DEFAULT_BASE_URL_ENV,
    ) -> None:
        """
        Initialize builder.

        Args:
            validate: Raise on values that violate the protocol
            template: Render template with {name} and {value} slots
            name_prefix: Namespace prefix for prefixed tags
            description_max_length: Default cut-off for description()
            asset_resolver: Turns relative media paths into absolute URLs
            request_context: Source of the current request URL for url()
            environment: Source of the base URL override for url()
            base_url_env: Environment key holding the base URL override
        """
        self._tags: list[OpenGraphTag] = []
        self._validate = validate
        self._template = template
        self._name_prefix = name_prefix
        self._description_max_length = description_max_length
        self._asset_resolver = asset_resolver
        self._request_context = request_context
        self._environment = environment
        self._base_url_env = base_url_env

    # --- Queries ---

    def tags(self) -> tuple[OpenGraphTag, ...]:
        """Current tags in insertion order."""
        return tuple(self._tags)

    def has(self, name: str) -> bool:
        """True if at least one tag with the given name exists."""
        return any(tag.name == name for tag in self._tags)

    def last_tag(self, name: str) -> OpenGraphTag | None:
        """Most recently added tag with the given name."""
        for tag in reversed(self._tags):
            if tag.name == name:
                return tag
        return None

    def declared_type(self) -> str | None:
        """Value of the latest "type" tag."""
        tag = self.last_tag("type")
        return tag.value if tag else None

    def valid(self) -> bool:
        """Whether validation mode is on."""
        return self._validate

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[OpenGraphTag]:
        return iter(tuple(self._tags))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    # --- Collection Management ---

    def validate(self, enabled: bool = True) -> OpenGraph:
        self._validate = enabled
        return self

    def template(self, template: str) -> OpenGraph:
        """Set the render template. {name} and {value} are replaced per tag."""
        self._template = template
        return self

    def forget(self, name: str) -> OpenGraph:
        """Remove all tags with the given name."""
        self._tags = [tag for tag in self._tags if tag.name != name]
        return self

    def clear(self) -> OpenGraph:
        self._tags = []
        return self

    # --- Generic Tags ---

    def tag(self, name: str, value: Any, prefixed: bool = True) -> OpenGraph:
        """Add a custom tag. Dates are converted to ISO 8601."""
        self._tags.append(OpenGraphTag(name, value, prefixed))
        return self

    def attributes(
        self,
        tag_name: str,
        attributes: Mapping[str, Any] | None = None,
        valid: Iterable[str] = (),
        prefixed: bool = True,
    ) -> OpenGraph:
        """
        Add attribute tags named "{tag_name}:{key}".

        Args:
            tag_name: Name of the base tag
            attributes: Pairs of attribute name and value
            valid: Allowed attribute names, empty for no restriction
            prefixed: Add the namespace prefix?

        Raises:
            InvalidAttributeError: With validation on, for a name outside valid.
                Nothing is added in that case.
        """
        attributes = attributes or {}
        self._check_attributes(tag_name, attributes, tuple(valid))

        for name, value in attributes.items():
            self._tags.append(OpenGraphTag(f"{tag_name}:{name}", value, prefixed))
        return self

    def unprefixed_attributes(
        self,
        tag_name: str,
        attributes: Mapping[str, Any] | None = None,
        valid: Iterable[str] = (),
    ) -> OpenGraph:
        """Same as attributes() without the namespace prefix."""
        return self.attributes(tag_name, attributes, valid, prefixed=False)

    # --- Basic Metadata ---

    def title(self, title: str) -> OpenGraph:
        title = title.strip()

        if self._validate and not title:
            self._reject(InvalidTitleError(title))

        return self._replace("title", strip_tags(title))

    def type(self, type: str) -> OpenGraph:
        """Set the object type, e.g. "article" or "video.movie"."""
        if self._validate and type not in OBJECT_TYPES:
            self._reject(InvalidTypeError(type))

        return self._replace("type", type)

    def image(self, url: str, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        """
        Add an image tag. A relative URL is made absolute through the asset resolver.

        Args:
            url: URL of the image file
            attributes: Optional secure_url, type, width, height
        """
        return self._media("image", url, attributes, singleton=True)

    def description(self, description: str, max_length: int | None = None) -> OpenGraph:
        """
        Set the description.

        Markup and line breaks are removed. A text longer than max_length code
        points is cut and gets "..." appended.
        """
        if max_length is None:
            max_length = self._description_max_length

        return self._replace("description", clean_description(description, max_length))

    def url(
        self,
        url: str | None = None,
        request_context: RequestContextPort | None = None,
    ) -> OpenGraph:
        """
        Set the canonical page URL.

        Without an explicit URL the base URL from the environment is used
        verbatim, then the current request URL, then "http://localhost/".
        """
        if not url:
            url = self._resolve_page_url(request_context or self._request_context)

        if self._validate and not is_valid_url(url):
            self._reject(InvalidUrlError(url))

        return self._replace("url", url)

    def locale(self, locale: str) -> OpenGraph:
        if self._validate and not locale:
            self._reject(InvalidLocaleError(locale))

        return self._replace("locale", locale)

    def locale_alternate(self, locales: str | Iterable[str] = ()) -> OpenGraph:
        """Add one locale:alternate tag per locale."""
        if isinstance(locales, str):
            locales = [locales]
        locales = list(locales)

        if self._validate:
            for position, locale in enumerate(locales):
                if not locale:
                    self._reject(InvalidLocaleError(locale, position))

        for locale in locales:
            self._tags.append(OpenGraphTag("locale:alternate", locale))
        return self

    def site_name(self, site_name: str) -> OpenGraph:
        if self._validate and not site_name:
            self._reject(InvalidSiteNameError(site_name))

        return self._replace("site_name", site_name)

    def determiner(self, determiner: str = "") -> OpenGraph:
        """Add a determiner tag (a, an, the, auto or empty)."""
        if self._validate and determiner not in DETERMINERS:
            self._reject(InvalidDeterminerError(determiner))

        self._tags.append(OpenGraphTag("determiner", determiner))
        return self

    # --- Media ---

    def audio(self, url: str, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        """
        Add an audio tag.

        Allowed attributes depend on the declared music.* type.
        """
        return self._media("audio", url, attributes)

    def video(self, url: str, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        """
        Add a video tag.

        Allowed attributes depend on the declared video.* type.
        """
        return self._media("video", url, attributes)

    # --- Type-specific Attributes ---

    def article(self, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        return self._typed_attributes("article", attributes)

    def book(self, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        return self._typed_attributes("book", attributes)

    def profile(self, attributes: Mapping[str, Any] | None = None) -> OpenGraph:
        return self._typed_attributes("profile", attributes)

    # --- Rendering ---

    def render_tags(self) -> str:
        """Render all tags with the template, in insertion order."""
        output = []
        for tag in self._tags:
            slots = {"name": tag.rendered_name(self._name_prefix), "value": tag.value}
            output.append(_TEMPLATE_SLOT.sub(lambda m: slots[m.group(1)], self._template))
        return "".join(output)

    def __str__(self) -> str:
        return self.render_tags()

    def __repr__(self) -> str:
        return f"OpenGraph(tags={len(self._tags)}, validate={self._validate})"

    # --- Internals ---

    def _replace(self, name: str, value: Any) -> OpenGraph:
        self.forget(name)
        self._tags.append(OpenGraphTag(name, value))
        return self

    def _reject(self, error: OpenGraphError) -> None:
        logger.warning("Rejected %s %r: %s", error.field, error.value, error.reason)
        raise error

    def _check_attributes(
        self,
        tag_name: str,
        attributes: Mapping[str, Any],
        valid: tuple[str, ...],
    ) -> None:
        if not self._validate:
            return
        invalid = first_invalid_attribute(attributes, valid)
        if invalid is not None:
            self._reject(InvalidAttributeError(tag_name, invalid))

    def _media(
        self,
        kind: str,
        url: str,
        attributes: Mapping[str, Any] | None,
        singleton: bool = False,
    ) -> OpenGraph:
        error = _MEDIA_ERRORS[kind]

        if self._validate and not url:
            self._reject(error(url, "empty"))

        if not has_scheme(url) and self._asset_resolver is not None:
            resolved = self._asset_resolver(url)
            logger.debug("Resolved %s path %r to %r", kind, url, resolved)
            url = resolved

        if self._validate and not is_valid_url(url):
            self._reject(error(url))

        valid = allowed_attributes(kind, self.declared_type())
        if attributes:
            self._check_attributes(kind, attributes, valid)

        if singleton:
            self.forget(kind)
        self._tags.append(OpenGraphTag(kind, url))

        if attributes:
            self.attributes(kind, attributes, valid)
        return self

    def _typed_attributes(self, kind: str, attributes: Mapping[str, Any] | None) -> OpenGraph:
        declared = self.declared_type()
        if declared != kind:
            self._reject(InvalidStateError(kind, declared))

        return self.unprefixed_attributes(kind, attributes, allowed_attributes(kind))

    def _resolve_page_url(self, request_context: RequestContextPort | None) -> str:
        if self._environment is not None:
            base_url = self._environment.get(self._base_url_env)
            if base_url:
                logger.debug("Page URL from %s", self._base_url_env)
                return base_url

        request_url = request_context.get_request_url() if request_context else None
        if request_url is None:
            logger.debug("No request context, page URL falls back to %s", DEFAULT_URL)
            return DEFAULT_URL

        return build_request_url(request_url)


# --- Factory ---


def create_open_graph(
    rules: OpenGraphRules | None = None,
    *,
    asset_resolver: AssetUrlResolver | None = None,
    request_context: RequestContextPort | None = None,
    environment: EnvironmentPort | None = None,
) -> OpenGraph:
    """
    Create a builder from rules.

    Args:
        rules: Builder configuration, defaults when None
        asset_resolver: Overrides the resolver derived from rules.asset_base_url
        request_context: Source of the current request URL
        environment: Source of the base URL override

    Returns:
        Configured OpenGraph builder
    """
    if rules is None:
        return OpenGraph(
            asset_resolver=asset_resolver,
            request_context=request_context,
            environment=environment,
        )

    if asset_resolver is None and rules.asset_base_url:
        asset_resolver = BaseUrlAssetResolver(rules.asset_base_url)

    return OpenGraph(
        rules.validate_tags,
        template=rules.template,
        name_prefix=rules.name_prefix,
        description_max_length=rules.description_max_length,
        asset_resolver=asset_resolver,
        request_context=request_context,
        environment=environment,
        base_url_env=rules.base_url_env,
    )
