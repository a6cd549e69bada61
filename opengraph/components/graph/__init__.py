"""
Graph component - Open Graph tag builder.
"""

from ._impl import (
    BASE_ATTRIBUTES,
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    DEFAULT_TEMPLATE,
    DEFAULT_URL,
    DETERMINERS,
    OBJECT_TYPES,
    allowed_attributes,
    build_request_url,
    clean_description,
    is_valid_url,
)
from .component import OpenGraph, create_open_graph
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
    RequestUrl,
)
from .ports import AssetUrlResolver, EnvironmentPort, RequestContextPort

__all__ = [
    # Builder
    "OpenGraph",
    "create_open_graph",
    # Models
    "OpenGraphTag",
    "RequestUrl",
    "NAME_PREFIX",
    # Errors
    "OpenGraphError",
    "InvalidAttributeError",
    "InvalidAudioUrlError",
    "InvalidDeterminerError",
    "InvalidImageUrlError",
    "InvalidLocaleError",
    "InvalidSiteNameError",
    "InvalidStateError",
    "InvalidTitleError",
    "InvalidTypeError",
    "InvalidUrlError",
    "InvalidVideoUrlError",
    # Rules
    "BASE_ATTRIBUTES",
    "DETERMINERS",
    "OBJECT_TYPES",
    "DEFAULT_DESCRIPTION_MAX_LENGTH",
    "DEFAULT_TEMPLATE",
    "DEFAULT_URL",
    "allowed_attributes",
    "build_request_url",
    "clean_description",
    "is_valid_url",
    # Ports
    "AssetUrlResolver",
    "EnvironmentPort",
    "RequestContextPort",
]
