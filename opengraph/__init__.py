"""
Open Graph meta tag builder.

Open Graph protocol docs: http://ogp.me/
"""

from opengraph.components.graph import (
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
    OpenGraph,
    OpenGraphError,
    OpenGraphTag,
    RequestUrl,
    allowed_attributes,
    create_open_graph,
)
from opengraph.rules import OpenGraphRules, load_rules

__version__ = "2.0.0"

__all__ = [
    "NAME_PREFIX",
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
    "OpenGraph",
    "OpenGraphError",
    "OpenGraphRules",
    "OpenGraphTag",
    "RequestUrl",
    "__version__",
    "allowed_attributes",
    "create_open_graph",
    "load_rules",
]
