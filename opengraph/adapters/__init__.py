from .assets import BaseUrlAssetResolver
from .environment import OsEnvironment
from .request_context import NullRequestContext, StarletteRequestContext, StaticRequestContext

__all__ = [
    "BaseUrlAssetResolver",
    "NullRequestContext",
    "OsEnvironment",
    "StarletteRequestContext",
    "StaticRequestContext",
]
