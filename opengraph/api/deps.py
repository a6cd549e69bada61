"""
FastAPI dependencies for request-scoped Open Graph builders.

    @app.get("/recipes/{slug}")
    def recipe(slug: str, og: Annotated[OpenGraph, Depends(get_open_graph)]):
        og.title(...).url()
        ...
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request

from opengraph.adapters.assets import BaseUrlAssetResolver
from opengraph.adapters.environment import OsEnvironment
from opengraph.adapters.request_context import StarletteRequestContext
from opengraph.components.graph import OpenGraph, create_open_graph
from opengraph.rules.loader import load_rules
from opengraph.rules.models import OpenGraphRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path = Path(os.environ.get("OPENGRAPH_RULES", "opengraph_rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Annotated[Settings, Depends(get_settings)]) -> OpenGraphRules:
    # A missing rules file is allowed; the builder then runs with defaults.
    if not settings.rules_path.exists():
        return OpenGraphRules()
    return _load_cached_rules(settings.rules_path)


@lru_cache
def _load_cached_rules(path: Path) -> OpenGraphRules:
    return load_rules(path)


# --- Builder ---
def get_open_graph(
    request: Request,
    rules: Annotated[OpenGraphRules, Depends(get_rules)],
) -> OpenGraph:
    """A fresh builder per request, wired to the request URL and the process environment."""
    asset_resolver = None
    if not rules.asset_base_url:
        asset_resolver = BaseUrlAssetResolver(str(request.base_url))

    return create_open_graph(
        rules,
        asset_resolver=asset_resolver,
        request_context=StarletteRequestContext(request),
        environment=OsEnvironment(),
    )
