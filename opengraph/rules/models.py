from pydantic import BaseModel, ConfigDict, Field

from opengraph.components.graph._impl import (
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    DEFAULT_TEMPLATE,
)
from opengraph.components.graph.models import NAME_PREFIX


class OpenGraphRules(BaseModel):
    """Builder configuration, usually loaded from opengraph_rules.yaml."""

    model_config = ConfigDict(extra="forbid")

    validate_tags: bool = False
    template: str = DEFAULT_TEMPLATE
    name_prefix: str = NAME_PREFIX
    description_max_length: int = Field(default=DEFAULT_DESCRIPTION_MAX_LENGTH, ge=1)
    base_url_env: str = "APP_URL"
    asset_base_url: str | None = None
