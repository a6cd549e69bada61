import pytest

from opengraph.api.deps import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Keep the process environment out of url() resolution unless a test sets it.
    """
    monkeypatch.delenv("APP_URL", raising=False)
    monkeypatch.delenv("OPENGRAPH_RULES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
