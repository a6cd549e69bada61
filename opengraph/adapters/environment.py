import os
from collections.abc import Mapping


class OsEnvironment:
    """Environment port backed by os.environ, or by a fixed mapping in tests."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._environ.get(key, default)
