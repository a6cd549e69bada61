from urllib.parse import urljoin


class BaseUrlAssetResolver:
    """
    Resolves relative asset paths against a base URL.

    "img/a.png" and "/img/a.png" both end up under the base URL's root
    when the base URL has no path. A protocol-relative "//host/a.png" keeps
    its host and takes the base URL's scheme.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"

    def __call__(self, path: str) -> str:
        if path.startswith("//"):
            return urljoin(self._base_url, path)
        return urljoin(self._base_url, path.lstrip("/"))
