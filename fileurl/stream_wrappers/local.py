"""Stream wrappers for files served by the site itself."""

from urllib.parse import quote

from .base import encode_target


class LocalStreamWrapper:
    """
    Files under a directory or route of the local site.

    ``base_url`` may be base-path-relative ("sites/default/files"),
    root-relative ("/files") or absolute ("https://example.com/files").
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def external_url(self, target: str) -> str:
        return f"{self.base_url}/{encode_target(target)}"

    def __repr__(self):
        return f"LocalStreamWrapper({self.base_url!r})"


class TemporaryStreamWrapper:
    """Temporary files, streamed by a route that takes the file as a query parameter."""

    def __init__(self, route: str):
        self.route = route.rstrip("/")

    def external_url(self, target: str) -> str:
        path = target.replace("\\", "/").strip("/")
        return f"{self.route}?file={quote(path, safe='/')}"

    def __repr__(self):
        return f"TemporaryStreamWrapper({self.route!r})"
