"""Stream wrapper capability shared by all handlers."""

from typing import Protocol, runtime_checkable
from urllib.parse import quote


@runtime_checkable
class StreamWrapper(Protocol):
    """Turns the target of a ``<scheme>://<target>`` URI into a reachable URL."""

    def external_url(self, target: str) -> str:
        """Return an absolute, root-relative or base-path-relative URL for ``target``."""
        ...


def encode_target(target: str) -> str:
    """URL-encode a URI target for use as a path, keeping "/" separators."""
    path = target.replace("\\", "/").strip("/")
    return quote(path, safe="/")
