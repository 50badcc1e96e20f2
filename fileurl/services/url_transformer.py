#!/usr/bin/env python3
"""
Relative URL transformation for local file URLs.
- Never raises: unparseable or already-relative input is returned unchanged.
- Idempotent: relative output has no host and passes through on a second call.
"""

import logging
from urllib.parse import urlsplit

from fileurl.schemas.url import BaseUrlContext, DEFAULT_PORTS

logger = logging.getLogger(__name__)


class RelativeUrlTransformer:
    """Strips the current site's origin (and optionally base path) from local URLs"""

    def __init__(self, context: BaseUrlContext):
        self.context = context

    def transform_relative(self, url: str, root_relative: bool = True) -> str:
        """
        Transform an absolute URL of a local file into a relative URL.

        Args:
            url: File URL, typically produced by FileUrlGenerator
            root_relative: True for a URL relative to the host root,
                False for one relative to the application base path

        Returns:
            The relative URL when ``url`` is absolute and points at the current
            site; otherwise ``url`` unchanged.
        """
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError:
            logger.debug("Unparseable URL left unchanged", extra={"url": url})
            return url

        if not parts.netloc or not parts.hostname:
            return url

        scheme = parts.scheme.lower()
        if port is None:
            port = DEFAULT_PORTS.get(scheme)

        if (
            scheme != self.context.scheme
            or parts.hostname != self.context.host
            or port != self.context.effective_port
        ):
            return url

        path = parts.path or "/"
        if not root_relative:
            base = self.context.base_path.rstrip("/")
            if base:
                if path != base and not path.startswith(base + "/"):
                    # Same host, but outside this application
                    return url
                path = path[len(base):] or "/"

        if path.startswith("//"):
            # Would read as a protocol-relative URL on another host
            return url

        if parts.query:
            path += "?" + parts.query
        if parts.fragment:
            path += "#" + parts.fragment
        return path
