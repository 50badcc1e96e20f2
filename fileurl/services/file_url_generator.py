#!/usr/bin/env python3
"""
File URL generation for stream wrapper URIs and shipped files.
- Pure: depends only on the URI, the registry and the base URL context.
- Local URLs come back root-relative; CDN/remote URLs stay absolute.
- Unregistered schemes raise InvalidStreamWrapperError, nothing else does.
"""

import logging

from fileurl.schemas.url import BaseUrlContext, FileUrl
from fileurl.services.url_transformer import RelativeUrlTransformer
from fileurl.stream_wrappers.registry import StreamWrapperRegistry
from fileurl.utils.url_resolver import (
    get_scheme,
    get_target,
    is_protocol_relative,
    resolve_relative,
    to_absolute,
)

logger = logging.getLogger(__name__)

# URIs with these schemes are already web-accessible
EXTERNAL_SCHEMES = frozenset({"http", "https", "data"})


class InvalidStreamWrapperError(Exception):
    """Raised when a URI names a scheme without a registered stream wrapper"""

    def __init__(self, scheme: str, uri: str):
        super().__init__(f"No stream wrapper registered for scheme '{scheme}' (URI: {uri})")
        self.scheme = scheme
        self.uri = uri


class FileUrlGenerator:
    """
    Generates web-accessible URLs for files.

    Two kinds of files are supported:
    - managed files, addressed as ``<scheme>://<target>`` and resolved by the
      stream wrapper registered for the scheme;
    - shipped files, addressed by a plain path relative to the application
      base path.
    """

    def __init__(self, registry: StreamWrapperRegistry, context: BaseUrlContext):
        self.registry = registry
        self.context = context
        self.transformer = RelativeUrlTransformer(context)

    def generate_string(self, uri: str) -> str:
        """
        Create a root-relative URL string.

        For a local file this is a root-relative path; a CDN or remote stream
        wrapper may yield an absolute URL.

        Raises:
            InvalidStreamWrapperError: no stream wrapper for the URI's scheme
        """
        if get_scheme(uri) in EXTERNAL_SCHEMES:
            return uri

        url = self._resolve(uri)
        if is_protocol_relative(url) or get_scheme(url):
            return self.transformer.transform_relative(url)
        return url

    def generate_absolute_string(self, uri: str) -> str:
        """
        Create an absolute URL string.

        Raises:
            InvalidStreamWrapperError: no stream wrapper for the URI's scheme
        """
        return to_absolute(self._resolve(uri), self.context)

    def generate(self, uri: str) -> FileUrl:
        """
        Create an immutable URL descriptor rendering relative by default.
        Use ``to_absolute_string()`` or ``as_absolute()`` for the absolute form.

        Raises:
            InvalidStreamWrapperError: no stream wrapper for the URI's scheme
        """
        return FileUrl(uri=uri, url=self.generate_string(uri), context=self.context)

    def transform_relative(self, url: str, root_relative: bool = True) -> str:
        """Transform an absolute URL of a local file to a relative URL."""
        return self.transformer.transform_relative(url, root_relative)

    def _resolve(self, uri: str) -> str:
        """Resolve a URI into an absolute or root-relative URL (not yet normalized)."""
        scheme = get_scheme(uri)

        if scheme is None:
            # Shipped file; root-relative and protocol-relative paths pass through
            return resolve_relative(uri, self.context)

        if scheme in EXTERNAL_SCHEMES:
            return uri

        wrapper = self.registry.lookup(scheme)
        if wrapper is None:
            logger.warning(
                "No stream wrapper registered for scheme",
                extra={"scheme": scheme, "uri": uri},
            )
            raise InvalidStreamWrapperError(scheme, uri)

        external_url = wrapper.external_url(get_target(uri))
        logger.debug(
            "Stream wrapper resolved URI",
            extra={"uri": uri, "scheme": scheme, "external_url": external_url},
        )
        return resolve_relative(external_url, self.context)
