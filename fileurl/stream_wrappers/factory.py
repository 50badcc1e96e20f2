"""Stream wrapper registry factory driven by application settings."""

import logging

from .local import LocalStreamWrapper, TemporaryStreamWrapper
from .registry import StreamWrapperRegistry
from .remote import CdnStreamWrapper, S3StreamWrapper

logger = logging.getLogger(__name__)


def build_registry(settings) -> StreamWrapperRegistry:
    """Create the stream wrapper registry from settings; called once at startup."""
    public_base = settings.PUBLIC_FILES_BASE_URL or settings.PUBLIC_FILES_PATH
    wrappers = {
        "public": LocalStreamWrapper(public_base),
        "private": LocalStreamWrapper(settings.PRIVATE_FILES_ROUTE),
        "temporary": TemporaryStreamWrapper(settings.TEMPORARY_FILES_ROUTE),
    }

    if settings.CDN_BASE_URL:
        wrappers["cdn"] = CdnStreamWrapper(settings.CDN_BASE_URL)

    if settings.S3_BUCKET:
        wrappers["s3"] = S3StreamWrapper(
            settings.S3_BUCKET,
            region=settings.S3_REGION,
            public_base_url=settings.S3_PUBLIC_BASE_URL,
        )

    for scheme, base_url in settings.REMOTE_STREAM_WRAPPERS.items():
        if scheme.lower() in wrappers:
            raise ValueError(f"Remote stream wrapper '{scheme}' conflicts with a built-in scheme")
        wrappers[scheme] = CdnStreamWrapper(base_url)

    registry = StreamWrapperRegistry(wrappers)
    logger.info("Stream wrappers registered", extra={"schemes": registry.schemes})
    return registry
