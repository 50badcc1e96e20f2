#!/usr/bin/env python3
"""
FastAPI dependencies shared by the routers
"""

from fastapi import Depends, Request

from fileurl.schemas.url import BaseUrlContext
from fileurl.services.file_url_generator import FileUrlGenerator
from fileurl.stream_wrappers.registry import StreamWrapperRegistry


def get_registry(request: Request) -> StreamWrapperRegistry:
    """Stream wrapper registry built at application startup"""
    return request.app.state.registry


def get_base_url_context(request: Request) -> BaseUrlContext:
    """Canonical BASE_URL when configured, otherwise derived from the request"""
    if request.app.state.base_url_context is not None:
        return request.app.state.base_url_context
    return BaseUrlContext.from_request(request)


def get_file_url_generator(
    registry: StreamWrapperRegistry = Depends(get_registry),
    context: BaseUrlContext = Depends(get_base_url_context),
) -> FileUrlGenerator:
    """Per-request generator bound to the request's base URL context"""
    return FileUrlGenerator(registry, context)
