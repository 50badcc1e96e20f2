#!/usr/bin/env python3
"""
FastAPI routes for file URL endpoints.
- Clean route definitions with dependency injection.
- Generator bound to the base URL context of each request.
"""

import logging

from fastapi import APIRouter, Depends, Query

from fileurl.controllers.file_url_controller import FileUrlController
from fileurl.routes.dependencies import get_file_url_generator
from fileurl.schemas.files import (
    FileUrlResponse,
    FileUrlDescriptorResponse,
    RelativeUrlResponse,
    SchemesResponse,
)
from fileurl.services.file_url_generator import FileUrlGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["files"])


def get_file_url_controller(
    generator: FileUrlGenerator = Depends(get_file_url_generator),
) -> FileUrlController:
    """Dependency to get File URL Controller bound to the request context"""
    return FileUrlController(generator)


@router.get("/url", response_model=FileUrlResponse)
def get_file_url(
    uri: str = Query(..., description="Stream wrapper URI or shipped file path"),
    absolute: bool = Query(False, description="Return an absolute URL"),
    controller: FileUrlController = Depends(get_file_url_controller),
):
    """
    Generate a web-accessible URL for a file.

    Returns:
        - 200: URL generated (root-relative unless absolute=true or remote)
        - 400: Missing URI or unregistered scheme
    """
    return controller.get_url(uri, absolute)


@router.get("/descriptor", response_model=FileUrlDescriptorResponse)
def get_file_url_descriptor(
    uri: str = Query(..., description="Stream wrapper URI or shipped file path"),
    controller: FileUrlController = Depends(get_file_url_controller),
):
    """
    Generate both renderings of a file URL.

    Returns:
        - 200: Relative and absolute renderings
        - 400: Missing URI or unregistered scheme
    """
    return controller.get_descriptor(uri)


@router.get("/relative", response_model=RelativeUrlResponse)
def get_relative_url(
    url: str = Query(..., description="Absolute file URL"),
    root_relative: bool = Query(True, description="Relative to the host root rather than the base path"),
    controller: FileUrlController = Depends(get_file_url_controller),
):
    """
    Transform an absolute URL of a local file to a relative URL.
    URLs on other hosts are returned unchanged.
    """
    return controller.get_relative(url, root_relative)


@router.get("/schemes", response_model=SchemesResponse)
def list_schemes(controller: FileUrlController = Depends(get_file_url_controller)):
    """List registered stream wrapper schemes"""
    return controller.list_schemes()
