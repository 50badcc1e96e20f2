#!/usr/bin/env python3
"""
Schemas package for the File URL Service
"""

from fileurl.schemas.url import BaseUrlContext, FileUrl
from fileurl.schemas.files import (
    FileUrlResponse,
    FileUrlDescriptorResponse,
    RelativeUrlResponse,
    SchemesResponse,
)
from fileurl.schemas.health import HealthResponse, ErrorResponse

__all__ = [
    "BaseUrlContext",
    "FileUrl",
    "FileUrlResponse",
    "FileUrlDescriptorResponse",
    "RelativeUrlResponse",
    "SchemesResponse",
    "HealthResponse",
    "ErrorResponse"
]
