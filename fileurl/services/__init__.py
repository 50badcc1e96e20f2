#!/usr/bin/env python3
"""
Services package for the File URL Service
URL resolution layer
"""

from fileurl.services.file_url_generator import FileUrlGenerator, InvalidStreamWrapperError
from fileurl.services.url_transformer import RelativeUrlTransformer

__all__ = [
    "FileUrlGenerator",
    "InvalidStreamWrapperError",
    "RelativeUrlTransformer"
]
