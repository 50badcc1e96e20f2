"""Resolve stream wrapper URIs into web-accessible file URLs."""

from fileurl.schemas.url import BaseUrlContext, FileUrl
from fileurl.services.file_url_generator import FileUrlGenerator, InvalidStreamWrapperError
from fileurl.services.url_transformer import RelativeUrlTransformer
from fileurl.stream_wrappers import StreamWrapper, StreamWrapperRegistry, build_registry
from fileurl.utils.url_resolver import get_scheme, get_target

__all__ = [
    "BaseUrlContext",
    "FileUrl",
    "FileUrlGenerator",
    "InvalidStreamWrapperError",
    "RelativeUrlTransformer",
    "StreamWrapper",
    "StreamWrapperRegistry",
    "build_registry",
    "get_scheme",
    "get_target",
]
__version__ = "1.0.0"
