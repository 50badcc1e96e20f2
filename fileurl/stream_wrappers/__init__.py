"""Stream wrapper handlers and the scheme registry."""

from .base import StreamWrapper, encode_target
from .factory import build_registry
from .local import LocalStreamWrapper, TemporaryStreamWrapper
from .registry import StreamWrapperRegistry
from .remote import CdnStreamWrapper, S3StreamWrapper

__all__ = [
    'StreamWrapper',
    'StreamWrapperRegistry',
    'build_registry',
    'encode_target',
    'LocalStreamWrapper',
    'TemporaryStreamWrapper',
    'CdnStreamWrapper',
    'S3StreamWrapper',
]
