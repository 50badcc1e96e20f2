"""Scheme-keyed, read-only table of stream wrappers."""

import logging
import re
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from .base import StreamWrapper

logger = logging.getLogger(__name__)

SCHEME_NAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")

# Resolved by the generator without a handler
RESERVED_SCHEMES = frozenset({"http", "https", "data"})


class StreamWrapperRegistry:
    """Maps scheme names to stream wrappers; frozen once constructed."""

    def __init__(self, wrappers: Optional[Mapping[str, StreamWrapper]] = None) -> None:
        table = {}
        for scheme, wrapper in (wrappers or {}).items():
            if not SCHEME_NAME_PATTERN.match(scheme):
                raise ValueError(f"Invalid stream wrapper scheme: {scheme!r}")
            key = scheme.lower()
            if key in RESERVED_SCHEMES:
                raise ValueError(f"Scheme '{key}' is reserved and cannot be registered")
            if key in table:
                raise ValueError(f"Duplicate stream wrapper for scheme '{key}'")
            if not isinstance(wrapper, StreamWrapper):
                raise TypeError(f"Stream wrapper for '{key}' must provide external_url()")
            table[key] = wrapper
        self._wrappers = MappingProxyType(table)
        logger.debug("Stream wrapper registry built", extra={"schemes": sorted(table)})

    def lookup(self, scheme: str) -> Optional[StreamWrapper]:
        return self._wrappers.get(scheme.lower())

    @property
    def schemes(self) -> List[str]:
        return sorted(self._wrappers)

    def __contains__(self, scheme: str) -> bool:
        return scheme.lower() in self._wrappers

    def __iter__(self) -> Iterator[str]:
        return iter(self.schemes)

    def __len__(self) -> int:
        return len(self._wrappers)
