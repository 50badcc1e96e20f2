#!/usr/bin/env python3
"""
Pydantic schemas for URL resolution: the base URL context of the current site
and the immutable file URL descriptor.
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from fileurl.utils.url_resolver import has_host, to_absolute


DEFAULT_PORTS = {"http": 80, "https": 443}


class BaseUrlContext(BaseModel):
    """Scheme, host, port and base path the current site is served from"""
    scheme: str = Field("http", description="Request scheme")
    host: str = Field(..., description="Host name, lower-cased")
    port: Optional[int] = Field(None, description="Port; None when the scheme default is used")
    base_path: str = Field("/", description="Application base path, always ending with '/'")

    class Config:
        frozen = True

    @field_validator("scheme", "host")
    @classmethod
    def _lower(cls, value: str) -> str:
        return value.lower()

    @field_validator("port")
    @classmethod
    def _drop_default_port(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        if value is not None and DEFAULT_PORTS.get(info.data.get("scheme")) == value:
            return None
        return value

    @field_validator("base_path")
    @classmethod
    def _normalize_base_path(cls, value: str) -> str:
        stripped = (value or "").strip("/")
        return f"/{stripped}/" if stripped else "/"

    @property
    def effective_port(self) -> Optional[int]:
        if self.port is not None:
            return self.port
        return DEFAULT_PORTS.get(self.scheme)

    @property
    def netloc(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return host if self.port is None else f"{host}:{self.port}"

    @property
    def origin(self) -> str:
        return f"{self.scheme}://{self.netloc}"

    @property
    def base_url(self) -> str:
        return self.origin + self.base_path

    @classmethod
    def from_url(cls, url: str) -> "BaseUrlContext":
        """Build a context from a canonical site URL such as https://example.com/sub/"""
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"Base URL must be absolute: {url!r}")
        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=parts.port,
            base_path=parts.path,
        )

    @classmethod
    def from_request(cls, request) -> "BaseUrlContext":
        """Build a context from an incoming Starlette/FastAPI request"""
        return cls(
            scheme=request.url.scheme,
            host=request.url.hostname or "localhost",
            port=request.url.port,
            base_path=request.scope.get("root_path", ""),
        )


class FileUrl(BaseModel):
    """
    Immutable file URL descriptor.

    ``url`` holds the relative rendering (root-relative for local files,
    absolute for files on a foreign host). The absolute rendering is derived
    from the context; ``as_absolute()`` returns a copy with the mode flag set.
    """
    uri: str = Field(..., description="URI the URL was generated from")
    url: str = Field(..., description="Relative rendering of the URL")
    context: BaseUrlContext = Field(..., description="Base URL context used for resolution")
    absolute: bool = Field(False, description="Render absolute by default")

    class Config:
        frozen = True

    @property
    def is_external(self) -> bool:
        return has_host(self.url)

    def to_relative_string(self) -> str:
        return self.url

    def to_absolute_string(self) -> str:
        return to_absolute(self.url, self.context)

    def to_string(self) -> str:
        if self.absolute:
            return self.to_absolute_string()
        return self.to_relative_string()

    def as_absolute(self, absolute: bool = True) -> "FileUrl":
        return self.model_copy(update={"absolute": absolute})

    def __str__(self) -> str:
        return self.to_string()
