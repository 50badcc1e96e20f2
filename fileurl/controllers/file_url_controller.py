#!/usr/bin/env python3
"""
HTTP controller for file URL endpoints.
- Minimal HTTP logic: validation, generator calls, response formatting.
- Maps InvalidStreamWrapperError to 400; anything unexpected to 500.
"""

import logging

from fastapi import HTTPException

from fileurl.services.file_url_generator import FileUrlGenerator, InvalidStreamWrapperError
from fileurl.schemas.files import (
    FileUrlResponse,
    FileUrlDescriptorResponse,
    RelativeUrlResponse,
    SchemesResponse,
)

logger = logging.getLogger(__name__)


class FileUrlController:
    """HTTP orchestration for file URL endpoints"""

    def __init__(self, generator: FileUrlGenerator):
        self.generator = generator

    def get_url(self, uri: str, absolute: bool = False) -> FileUrlResponse:
        """
        Generate a URL string for a URI.
        Root-relative by default; absolute when requested.
        """
        uri = self._require(uri, "URI")
        try:
            if absolute:
                url = self.generator.generate_absolute_string(uri)
            else:
                url = self.generator.generate_string(uri)
        except InvalidStreamWrapperError as e:
            logger.warning("Invalid stream wrapper requested", extra={"scheme": e.scheme, "uri": uri})
            raise HTTPException(status_code=400, detail=str(e))
        except Exception:
            logger.exception("Unexpected error generating file URL")
            raise HTTPException(status_code=500, detail="Internal server error")

        return FileUrlResponse(uri=uri, url=url, absolute=absolute)

    def get_descriptor(self, uri: str) -> FileUrlDescriptorResponse:
        """Generate a URL descriptor exposing both renderings"""
        uri = self._require(uri, "URI")
        try:
            file_url = self.generator.generate(uri)
        except InvalidStreamWrapperError as e:
            logger.warning("Invalid stream wrapper requested", extra={"scheme": e.scheme, "uri": uri})
            raise HTTPException(status_code=400, detail=str(e))
        except Exception:
            logger.exception("Unexpected error generating file URL descriptor")
            raise HTTPException(status_code=500, detail="Internal server error")

        return FileUrlDescriptorResponse(
            uri=uri,
            url=file_url.to_relative_string(),
            absolute_url=file_url.to_absolute_string(),
            external=file_url.is_external,
        )

    def get_relative(self, url: str, root_relative: bool = True) -> RelativeUrlResponse:
        """Transform a local absolute URL into relative form"""
        url = self._require(url, "URL")
        relative_url = self.generator.transform_relative(url, root_relative)

        logger.debug(
            "Relative URL transform",
            extra={"url": url, "root_relative": root_relative, "changed": relative_url != url},
        )

        return RelativeUrlResponse(url=url, relative_url=relative_url, changed=relative_url != url)

    def list_schemes(self) -> SchemesResponse:
        return SchemesResponse(schemes=self.generator.registry.schemes)

    @staticmethod
    def _require(value: str, label: str) -> str:
        if not value or not value.strip():
            raise HTTPException(status_code=400, detail=f"{label} is required")
        return value
