#!/usr/bin/env python3
"""
Pydantic schemas for file URL endpoints
"""

from typing import List

from pydantic import BaseModel, Field


class FileUrlResponse(BaseModel):
    """Response for GET /files/url"""
    uri: str = Field(..., description="Requested URI")
    url: str = Field(..., description="Generated URL")
    absolute: bool = Field(..., description="Whether an absolute URL was requested")


class FileUrlDescriptorResponse(BaseModel):
    """Response for GET /files/descriptor, exposing both renderings"""
    uri: str = Field(..., description="Requested URI")
    url: str = Field(..., description="Relative rendering (absolute for foreign hosts)")
    absolute_url: str = Field(..., description="Absolute rendering")
    external: bool = Field(..., description="True when the file lives on a foreign host")


class RelativeUrlResponse(BaseModel):
    """Response for GET /files/relative"""
    url: str = Field(..., description="URL as submitted")
    relative_url: str = Field(..., description="Relative form, or the submitted URL when not local")
    changed: bool = Field(..., description="Whether the URL was rewritten")


class SchemesResponse(BaseModel):
    """Response for GET /files/schemes"""
    schemes: List[str] = Field(..., description="Registered stream wrapper schemes")
