#!/usr/bin/env python3
"""
Pydantic schemas for health check operations
"""

from typing import List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Schema for health check response"""
    ok: bool = Field(..., description="Health status")
    stream_wrappers: int = Field(..., description="Number of registered stream wrappers")
    schemes: List[str] = Field(default_factory=list, description="Registered schemes")

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    detail: str = Field(..., description="Error message")

    class Config:
        from_attributes = True
