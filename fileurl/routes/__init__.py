#!/usr/bin/env python3
"""
Routes package for the File URL Service
"""

from fileurl.routes.files_rcs import router as files_router
from fileurl.routes.health_rcs import router as health_router

__all__ = [
    "files_router",
    "health_router"
]
