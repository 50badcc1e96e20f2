#!/usr/bin/env python3
"""
Controllers package for the File URL Service
Request/Response Handling Layer
"""

from fileurl.controllers.file_url_controller import FileUrlController
from fileurl.controllers.health_controller import HealthController

__all__ = [
    "FileUrlController",
    "HealthController"
]
