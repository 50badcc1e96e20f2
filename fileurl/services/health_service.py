#!/usr/bin/env python3
"""
Health Service - System Health Business Logic
"""

from typing import Dict, Any
import logging

from fileurl.stream_wrappers.registry import StreamWrapperRegistry

logger = logging.getLogger(__name__)


class HealthService:
    """
    Service layer for health check operations
    Reports whether stream wrappers are registered and usable
    """

    def __init__(self, registry: StreamWrapperRegistry):
        self.registry = registry

    def check_system_health(self) -> Dict[str, Any]:
        """
        Business operation: stream wrapper registry health check
        """
        schemes = self.registry.schemes
        overall_health = len(schemes) > 0

        return {
            "success": overall_health,
            "error_code": None if overall_health else "NO_STREAM_WRAPPERS",
            "data": {
                "ok": overall_health,
                "stream_wrappers": len(schemes),
                "schemes": schemes,
            }
        }
