#!/usr/bin/env python3
"""
Health Controller - Health Check Request Handling
"""

import logging

from fileurl.services.health_service import HealthService
from fileurl.schemas.health import HealthResponse
from fileurl.stream_wrappers.registry import StreamWrapperRegistry

logger = logging.getLogger(__name__)


class HealthController:
    """
    Controller layer for health check operations
    Handles health check requests and responses
    """

    def __init__(self, registry: StreamWrapperRegistry):
        self.service = HealthService(registry)

    def check_health(self) -> HealthResponse:
        """
        Controller: Handle health check request
        """
        result = self.service.check_system_health()
        health_data = result["data"]

        if not result["success"]:
            logger.warning("Health check failed", extra={"error_code": result["error_code"]})

        return HealthResponse(
            ok=health_data["ok"],
            stream_wrappers=health_data["stream_wrappers"],
            schemes=health_data["schemes"]
        )
