#!/usr/bin/env python3
"""
Health Routes - Using Routes-Controller-Service Architecture
Clean separation of concerns for health check operations
"""

from fastapi import APIRouter, Depends

from fileurl.controllers import HealthController
from fileurl.routes.dependencies import get_registry
from fileurl.schemas import HealthResponse
from fileurl.stream_wrappers.registry import StreamWrapperRegistry

router = APIRouter(prefix="/health", tags=["health"])


def get_health_controller(registry: StreamWrapperRegistry = Depends(get_registry)) -> HealthController:
    """Dependency to get Health Controller with the stream wrapper registry"""
    return HealthController(registry)


@router.get("/", response_model=HealthResponse, summary="System health check")
def health_check(controller: HealthController = Depends(get_health_controller)):
    """
    System health check

    **Checks:**
    - Stream wrapper registry populated

    **Returns:**
    - ok: Boolean indicating overall system health
    - stream_wrappers: Number of registered stream wrappers
    - schemes: Registered schemes
    """
    return controller.check_health()
