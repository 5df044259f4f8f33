"""
Health controller.
"""

from textile_billing.controllers.base_controller import BaseController
from textile_billing.schemas.health import HealthResponse
from textile_billing.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""
    
    def __init__(self, health_service: HealthService = None):
        self.health_service = health_service or HealthService()
    
    async def get_health(self) -> HealthResponse:
        """Get system health status."""
        return await self.health_service.get_health()
