"""
Health service.
Reports uptime and whether the bill store can be queried.
"""

import time
from typing import Dict, Any

from textile_billing.services.base_service import BaseService
from textile_billing.schemas.health import HealthResponse
from textile_billing.db.session import get_sessionmaker
from textile_billing.db.repositories.health_repository import HealthRepository


class HealthService(BaseService):
    """Service for health check operations."""
    
    def __init__(self):
        self.started_at = time.monotonic()
    
    async def _run_checks(self) -> Dict[str, Any]:
        async with get_sessionmaker()() as session:
            repo = HealthRepository(session=session)
            if not await repo.check_database():
                return {"database": "error"}
            
            bill_count = await repo.count_bills()
            return {
                "database": "ok",
                "bills": "ok" if bill_count is not None else "error: bills table unavailable",
            }
    
    async def get_health(self) -> HealthResponse:
        """System status, uptime as an ISO 8601 duration and per-component checks."""
        checks = await self._run_checks()
        overall = "ok" if all(check == "ok" for check in checks.values()) else "degraded"
        
        return HealthResponse(
            status=overall,
            uptime=f"PT{int(time.monotonic() - self.started_at)}S",
            checks=checks,
        )
