"""
Health check response schemas.
"""

from pydantic import BaseModel
from typing import Dict, Any

from textile_billing.core.config import settings


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    uptime: str
    version: str = settings.VERSION
    checks: Dict[str, Any] = {}
