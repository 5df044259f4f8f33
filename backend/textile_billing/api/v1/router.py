"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from textile_billing.api.v1.endpoints import (
    health,
    buyers,
    dalals,
    materials,
    dharas,
    taxes,
    bills,
    company_profile,
    dashboard,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

# Reference data
api_router.include_router(buyers.router, prefix="/buyers", tags=["buyers"])
api_router.include_router(dalals.router, prefix="/dalals", tags=["dalals"])
api_router.include_router(materials.router, prefix="/materials", tags=["materials"])
api_router.include_router(dharas.router, prefix="/dharas", tags=["payment-terms"])
api_router.include_router(taxes.router, prefix="/taxes", tags=["taxes"])

# Billing
api_router.include_router(bills.router, prefix="/bills", tags=["bills"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(company_profile.router, prefix="/company-profile", tags=["company-profile"])
