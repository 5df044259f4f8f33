"""
Tax rates API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.tax_controller import TaxController
from textile_billing.schemas.tax import (
    TaxCreate,
    TaxUpdate,
    TaxResponse,
    TaxListResponse,
)

router = APIRouter()


@router.post("", response_model=TaxResponse, status_code=status.HTTP_201_CREATED)
async def create_tax(
    tax_data: TaxCreate,
    db: AsyncSession = Depends(get_db),
) -> TaxResponse:
    """Create a new tax rate."""
    controller = TaxController(db)
    return await controller.create_tax(tax_data)


@router.get("", response_model=TaxListResponse)
async def list_taxes(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> TaxListResponse:
    """List tax rate records."""
    controller = TaxController(db)
    return await controller.list_taxes(skip=skip, limit=limit)


@router.get("/{tax_id}", response_model=TaxResponse)
async def get_tax(
    tax_id: int,
    db: AsyncSession = Depends(get_db),
) -> TaxResponse:
    """Get tax rate by ID."""
    controller = TaxController(db)
    tax = await controller.get_tax(tax_id)
    if not tax:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tax rate not found",
        )
    return tax


@router.put("/{tax_id}", response_model=TaxResponse)
async def update_tax(
    tax_id: int,
    tax_data: TaxUpdate,
    db: AsyncSession = Depends(get_db),
) -> TaxResponse:
    """Update a tax rate."""
    controller = TaxController(db)
    tax = await controller.update_tax(tax_id, tax_data)
    if not tax:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tax rate not found",
        )
    return tax


@router.delete("/{tax_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tax(
    tax_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a tax rate. Fails with 409 while bills refer to it."""
    controller = TaxController(db)
    deleted = await controller.delete_tax(tax_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tax rate not found",
        )
