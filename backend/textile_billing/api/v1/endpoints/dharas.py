"""
Payment terms API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.dhara_controller import DharaController
from textile_billing.schemas.dhara import (
    DharaCreate,
    DharaUpdate,
    DharaResponse,
    DharaListResponse,
)

router = APIRouter()


@router.post("", response_model=DharaResponse, status_code=status.HTTP_201_CREATED)
async def create_dhara(
    dhara_data: DharaCreate,
    db: AsyncSession = Depends(get_db),
) -> DharaResponse:
    """Create a new payment term."""
    controller = DharaController(db)
    return await controller.create_dhara(dhara_data)


@router.get("", response_model=DharaListResponse)
async def list_dharas(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> DharaListResponse:
    """List payment term records."""
    controller = DharaController(db)
    return await controller.list_dharas(skip=skip, limit=limit)


@router.get("/{dhara_id}", response_model=DharaResponse)
async def get_dhara(
    dhara_id: int,
    db: AsyncSession = Depends(get_db),
) -> DharaResponse:
    """Get payment term by ID."""
    controller = DharaController(db)
    dhara = await controller.get_dhara(dhara_id)
    if not dhara:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment term not found",
        )
    return dhara


@router.put("/{dhara_id}", response_model=DharaResponse)
async def update_dhara(
    dhara_id: int,
    dhara_data: DharaUpdate,
    db: AsyncSession = Depends(get_db),
) -> DharaResponse:
    """Update a payment term."""
    controller = DharaController(db)
    dhara = await controller.update_dhara(dhara_id, dhara_data)
    if not dhara:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment term not found",
        )
    return dhara


@router.delete("/{dhara_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dhara(
    dhara_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a payment term. Fails with 409 while bills refer to it."""
    controller = DharaController(db)
    deleted = await controller.delete_dhara(dhara_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment term not found",
        )
