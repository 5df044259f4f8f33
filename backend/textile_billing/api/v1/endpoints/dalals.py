"""
Dalals API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.dalal_controller import DalalController
from textile_billing.schemas.dalal import (
    DalalCreate,
    DalalUpdate,
    DalalResponse,
    DalalListResponse,
)

router = APIRouter()


@router.post("", response_model=DalalResponse, status_code=status.HTTP_201_CREATED)
async def create_dalal(
    dalal_data: DalalCreate,
    db: AsyncSession = Depends(get_db),
) -> DalalResponse:
    """Create a new dalal."""
    controller = DalalController(db)
    return await controller.create_dalal(dalal_data)


@router.get("", response_model=DalalListResponse)
async def list_dalals(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> DalalListResponse:
    """List dalal records."""
    controller = DalalController(db)
    return await controller.list_dalals(skip=skip, limit=limit)


@router.get("/{dalal_id}", response_model=DalalResponse)
async def get_dalal(
    dalal_id: int,
    db: AsyncSession = Depends(get_db),
) -> DalalResponse:
    """Get dalal by ID."""
    controller = DalalController(db)
    dalal = await controller.get_dalal(dalal_id)
    if not dalal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Dalal not found",
        )
    return dalal


@router.put("/{dalal_id}", response_model=DalalResponse)
async def update_dalal(
    dalal_id: int,
    dalal_data: DalalUpdate,
    db: AsyncSession = Depends(get_db),
) -> DalalResponse:
    """Update a dalal."""
    controller = DalalController(db)
    dalal = await controller.update_dalal(dalal_id, dalal_data)
    if not dalal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Dalal not found",
        )
    return dalal


@router.delete("/{dalal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dalal(
    dalal_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a dalal. Fails with 409 while bills refer to it."""
    controller = DalalController(db)
    deleted = await controller.delete_dalal(dalal_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Dalal not found",
        )
