"""
Buyers API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.buyer_controller import BuyerController
from textile_billing.schemas.buyer import (
    BuyerCreate,
    BuyerUpdate,
    BuyerResponse,
    BuyerListResponse,
)

router = APIRouter()


@router.post("", response_model=BuyerResponse, status_code=status.HTTP_201_CREATED)
async def create_buyer(
    buyer_data: BuyerCreate,
    db: AsyncSession = Depends(get_db),
) -> BuyerResponse:
    """Create a new buyer."""
    controller = BuyerController(db)
    return await controller.create_buyer(buyer_data)


@router.get("", response_model=BuyerListResponse)
async def list_buyers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> BuyerListResponse:
    """List buyer records."""
    controller = BuyerController(db)
    return await controller.list_buyers(skip=skip, limit=limit)


@router.get("/{buyer_id}", response_model=BuyerResponse)
async def get_buyer(
    buyer_id: int,
    db: AsyncSession = Depends(get_db),
) -> BuyerResponse:
    """Get buyer by ID."""
    controller = BuyerController(db)
    buyer = await controller.get_buyer(buyer_id)
    if not buyer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Buyer not found",
        )
    return buyer


@router.put("/{buyer_id}", response_model=BuyerResponse)
async def update_buyer(
    buyer_id: int,
    buyer_data: BuyerUpdate,
    db: AsyncSession = Depends(get_db),
) -> BuyerResponse:
    """Update a buyer."""
    controller = BuyerController(db)
    buyer = await controller.update_buyer(buyer_id, buyer_data)
    if not buyer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Buyer not found",
        )
    return buyer


@router.delete("/{buyer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_buyer(
    buyer_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a buyer. Fails with 409 while bills refer to it."""
    controller = BuyerController(db)
    deleted = await controller.delete_buyer(buyer_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Buyer not found",
        )
