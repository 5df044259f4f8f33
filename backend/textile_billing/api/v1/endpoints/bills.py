"""
Bill API endpoints.

Every response ages bills against ``as_of`` when given, otherwise against
today's date.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.deps.clock import get_today
from textile_billing.controllers.bill_controller import BillController
from textile_billing.schemas.bill import (
    BillCreate,
    BillUpdate,
    BillView,
    BillFilter,
    BillListResponse,
    BillStatusFilter,
)
from textile_billing.schemas.invoice import InvoiceResponse

router = APIRouter()


def _bill_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Bill not found",
    )


@router.post("", response_model=BillView, status_code=status.HTTP_201_CREATED)
async def create_bill(
    bill_data: BillCreate,
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> BillView:
    """Create a new bill. Fails with 422 when a referenced record does not exist."""
    controller = BillController(db)
    return await controller.create_bill(bill_data, today)


@router.get("", response_model=BillListResponse)
async def list_bills(
    status_filter: BillStatusFilter = Query(BillStatusFilter.ALL, alias="status"),
    buyer_id: Optional[int] = Query(None, gt=0),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> BillListResponse:
    """List bills, most recent first."""
    try:
        bill_filter = BillFilter(
            status=status_filter,
            buyer_id=buyer_id,
            from_date=from_date,
            to_date=to_date,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False),
        )
    
    controller = BillController(db)
    return await controller.list_bills(bill_filter, today, skip=skip, limit=limit)


@router.get("/urgent", response_model=List[BillView])
async def list_urgent_bills(
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> List[BillView]:
    """Unpaid bills due within five days or already overdue, most overdue first."""
    controller = BillController(db)
    return await controller.list_urgent_bills(today)


@router.get("/{bill_id}", response_model=BillView)
async def get_bill(
    bill_id: int,
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> BillView:
    """Get bill by ID."""
    controller = BillController(db)
    bill = await controller.get_bill(bill_id, today)
    if not bill:
        raise _bill_not_found()
    return bill


@router.put("/{bill_id}", response_model=BillView)
async def update_bill(
    bill_id: int,
    bill_data: BillUpdate,
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> BillView:
    """Replace a bill's inputs. Amounts are recomputed with the current tax rate."""
    controller = BillController(db)
    bill = await controller.update_bill(bill_id, bill_data, today)
    if not bill:
        raise _bill_not_found()
    return bill


@router.post("/{bill_id}/mark-paid", response_model=BillView)
async def mark_bill_paid(
    bill_id: int,
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> BillView:
    """Record payment received. Fails with 409 if the bill is already paid."""
    controller = BillController(db)
    bill = await controller.mark_paid(bill_id, today)
    if not bill:
        raise _bill_not_found()
    return bill


@router.get("/{bill_id}/invoice", response_model=InvoiceResponse)
async def get_bill_invoice(
    bill_id: int,
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Invoice data for printing: bill, company profile and amount in words."""
    controller = BillController(db)
    invoice = await controller.get_invoice(bill_id, today)
    if not invoice:
        raise _bill_not_found()
    return invoice


@router.delete("/{bill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bill(
    bill_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a bill."""
    controller = BillController(db)
    deleted = await controller.delete_bill(bill_id)
    if not deleted:
        raise _bill_not_found()
