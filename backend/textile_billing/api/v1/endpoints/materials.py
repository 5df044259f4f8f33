"""
Materials API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.material_controller import MaterialController
from textile_billing.schemas.material import (
    MaterialCreate,
    MaterialUpdate,
    MaterialResponse,
    MaterialListResponse,
)

router = APIRouter()


@router.post("", response_model=MaterialResponse, status_code=status.HTTP_201_CREATED)
async def create_material(
    material_data: MaterialCreate,
    db: AsyncSession = Depends(get_db),
) -> MaterialResponse:
    """Create a new material."""
    controller = MaterialController(db)
    return await controller.create_material(material_data)


@router.get("", response_model=MaterialListResponse)
async def list_materials(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> MaterialListResponse:
    """List material records."""
    controller = MaterialController(db)
    return await controller.list_materials(skip=skip, limit=limit)


@router.get("/{material_id}", response_model=MaterialResponse)
async def get_material(
    material_id: int,
    db: AsyncSession = Depends(get_db),
) -> MaterialResponse:
    """Get material by ID."""
    controller = MaterialController(db)
    material = await controller.get_material(material_id)
    if not material:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )
    return material


@router.put("/{material_id}", response_model=MaterialResponse)
async def update_material(
    material_id: int,
    material_data: MaterialUpdate,
    db: AsyncSession = Depends(get_db),
) -> MaterialResponse:
    """Update a material."""
    controller = MaterialController(db)
    material = await controller.update_material(material_id, material_data)
    if not material:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )
    return material


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_material(
    material_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a material. Fails with 409 while bills refer to it."""
    controller = MaterialController(db)
    deleted = await controller.delete_material(material_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )
