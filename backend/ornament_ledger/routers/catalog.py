"""
Stock catalog router: flat CRUD, unrelated to the active stock lifecycle.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from ornament_ledger.core.exceptions import NotFoundError
from ornament_ledger.dependencies.database import get_catalog_service
from ornament_ledger.schemas.catalog import (
    CatalogItemCreate,
    CatalogItemResponse,
    CatalogItemUpdate,
)
from ornament_ledger.schemas.stock import MessageResponse
from ornament_ledger.services.catalog_service import CatalogService

router = APIRouter(prefix="/stocks", tags=["Stock Catalog"])


@router.get(
    "",
    response_model=list[CatalogItemResponse],
    summary="List catalog items",
)
async def list_stocks(catalog: CatalogService = Depends(get_catalog_service)):
    """List all catalog items."""
    return await catalog.list_items()


@router.post(
    "",
    response_model=CatalogItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add catalog item",
)
async def add_stock(
    body: CatalogItemCreate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Add a catalog item. **itemname** is required."""
    return await catalog.create_item(body)


@router.put(
    "/{item_id}",
    response_model=CatalogItemResponse,
    summary="Update catalog item",
)
async def update_stock(
    item_id: str,
    body: CatalogItemUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Update the supplied fields. The item's date is reset to now."""
    try:
        return await catalog.update_item(item_id, body)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    summary="Delete catalog item",
)
async def delete_stock(
    item_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Delete a catalog item."""
    try:
        await catalog.delete_item(item_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return MessageResponse(message="Stock item deleted successfully")
