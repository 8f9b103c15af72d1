"""
Active stock router: outstanding ornament stock.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ornament_ledger.core.exceptions import NotFoundError
from ornament_ledger.dependencies.database import (
    get_active_stock_ledger,
    get_inventory_lifecycle,
)
from ornament_ledger.schemas.archive import ArchiveEntryResponse, RetireRequest
from ornament_ledger.schemas.stock import (
    MessageResponse,
    StockEntryCreate,
    StockEntryResponse,
)
from ornament_ledger.services.lifecycle_service import InventoryLifecycle
from ornament_ledger.services.stock_service import ActiveStockLedger

router = APIRouter(prefix="/active-stock", tags=["Active Stock"])


@router.get(
    "",
    response_model=list[StockEntryResponse],
    summary="List active stock",
)
async def list_active_stock(
    ledger: ActiveStockLedger = Depends(get_active_stock_ledger),
):
    """List all outstanding stock, newest first."""
    return await ledger.list_entries()


@router.post(
    "",
    response_model=StockEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create active stock",
)
async def create_active_stock(
    body: StockEntryCreate,
    ledger: ActiveStockLedger = Depends(get_active_stock_ledger),
):
    """
    Record stock given to someone.
    
    - **itemName**: Ornament name (required)
    - **productGivenTo**: Recipient (required)
    - **weight**: Positive weight (required)
    - **author**: Who records it (required)
    - **pieces**: Number of pieces (default: 0)
    - **ornamentType**: "Gold" or "Silver" (default: "Gold")
    """
    return await ledger.create_entry(body)


@router.delete(
    "/{entry_id}",
    response_model=MessageResponse,
    summary="Delete active stock",
)
async def delete_active_stock(
    entry_id: str,
    ledger: ActiveStockLedger = Depends(get_active_stock_ledger),
):
    """
    Remove an entry from active stock.
    
    **Note**: This does not archive the entry. Post a copy to `/archive`
    afterwards, or use `/active-stock/{id}/retire` to do both at once.
    """
    try:
        await ledger.delete_entry(entry_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return MessageResponse(message="Stock item deleted successfully")


@router.post(
    "/{entry_id}/retire",
    response_model=ArchiveEntryResponse,
    summary="Delete active stock and archive it",
)
async def retire_active_stock(
    entry_id: str,
    body: Optional[RetireRequest] = None,
    lifecycle: InventoryLifecycle = Depends(get_inventory_lifecycle),
):
    """
    Remove an entry and append a copy of it to the archive in one call.
    
    - **status**: Archive status (default: "Deleted")
    
    The archive record's deletionDate is set to the current time.
    """
    request = body or RetireRequest()
    try:
        return await lifecycle.retire(entry_id, status=request.status)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
