"""
Prices router: current gold/silver prices and their history.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ornament_ledger.core.exceptions import ValidationError
from ornament_ledger.dependencies.database import get_price_ledger
from ornament_ledger.schemas.price import (
    GoldPriceUpdate,
    PriceHistoryResponse,
    PriceSnapshotResponse,
    PriceUpdate,
    SilverPriceUpdate,
)
from ornament_ledger.services.price_service import PriceLedger

router = APIRouter(tags=["Prices"])


@router.get(
    "/prices",
    response_model=Optional[PriceSnapshotResponse],
    summary="Get current prices",
)
async def get_prices(ledger: PriceLedger = Depends(get_price_ledger)):
    """Current prices, or `null` if none have been set yet."""
    return await ledger.get_current()


@router.put(
    "/prices",
    response_model=PriceSnapshotResponse,
    summary="Update gold and/or silver price",
)
async def update_prices(
    body: PriceUpdate,
    ledger: PriceLedger = Depends(get_price_ledger),
):
    """
    Update either or both prices.
    
    - **gold_price**: optional
    - **silver_price**: optional
    
    Omitted prices keep their current value. Each supplied price adds one
    record to the price history.
    """
    try:
        return await ledger.update_both(body.gold_price, body.silver_price)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )


@router.put(
    "/prices/gold",
    response_model=PriceSnapshotResponse,
    summary="Update gold price",
)
async def update_gold_price(
    body: GoldPriceUpdate,
    ledger: PriceLedger = Depends(get_price_ledger),
):
    """Update the gold price only. **gold_price** is required."""
    try:
        return await ledger.update_gold(body.gold_price)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )


@router.put(
    "/prices/silver",
    response_model=PriceSnapshotResponse,
    summary="Update silver price",
)
async def update_silver_price(
    body: SilverPriceUpdate,
    ledger: PriceLedger = Depends(get_price_ledger),
):
    """Update the silver price only. **silver_price** is required."""
    try:
        return await ledger.update_silver(body.silver_price)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )


@router.get(
    "/price-history",
    response_model=list[PriceHistoryResponse],
    summary="Get price history",
)
async def get_price_history(ledger: PriceLedger = Depends(get_price_ledger)):
    """Every accepted price write, most recent first."""
    return await ledger.get_history()
