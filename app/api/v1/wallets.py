from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.services import wallet_service, offer_service
from app.schemas.wallet import (
    WalletAssetsUpdate,
    WalletConnectRequest,
    WalletFilters,
    WalletListResponse,
    WalletResponse,
)
from app.schemas.offer import OfferResponse

router = APIRouter()

@router.get("", response_model=WalletListResponse)
def list_wallets(
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: str = Query("", max_length=255),
    min_eth: Decimal = Query(Decimal("0"), alias="minEth", ge=0),
    asset_type: str = Query("", alias="assetType"),
    sort_by: str = Query("totalValueUsd", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db)
):
    """
    List wallets with search, minimum ETH filter, sorting and pagination.
    """
    filters = WalletFilters(
        search=search.strip(),
        min_eth=min_eth,
        asset_type=asset_type,
        sort_by=sort_by,
        sort_order=sort_order.lower(),
    )
    return wallet_service.list_wallets(db, page, limit, filters)

@router.post("/connect", response_model=WalletResponse)
def connect_wallet(request: WalletConnectRequest, db: Session = Depends(get_db)):
    """
    Register a wallet or refresh its balances if it is already known.
    """
    return wallet_service.connect_wallet(db, request)

@router.put("/{wallet_id}/assets", response_model=WalletResponse)
def update_wallet_assets(wallet_id: int, request: WalletAssetsUpdate, db: Session = Depends(get_db)):
    return wallet_service.update_wallet_assets(db, wallet_id, request)

@router.get("/{wallet_id}/offers", response_model=List[OfferResponse])
def get_wallet_offers(wallet_id: int, db: Session = Depends(get_db)):
    """Offers received by a wallet, newest first."""
    return offer_service.get_offers_for_wallet(db, wallet_id)
