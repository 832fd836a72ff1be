from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Query, Session
from app.models.wallet import Wallet
from app.schemas.wallet import WalletFilters
from app.utils.constants import WalletSortField, SortOrder, utcnow
from typing import Any, Dict, List, Optional

def get_wallet_by_id(db: Session, wallet_id: int) -> Optional[Wallet]:
    """Fetch a wallet by its ID."""
    return db.query(Wallet).filter(Wallet.id == wallet_id).first()

def get_wallet_by_address(db: Session, address: str) -> Optional[Wallet]:
    """
    Find a wallet by its exact on-chain address.

    Addresses are stored lowercase, so callers pass normalised input.
    """
    return db.query(Wallet).filter(Wallet.address == address).first()

def _apply_filters(query: Query, filters: WalletFilters) -> Query:
    """
    Narrow a wallet query by search term and minimum ETH balance.

    The search term is matched case-insensitively against the address and
    against the serialized preferences JSON.
    """
    if filters.search:
        query = query.filter(
            or_(
                Wallet.address.icontains(filters.search, autoescape=True),
                cast(Wallet.preferences, String).icontains(filters.search, autoescape=True),
            )
        )
    if filters.min_eth > 0:
        query = query.filter(Wallet.eth_balance >= filters.min_eth)
    return query

def _apply_sorting(query: Query, filters: WalletFilters) -> Query:
    if filters.sort_by == WalletSortField.TOTAL_VALUE_USD:
        if filters.sort_order == SortOrder.ASC:
            query = query.order_by(Wallet.total_value_usd.asc())
        else:
            query = query.order_by(Wallet.total_value_usd.desc())
    elif filters.sort_by == WalletSortField.LAST_ACTIVE:
        # Most recently active first, whatever the requested direction
        query = query.order_by(Wallet.last_active.desc())
    # Unknown keys fall back to insertion order; id also breaks ties
    return query.order_by(Wallet.id.asc())

def get_wallets(db: Session, page: int, limit: int, filters: WalletFilters) -> List[Wallet]:
    """Return one page of wallets matching the filters."""
    query = _apply_filters(db.query(Wallet), filters)
    query = _apply_sorting(query, filters)
    return query.offset((page - 1) * limit).limit(limit).all()

def count_wallets(db: Session, filters: WalletFilters) -> int:
    """Count wallets matching the filters, ignoring pagination."""
    query = _apply_filters(db.query(func.count(Wallet.id)), filters)
    return query.scalar() or 0

def create_wallet(db: Session, address: str, **fields: Any) -> Wallet:
    """
    Insert a new wallet row.

    Raises IntegrityError if the address is already taken; the caller is
    responsible for rolling back.
    """
    wallet = Wallet(address=address, **fields)
    db.add(wallet)
    db.commit()
    db.refresh(wallet)
    return wallet

def update_wallet_assets(db: Session, wallet: Wallet, assets: Dict[str, Any]) -> Wallet:
    """Overwrite balance fields on a wallet and mark it active now."""
    for field, value in assets.items():
        setattr(wallet, field, value)
    wallet.last_active = utcnow()
    db.commit()
    db.refresh(wallet)
    return wallet
