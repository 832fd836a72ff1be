import math
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.wallet import Wallet
from app.repositories import wallet_repo
from app.schemas.wallet import AssetBalances, WalletAssetsUpdate, WalletConnectRequest, WalletFilters
from app.services.valuation_service import calculate_total_value_usd
from app.utils.exceptions import WalletNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _serialize_lrt(lrt_balances: Dict[str, Decimal]) -> Dict[str, str]:
    # JSON column; keep balances as strings to avoid float drift
    return {token: str(amount) for token, amount in lrt_balances.items()}


def _asset_snapshot(request: AssetBalances) -> Dict[str, Any]:
    """Balance columns to write for a connect request."""
    total_value_usd = request.total_value_usd
    if total_value_usd is None:
        total_value_usd = calculate_total_value_usd(
            {
                "eth": request.eth_balance,
                "steth": request.steth_balance,
                "reth": request.reth_balance,
                "cbeth": request.cbeth_balance,
            },
            request.lrt_balances,
        )
    return {
        "eth_balance": request.eth_balance,
        "steth_balance": request.steth_balance,
        "reth_balance": request.reth_balance,
        "cbeth_balance": request.cbeth_balance,
        "lrt_balances": _serialize_lrt(request.lrt_balances),
        "total_value_usd": total_value_usd,
    }


def get_wallet(db: Session, wallet_id: int) -> Wallet:
    wallet = wallet_repo.get_wallet_by_id(db, wallet_id)
    if not wallet:
        raise WalletNotFoundError(f"Wallet {wallet_id} not found")
    return wallet


def list_wallets(db: Session, page: int, limit: int, filters: WalletFilters) -> Dict[str, Any]:
    """
    Return a page of wallets plus pagination metadata.
    """
    if filters.asset_type:
        logger.debug("assetType filter %r accepted but not applied", filters.asset_type)

    wallets = wallet_repo.get_wallets(db, page, limit, filters)
    total = wallet_repo.count_wallets(db, filters)
    return {
        "wallets": wallets,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }


def connect_wallet(db: Session, request: WalletConnectRequest) -> Wallet:
    """
    Register a wallet on first connect, or refresh its balances on reconnect.

    Only balances, valuation and last_active change on reconnect; profile
    fields keep their stored values.
    """
    assets = _asset_snapshot(request)

    existing = wallet_repo.get_wallet_by_address(db, request.address)
    if existing:
        logger.info("Refreshing balances for wallet %s", request.address)
        return wallet_repo.update_wallet_assets(db, existing, assets)

    try:
        wallet = wallet_repo.create_wallet(
            db,
            address=request.address,
            preferences=request.preferences.model_dump(exclude_none=True),
            available_capital_min=request.available_capital_min,
            available_capital_max=request.available_capital_max,
            email_alerts_enabled=request.email_alerts_enabled,
            email=request.email,
            is_verified=request.is_verified,
            badges=request.badges,
            **assets,
        )
        logger.info("Registered new wallet %s (id=%s)", wallet.address, wallet.id)
        return wallet
    except IntegrityError:
        # Another request inserted the same address between our check and insert
        db.rollback()
        existing = wallet_repo.get_wallet_by_address(db, request.address)
        if existing is None:
            raise
        logger.warning("Concurrent connect for %s, updating existing wallet", request.address)
        return wallet_repo.update_wallet_assets(db, existing, assets)


def update_wallet_assets(db: Session, wallet_id: int, request: WalletAssetsUpdate) -> Wallet:
    """Write the balance fields present in the request and refresh last_active."""
    wallet = get_wallet(db, wallet_id)

    assets = request.model_dump(exclude_unset=True, exclude_none=True)
    if "lrt_balances" in assets:
        assets["lrt_balances"] = _serialize_lrt(request.lrt_balances)

    logger.info("Updating assets for wallet %s: %s", wallet_id, sorted(assets))
    return wallet_repo.update_wallet_assets(db, wallet, assets)
