from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.marketplace_stats import MarketplaceStats
from app.models.offer import Offer
from app.models.wallet import Wallet
from typing import Any, Dict, Optional

def get_stats(db: Session) -> Optional[MarketplaceStats]:
    """Fetch the singleton stats row, if it has been created."""
    return db.query(MarketplaceStats).order_by(MarketplaceStats.id.asc()).first()

def create_stats(db: Session, **values: Any) -> MarketplaceStats:
    stats = MarketplaceStats(**values)
    db.add(stats)
    db.commit()
    db.refresh(stats)
    return stats

def update_stats(db: Session, stats: MarketplaceStats, values: Dict[str, Any]) -> MarketplaceStats:
    for field, value in values.items():
        setattr(stats, field, value)
    db.commit()
    db.refresh(stats)
    return stats

def compute_live_totals(db: Session) -> Dict[str, Any]:
    """
    Aggregate the counters straight from the wallets and offers tables.

    deals_closed counts accepted offers.
    """
    total_wallets, total_value = db.query(
        func.count(Wallet.id), func.coalesce(func.sum(Wallet.total_value_usd), 0)
    ).one()
    active_offers = db.query(func.count(Offer.id)).filter(Offer.is_active.is_(True)).scalar()
    deals_closed = db.query(func.count(Offer.id)).filter(Offer.is_accepted.is_(True)).scalar()
    return {
        "total_wallets": total_wallets or 0,
        "total_value_usd": Decimal(str(total_value or 0)).quantize(Decimal("0.01")),
        "active_offers": active_offers or 0,
        "deals_closed": deals_closed or 0,
    }
