from sqlalchemy.orm import Session

from app.models.marketplace_stats import MarketplaceStats
from app.repositories import stats_repo
from app.utils.logger import get_logger

logger = get_logger(__name__)


def get_marketplace_stats(db: Session) -> MarketplaceStats:
    """
    Read the stats row, creating it with zero counters on first access.

    The counters are not recomputed here, so they can lag behind the
    wallets and offers tables until refresh_marketplace_stats runs.
    """
    stats = stats_repo.get_stats(db)
    if stats:
        return stats

    logger.info("No marketplace stats row yet, initialising with zeros")
    return stats_repo.create_stats(
        db,
        total_wallets=0,
        total_value_usd=0,
        active_offers=0,
        deals_closed=0,
    )


def refresh_marketplace_stats(db: Session) -> MarketplaceStats:
    """Recompute the counters from the underlying tables and store them."""
    totals = stats_repo.compute_live_totals(db)
    stats = get_marketplace_stats(db)
    stats = stats_repo.update_stats(db, stats, totals)
    logger.info(
        "Marketplace stats refreshed: %s wallets, %s USD, %s active offers, %s deals",
        totals["total_wallets"], totals["total_value_usd"], totals["active_offers"], totals["deals_closed"],
    )
    return stats
