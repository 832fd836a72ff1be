from decimal import Decimal

from app.init_db import seed_sample_data, SAMPLE_WALLETS
from app.models.marketplace_stats import MarketplaceStats
from app.models.offer import Offer
from app.models.wallet import Wallet


def test_seed_sample_data_populates_empty_database(db_session):
    assert seed_sample_data(db_session) is True

    assert db_session.query(Wallet).count() == len(SAMPLE_WALLETS)
    assert db_session.query(Offer).count() == 2

    stats = db_session.query(MarketplaceStats).one()
    assert stats.total_wallets == 3
    assert stats.total_value_usd == Decimal("356721.30")
    assert stats.active_offers == 2
    assert stats.deals_closed == 0

def test_seed_sample_data_skips_populated_database(db_session, sample_wallet):
    assert seed_sample_data(db_session) is False

    assert db_session.query(Wallet).count() == 1
    assert db_session.query(Offer).count() == 0
