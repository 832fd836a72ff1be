"""
Create the schema and load sample marketplace data.

Run with:
    python -m app.init_db
"""
from decimal import Decimal

from sqlalchemy.orm import Session

import app.models  # noqa: F401  registers every table on Base.metadata
from app.database import Base, SessionLocal, engine
from app.models.offer import Offer
from app.models.wallet import Wallet
from app.services import stats_service
from app.utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_WALLETS = [
    {
        "address": "0x1234567890abcdef1234567890abcdef12345678",
        "eth_balance": Decimal("25.5"),
        "steth_balance": Decimal("12.3"),
        "reth_balance": Decimal("8.7"),
        "cbeth_balance": Decimal("5.2"),
        "lrt_balances": {"ezeth": "3.4", "rseth": "2.1"},
        "total_value_usd": Decimal("108643.50"),
        "preferences": {"activities": ["staking", "lending"]},
        "available_capital_min": Decimal("5000"),
        "available_capital_max": Decimal("50000"),
        "email_alerts_enabled": True,
        "is_verified": True,
        "badges": ["top-holder"],
    },
    {
        "address": "0xabcdef1234567890abcdef1234567890abcdef12",
        "eth_balance": Decimal("45.2"),
        "steth_balance": Decimal("23.1"),
        "reth_balance": Decimal("15.6"),
        "cbeth_balance": Decimal("8.9"),
        "lrt_balances": {"ezeth": "6.7", "rseth": "4.3"},
        "total_value_usd": Decimal("196874.20"),
        "preferences": {"activities": ["defi", "yield-farming"]},
        "available_capital_min": Decimal("10000"),
        "available_capital_max": Decimal("100000"),
        "email_alerts_enabled": True,
        "is_verified": True,
        "badges": ["verified", "whale"],
    },
    {
        "address": "0x9876543210fedcba9876543210fedcba98765432",
        "eth_balance": Decimal("12.8"),
        "steth_balance": Decimal("6.4"),
        "reth_balance": Decimal("3.2"),
        "cbeth_balance": Decimal("1.8"),
        "lrt_balances": {"ezeth": "1.2", "rseth": "0.8"},
        "total_value_usd": Decimal("51203.60"),
        "preferences": {"activities": ["nft", "gaming"]},
        "available_capital_min": Decimal("2000"),
        "available_capital_max": Decimal("25000"),
        "email_alerts_enabled": False,
        "is_verified": False,
        "badges": [],
    },
]

# Keyed by the index of the target wallet in SAMPLE_WALLETS
SAMPLE_OFFERS = [
    (0, {
        "from_anonymous_tag": "Protocol Alpha",
        "title": "Stake 10 ETH for 30 days - Get $500 bonus",
        "description": "We're looking for ETH holders to stake with our protocol for 30 days. "
                       "Earn our governance token plus a $500 USDC bonus.",
        "offer_type": "cash",
        "category": "defi",
        "reward_value": Decimal("500"),
        "contact_info": "alpha@protocol.com",
    }),
    (1, {
        "from_anonymous_tag": "Yield Farm Beta",
        "title": "Provide LP tokens - Earn 15% APY",
        "description": "Join our liquidity pool and earn high yield on your ETH. "
                       "Limited time offer with bonus rewards.",
        "offer_type": "tokens",
        "category": "defi",
        "reward_value": Decimal("1200"),
        "contact_info": "beta@yieldfarm.com",
    }),
]


def seed_sample_data(db: Session) -> bool:
    """
    Insert sample wallets and offers into an empty marketplace.

    Returns False without touching anything when wallets already exist.
    """
    if db.query(Wallet).first():
        logger.info("Database already has data, skipping initialization")
        return False

    wallets = [Wallet(**fields) for fields in SAMPLE_WALLETS]
    db.add_all(wallets)
    db.flush()
    logger.info("Inserted %d sample wallets", len(wallets))

    offers = [Offer(target_wallet_id=wallets[index].id, **fields) for index, fields in SAMPLE_OFFERS]
    db.add_all(offers)
    db.commit()
    logger.info("Inserted %d sample offers", len(offers))

    stats_service.refresh_marketplace_stats(db)
    return True


def initialize_database() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema is up to date")

    db = SessionLocal()
    try:
        seed_sample_data(db)
    finally:
        db.close()
    logger.info("Database initialization complete")


if __name__ == "__main__":
    initialize_database()
