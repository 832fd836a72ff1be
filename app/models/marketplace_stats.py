from sqlalchemy import Column, Integer, DateTime, Numeric
from sqlalchemy.sql import func

from app.database import Base


class MarketplaceStats(Base):
    """Singleton row of marketplace-wide counters."""
    __tablename__ = "marketplace_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    total_wallets = Column(Integer, nullable=False, default=0, server_default="0")
    total_value_usd = Column(Numeric(precision=18, scale=2), nullable=False, default=0, server_default="0")
    active_offers = Column(Integer, nullable=False, default=0, server_default="0")
    deals_closed = Column(Integer, nullable=False, default=0, server_default="0")
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        {"mysql_engine": "InnoDB"},
    )
