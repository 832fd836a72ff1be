from sqlalchemy import (
    Column, String, DateTime, Boolean, Index,
    Numeric, JSON, CheckConstraint
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.types import BigIntPK


class Wallet(Base):
    __tablename__ = "wallets"
    id = Column(BigIntPK, primary_key=True, autoincrement=True)

    # On-chain address, stored lowercase
    address = Column(String(255), unique=True, nullable=False, index=True)

    eth_balance = Column(Numeric(precision=18, scale=8), nullable=False, default=0, server_default="0")
    steth_balance = Column(Numeric(precision=18, scale=8), nullable=False, default=0, server_default="0")
    reth_balance = Column(Numeric(precision=18, scale=8), nullable=False, default=0, server_default="0")
    cbeth_balance = Column(Numeric(precision=18, scale=8), nullable=False, default=0, server_default="0")

    # Liquid restaking tokens - e.g : {"ezeth": "3.4", "rseth": "2.1"}
    lrt_balances = Column(JSON, nullable=False, default=dict)

    total_value_usd = Column(Numeric(precision=18, scale=2), nullable=False, default=0, server_default="0")

    # {"activities": [...], "region": "..."}
    preferences = Column(JSON, nullable=False, default=dict)

    available_capital_min = Column(Numeric(precision=18, scale=2), nullable=False, default=0, server_default="0")
    available_capital_max = Column(Numeric(precision=18, scale=2), nullable=False, default=0, server_default="0")

    email_alerts_enabled = Column(Boolean, nullable=False, default=False, server_default="0")
    email = Column(String(255), nullable=True)
    is_verified = Column(Boolean, nullable=False, default=False, server_default="0")
    badges = Column(JSON, nullable=False, default=list)

    last_active = Column(DateTime, nullable=False, server_default=func.now())
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    offers_received = relationship(
        "Offer",
        foreign_keys="Offer.target_wallet_id",
        back_populates="target_wallet",
        cascade="all, delete",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "eth_balance >= 0 AND steth_balance >= 0 AND reth_balance >= 0 AND cbeth_balance >= 0",
            name="chk_balances_not_negative",
        ),
        CheckConstraint("total_value_usd >= 0", name="chk_total_value_not_negative"),
        CheckConstraint(
            "available_capital_min >= 0 AND available_capital_min <= available_capital_max",
            name="chk_capital_range_valid",
        ),
        Index("idx_wallets_total_value", "total_value_usd"),
        Index("idx_wallets_last_active", "last_active"),
        {"mysql_engine": "InnoDB"},
    )
