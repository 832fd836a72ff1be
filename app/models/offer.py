from sqlalchemy import (
    Column, String, DateTime, Boolean, Index, Text,
    Numeric, ForeignKey, CheckConstraint
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.types import BigIntPK
from app.utils.constants import OfferCategory, OfferType


def _in_list(values) -> str:
    return ", ".join(f"'{value}'" for value in values)


class Offer(Base):
    __tablename__ = "offers"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)

    # Wallet receiving the offer
    target_wallet_id = Column(
        BigIntPK, ForeignKey("wallets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Sender, either a known wallet or an anonymous label
    from_wallet_id = Column(BigIntPK, ForeignKey("wallets.id", ondelete="CASCADE"), nullable=True)
    from_anonymous_tag = Column(String(255), nullable=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    offer_type = Column(String(20), nullable=False)
    category = Column(String(20), nullable=False, default=OfferCategory.DEFI, server_default=OfferCategory.DEFI)

    reward_value = Column(Numeric(precision=18, scale=2), nullable=True)
    expiry_date = Column(DateTime, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True, server_default="1", index=True)
    is_accepted = Column(Boolean, nullable=False, default=False, server_default="0")
    accepted_at = Column(DateTime, nullable=True)

    contact_info = Column(String(255), nullable=True)
    terms_link = Column(String(500), nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    target_wallet = relationship("Wallet", foreign_keys=[target_wallet_id], back_populates="offers_received")
    from_wallet = relationship("Wallet", foreign_keys=[from_wallet_id])
    messages = relationship(
        "Message", back_populates="offer", cascade="all, delete", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(f"offer_type IN ({_in_list(OfferType.ALL)})", name="chk_offer_type_valid"),
        CheckConstraint(f"category IN ({_in_list(OfferCategory.ALL)})", name="chk_offer_category_valid"),
        Index("idx_offers_target_created", "target_wallet_id", "created_at"),
        {"mysql_engine": "InnoDB"},
    )
