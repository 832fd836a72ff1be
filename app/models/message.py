from sqlalchemy import Column, DateTime, Boolean, Text, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.types import BigIntPK


class Message(Base):
    __tablename__ = "messages"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    offer_id = Column(BigIntPK, ForeignKey("offers.id", ondelete="CASCADE"), nullable=False)

    from_wallet_id = Column(BigIntPK, ForeignKey("wallets.id", ondelete="CASCADE"), nullable=True)
    to_wallet_id = Column(BigIntPK, ForeignKey("wallets.id", ondelete="CASCADE"), nullable=True)

    content = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    offer = relationship("Offer", back_populates="messages")

    __table_args__ = (
        Index("idx_messages_offer_created", "offer_id", "created_at"),
        {"mysql_engine": "InnoDB"},
    )
