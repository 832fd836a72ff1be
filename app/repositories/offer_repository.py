from sqlalchemy.orm import Session
from app.models.offer import Offer
from app.utils.constants import utcnow
from typing import Any, List, Optional

def get_offer_by_id(db: Session, offer_id: int) -> Optional[Offer]:
    """Fetch an offer by its ID."""
    return db.query(Offer).filter(Offer.id == offer_id).first()

def create_offer(db: Session, target_wallet_id: int, **fields: Any) -> Offer:
    """Insert a new offer. is_active / is_accepted take their defaults."""
    offer = Offer(target_wallet_id=target_wallet_id, **fields)
    db.add(offer)
    db.commit()
    db.refresh(offer)
    return offer

def get_offers_by_wallet(db: Session, wallet_id: int) -> List[Offer]:
    """Offers targeting a wallet, newest first."""
    return (
        db.query(Offer)
        .filter(Offer.target_wallet_id == wallet_id)
        .order_by(Offer.created_at.desc(), Offer.id.desc())
        .all()
    )

def mark_offer_accepted(db: Session, offer: Offer) -> Offer:
    offer.is_accepted = True
    offer.accepted_at = utcnow()
    db.commit()
    db.refresh(offer)
    return offer

def get_top_offers(db: Session, limit: int) -> List[Offer]:
    """Newest active offers."""
    return (
        db.query(Offer)
        .filter(Offer.is_active.is_(True))
        .order_by(Offer.created_at.desc(), Offer.id.desc())
        .limit(limit)
        .all()
    )

def get_recent_offers(db: Session, limit: int) -> List[Offer]:
    return (
        db.query(Offer)
        .order_by(Offer.created_at.desc(), Offer.id.desc())
        .limit(limit)
        .all()
    )
