from datetime import timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.offer import Offer
from app.models.wallet import Wallet
from app.repositories import offer_repo, wallet_repo
from app.schemas.offer import OfferCreateRequest
from app.utils.constants import TOP_OFFERS_LIMIT, RECENT_ACTIVITY_LIMIT, utcnow
from app.utils.exceptions import OfferNotFoundError, OfferNotAcceptableError, WalletNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _resolve_wallet(db: Session, address: Optional[str] = None, wallet_id: Optional[int] = None) -> Wallet:
    """Look a wallet up by exact address, falling back to its id."""
    if address:
        wallet = wallet_repo.get_wallet_by_address(db, address)
        if not wallet:
            raise WalletNotFoundError(f"Wallet {address} not found")
        return wallet

    wallet = wallet_repo.get_wallet_by_id(db, wallet_id)
    if not wallet:
        raise WalletNotFoundError(f"Wallet {wallet_id} not found")
    return wallet


def create_offer(db: Session, request: OfferCreateRequest) -> Offer:
    """
    Create an offer addressed to an existing wallet.

    Raises WalletNotFoundError when the target (or the named sender) does
    not exist; nothing is written in that case.
    """
    target = _resolve_wallet(db, request.target_address, request.target_wallet_id)

    from_wallet_id = None
    if request.from_address or request.from_wallet_id is not None:
        from_wallet_id = _resolve_wallet(db, request.from_address, request.from_wallet_id).id

    offer = offer_repo.create_offer(
        db,
        target_wallet_id=target.id,
        from_wallet_id=from_wallet_id,
        **request.model_dump(
            exclude={"target_address", "target_wallet_id", "from_address", "from_wallet_id"}
        ),
    )
    logger.info("Offer %s created for wallet %s", offer.id, target.address)
    return offer


def accept_offer(db: Session, offer_id: int) -> Offer:
    """
    Mark an offer accepted.

    Accepting an already accepted offer is a no-op and keeps the original
    accepted_at. Inactive or expired offers cannot be accepted.
    """
    offer = offer_repo.get_offer_by_id(db, offer_id)
    if not offer:
        raise OfferNotFoundError(f"Offer {offer_id} not found")

    if offer.is_accepted:
        return offer
    if not offer.is_active:
        raise OfferNotAcceptableError(f"Offer {offer_id} is no longer active")
    if offer.expiry_date is not None and offer.expiry_date <= utcnow():
        raise OfferNotAcceptableError(f"Offer {offer_id} expired at {offer.expiry_date.isoformat()}")

    offer = offer_repo.mark_offer_accepted(db, offer)
    logger.info("Offer %s accepted", offer_id)
    return offer


def get_offers_for_wallet(db: Session, wallet_id: int) -> List[Offer]:
    return offer_repo.get_offers_by_wallet(db, wallet_id)


def get_top_offers(db: Session) -> List[Offer]:
    return offer_repo.get_top_offers(db, TOP_OFFERS_LIMIT)


def get_recent_activity(db: Session) -> List[Dict[str, Any]]:
    """Activity feed built from the most recently created offers."""
    return [
        {
            "id": offer.id,
            "type": "offer",
            "description": f"New offer: {offer.title}",
            # Stored naive UTC; tagged so it serialises with a Z suffix
            "timestamp": offer.created_at.replace(tzinfo=timezone.utc),
            "wallet_address": None,
        }
        for offer in offer_repo.get_recent_offers(db, RECENT_ACTIVITY_LIMIT)
    ]
