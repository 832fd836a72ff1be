from typing import List

from sqlalchemy.orm import Session

from app.models.message import Message
from app.repositories import message_repo, offer_repo, wallet_repo
from app.schemas.message import MessageCreateRequest
from app.utils.exceptions import OfferNotFoundError, WalletNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def get_messages_for_offer(db: Session, offer_id: int) -> List[Message]:
    return message_repo.get_messages_by_offer(db, offer_id)


def send_message(db: Session, request: MessageCreateRequest) -> Message:
    """Append a message to an offer's thread."""
    if not offer_repo.get_offer_by_id(db, request.offer_id):
        raise OfferNotFoundError(f"Offer {request.offer_id} not found")

    for wallet_id in (request.from_wallet_id, request.to_wallet_id):
        if wallet_id is not None and not wallet_repo.get_wallet_by_id(db, wallet_id):
            raise WalletNotFoundError(f"Wallet {wallet_id} not found")

    message = message_repo.create_message(
        db,
        offer_id=request.offer_id,
        content=request.content,
        from_wallet_id=request.from_wallet_id,
        to_wallet_id=request.to_wallet_id,
    )
    logger.info("Message %s posted on offer %s", message.id, request.offer_id)
    return message
