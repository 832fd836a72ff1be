from sqlalchemy.orm import Session
from app.models.message import Message
from typing import List, Optional

def create_message(
    db: Session, offer_id: int, content: str, from_wallet_id: Optional[int] = None, to_wallet_id: Optional[int] = None
) -> Message:
    """Append a message to an offer thread."""
    message = Message(
        offer_id=offer_id,
        from_wallet_id=from_wallet_id,
        to_wallet_id=to_wallet_id,
        content=content
        )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message

def get_messages_by_offer(db: Session, offer_id: int) -> List[Message]:
    """Get the thread for an offer, oldest message first."""
    return (
        db.query(Message)
        .filter(Message.offer_id == offer_id)
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )
