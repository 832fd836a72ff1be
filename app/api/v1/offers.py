from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services import offer_service, message_service
from app.schemas.offer import OfferCreateRequest, OfferResponse
from app.schemas.message import MessageResponse

router = APIRouter()

@router.post("", response_model=OfferResponse)
def create_offer(request: OfferCreateRequest, db: Session = Depends(get_db)):
    """
    Send an offer to a listed wallet.
    The target is looked up by its exact address.
    """
    return offer_service.create_offer(db, request)

@router.get("/top", response_model=List[OfferResponse])
def get_top_offers(db: Session = Depends(get_db)):
    return offer_service.get_top_offers(db)

@router.post("/{offer_id}/accept", response_model=OfferResponse)
def accept_offer(offer_id: int, db: Session = Depends(get_db)):
    return offer_service.accept_offer(db, offer_id)

@router.get("/{offer_id}/messages", response_model=List[MessageResponse])
def get_offer_messages(offer_id: int, db: Session = Depends(get_db)):
    """Message thread of an offer, oldest first."""
    return message_service.get_messages_for_offer(db, offer_id)
