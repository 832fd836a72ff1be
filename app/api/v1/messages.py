from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services import message_service
from app.schemas.message import MessageCreateRequest, MessageResponse

router = APIRouter()

@router.post("", response_model=MessageResponse)
def send_message(request: MessageCreateRequest, db: Session = Depends(get_db)):
    return message_service.send_message(db, request)
