from pydantic import Field
from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class MessageCreateRequest(CamelModel):
    offer_id: int = Field(..., gt=0)
    from_wallet_id: Optional[int] = Field(None, gt=0)
    to_wallet_id: Optional[int] = Field(None, gt=0)
    content: str = Field(..., min_length=1, max_length=5000)


class MessageResponse(CamelModel):
    id: int
    offer_id: int
    from_wallet_id: Optional[int] = None
    to_wallet_id: Optional[int] = None
    content: str
    is_read: bool
    created_at: datetime
