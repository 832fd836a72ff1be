from pydantic import Field, field_validator, model_validator
from decimal import Decimal
from datetime import datetime, timezone
from typing import Literal, Optional

from app.schemas.base import CamelModel
from app.schemas.wallet import ADDRESS_PATTERN, UsdAmount
from app.utils.constants import OfferCategory, OfferType

OfferTypeLiteral = Literal[OfferType.ALL]
OfferCategoryLiteral = Literal[OfferCategory.ALL]


class OfferCreateRequest(CamelModel):
    # Target is resolved by exact address; a wallet id is accepted as well
    target_address: Optional[str] = Field(None, max_length=255, pattern=ADDRESS_PATTERN)
    target_wallet_id: Optional[int] = Field(None, gt=0)
    from_address: Optional[str] = Field(None, max_length=255, pattern=ADDRESS_PATTERN)
    from_wallet_id: Optional[int] = Field(None, gt=0)
    from_anonymous_tag: Optional[str] = Field(None, max_length=255)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    offer_type: OfferTypeLiteral
    category: OfferCategoryLiteral = OfferCategory.DEFI
    reward_value: Optional[UsdAmount] = None
    expiry_date: Optional[datetime] = None
    contact_info: Optional[str] = Field(None, max_length=255)
    terms_link: Optional[str] = Field(None, max_length=500)

    @field_validator("target_address", "from_address")
    @classmethod
    def normalize_address(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value else value

    @field_validator("expiry_date")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def check_target(self):
        if not self.target_address and self.target_wallet_id is None:
            raise ValueError("targetAddress or targetWalletId is required")
        return self


class OfferResponse(CamelModel):
    id: int
    target_wallet_id: int
    from_wallet_id: Optional[int] = None
    from_anonymous_tag: Optional[str] = None
    title: str
    description: str
    offer_type: str
    category: str
    reward_value: Optional[Decimal] = None
    expiry_date: Optional[datetime] = None
    is_active: bool
    is_accepted: bool
    accepted_at: Optional[datetime] = None
    contact_info: Optional[str] = None
    terms_link: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ActivityItem(CamelModel):
    id: int
    type: str
    description: str
    timestamp: datetime
    wallet_address: Optional[str] = None
