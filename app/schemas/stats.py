from decimal import Decimal
from datetime import datetime

from app.schemas.base import CamelModel


class StatsResponse(CamelModel):
    total_wallets: int
    total_value_usd: Decimal
    active_offers: int
    deals_closed: int
    updated_at: datetime
