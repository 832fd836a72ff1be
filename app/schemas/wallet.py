from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from decimal import Decimal
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from app.schemas.base import CamelModel
from app.utils.constants import WalletSortField, SortOrder

# Bounds mirror the Numeric(18, 8) balance and Numeric(18, 2) USD columns
TokenBalance = Annotated[Decimal, Field(ge=0, lt=Decimal("1e10"), max_digits=18, decimal_places=8)]
UsdAmount = Annotated[Decimal, Field(ge=0, lt=Decimal("1e16"), max_digits=18, decimal_places=2)]

ADDRESS_PATTERN = r"^0x[0-9a-fA-F]+$"


class WalletPreferences(CamelModel):
    activities: List[str] = Field(default_factory=list)
    region: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(extra="allow")


class AssetBalances(CamelModel):
    eth_balance: TokenBalance = Decimal("0")
    steth_balance: TokenBalance = Decimal("0")
    reth_balance: TokenBalance = Decimal("0")
    cbeth_balance: TokenBalance = Decimal("0")
    lrt_balances: Dict[str, TokenBalance] = Field(default_factory=dict)
    # Computed from the reference price table when omitted
    total_value_usd: Optional[UsdAmount] = None


class WalletConnectRequest(AssetBalances):
    address: str = Field(..., min_length=3, max_length=255, pattern=ADDRESS_PATTERN)
    preferences: WalletPreferences = Field(default_factory=WalletPreferences)
    available_capital_min: UsdAmount = Decimal("0")
    available_capital_max: UsdAmount = Decimal("0")
    email_alerts_enabled: bool = False
    email: Optional[str] = Field(None, max_length=255)
    is_verified: bool = False
    badges: List[str] = Field(default_factory=list)

    @field_validator("address")
    @classmethod
    def normalize_address(cls, value: str) -> str:
        return value.lower()

    @model_validator(mode="after")
    def check_capital_range(self):
        if self.available_capital_min > self.available_capital_max:
            raise ValueError("availableCapitalMin must not exceed availableCapitalMax")
        return self


class WalletAssetsUpdate(CamelModel):
    """Partial balance update; only fields present in the body are written."""
    eth_balance: Optional[TokenBalance] = None
    steth_balance: Optional[TokenBalance] = None
    reth_balance: Optional[TokenBalance] = None
    cbeth_balance: Optional[TokenBalance] = None
    lrt_balances: Optional[Dict[str, TokenBalance]] = None
    total_value_usd: Optional[UsdAmount] = None


class WalletFilters(BaseModel):
    search: str = ""
    min_eth: Decimal = Decimal("0")
    # Accepted for API compatibility, not applied to the query
    asset_type: str = ""
    sort_by: str = WalletSortField.TOTAL_VALUE_USD
    sort_order: str = SortOrder.DESC


class WalletResponse(CamelModel):
    id: int
    address: str
    eth_balance: Decimal
    steth_balance: Decimal
    reth_balance: Decimal
    cbeth_balance: Decimal
    lrt_balances: Dict[str, Any]
    total_value_usd: Decimal
    preferences: Dict[str, Any]
    available_capital_min: Decimal
    available_capital_max: Decimal
    email_alerts_enabled: bool
    email: Optional[str] = None
    is_verified: bool
    badges: List[str]
    last_active: datetime
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class WalletListResponse(CamelModel):
    wallets: List[WalletResponse]
    pagination: Pagination
