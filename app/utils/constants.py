from datetime import datetime, timezone
from decimal import Decimal


class OfferType:
    CASH = "cash"
    TOKENS = "tokens"
    NFT = "nft"
    IRL = "irl"
    OTHER = "other"

    ALL = (CASH, TOKENS, NFT, IRL, OTHER)

class OfferCategory:
    DEFI = "defi"
    NFT = "nft"
    IRL = "irl"
    OTHER = "other"

    ALL = (DEFI, NFT, IRL, OTHER)

class WalletSortField:
    TOTAL_VALUE_USD = "totalValueUsd"
    LAST_ACTIVE = "lastActive"

class SortOrder:
    ASC = "asc"
    DESC = "desc"

# Reference USD prices used when the caller does not supply a valuation
DEFAULT_ASSET_PRICES_USD = {
    "eth": Decimal("3500"),
    "steth": Decimal("3480"),
    "reth": Decimal("3520"),
    "cbeth": Decimal("3490"),
    "ezeth": Decimal("3510"),
    "rseth": Decimal("3505"),
}

TOP_OFFERS_LIMIT = 10
RECENT_ACTIVITY_LIMIT = 10


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
