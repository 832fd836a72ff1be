from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Mapping, Optional

from app.config import settings

CENT = Decimal("0.01")


def calculate_total_value_usd(
    balances: Mapping[str, Any],
    lrt_balances: Optional[Mapping[str, Any]] = None,
    prices: Optional[Mapping[str, Any]] = None,
) -> Decimal:
    """
    Value a wallet's holdings in USD.

    Each balance is multiplied by the reference price for its symbol and
    the products are summed. Symbols without a price contribute nothing.
    The total is rounded half-up to cents.

    Args:
        balances: Core asset balances keyed by symbol, e.g. {"eth": "10"}
        lrt_balances: Liquid restaking token balances keyed by symbol
        prices: USD price per symbol; defaults to settings.ASSET_PRICES_USD
    """
    if prices is None:
        prices = settings.ASSET_PRICES_USD

    total = Decimal("0")
    for holdings in (balances, lrt_balances or {}):
        for symbol, amount in holdings.items():
            price = prices.get(symbol.lower())
            if price is None:
                continue
            total += Decimal(str(amount or 0)) * Decimal(str(price))

    return total.quantize(CENT, rounding=ROUND_HALF_UP)
