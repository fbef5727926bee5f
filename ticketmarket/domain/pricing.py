"""
Resale pricing rules.

Prices are integer units. The multiplier is applied in decimal arithmetic
so that the cap is an exact floor (100 * 1.2 -> 120, never 119).
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

DEFAULT_MAX_RESALE_MULTIPLIER = 1.2


def max_resale_price(
    original_price: int,
    multiplier: float = DEFAULT_MAX_RESALE_MULTIPLIER,
) -> int:
    """Return floor(original_price * multiplier)."""
    cap = Decimal(original_price) * Decimal(str(multiplier))
    return int(cap.to_integral_value(rounding=ROUND_FLOOR))


def is_within_resale_cap(
    price: int,
    original_price: int,
    multiplier: float = DEFAULT_MAX_RESALE_MULTIPLIER,
) -> bool:
    return price <= max_resale_price(original_price, multiplier)


def platform_fee(price: int, fee_percentage: int) -> int:
    """Platform share of a sale, floored to whole units."""
    fee = Decimal(price) * Decimal(fee_percentage) / Decimal(100)
    return int(fee.to_integral_value(rounding=ROUND_FLOOR))
