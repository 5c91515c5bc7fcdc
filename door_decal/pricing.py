"""
Pricing Module.

This module derives the printed area and the price of a decal order from the
normalized door dimensions, and formats amounts as Dominican Pesos.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Union

from babel.core import UnknownLocaleError
from babel.numbers import format_currency

from door_decal.config import (
    PRICE_PER_SQFT, CURRENCY_CODE, CURRENCY_LOCALE, CURRENCY_FALLBACK_PREFIX,
    PRICE_WHOLE_TOLERANCE
)
from door_decal.enums import LengthUnit
from door_decal.units import to_feet

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PriceQuote:
    """
    Price of an order.
    `unit_price` is the price of a single decal (area x rate) and is shown on its
    own in the summary panel; `total` includes the quantity and is rounded up
    to whole pesos.
    """
    area_sqft: float
    quantity: int
    rate: float
    unit_price: float
    total: int

    @property
    def area_price(self) -> float:
        return self.unit_price


def coerce_quantity(quantity: Any) -> int:
    """Floors the quantity to an integer with a minimum of 1."""
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return 1
    if not math.isfinite(value):
        return 1
    return max(int(math.floor(value)), 1)


def door_area(width_ft: float, height_ft: float) -> float:
    """Area in square feet; non-finite input yields 0."""
    try:
        area = max(width_ft, 0.0) * max(height_ft, 0.0)
    except TypeError:
        return 0.0
    return area if math.isfinite(area) else 0.0


def quote(width_ft: float, height_ft: float, quantity: Any = 1, rate: float = PRICE_PER_SQFT) -> PriceQuote:
    """
    Calculates the price of `quantity` decals for a door of the given size.
    Never raises: malformed dimensions price as zero area and malformed
    quantities as a single unit.
    """
    area = door_area(width_ft, height_ft)
    qty = coerce_quantity(quantity)
    unit_price = area * rate
    amount = unit_price * qty
    # Binary noise on a whole amount is not a fraction: 2 x 20 ft2 at RD$99 is 3960, not 3961.
    whole = round(amount)
    if math.isclose(amount, whole, rel_tol=PRICE_WHOLE_TOLERANCE, abs_tol=0.0):
        total = whole
    else:
        total = math.ceil(amount)
    return PriceQuote(area_sqft=area, quantity=qty, rate=rate, unit_price=unit_price, total=max(int(total), 0))


def quote_for(width: Any, height: Any, unit: Union[LengthUnit, str], quantity: Any = 1, rate: float = PRICE_PER_SQFT) -> PriceQuote:
    """Quotes raw form values measured in `unit`."""
    return quote(to_feet(width, unit), to_feet(height, unit), quantity, rate)


def format_rd(amount: float) -> str:
    """
    Formats an amount as whole Dominican Pesos, e.g. 'RD$1,832'.
    Falls back to a plain 'RD$ 1,832' when locale data is unavailable.
    """
    try:
        return format_currency(
            amount, CURRENCY_CODE, format="¤#,##0",
            locale=CURRENCY_LOCALE, currency_digits=False
        )
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug(f"Locale currency formatting unavailable, using fallback: {e}")
        return format_rd_plain(amount)


def format_rd_plain(amount: float) -> str:
    return f"{CURRENCY_FALLBACK_PREFIX} {int(round(amount)):,}"
