from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.errors import ConfiguratorError, ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# upper bound for a single catalog or line price
MAX_PRICE = Decimal("99999.99")
# five priced slots per order
MAX_ORDER_TOTAL = MAX_PRICE * 5


def to_price(amount: Decimal | int | float | str) -> Decimal:
    # str() first so floats like 19.99 do not drag binary noise into the Decimal
    return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_exact_price(raw: object) -> Decimal | None:
    """
    A price in [0, MAX_PRICE] with at most two decimal places, or None.

    Unlike to_price, nothing is rounded: 4.995 is refused rather than
    stored as 5.00.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        price = Decimal(str(raw))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        return None
    exact = price.quantize(CENT)
    if exact != price:
        return None
    return exact


def sum_prices(values: Iterable[Decimal]) -> Result[Decimal, ConfiguratorError]:
    total = ZERO
    try:
        for v in values:
            total = total + v
        return Success(total.quantize(CENT, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return Failure(ValidationError("price total is out of range"))
