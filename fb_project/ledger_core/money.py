"""
Exact currency arithmetic.

Every monetary value in the ledger engine goes through these helpers so
that sums, differences and running balances are computed on Decimal and
always come back rounded half-up to 2 places (0.1 + 0.2 == 0.30).
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    # None (missing optional field) counts as zero
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through str() so 0.1 becomes Decimal("0.1"), not its binary twin
        return Decimal(str(value))
    return Decimal(value)


def round_currency(value) -> Decimal:
    """Round to 2 decimals, half away from zero (10.555 -> 10.56)."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def add(a, b) -> Decimal:
    return round_currency(to_decimal(a) + to_decimal(b))


def subtract(a, b) -> Decimal:
    return round_currency(to_decimal(a) - to_decimal(b))


def multiply(a, b) -> Decimal:
    return round_currency(to_decimal(a) * to_decimal(b))


def divide(a, b) -> Decimal:
    """Quotient rounded to 2 places; dividing by zero yields 0.00."""
    divisor = to_decimal(b)
    if divisor == 0:
        return ZERO
    return round_currency(to_decimal(a) / divisor)


def sum_amounts(values) -> Decimal:
    # Accumulate unrounded, round once at the end
    total = sum((to_decimal(v) for v in values), Decimal("0"))
    return round_currency(total)


def parse_amount(value) -> Decimal:
    """
    Parse user/form input into a currency value.
    Anything that is not a finite number parses as 0.00.
    """
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return ZERO
    try:
        number = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return ZERO
    if not number.is_finite():
        return ZERO
    return round_currency(number)


def currency_equals(a, b) -> bool:
    return round_currency(a) == round_currency(b)


def is_zero(value) -> bool:
    return round_currency(value) == ZERO
