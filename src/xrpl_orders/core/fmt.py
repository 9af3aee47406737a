"""
Decimal helpers: significant-digit rounding and string rendering.

All arithmetic runs in an explicit module context so that callers'
thread-local Decimal settings are neither relied upon nor mutated.
"""

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from .constants import RATE_SIGNIFICANT_DIGITS
from .exc import MalformedAmount


#: Working precision for intermediate Decimal arithmetic.
DEFAULT_DECIMAL_PRECISION: int = 28

DECIMAL_CONTEXT = Context(prec=DEFAULT_DECIMAL_PRECISION, rounding=ROUND_HALF_UP)


def to_decimal(x: Any) -> Decimal:
    """Coerce a ledger/JSON value (str, int, float, Decimal) to Decimal.

    Floats go through `str` so that JSON numbers like 0.1 stay 0.1.
    """
    if isinstance(x, Decimal):
        return x
    if isinstance(x, bool) or x is None:
        raise MalformedAmount(f"not a numeric value: {x!r}")
    try:
        d = Decimal(str(x).strip())
    except InvalidOperation:
        raise MalformedAmount(f"not a numeric value: {x!r}") from None
    if d.is_nan() or d.is_infinite():
        raise MalformedAmount(f"not a finite value: {x!r}")
    return d


def round_sig(x: Decimal, digits: int = RATE_SIGNIFICANT_DIGITS) -> Decimal:
    """Round to `digits` significant digits, half away from zero.

    Decimal('64.999999999999985') -> Decimal('65.0000000000000')
    """
    if x.is_zero():
        return Decimal(0)
    exp = x.adjusted() - (digits - 1)
    return x.quantize(Decimal(1).scaleb(exp), rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT)


def div_sig(num: Decimal, den: Decimal, digits: int = RATE_SIGNIFICANT_DIGITS) -> Decimal:
    """num / den rounded to `digits` significant digits."""
    return round_sig(DECIMAL_CONTEXT.divide(num, den), digits)


def mul_sig(a: Decimal, b: Decimal, digits: int = RATE_SIGNIFICANT_DIGITS) -> Decimal:
    """a * b rounded to `digits` significant digits."""
    return round_sig(DECIMAL_CONTEXT.multiply(a, b), digits)


def invert_rate(rate: Decimal) -> Decimal:
    """1 / rate to 15 significant digits; a zero rate stays zero."""
    if rate.is_zero():
        return Decimal(0)
    return div_sig(Decimal(1), rate)


def fmt_value(x: Decimal) -> str:
    """Render a Decimal in plain notation without trailing zeros.

      Decimal('65.0000000000000') -> '65'
      Decimal('1E-7')             -> '0.0000001'
      Decimal('0.10')             -> '0.1'
    """
    if x.is_zero():
        return "0"
    return format(x.normalize(DECIMAL_CONTEXT), "f")


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "DECIMAL_CONTEXT",
    "to_decimal",
    "round_sig",
    "div_sig",
    "mul_sig",
    "invert_rate",
    "fmt_value",
]
