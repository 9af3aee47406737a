"""
Quality (exchange rate) utilities aligned with XRPL offer semantics.

Alignment notes:
- An offer's quality is TakerPays / TakerGets in ledger units, i.e. XRP
  sides are counted in drops. This is the value rippled stores in the last
  64 bits of the offer's BookDirectory key: one byte holding exponent + 100,
  then a 56-bit mantissa.
- Display rates are in major units. `to_display_rate` removes the drops
  scaling from whichever side is native.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .amounts import Amount, XRPAmount
from .constants import DROPS_PER_XRP, QUALITY_EXPONENT_BIAS, QUALITY_HEX_LENGTH
from .exc import InvariantViolation
from .fmt import div_sig, mul_sig


@dataclass(frozen=True)
class Quality:
    """Offer quality: TakerPays / TakerGets in ledger units (drops for XRP)."""

    rate: Decimal

    @staticmethod
    def zero() -> "Quality":
        return Quality(Decimal(0))

    @classmethod
    def from_book_directory(cls, book_directory: str) -> "Quality":
        """Decode the quality embedded in a BookDirectory key.

        '...4E038D7EA4C68000' -> exponent 0x4E - 100 = -22,
        mantissa 0x038D7EA4C68000 = 10**15, rate = 1E-7.
        """
        tail = str(book_directory)[-QUALITY_HEX_LENGTH:]
        if len(tail) != QUALITY_HEX_LENGTH:
            raise InvariantViolation(f"BookDirectory too short: {book_directory!r}")
        try:
            exponent = int(tail[:2], 16) - QUALITY_EXPONENT_BIAS
            mantissa = int(tail[2:], 16)
        except ValueError:
            raise InvariantViolation(f"BookDirectory is not hex: {book_directory!r}") from None
        return cls(Decimal(mantissa).scaleb(exponent))

    @classmethod
    def from_amounts(cls, taker_pays: Amount, taker_gets: Amount) -> "Quality":
        """Build quality as TakerPays / TakerGets (15 significant digits).

        An empty TakerGets side has no meaningful rate; it maps to zero.
        """
        gets = taker_gets.to_decimal()
        if gets.is_zero():
            return cls.zero()
        return cls(div_sig(taker_pays.to_decimal(), gets))

    def is_zero(self) -> bool:
        return self.rate.is_zero()

    def to_display_rate(self, taker_pays: Amount, taker_gets: Amount) -> Decimal:
        """Counter-per-base rate in major units for the given offer sides."""
        rate = self.rate
        if isinstance(taker_gets, XRPAmount):
            rate = mul_sig(rate, Decimal(DROPS_PER_XRP))
        if isinstance(taker_pays, XRPAmount):
            rate = div_sig(rate, Decimal(DROPS_PER_XRP))
        return rate


__all__ = [
    "Quality",
]
