"""
Amount primitives: the ledger's two amount encodings and the display shape.

- XRPAmount: native XRP in integer drops (ledger sends a bare digit string).
- IOUAmount: issued currency with a Decimal value, currency code and issuer.
- OrderAmount: the canonical display amount of an order
  (value in major units, uppercase currency, empty issuer for XRP).

Non-negative domain: offers never carry negative amounts, so both ledger
variants reject them at construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from .constants import NATIVE_CURRENCY, XRP_QUANTUM
from .exc import AmountDomainError, MalformedAmount
from .fmt import fmt_value, to_decimal


# ----------------------------
# XRP primitive (integer drops)
# ----------------------------

@dataclass(frozen=True)
class XRPAmount:
    """Native XRP amount in integer drops (non-negative domain)."""
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise AmountDomainError("XRPAmount must be >= 0 drops")

    def is_zero(self) -> bool:
        return self.value == 0

    def to_decimal(self) -> Decimal:
        """Ledger-unit value (drops) as Decimal."""
        return Decimal(self.value)


# ----------------------------
# Issued currency
# ----------------------------

@dataclass(frozen=True)
class IOUAmount:
    """Issued-currency amount as carried in ledger JSON."""
    value: Decimal
    currency: str
    issuer: str

    def __post_init__(self):
        if self.value < 0:
            raise AmountDomainError("IOUAmount must be >= 0")

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def to_decimal(self) -> Decimal:
        return self.value


# Unified ledger amount type alias for signatures
Amount = Union[XRPAmount, IOUAmount]


# ----------------------------
# Display amount
# ----------------------------

@dataclass(frozen=True)
class OrderAmount:
    """Canonical order amount. `value` is None only in request contexts."""
    value: Optional[Decimal]
    currency: str
    issuer: str = ""

    @property
    def is_native(self) -> bool:
        return self.currency == NATIVE_CURRENCY

    def to_json(self) -> dict[str, str]:
        return {
            "value": "" if self.value is None else fmt_value(self.value),
            "currency": self.currency,
            "issuer": self.issuer,
        }


# ----------------------------
# XRP Decimal bridges
# ----------------------------

def xrp_from_drops(d: int) -> Decimal:
    """Return Decimal XRP from integer drops."""
    if not isinstance(d, int):
        raise AmountDomainError("xrp_from_drops: drops must be int")
    if d < 0:
        raise AmountDomainError("xrp_from_drops: drops must be >= 0")
    return Decimal(d) * XRP_QUANTUM


def _drops_from_string(raw: str) -> int:
    d = to_decimal(raw)
    if d != d.to_integral_value() or d < 0:
        raise MalformedAmount(f"drops must be a non-negative integer string: {raw!r}")
    return int(d)


# ----------------------------
# Parsing / rendering
# ----------------------------

def parse_amount(raw: Any) -> Amount:
    """Build the tagged ledger variant from a ledger JSON amount.

    Currency codes are kept verbatim here; matching against other ledger
    amounts is exact. Use `normalize` for display.
    """
    if isinstance(raw, (XRPAmount, IOUAmount)):
        return raw
    if isinstance(raw, str):
        return XRPAmount(_drops_from_string(raw))
    if isinstance(raw, Mapping):
        if raw.get("currency") is None or raw.get("value") is None:
            raise MalformedAmount(f"issued amount needs currency and value: {raw!r}")
        return IOUAmount(
            value=to_decimal(raw["value"]),
            currency=str(raw["currency"]),
            issuer=str(raw.get("issuer") or ""),
        )
    raise MalformedAmount(f"unsupported amount payload: {raw!r}")


def amount_to_json(a: Amount) -> Union[str, dict[str, str]]:
    """Render a ledger variant in ledger JSON shape (drops string or object)."""
    if isinstance(a, XRPAmount):
        return str(a.value)
    if isinstance(a, IOUAmount):
        return {"currency": a.currency, "issuer": a.issuer, "value": fmt_value(a.value)}
    raise MalformedAmount(f"unsupported amount type: {a!r}")


def same_asset(a: Amount, b: Amount) -> bool:
    """True if both are XRP, or both are the same currency from the same issuer."""
    if isinstance(a, XRPAmount) and isinstance(b, XRPAmount):
        return True
    if isinstance(a, IOUAmount) and isinstance(b, IOUAmount):
        return a.currency == b.currency and a.issuer == b.issuer
    return False


def normalize(raw: Any) -> OrderAmount:
    """Convert any supported amount shape into an OrderAmount.

    - drops string / XRPAmount -> value in XRP, currency 'XRP', issuer ''
    - object / IOUAmount       -> uppercase currency; issuer and value passed through
    - OrderAmount              -> re-canonicalised (idempotent)
    """
    if isinstance(raw, OrderAmount):
        return OrderAmount(raw.value, raw.currency.upper(), raw.issuer)
    if isinstance(raw, str):
        raw = XRPAmount(_drops_from_string(raw))
    if isinstance(raw, XRPAmount):
        return OrderAmount(xrp_from_drops(raw.value), NATIVE_CURRENCY, "")
    if isinstance(raw, IOUAmount):
        return OrderAmount(raw.value, raw.currency.upper(), raw.issuer)
    if isinstance(raw, Mapping):
        if raw.get("currency") is None:
            raise MalformedAmount(f"amount object needs a currency: {raw!r}")
        value = raw.get("value")
        return OrderAmount(
            value=None if value is None or value == "" else to_decimal(value),
            currency=str(raw["currency"]).upper(),
            issuer=str(raw.get("issuer") or ""),
        )
    raise MalformedAmount(f"unsupported amount payload: {raw!r}")


__all__ = [
    "XRPAmount",
    "IOUAmount",
    "Amount",
    "OrderAmount",
    "xrp_from_drops",
    "parse_amount",
    "amount_to_json",
    "same_asset",
    "normalize",
]
