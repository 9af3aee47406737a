"""
XRPL Order Core Constants
=========================

Ledger-defined constants used when decoding offers and rendering orders.
Flag bit tables live in `flags.py`.
"""

from decimal import Decimal

# ---------------------------------------------------------------------------
# Native asset (XRP) and the drops bridge
# ---------------------------------------------------------------------------

#: Currency code used for the native asset in display amounts.
NATIVE_CURRENCY: str = "XRP"

#: Integer bridge: number of drops per 1 XRP.
DROPS_PER_XRP: int = 1_000_000

# Minimum quantisation step for XRP values (1 drop = 1e-6 XRP).
XRP_QUANTUM: Decimal = Decimal("1e-6")


# ---------------------------------------------------------------------------
# Rates and quality
# ---------------------------------------------------------------------------

#: Significant digits kept for exchange rates and exercised totals.
RATE_SIGNIFICANT_DIGITS: int = 15

#: The quality exponent byte in a BookDirectory key is stored with this bias.
QUALITY_EXPONENT_BIAS: int = 100

#: A BookDirectory key ends with a 64-bit quality (16 hex chars):
#: 1 byte biased exponent followed by a 56-bit mantissa.
QUALITY_HEX_LENGTH: int = 16


# ---------------------------------------------------------------------------
# Ledger entry / transaction type names
# ---------------------------------------------------------------------------

LEDGER_ENTRY_OFFER: str = "Offer"
TX_OFFER_CREATE: str = "OfferCreate"
TX_OFFER_CANCEL: str = "OfferCancel"


__all__ = [
    "NATIVE_CURRENCY",
    "DROPS_PER_XRP",
    "XRP_QUANTUM",
    "RATE_SIGNIFICANT_DIGITS",
    "QUALITY_EXPONENT_BIAS",
    "QUALITY_HEX_LENGTH",
    "LEDGER_ENTRY_OFFER",
    "TX_OFFER_CREATE",
    "TX_OFFER_CANCEL",
]
