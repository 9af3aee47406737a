"""
Offer flag tables.

Transaction-level and ledger-entry-level flags are kept apart: immediate
or cancel and fill or kill exist only on the OfferCreate transaction, since
an offer carrying them never rests on the ledger.
"""

from enum import IntFlag


class OfferCreateFlag(IntFlag):
    """Flags on an OfferCreate transaction (`tx.Flags`)."""

    PASSIVE = 0x00010000
    IMMEDIATE_OR_CANCEL = 0x00020000
    FILL_OR_KILL = 0x00040000
    SELL = 0x00080000


class OfferEntryFlag(IntFlag):
    """Flags read from an Offer's final fields (or the synthesized ones)."""

    PASSIVE = 0x00010000
    SELL = 0x00080000


def has_flag(flags: int, flag: IntFlag) -> bool:
    return bool(int(flags or 0) & int(flag))


__all__ = [
    "OfferCreateFlag",
    "OfferEntryFlag",
    "has_flag",
]
