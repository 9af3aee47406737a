"""Base/counter classification of a currency pair.

Decides whether side A of an offer is the pair's base currency. Precedence:

1. Same currency code on both sides (two issuers): the lexicographically
   smaller-or-equal issuer is base.
2. Pair exceptions, written "BASE/COUNTER".
3. Currency priority list: earlier wins; a listed currency beats an unlisted one.
4. Lexicographic order of the currency codes.

The result is antisymmetric: swapping the sides flips the answer, except
for two amounts that are identical in both currency and issuer.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .config import default_config
from .core.amounts import normalize


def resolve_conventions(
    priority: Optional[Sequence[str]] = None,
    pair_exceptions: Optional[Sequence[str]] = None,
) -> Tuple[Sequence[str], Sequence[str]]:
    """Fill unset conventions from the default config (an empty list stays empty)."""
    if priority is None or pair_exceptions is None:
        cfg = default_config()
        if priority is None:
            priority = cfg.currency_prioritization
        if pair_exceptions is None:
            pair_exceptions = cfg.currency_pair_exceptions
    return priority, pair_exceptions


def is_base_as_taker_side(
    taker_side_a: Any,
    taker_side_b: Any,
    *,
    priority: Optional[Sequence[str]] = None,
    pair_exceptions: Optional[Sequence[str]] = None,
) -> bool:
    """Return True if side A holds the base currency of the (A, B) pair.

    Sides may be ledger JSON amounts, parsed ledger amounts or OrderAmounts.
    """
    priority, pair_exceptions = resolve_conventions(priority, pair_exceptions)
    a = normalize(taker_side_a)
    b = normalize(taker_side_b)

    if a.currency == b.currency:
        return a.issuer <= b.issuer

    if f"{a.currency}/{b.currency}" in pair_exceptions:
        return True
    if f"{b.currency}/{a.currency}" in pair_exceptions:
        return False

    a_listed = a.currency in priority
    b_listed = b.currency in priority
    if a_listed and b_listed:
        return list(priority).index(a.currency) < list(priority).index(b.currency)
    if a_listed:
        return True
    if b_listed:
        return False

    return a.currency <= b.currency


__all__ = ["resolve_conventions", "is_base_as_taker_side"]
