"""Scanning helpers over a transaction's Offer mutation records."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .core.constants import LEDGER_ENTRY_OFFER
from .core.datatypes import MutationRecord, TransactionContext


def iter_offer_records(
    tx: TransactionContext,
    actions: Optional[Iterable[str]] = None,
) -> Iterator[MutationRecord]:
    """Yield Offer records in metadata order, optionally limited to `actions`."""
    wanted = None if actions is None else frozenset(actions)
    for record in tx.nodes:
        if record.ledger_entry_type != LEDGER_ENTRY_OFFER:
            continue
        if wanted is not None and record.action not in wanted:
            continue
        yield record


def find_offer_record(
    tx: TransactionContext,
    account: str,
    sequence: Optional[int] = None,
) -> Optional[MutationRecord]:
    """First Offer record owned by `account` (and matching `sequence`, if given).

    Sequences are compared as strings; rippled sends integers but callers
    often hold them as strings from a URL.
    """
    for record in iter_offer_records(tx):
        fields = record.fields
        if fields.get("Account") != account:
            continue
        if sequence is not None and str(sequence) != str(fields.get("Sequence")):
            continue
        return record
    return None


__all__ = ["iter_offer_records", "find_offer_record"]
