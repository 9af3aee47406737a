"""Sum what a transaction exercised from other resting offers.

When an OfferCreate is consumed entirely on arrival (or carries immediate
or cancel / fill or kill), it never gets a ledger entry of its own. What it
actually traded is visible only as the amounts it removed from the offers it
crossed: each crossed offer's TakerPays shrank by what our offer gave
(our TakerGets), and its TakerGets shrank by what our offer received (our
TakerPays).
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from .core.amounts import Amount, IOUAmount, XRPAmount, parse_amount, same_asset
from .core.datatypes import ExercisedTotals, MutationRecord, TransactionContext
from .core.fmt import DECIMAL_CONTEXT, round_sig
from .ledger import iter_offer_records

log = logging.getLogger(__name__)


def _delta(record: MutationRecord, side: str, target: Amount) -> Optional[Decimal]:
    """previous - final of `side` on `record`, if that side trades `target`'s asset."""
    previous = (record.previous_fields or {}).get(side)
    final = record.final_fields.get(side)
    if previous is None or final is None:
        return None
    final_amt = parse_amount(final)
    if not same_asset(final_amt, target):
        return None
    return DECIMAL_CONTEXT.subtract(parse_amount(previous).to_decimal(), final_amt.to_decimal())


def _total_like(template: Amount, total: Decimal) -> Amount:
    if isinstance(template, XRPAmount):
        return XRPAmount(int(total))
    return IOUAmount(total, template.currency, template.issuer)


def sum_exercised_deltas(tx: Union[TransactionContext, Mapping[str, Any]]) -> ExercisedTotals:
    """Sum the exercised deltas of every Offer this transaction modified or deleted.

    Returns totals in the transaction's own encoding: an XRP side stays in
    drops, an issued side keeps the transaction's currency and issuer.
    Running totals are rounded to 15 significant digits after each addition.
    """
    if not isinstance(tx, TransactionContext):
        tx = TransactionContext.from_json(tx)

    tx_gets = parse_amount(tx.taker_gets)
    tx_pays = parse_amount(tx.taker_pays)

    gets_total = Decimal(0)
    pays_total = Decimal(0)
    for record in iter_offer_records(tx, actions=("modified", "deleted")):
        if not record.previous_fields or "TakerPays" not in record.previous_fields:
            continue

        # the crossed offer was paid what we give
        gets_delta = _delta(record, "TakerPays", tx_gets)
        if gets_delta is not None:
            gets_total = round_sig(DECIMAL_CONTEXT.add(gets_total, gets_delta))

        # and gave up what we receive
        pays_delta = _delta(record, "TakerGets", tx_pays)
        if pays_delta is not None:
            pays_total = round_sig(DECIMAL_CONTEXT.add(pays_total, pays_delta))

        log.debug(
            "Exercised offer %s: gets_delta=%s pays_delta=%s",
            record.ledger_index, gets_delta, pays_delta,
        )

    return ExercisedTotals(
        taker_gets=_total_like(tx_gets, gets_total),
        taker_pays=_total_like(tx_pays, pays_total),
    )


__all__ = ["sum_exercised_deltas"]
