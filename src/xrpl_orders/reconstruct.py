"""Reconstruct an account's order from a settled transaction.

The ledger has no notion of "order state"; it has to be inferred:

1. Locate the account's Offer record in the metadata (optionally by sequence).
2. If there is none, the offer may have been consumed on arrival or carried
   immediate or cancel / fill or kill. Only an OfferCreate sent by the
   account qualifies; its final fields are synthesized from what it
   exercised on other offers.
3. Derive the rate: the BookDirectory quality if present, else
   TakerPays / TakerGets; then strip the drops scaling of a native side.
4. Assign base/counter with the pair conventions; a bid inverts the rate
   because the ledger's rate is always pays over gets.
5. Derive the state and the resting flags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from .core.amounts import Amount, normalize, parse_amount
from .core.constants import TX_OFFER_CANCEL, TX_OFFER_CREATE
from .core.datatypes import (
    ExercisedTotals,
    MutationRecord,
    OrderState,
    ReconstructedOrder,
    TransactionContext,
)
from .core.exc import OrderNotFound
from .core.flags import OfferCreateFlag, OfferEntryFlag, has_flag
from .core.fmt import fmt_value, invert_rate
from .core.quality import Quality
from .exercised import sum_exercised_deltas
from .ledger import find_offer_record
from .pairs import is_base_as_taker_side, resolve_conventions

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _OfferView:
    """The offer's final state, read from the ledger or synthesized."""

    taker_gets: Amount
    taker_pays: Amount
    flags: int = 0
    sequence: Optional[int] = None
    book_directory: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "_OfferView":
        return cls(
            taker_gets=parse_amount(fields.get("TakerGets")),
            taker_pays=parse_amount(fields.get("TakerPays")),
            flags=int(fields.get("Flags") or 0),
            sequence=fields.get("Sequence"),
            book_directory=fields.get("BookDirectory") or None,
        )

    @classmethod
    def from_totals(cls, totals: ExercisedTotals, tx: TransactionContext) -> "_OfferView":
        return cls(
            taker_gets=totals.taker_gets,
            taker_pays=totals.taker_pays,
            flags=tx.flags,
            sequence=tx.sequence,
        )

    def quality(self) -> Quality:
        if self.book_directory:
            return Quality.from_book_directory(self.book_directory)
        return Quality.from_amounts(self.taker_pays, self.taker_gets)


def _exercised_state(tx: TransactionContext, view: _OfferView) -> OrderState:
    """State of an offer that left no ledger entry, from what it exercised.

    Exercising at least the requested amount counts as filled: drops can
    exceed a request rounded to whole XRP by a sub-drop margin.
    """
    if view.taker_gets.is_zero() or view.taker_pays.is_zero():
        return OrderState.FAILED
    requested_gets = parse_amount(tx.taker_gets)
    requested_pays = parse_amount(tx.taker_pays)
    if (requested_gets.to_decimal() > view.taker_gets.to_decimal()
            or requested_pays.to_decimal() > view.taker_pays.to_decimal()):
        return OrderState.PARTIALLY_FILLED
    return OrderState.FILLED


def _ledger_state(tx: TransactionContext, account: str, record: MutationRecord, view: _OfferView) -> OrderState:
    if tx.account == account and tx.transaction_type == TX_OFFER_CANCEL:
        return OrderState.CANCELLED
    previous = record.previous_fields or {}
    had_amounts = "TakerGets" in previous and "TakerPays" in previous
    if (record.action == "deleted" and had_amounts
            and view.taker_gets.is_zero() and view.taker_pays.is_zero()):
        return OrderState.FILLED
    if had_amounts:
        return OrderState.PARTIALLY_FILLED
    return OrderState.ACTIVE


def reconstruct_order(
    tx: Union[TransactionContext, Mapping[str, Any]],
    *,
    account: str,
    sequence: Optional[int] = None,
    priority: Optional[Sequence[str]] = None,
    pair_exceptions: Optional[Sequence[str]] = None,
) -> ReconstructedOrder:
    """Reconstruct `account`'s order as affected by `tx`.

    Raises OrderNotFound when the transaction has no effect on a matching
    order. `priority` / `pair_exceptions` default to the configured
    conventions.
    """
    if not account:
        raise ValueError("account is required to reconstruct an order")
    if not isinstance(tx, TransactionContext):
        tx = TransactionContext.from_json(tx)
    priority, pair_exceptions = resolve_conventions(priority, pair_exceptions)

    immediate_or_cancel = False
    fill_or_kill = False

    record = find_offer_record(tx, account, sequence)
    if record is None:
        if tx.account != account or tx.transaction_type != TX_OFFER_CREATE:
            log.debug("No offer for account=%s sequence=%s in tx %s", account, sequence, tx.hash)
            raise OrderNotFound(account, sequence, tx.hash)
        # these never rest on the ledger; only the transaction carries them
        immediate_or_cancel = has_flag(tx.flags, OfferCreateFlag.IMMEDIATE_OR_CANCEL)
        fill_or_kill = has_flag(tx.flags, OfferCreateFlag.FILL_OR_KILL)
        view = _OfferView.from_totals(sum_exercised_deltas(tx), tx)
        state = _exercised_state(tx, view)
        log.debug("Offer %s left no ledger entry; exercised state=%s", tx.hash, state.value)
    else:
        view = _OfferView.from_fields(record.fields)
        state = _ledger_state(tx, account, record, view)
        log.debug("Located %s offer for %s in tx %s: state=%s",
                  record.action, account, tx.hash, state.value)

    rate = view.quality().to_display_rate(view.taker_pays, view.taker_gets)

    if is_base_as_taker_side(view.taker_gets, view.taker_pays,
                             priority=priority, pair_exceptions=pair_exceptions):
        # pays/gets is already counter/base
        is_bid = False
        base, counter = view.taker_gets, view.taker_pays
    else:
        is_bid = True
        base, counter = view.taker_pays, view.taker_gets
        rate = invert_rate(rate)

    return ReconstructedOrder(
        account=account,
        is_bid=is_bid,
        base_amount=normalize(base),
        counter_amount=normalize(counter),
        exchange_rate=fmt_value(rate),
        state=state,
        passive=has_flag(view.flags, OfferEntryFlag.PASSIVE),
        immediate_or_cancel=immediate_or_cancel,
        fill_or_kill=fill_or_kill,
        maximize_buy_or_sell=has_flag(view.flags, OfferEntryFlag.SELL),
        sequence=view.sequence,
        ledger=tx.ledger_index,
        hash=tx.hash,
    )


__all__ = ["reconstruct_order"]
