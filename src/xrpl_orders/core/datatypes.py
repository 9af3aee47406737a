"""
Core datatypes: transaction context, mutation records and reconstructed orders.

All of them are frozen; reconstruction never mutates its input.

Notes:
- `TransactionContext` keeps TakerGets/TakerPays in their raw ledger JSON
  shape; consumers parse them with `parse_amount` when needed.
- `MutationRecord` mirrors one entry of `meta.AffectedNodes`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from .amounts import Amount, OrderAmount, amount_to_json
from .exc import InvariantViolation


# ---------------------------------------------------------------------------
# Order state
# ---------------------------------------------------------------------------

class OrderState(str, Enum):
    ACTIVE = "active"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    CANCELLED = "cancelled"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Mutation records
# ---------------------------------------------------------------------------

_NODE_KINDS = (
    ("CreatedNode", "created"),
    ("ModifiedNode", "modified"),
    ("DeletedNode", "deleted"),
)


@dataclass(frozen=True)
class MutationRecord:
    """One ledger object touched by a transaction.

    Fields:
    - action: "created", "modified" or "deleted".
    - ledger_entry_type: e.g. "Offer", "AccountRoot", "DirectoryNode".
    - final_fields / previous_fields / new_fields: raw field maps as sent by rippled.
    - ledger_index: the object's ledger key, if present.
    """

    action: str
    ledger_entry_type: str
    final_fields: Mapping[str, Any] = field(default_factory=dict)
    previous_fields: Optional[Mapping[str, Any]] = None
    new_fields: Optional[Mapping[str, Any]] = None
    ledger_index: Optional[str] = None

    @property
    def fields(self) -> Mapping[str, Any]:
        """The object's state after the transaction (NewFields for created nodes)."""
        return self.new_fields or self.final_fields

    @classmethod
    def from_json(cls, affected_node: Mapping[str, Any]) -> "MutationRecord":
        for key, action in _NODE_KINDS:
            node = affected_node.get(key)
            if node is not None:
                return cls(
                    action=action,
                    ledger_entry_type=str(node.get("LedgerEntryType", "")),
                    final_fields=node.get("FinalFields") or {},
                    previous_fields=node.get("PreviousFields"),
                    new_fields=node.get("NewFields"),
                    ledger_index=node.get("LedgerIndex"),
                )
        raise InvariantViolation(f"unrecognised AffectedNodes entry: {sorted(affected_node)!r}")


# ---------------------------------------------------------------------------
# Transaction context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransactionContext:
    """A settled transaction together with its mutation records."""

    account: str
    transaction_type: str
    flags: int = 0
    sequence: Optional[int] = None
    taker_gets: Any = None
    taker_pays: Any = None
    ledger_index: Optional[int] = None
    hash: Optional[str] = None
    nodes: Tuple[MutationRecord, ...] = ()

    @classmethod
    def from_json(cls, tx: Mapping[str, Any]) -> "TransactionContext":
        """Build from a rippled `tx` response (meta under `meta` or `metaData`)."""
        meta = tx.get("meta") or tx.get("metaData") or {}
        nodes = tuple(MutationRecord.from_json(n) for n in meta.get("AffectedNodes") or ())
        return cls(
            account=str(tx.get("Account") or ""),
            transaction_type=str(tx.get("TransactionType") or ""),
            flags=int(tx.get("Flags") or 0),
            sequence=tx.get("Sequence"),
            taker_gets=tx.get("TakerGets"),
            taker_pays=tx.get("TakerPays"),
            ledger_index=tx.get("ledger_index"),
            hash=tx.get("hash"),
            nodes=nodes,
        )


# ---------------------------------------------------------------------------
# Exercised totals
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExercisedTotals:
    """How much of an offer the ledger exercised, in the offer's own encoding."""

    taker_gets: Amount
    taker_pays: Amount

    def to_json(self) -> dict[str, Any]:
        return {
            "TakerGets": amount_to_json(self.taker_gets),
            "TakerPays": amount_to_json(self.taker_pays),
        }


# ---------------------------------------------------------------------------
# Reconstructed order
# ---------------------------------------------------------------------------

def _str_or_empty(x: Any) -> str:
    return "" if x is None else str(x)


@dataclass(frozen=True)
class ReconstructedOrder:
    """Canonical order derived from one transaction for one account."""

    account: str
    is_bid: bool
    base_amount: OrderAmount
    counter_amount: OrderAmount
    exchange_rate: str
    state: OrderState
    passive: bool = False
    immediate_or_cancel: bool = False
    fill_or_kill: bool = False
    maximize_buy_or_sell: bool = False
    sequence: Optional[int] = None
    ledger: Optional[int] = None
    hash: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        """REST representation; fields this core cannot derive are left empty."""
        return {
            "account": self.account,
            "is_bid": self.is_bid,
            "base_amount": self.base_amount.to_json(),
            "counter_amount": self.counter_amount.to_json(),
            "exchange_rate": self.exchange_rate,
            "expiration_timestamp": "",
            "ledger_timeout": "",
            "passive": self.passive,
            "immediate_or_cancel": self.immediate_or_cancel,
            "fill_or_kill": self.fill_or_kill,
            "maximize_buy_or_sell": self.maximize_buy_or_sell,
            "cancel_replace": "",
            "sequence": _str_or_empty(self.sequence),
            "state": self.state.value,
            "ledger": _str_or_empty(self.ledger),
            "hash": _str_or_empty(self.hash),
            "previous_url": "",
        }


__all__ = [
    "OrderState",
    "MutationRecord",
    "TransactionContext",
    "ExercisedTotals",
    "ReconstructedOrder",
]
