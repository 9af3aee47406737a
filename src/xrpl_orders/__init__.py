# Top-level API for xrpl_orders.
"""
Top-level API for xrpl_orders.

Pure decoding and validation of XRP Ledger orders (offers):
  - validate_order_request: shape/semantic checks of an order submission
  - reconstruct_order: canonical order (base/counter, rate, state, flags)
    from a settled transaction and its metadata
  - sum_exercised_deltas: what an offer without a ledger entry actually traded
  - is_base_as_taker_side: base/counter classification of a currency pair

Nothing in this package performs network I/O.
"""

from __future__ import annotations

from .config import OrderFormatConfig, default_config, load_config
from .exercised import sum_exercised_deltas
from .pairs import is_base_as_taker_side
from .reconstruct import reconstruct_order
from .validate import is_valid_order_request, validate_order_request

from .core import (
    Amount,
    XRPAmount,
    IOUAmount,
    OrderAmount,
    normalize,
    parse_amount,
    Quality,
    OrderState,
    TransactionContext,
    MutationRecord,
    ExercisedTotals,
    ReconstructedOrder,
    FieldError,
    OrderNotFound,
    InvariantViolation,
    MalformedAmount,
)

__version__ = "0.1.0"

__all__ = [
    # operations
    "validate_order_request",
    "is_valid_order_request",
    "reconstruct_order",
    "sum_exercised_deltas",
    "is_base_as_taker_side",
    # configuration
    "OrderFormatConfig",
    "load_config",
    "default_config",
    # core types
    "Amount",
    "XRPAmount",
    "IOUAmount",
    "OrderAmount",
    "normalize",
    "parse_amount",
    "Quality",
    "OrderState",
    "TransactionContext",
    "MutationRecord",
    "ExercisedTotals",
    "ReconstructedOrder",
    # exceptions
    "FieldError",
    "OrderNotFound",
    "InvariantViolation",
    "MalformedAmount",
]
