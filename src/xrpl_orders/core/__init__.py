"""
XRPL Orders Core
================

Unified exports for amount primitives, quality decoding, flag tables and
the datatypes shared by the validator and the reconstructor.

All monetary arithmetic is Decimal-based and pure; nothing here performs I/O.
"""

# NOTE:
#   XRPAmount (drops) and IOUAmount (issued currency) are the two ledger
#   encodings. OrderAmount is the display shape produced by `normalize`.
#   Rates are carried as Decimal and rendered with `fmt_value`.

# Constants
from .constants import (
    NATIVE_CURRENCY,
    DROPS_PER_XRP,
    XRP_QUANTUM,
    RATE_SIGNIFICANT_DIGITS,
    LEDGER_ENTRY_OFFER,
    TX_OFFER_CREATE,
    TX_OFFER_CANCEL,
)

# Decimal helpers
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    to_decimal,
    round_sig,
    div_sig,
    mul_sig,
    invert_rate,
    fmt_value,
)

# Amount primitives and bridges
from .amounts import (
    Amount,
    XRPAmount,
    IOUAmount,
    OrderAmount,
    xrp_from_drops,
    parse_amount,
    amount_to_json,
    same_asset,
    normalize,
)

# Quality (exchange rate)
from .quality import Quality

# Flag tables
from .flags import OfferCreateFlag, OfferEntryFlag, has_flag

# Datatypes
from .datatypes import (
    OrderState,
    MutationRecord,
    TransactionContext,
    ExercisedTotals,
    ReconstructedOrder,
)

# Exceptions
from .exc import (
    FieldError,
    OrderNotFound,
    InvariantViolation,
    AmountDomainError,
    MalformedAmount,
)

__all__ = [
    # constants
    "NATIVE_CURRENCY",
    "DROPS_PER_XRP",
    "XRP_QUANTUM",
    "RATE_SIGNIFICANT_DIGITS",
    "LEDGER_ENTRY_OFFER",
    "TX_OFFER_CREATE",
    "TX_OFFER_CANCEL",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "to_decimal",
    "round_sig",
    "div_sig",
    "mul_sig",
    "invert_rate",
    "fmt_value",
    # amounts
    "Amount",
    "XRPAmount",
    "IOUAmount",
    "OrderAmount",
    "xrp_from_drops",
    "parse_amount",
    "amount_to_json",
    "same_asset",
    "normalize",
    # quality
    "Quality",
    # flags
    "OfferCreateFlag",
    "OfferEntryFlag",
    "has_flag",
    # datatypes
    "OrderState",
    "MutationRecord",
    "TransactionContext",
    "ExercisedTotals",
    "ReconstructedOrder",
    # exceptions
    "FieldError",
    "OrderNotFound",
    "InvariantViolation",
    "AmountDomainError",
    "MalformedAmount",
]
