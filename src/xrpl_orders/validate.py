"""Validation of inbound order requests.

Checks run in a fixed order and the first failure wins. Each failure is a
FieldError naming the field and what was expected; messages match the REST
API's wording so they can be returned to clients verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .core.constants import NATIVE_CURRENCY
from .core.exc import FieldError
from .syntax import DEFAULT_VALIDATORS, SyntaxValidators

ADDRESS_HINT = "Must be a valid Ripple Address"
IS_BID_HINT = "Boolean required to determined whether order is a bid or an ask"
AMOUNT_HINT = 'Must be a valid Amount, though "value" can be omitted if exchange_rate is specified'
EXCHANGE_RATE_HINT = "Must be a string representation of a floating point number"
INCOMPLETE_AMOUNTS = (
    "Must supply base_amount and counter_amount complete with values for each."
    " One of the amount value fields may be omitted if exchange_rate is supplied"
)
TIMESTAMP_HINT = "Must be a valid timestamp"
LEDGER_TIMEOUT_HINT = "Must be a positive integer"
BOOLEAN_HINT = "Must be a boolean"
CANCEL_REPLACE_HINT = (
    "Must be a positive integer representing the sequence number of an order to replace"
)

FLAG_FIELDS = ("passive", "immediate_or_cancel", "fill_or_kill", "maximize_buy_or_sell")


def _missing(field: str, hint: str) -> FieldError:
    return FieldError(field, f"Missing parameter: {field}. {hint}")


def _invalid(field: str, hint: str) -> FieldError:
    return FieldError(field, f"Invalid parameter: {field}. {hint}")


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _is_numeric(value: Any, v: SyntaxValidators) -> bool:
    """Amount values may arrive as strings or JSON numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return v.float_string(str(value))
    return v.float_string(value)


def _is_non_negative_integer(value: Any, v: SyntaxValidators) -> bool:
    """'20', 20 and '20.0' pass; '10.5', '-10' and 'abc' do not."""
    if not _is_numeric(value, v):
        return False
    try:
        d = Decimal(str(value).strip())
    except InvalidOperation:
        return False
    return d.is_finite() and d == d.to_integral_value() and d >= 0


def _check_amount(order: Mapping[str, Any], field: str, v: SyntaxValidators) -> None:
    amount = order.get(field)
    if not _present(amount):
        raise _missing(field, AMOUNT_HINT)
    if not isinstance(amount, Mapping) or not v.currency(amount.get("currency")):
        raise _invalid(field, AMOUNT_HINT)
    issuer = amount.get("issuer")
    if amount["currency"] == NATIVE_CURRENCY:
        if issuer:
            raise _invalid(field, AMOUNT_HINT)
    elif not v.address(issuer):
        raise _invalid(field, AMOUNT_HINT)


def validate_order_request(
    order: Mapping[str, Any],
    *,
    validators: Optional[SyntaxValidators] = None,
) -> None:
    """Validate an order request; raise FieldError on the first problem.

    Either amount value may be omitted when a valid exchange_rate is given,
    since any two of (base value, counter value, rate) fix the third.
    """
    v = validators or DEFAULT_VALIDATORS

    if not isinstance(order, Mapping):
        raise FieldError("order", "Order must be an object")

    account = order.get("account")
    if not account:
        raise _missing("account", ADDRESS_HINT)
    if not v.address(account):
        raise _invalid("account", ADDRESS_HINT)

    if "is_bid" not in order:
        raise _missing("is_bid", IS_BID_HINT)
    if not isinstance(order["is_bid"], bool):
        raise _invalid("is_bid", IS_BID_HINT)

    _check_amount(order, "base_amount", v)
    _check_amount(order, "counter_amount", v)

    exchange_rate = order.get("exchange_rate")
    if _present(exchange_rate) and not v.float_string(exchange_rate):
        raise _invalid("exchange_rate", EXCHANGE_RATE_HINT)
    has_rate = _present(exchange_rate)

    for field in ("base_amount", "counter_amount"):
        value = order[field].get("value")
        if not (_present(value) and _is_numeric(value, v)) and not has_rate:
            raise FieldError(f"{field}.value", INCOMPLETE_AMOUNTS)

    expiration = order.get("expiration_timestamp")
    if _present(expiration) and not v.timestamp(expiration):
        raise _invalid("expiration_timestamp", TIMESTAMP_HINT)

    ledger_timeout = order.get("ledger_timeout")
    if _present(ledger_timeout) and not _is_non_negative_integer(ledger_timeout, v):
        raise _invalid("ledger_timeout", LEDGER_TIMEOUT_HINT)

    for field in FLAG_FIELDS:
        if field in order and not isinstance(order[field], bool):
            raise _invalid(field, BOOLEAN_HINT)

    cancel_replace = order.get("cancel_replace")
    if _present(cancel_replace) and not _is_non_negative_integer(cancel_replace, v):
        raise _invalid("cancel_replace", CANCEL_REPLACE_HINT)


def is_valid_order_request(order: Mapping[str, Any], *, validators: Optional[SyntaxValidators] = None) -> bool:
    try:
        validate_order_request(order, validators=validators)
    except FieldError:
        return False
    return True


__all__ = [
    "FLAG_FIELDS",
    "validate_order_request",
    "is_valid_order_request",
]
