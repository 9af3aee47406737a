"""Syntax checks for order request fields.

Default implementations of the address, currency, float and timestamp
validators. They are bundled in `SyntaxValidators` so a caller that already
owns stricter checks can pass its own into `validate_order_request`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from xrpl.core.addresscodec import is_valid_classic_address

_ADDRESS_RE = re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{24,34}$")
_CURRENCY_RE = re.compile(r"^([A-Za-z0-9]{3}|[A-Fa-f0-9]{40})$")
_FLOAT_RE = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")
_TIMESTAMP_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"[T ](\d{2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?"
    r"(Z|[+-](\d{2}):?(\d{2}))?$"
)


def is_valid_address(value: Any) -> bool:
    """Classic address with a valid base58check checksum (X-addresses are not accepted)."""
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        return False
    return is_valid_classic_address(value)


def is_valid_currency(value: Any) -> bool:
    return isinstance(value, str) and bool(_CURRENCY_RE.match(value))


def is_float_string(value: Any) -> bool:
    return isinstance(value, str) and bool(_FLOAT_RE.match(value.strip()))


def is_valid_timestamp(value: Any) -> bool:
    """ISO-8601 date-time such as '2014-04-07T13:21:07.293Z'.

    A bare Unix epoch ('1396876867') is not accepted.
    """
    if not isinstance(value, str):
        return False
    m = _TIMESTAMP_RE.match(value.strip())
    if not m:
        return False
    year, month, day, hour, minute = (int(m.group(i)) for i in range(1, 6))
    second = int(m.group(6) or 0)
    try:
        tz = timezone.utc
        if m.group(8) is not None:
            tz = timezone(timedelta(hours=int(m.group(8)), minutes=int(m.group(9))))
        datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class SyntaxValidators:
    address: Callable[[Any], bool] = is_valid_address
    currency: Callable[[Any], bool] = is_valid_currency
    float_string: Callable[[Any], bool] = is_float_string
    timestamp: Callable[[Any], bool] = is_valid_timestamp


DEFAULT_VALIDATORS = SyntaxValidators()


__all__ = [
    "is_valid_address",
    "is_valid_currency",
    "is_float_string",
    "is_valid_timestamp",
    "SyntaxValidators",
    "DEFAULT_VALIDATORS",
]
