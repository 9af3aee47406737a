"""
Currency conventions used to decide which side of a pair is the base.

Configuration is a small JSON document:

    {
      "currency_prioritization": ["XRP", "EUR", "USD"],
      "currency_pair_exceptions": ["EUR/USD"]
    }

`load_config()` reads it from an explicit path or from the file named by
the XRPL_ORDERS_CONFIG environment variable; missing keys keep their
defaults. Values passed per call always take precedence over configuration.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple, Union

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "XRPL_ORDERS_CONFIG"

DEFAULT_CURRENCY_PRIORITIZATION: Tuple[str, ...] = (
    "XRP", "EUR", "GBP", "AUD", "NZD", "USD", "CAD", "CHF", "JPY", "CNY",
)
DEFAULT_CURRENCY_PAIR_EXCEPTIONS: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OrderFormatConfig:
    """Base-currency conventions.

    - currency_prioritization: earlier entries are preferred as base currency.
    - currency_pair_exceptions: "BASE/COUNTER" pairs overriding the priority list.
    """

    currency_prioritization: Tuple[str, ...] = DEFAULT_CURRENCY_PRIORITIZATION
    currency_pair_exceptions: Tuple[str, ...] = DEFAULT_CURRENCY_PAIR_EXCEPTIONS

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "OrderFormatConfig":
        return cls(
            currency_prioritization=_str_tuple(
                data.get("currency_prioritization", DEFAULT_CURRENCY_PRIORITIZATION),
                "currency_prioritization",
            ),
            currency_pair_exceptions=_str_tuple(
                data.get("currency_pair_exceptions", DEFAULT_CURRENCY_PAIR_EXCEPTIONS),
                "currency_pair_exceptions",
            ),
        )


def _str_tuple(values: Iterable[Any], key: str) -> Tuple[str, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
        raise ValueError(f"{key} must be a list of strings")
    return tuple(str(v) for v in values)


def load_config(path: Optional[Union[str, Path]] = None) -> OrderFormatConfig:
    """Load conventions from `path`, else from $XRPL_ORDERS_CONFIG, else defaults.

    An explicitly named file that does not exist raises FileNotFoundError.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return OrderFormatConfig()
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"config root must be a JSON object: {p}")
    cfg = OrderFormatConfig.from_mapping(data)
    log.debug("Loaded order format config from %s: %s", p, cfg)
    return cfg


@lru_cache(maxsize=1)
def default_config() -> OrderFormatConfig:
    """Process-wide defaults, resolved once."""
    return load_config()


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CURRENCY_PRIORITIZATION",
    "DEFAULT_CURRENCY_PAIR_EXCEPTIONS",
    "OrderFormatConfig",
    "load_config",
    "default_config",
]
