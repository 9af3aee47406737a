from __future__ import annotations

from typing import Any, Dict

import pytest

from builders import load_fixture


# -----------------------------
# Pytest fixtures
# -----------------------------


@pytest.fixture()
def offer_cancel_tx() -> Dict[str, Any]:
    """OfferCancel deleting the account's FAK/USD offer, sequence 219."""
    return load_fixture("offer_cancel_tx.json")


@pytest.fixture()
def consumed_offer_create_tx() -> Dict[str, Any]:
    """OfferCreate, sequence 218, fully crossed on arrival (no Offer entry of its own)."""
    return load_fixture("offer_create_consumed_tx.json")


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    """Keep a developer's XRPL_ORDERS_CONFIG out of the tests."""
    monkeypatch.delenv("XRPL_ORDERS_CONFIG", raising=False)
