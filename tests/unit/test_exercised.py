from decimal import Decimal

from xrpl_orders.core.amounts import IOUAmount, XRPAmount
from xrpl_orders.core.datatypes import TransactionContext
from xrpl_orders.exercised import sum_exercised_deltas

from builders import FAK_ISSUER, USD_ISSUER, iou, offer_create_tx, offer_node


def _usd(value):
    return iou(value, "USD", USD_ISSUER)


def _crossed(kind, gets_before, gets_after, pays_before, pays_after):
    """A resting offer that gives XRP for USD, drained by the transaction."""
    return offer_node(
        kind,
        {"Account": "rE9KY28Z9Ru9y1mS3UMWWExA1cFJDjcxdN", "TakerGets": gets_after, "TakerPays": _usd(pays_after)},
        {"TakerGets": gets_before, "TakerPays": _usd(pays_before)},
    )


# -----------------------------
# Single and multiple crossed offers
# -----------------------------

def test_single_modified_offer():
    print("[exercised-single] one crossed offer: 11710000 drops received, 0.1 USD given")
    tx = offer_create_tx(
        _usd("0.1"),
        "10000000",
        [_crossed("ModifiedNode", "1017153846", "1005443846", "8.68619851409053", "8.58619851409053")],
        account=FAK_ISSUER,
    )
    totals = sum_exercised_deltas(tx)
    print("totals ->", totals.to_json())
    assert totals.to_json() == {
        "TakerPays": "11710000",
        "TakerGets": {"currency": "USD", "issuer": USD_ISSUER, "value": "0.1"},
    }


def test_multiple_offers_rounded_after_each_addition():
    print("[exercised-multi] three deleted + one modified offer -> 8387455793 drops and exactly 65 USD")
    tx = offer_create_tx(
        _usd("65"),
        "8385000000",
        [
            _crossed("DeletedNode", "3359172828", "0", "26.025946423", "0"),
            _crossed("DeletedNode", "771588410", "0", "5.979128602047855", "0"),
            _crossed("DeletedNode", "1928437736", "0", "14.94782150511963", "0"),
            _crossed("ModifiedNode", "25802000000", "23473743181", "200", "181.9528965301675"),
        ],
        account=FAK_ISSUER,
    )
    totals = sum_exercised_deltas(tx)
    print("totals ->", totals.to_json())
    assert totals.taker_pays == XRPAmount(8_387_455_793)
    assert totals.taker_gets.value == Decimal("65")
    assert totals.to_json()["TakerGets"]["value"] == "65"


def test_accepts_parsed_transaction_context():
    print("[exercised-context] TransactionContext input gives the same totals as raw JSON")
    tx = offer_create_tx(
        _usd("0.1"),
        "10000000",
        [_crossed("ModifiedNode", "1017153846", "1005443846", "8.68619851409053", "8.58619851409053")],
    )
    assert sum_exercised_deltas(TransactionContext.from_json(tx)) == sum_exercised_deltas(tx)


# -----------------------------
# Records that do not count
# -----------------------------

def test_ignores_records_without_previous_pays_and_other_assets():
    print("[exercised-filter] untouched offers, other issuers and non-Offer entries are skipped")
    untouched = offer_node("ModifiedNode", {"TakerGets": "500", "TakerPays": _usd("1")})
    other_issuer = offer_node(
        "ModifiedNode",
        {"TakerGets": iou("9", "EUR"), "TakerPays": iou("1", "USD", FAK_ISSUER)},
        {"TakerGets": iou("10", "EUR"), "TakerPays": iou("2", "USD", FAK_ISSUER)},
    )
    account_root = {
        "ModifiedNode": {
            "LedgerEntryType": "AccountRoot",
            "FinalFields": {"Balance": "100"},
            "PreviousFields": {"Balance": "200", "TakerPays": "1"},
        }
    }
    created = offer_node("CreatedNode", {"TakerGets": "1", "TakerPays": _usd("1")})
    tx = offer_create_tx(_usd("1"), "1000", [untouched, other_issuer, account_root, created])

    totals = sum_exercised_deltas(tx)
    print("totals ->", totals.to_json())
    assert totals.taker_pays == XRPAmount(0)
    assert totals.taker_gets == IOUAmount(Decimal(0), "USD", USD_ISSUER)


def test_no_affected_nodes_gives_zero_totals_in_tx_encoding():
    print("[exercised-empty] nothing crossed -> zero totals keep the tx's currencies")
    tx = offer_create_tx(iou("1"), "10", [])
    totals = sum_exercised_deltas(tx)
    assert totals.to_json() == {
        "TakerGets": {"currency": "FAK", "issuer": FAK_ISSUER, "value": "0"},
        "TakerPays": "0",
    }
