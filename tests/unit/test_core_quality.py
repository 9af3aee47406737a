import pytest
from decimal import Decimal

from xrpl_orders.core.amounts import IOUAmount, XRPAmount
from xrpl_orders.core.exc import InvariantViolation
from xrpl_orders.core.quality import Quality

ISSUER = "rLpq5RcRzA8FU1yUqEPW4xfsdwon7casuM"


def _iou(x: str, currency: str = "FAK") -> IOUAmount:
    """Helper: IOU amount from a Decimal string."""
    return IOUAmount(Decimal(x), currency, ISSUER)


# -----------------------------
# BookDirectory decoding
# -----------------------------

@pytest.mark.parametrize(
    "book_directory,expected",
    [
        ("CF8D13399C6ED20BA82740CFA78E928DC8D498255249BA634E038D7EA4C68000", Decimal("1E-7")),
        ("3314E812CD309A7DE88E3BEDED6127FCB050AAC661A0719E5D038D7EA4C68000", Decimal("1E+8")),
        ("2BD15E244142FBC8FC0E8C167D2A098D4A120E257523DE155411C37937E08000", Decimal("0.5")),
    ],
)
def test_quality_from_book_directory(book_directory, expected):
    q = Quality.from_book_directory(book_directory)
    print(f"[book-directory] ...{book_directory[-16:]} -> {q.rate} (expect {expected})")
    assert q.rate == expected


@pytest.mark.parametrize("bad", ["", "ABC", "ZZZZZZZZZZZZZZZZ"])
def test_quality_from_book_directory_rejects_bad_keys(bad):
    print(f"[book-directory-bad] {bad!r} -> expect InvariantViolation")
    with pytest.raises(InvariantViolation):
        Quality.from_book_directory(bad)


# -----------------------------
# Amount ratio
# -----------------------------

def test_quality_from_amounts_ratio():
    print("[from_amounts] pays=0.5 USD, gets=1 FAK -> 0.5")
    q = Quality.from_amounts(_iou("0.5", "USD"), _iou("1"))
    assert q.rate == Decimal("0.5")


def test_quality_from_amounts_zero_gets_is_zero():
    print("[from_amounts] gets=0 -> zero quality instead of division by zero")
    q = Quality.from_amounts(XRPAmount(10), _iou("0"))
    assert q.is_zero()
    assert q == Quality.zero()


def test_quality_from_amounts_rounds_to_fifteen_digits():
    print("[from_amounts] 1/3 -> 0.333333333333333")
    q = Quality.from_amounts(_iou("1"), _iou("3"))
    assert q.rate == Decimal("0.333333333333333")


# -----------------------------
# Display rate (drops scaling removed)
# -----------------------------

def test_display_rate_native_gets_side():
    print("[display] gets=1000000 drops, pays=0.1 USD, quality 1E-7 -> 0.1")
    q = Quality(Decimal("1E-7"))
    assert q.to_display_rate(_iou("0.1", "USD"), XRPAmount(1_000_000)) == Decimal("0.1")


def test_display_rate_native_pays_side():
    print("[display] pays=100000000 drops, gets=1 FAK, quality 1E+8 -> 100")
    q = Quality(Decimal("1E+8"))
    assert q.to_display_rate(XRPAmount(100_000_000), _iou("1")) == Decimal("100")


def test_display_rate_issued_both_sides_unchanged():
    print("[display] IOU/IOU rate passes through")
    q = Quality(Decimal("0.5"))
    assert q.to_display_rate(_iou("0.5", "USD"), _iou("1")) == Decimal("0.5")
