import pytest

from xrpl_orders.syntax import (
    is_float_string,
    is_valid_address,
    is_valid_currency,
    is_valid_timestamp,
)


# -----------------------------
# Addresses
# -----------------------------

@pytest.mark.parametrize(
    "address",
    [
        "rKXCummUHnenhYudNb9UoJ4mGBR75vFcgz",
        "rLpq5RcRzA8FU1yUqEPW4xfsdwon7casuM",
        "rNw4ozCG514KEjPs5cDrqEcdsi31Jtfm5r",
        "rMwjYedjc7qqtKYVLiAccJSmCwih4LnE2q",
        "rrrrrrrrrrrrrrrrrrrrBZbvji",
    ],
)
def test_known_addresses_are_valid(address):
    print(f"[address-ok] {address}")
    assert is_valid_address(address)


@pytest.mark.parametrize(
    "address,why",
    [
        ("rKXCummUHnenhYudNb9UoJ4mGBR75vFcgy", "checksum mismatch"),
        ("notavalidaddress", "does not start with r"),
        ("r...", "too short"),
        ("rKXCummUHnenhYudNb9UoJ4mGBR75vFcg0", "0 outside alphabet"),
        ("", "empty"),
        (None, "not a string"),
        (12345, "not a string"),
        ("XVLhHMPHU98es4dbozjVtdWzVrDjtV18pX8yuPT7y4xaEHi", "X-address, not classic"),
    ],
)
def test_bad_addresses_rejected(address, why):
    print(f"[address-bad] {address!r}: {why}")
    assert not is_valid_address(address)


# -----------------------------
# Currencies, floats, timestamps
# -----------------------------

@pytest.mark.parametrize(
    "code,ok",
    [
        ("USD", True),
        ("usd", True),
        ("XRP", True),
        ("0158415500000000C1F76FF6ECB0BAC600000000", True),
        ("DOLLARS", False),
        ("US", False),
        ("U$D", False),
        (None, False),
    ],
)
def test_currency_codes(code, ok):
    assert is_valid_currency(code) is ok


@pytest.mark.parametrize(
    "value,ok",
    [
        ("0.1", True),
        ("10", True),
        ("10.", True),
        (".5", True),
        ("-1.5e3", True),
        ("abc", False),
        ("1.2.3", False),
        ("", False),
        (0.1, False),
    ],
)
def test_float_strings(value, ok):
    assert is_float_string(value) is ok


@pytest.mark.parametrize(
    "value,ok",
    [
        ("2014-04-07T13:21:07.293Z", True),
        ("2014-04-07T13:21:07Z", True),
        ("2014-04-07T13:21:07+02:00", True),
        ("2014-04-07 13:21", True),
        ("1396876559", False),
        ("abc", False),
        ("2014-02-30T00:00:00Z", False),
        (1396876559, False),
    ],
)
def test_timestamps(value, ok):
    print(f"[timestamp] {value!r} -> {ok}")
    assert is_valid_timestamp(value) is ok
