import json

import pytest

from xrpl_orders.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CURRENCY_PRIORITIZATION,
    OrderFormatConfig,
    default_config,
    load_config,
)


def _write(tmp_path, data):
    p = tmp_path / "orders.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_defaults_without_file():
    print("[config] no path, no env -> built-in defaults")
    cfg = load_config()
    assert cfg == OrderFormatConfig()
    assert cfg.currency_prioritization == DEFAULT_CURRENCY_PRIORITIZATION
    assert cfg.currency_pair_exceptions == ()


def test_explicit_path_overrides_and_keeps_missing_keys(tmp_path):
    print("[config] file sets only pair exceptions -> priority stays default")
    cfg = load_config(_write(tmp_path, {"currency_pair_exceptions": ["EUR/USD"]}))
    assert cfg.currency_pair_exceptions == ("EUR/USD",)
    assert cfg.currency_prioritization == DEFAULT_CURRENCY_PRIORITIZATION


def test_env_var_names_the_file(tmp_path, monkeypatch):
    print(f"[config] ${CONFIG_ENV_VAR} -> loaded when no path is given")
    p = _write(tmp_path, {"currency_prioritization": ["USD", "XRP"]})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
    assert load_config().currency_prioritization == ("USD", "XRP")


def test_default_config_is_cached():
    default_config.cache_clear()
    assert default_config() is default_config()
    default_config.cache_clear()


@pytest.mark.parametrize(
    "data",
    [
        ["XRP", "USD"],
        {"currency_prioritization": "XRP"},
        {"currency_pair_exceptions": {"EUR": "USD"}},
    ],
)
def test_bad_shapes_raise_value_error(tmp_path, data):
    print(f"[config-bad] {data!r} -> ValueError")
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, data))


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")
