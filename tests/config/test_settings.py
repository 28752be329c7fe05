"""Tests for KittiesSettings, GenesisConfig and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from kitties import GenesisConfig, KittiesSettings, configure_logging


def test_defaults(settings):
    assert settings.id_bits == 32
    assert settings.max_kitty_id == 2**32 - 1
    assert settings.max_balance == 2**128 - 1
    assert settings.seed_bytes == bytes(32)
    assert settings.atomic_exchange is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KITTIES_ID_BITS", "8")
    monkeypatch.setenv("KITTIES_ATOMIC_EXCHANGE", "true")
    monkeypatch.setenv("KITTIES_RANDOM_SEED", "ABCD")
    monkeypatch.setenv("KITTIES_LOG_LEVEL", "debug")

    settings = KittiesSettings(_env_file=None)

    assert settings.max_kitty_id == 255
    assert settings.atomic_exchange is True
    assert settings.seed_bytes == b"\xab\xcd"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [{"random_seed": "not-hex"}, {"log_level": "LOUD"}, {"id_bits": 0}, {"balance_bits": 300}],
)
def test_invalid_settings_rejected(overrides):
    with pytest.raises(ValidationError):
        KittiesSettings(_env_file=None, **overrides)


def test_genesis_defaults_are_empty():
    genesis = GenesisConfig()
    assert genesis.balances == {}
    assert genesis.prices == {}
    assert genesis.next_kitty_id == 0


@pytest.mark.parametrize(
    "data",
    [{"balances": {"alice": -1}}, {"prices": {0: -5}}, {"next_kitty_id": -1}],
)
def test_genesis_rejects_negative_values(data):
    with pytest.raises(ValidationError):
        GenesisConfig(**data)


def test_configure_logging_sets_package_level():
    logger = configure_logging(KittiesSettings(_env_file=None, log_level="WARNING"))

    assert logger is logging.getLogger("kitties")
    assert logger.level == logging.WARNING
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    ("genesis", "match"),
    [
        (GenesisConfig(balances={"bob": 256}), "Balance 256"),
        (GenesisConfig(prices={0: 256}), "Price 256"),
        (GenesisConfig(next_kitty_id=256), "next_kitty_id 256"),
    ],
)
def test_genesis_outside_configured_bounds_rejected(genesis, match):
    settings = KittiesSettings(_env_file=None, id_bits=8, balance_bits=8)

    with pytest.raises(ValueError, match=match):
        genesis.check_bounds(settings)


def test_genesis_at_configured_bounds_accepted():
    settings = KittiesSettings(_env_file=None, id_bits=8, balance_bits=8)

    GenesisConfig(balances={"bob": 255}, prices={0: 255}, next_kitty_id=255).check_bounds(settings)
