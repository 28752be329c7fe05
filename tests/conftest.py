"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from kitties import EventLog, KittiesModule, KittiesSettings, Kitty, LocalRandomness, LocalStore

SEED = bytes(range(32))


@pytest.fixture
def settings():
    """Default settings, isolated from the environment."""
    return KittiesSettings(_env_file=None)


@pytest.fixture
def store():
    """Fresh empty LocalStore."""
    return LocalStore()


@pytest.fixture
def seed():
    return SEED


@pytest.fixture
def randomness():
    """Deterministic randomness port."""
    return LocalRandomness(seed=SEED)


@pytest.fixture
def event_log():
    return EventLog()


@pytest.fixture
def module(store, randomness, event_log, settings):
    """KittiesModule wired to the fixture store, port and log."""
    return KittiesModule(store=store, randomness=randomness, sink=event_log, settings=settings)


@pytest.fixture
def add_kitty(store):
    """Insert a kitty with a chosen first byte (which fixes its gender).

    Advances the id counter the way an allocation would.
    """

    def _add(owner: str, first: int, fill: int = 0) -> int:
        kitty_id = store.next_kitty_id()
        store.put_kitty(kitty_id, owner, Kitty(bytes([first]) + bytes([fill]) * 15))
        store.set_next_kitty_id(kitty_id + 1)
        return kitty_id

    return _add
