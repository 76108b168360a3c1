"""Shared fixtures for restcursor tests (no network required)."""

from __future__ import annotations

import pytest

from restcursor.account import Account
from restcursor.registry import RESOURCE_REGISTRY

from .fakes import FakeStore, make_items


@pytest.fixture(autouse=True)
def _restore_registry():
    """Keep resource types registered inside a test from leaking into others."""
    saved = dict(RESOURCE_REGISTRY)
    yield
    RESOURCE_REGISTRY.clear()
    RESOURCE_REGISTRY.update(saved)


@pytest.fixture
def store():
    return FakeStore("Items", make_items(5))


@pytest.fixture
def account(store):
    return Account(store, account_id=1)
