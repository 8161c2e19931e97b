"""Global test fixtures for the SSI test suite."""

from __future__ import annotations

import os
import random

import pytest

from ssi.core.config import clear_config_cache
from ssi.identity import Bip340Secret, Ed25519Secret, Network, Uid

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove all SSI_ environment variables and reset cached config."""
    for key in list(os.environ.keys()):
        if key.startswith("SSI_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


# ============================================================================
# Key Fixtures
# ============================================================================
# A vanity search takes ~65536 key derivations, so each algorithm's key is
# generated once per session and shared.


@pytest.fixture(scope="session")
def bip340_secret() -> Bip340Secret:
    return Bip340Secret.new(Network.BITCOIN)


@pytest.fixture(scope="session")
def ed25519_secret() -> Ed25519Secret:
    return Ed25519Secret.new(Network.TESTNET)


@pytest.fixture
def seeded_rng():
    """Deterministic random source for reproducible key sampling."""
    return random.Random(1234).randbytes


@pytest.fixture
def alice() -> Uid:
    return Uid("Alice", "dns", "alice.example")


@pytest.fixture
def bob() -> Uid:
    return Uid("Bob Builder", "mailto", "bob@example.org")
