"""
conftest.py - Shared pytest fixtures for Honey tests

Provides common fixtures used across unit and conformance tests:
- Fresh ledger with the whole supply held by ALICE
- Empty treasury owned by ALICE
- Treasury funded with 100 tokens
"""

import pytest

from honey import Ledger, Treasury

from tests.accounts import ALICE, INITIAL_SUPPLY, HUNDRED


@pytest.fixture
def ledger():
    """Fresh ledger with the whole supply held by ALICE."""
    return Ledger(ALICE, INITIAL_SUPPLY, verbose=False)


@pytest.fixture
def treasury(ledger):
    """Empty treasury on `ledger`, owned by ALICE."""
    return Treasury(ledger, creator=ALICE, verbose=False)


@pytest.fixture
def funded_treasury(ledger, treasury):
    """Treasury holding 100 tokens, owned by ALICE."""
    ledger.transfer(ALICE, treasury.address, HUNDRED)
    return treasury
