"""
accounts.py - Test accounts and state helpers

Fixed addresses and amounts shared by the unit and conformance tests, plus a
snapshot helper for checking that rejected calls have no effect.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from honey import Ledger, Treasury, ONE_TOKEN


OWNER = "0xB4E4dD051162e567336DDAe9e86eb03C1f8d5C04"
ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"

INITIAL_SUPPLY = 1000 * ONE_TOKEN
HUNDRED = 100 * ONE_TOKEN


def snapshot(ledger: Ledger, treasury: Optional[Treasury] = None) -> Dict[str, Any]:
    """Capture all observable state so a rejected call can be checked for zero effect."""
    state = {
        "balances": dict(ledger.balances),
        "total_supply": ledger.total_supply,
        "transfer_log": list(ledger.transfer_log),
    }
    if treasury is not None:
        state["owner"] = treasury.owner
        state["ownership_log"] = list(treasury.ownership_log)
    return state
