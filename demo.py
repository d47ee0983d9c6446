#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Honey Ledger and Community Treasury

A step-by-step walkthrough of the token ledger and the owner-gated treasury.
Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2: Ledger    - Minting the supply, transfers, conservation
  3-5: Treasury  - Funding, owner withdrawals, rejected callers
  6-7: Ownership - Handing over the treasury, renouncing it for good

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass
import sys

from honey import (
    Ledger, Treasury, HoneyError, ONE_TOKEN, ZERO_ADDRESS,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    deployer: str = "0xB4E4dD051162e567336DDAe9e86eb03C1f8d5C04"
    council: str = "0x2222222222222222222222222222222222222222"
    grantee: str = "0x3333333333333333333333333333333333333333"
    stranger: str = "0x4444444444444444444444444444444444444444"

    initial_supply: int = 10_000_000 * ONE_TOKEN
    treasury_funding: int = 100 * ONE_TOKEN
    grant: int = 40 * ONE_TOKEN


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def tokens(amount: int) -> str:
    return f"{amount / ONE_TOKEN:,.2f} HNY"


def attempt(label: str, fn, *args):
    """Run a call that may be rejected and show the stable reason."""
    print(f">>> {label}")
    try:
        fn(*args)
    except HoneyError as e:
        print(f"    rejected [{e.kind.value}]: {e.reason}")


# ============================================================================
# STEPS
# ============================================================================

def step_01_mint():
    step_header(1, "Minting the Supply",
        "The whole supply is created once, in one account.")
    ledger = Ledger(CONFIG.deployer, CONFIG.initial_supply, verbose=True)
    print(ledger)
    print(f"Deployer balance: {tokens(ledger.balance_of(CONFIG.deployer))}")
    print(f"Unknown account:  {tokens(ledger.balance_of(CONFIG.stranger))}")
    return ledger


def step_02_conservation(ledger: Ledger):
    step_header(2, "Transfers Conserve Supply",
        "Transfers move tokens; they never create or destroy them.")
    ledger.transfer(CONFIG.deployer, CONFIG.stranger, 5 * ONE_TOKEN)
    attempt("stranger sends more than it holds",
            ledger.transfer, CONFIG.stranger, CONFIG.deployer, 6 * ONE_TOKEN)
    attempt("deployer burns to the zero address",
            ledger.transfer, CONFIG.deployer, ZERO_ADDRESS, ONE_TOKEN)
    result = ledger.verify_conservation()
    print(f"Conservation: valid={result['valid']} sum={tokens(result['sum_of_balances'])}")


def step_03_fund_treasury(ledger: Ledger):
    step_header(3, "Funding the Treasury",
        "The treasury is just an account on the shared ledger.")
    treasury = Treasury(ledger, creator=CONFIG.deployer, verbose=True)
    print(treasury)
    ledger.transfer(CONFIG.deployer, treasury.address, CONFIG.treasury_funding)
    print(f"Treasury balance: {tokens(treasury.balance())}")
    return treasury


def step_04_owner_withdraws(treasury: Treasury):
    step_header(4, "Owner Withdrawal",
        "Only the owner can move treasury funds.")
    treasury.transfer(CONFIG.deployer, CONFIG.grantee, CONFIG.grant)
    print(f"Treasury balance: {tokens(treasury.balance())}")


def step_05_rejections(treasury: Treasury):
    step_header(5, "Rejected Callers",
        "Non-owners are stopped before the ledger is touched.")
    log_before = len(treasury.ledger.transfer_log)
    attempt("stranger withdraws", treasury.transfer,
            CONFIG.stranger, CONFIG.stranger, ONE_TOKEN)
    attempt("owner overdraws", treasury.transfer,
            CONFIG.deployer, CONFIG.grantee, CONFIG.treasury_funding)
    print(f"Ledger log grew by: {len(treasury.ledger.transfer_log) - log_before}")


def step_06_hand_over(treasury: Treasury):
    step_header(6, "Handing Over Ownership",
        "Ownership moves to exactly one new account.")
    attempt("stranger claims ownership", treasury.transfer_ownership,
            CONFIG.stranger, CONFIG.stranger)
    treasury.transfer_ownership(CONFIG.deployer, CONFIG.council)
    attempt("old owner withdraws", treasury.transfer,
            CONFIG.deployer, CONFIG.grantee, ONE_TOKEN)
    treasury.transfer(CONFIG.council, CONFIG.grantee, ONE_TOKEN)


def step_07_renounce(treasury: Treasury):
    step_header(7, "Renouncing Ownership",
        "Renouncement is terminal: the remaining funds are frozen forever.")
    treasury.renounce_ownership(CONFIG.council)
    for caller in (CONFIG.council, CONFIG.deployer, ZERO_ADDRESS):
        attempt(f"{caller[:10]}... withdraws", treasury.transfer,
                caller, CONFIG.grantee, ONE_TOKEN)
    print(f"Owner:            {treasury.owner}")
    print(f"Frozen balance:   {tokens(treasury.balance())}")
    print("Ownership history:")
    for record in treasury.ownership_log:
        print(f"    {record!r}")


def main():
    """Run the complete tutorial."""
    print("=" * 70)
    print("       HONEY LEDGER & COMMUNITY TREASURY - TUTORIAL")
    print("=" * 70)
    if QUICK_MODE:
        print("Running in QUICK mode (no pauses)")
    wait_for_enter()

    ledger = step_01_mint()
    wait_for_enter()
    step_02_conservation(ledger)
    wait_for_enter()
    treasury = step_03_fund_treasury(ledger)
    wait_for_enter()
    step_04_owner_withdraws(treasury)
    wait_for_enter()
    step_05_rejections(treasury)
    wait_for_enter()
    step_06_hand_over(treasury)
    wait_for_enter()
    step_07_renounce(treasury)

    replayed = ledger.replay()
    print(f"\nReplay matches live ledger: {replayed.balances == ledger.balances}")


if __name__ == "__main__":
    main()
