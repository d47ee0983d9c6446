"""
ledger.py - Stateful Honey Token Ledger

The Ledger class is the token accounting engine. It is the only module that
mutates balances, ensuring controlled and auditable changes.

Key responsibilities:
    - Mints the entire fixed supply to one holder at creation
    - Executes self-transfers atomically (both sides move or neither does)
    - Enforces conservation: total_supply always equals the sum of balances
    - Serializes mutations behind a lock so reads never see a half-applied transfer
    - Always validates and always logs - no exceptions
"""

from __future__ import annotations
import copy
import threading
from typing import Any, Dict, List, Optional

from .core import (
    # Types
    TransferRecord,
    # Constants
    DEFAULT_DECIMALS, DEFAULT_INITIAL_SUPPLY, DEFAULT_NAME, DEFAULT_SYMBOL,
    # Exceptions
    AccountInUse, InsufficientBalance, InvalidRecipient, InvalidSender, LedgerError,
    # Helper functions
    derive_address, is_null_address, validate_amount,
)


class Ledger:
    """
    Fixed-supply token ledger with full validation and audit trail.

    Design Principles:
        - Always validates: every transfer is checked for amount, sender,
          recipient and sufficiency before any balance is touched.
        - Always logs: every applied transfer is recorded in transfer_log,
          enabling replay() for historical state reconstruction.

    Thread Safety:
        Every public method holds the ledger's lock. Mutations run to
        completion before any other call observes state.

    Example:
        ledger = Ledger("0xalice", 1000)
        ledger.transfer("0xalice", "0xbob", 100)
        ledger.balance_of("0xbob")   # 100
    """

    def __init__(
        self,
        initial_holder: str,
        initial_supply: int = DEFAULT_INITIAL_SUPPLY,
        *,
        name: str = DEFAULT_NAME,
        symbol: str = DEFAULT_SYMBOL,
        decimals: int = DEFAULT_DECIMALS,
        address: Optional[str] = None,
        verbose: bool = True,
    ):
        """
        Create a ledger and mint the whole supply to initial_holder.

        Args:
            initial_holder: Account receiving the entire initial supply
            initial_supply: Total supply in base units (fixed for the ledger's life)
            name: Token name (default: "Honey")
            symbol: Token symbol (default: "HNY")
            decimals: Display decimals (default: 18)
            address: Ledger's own address (default: derived from holder, supply, name)
            verbose: Print one line per applied or rejected transfer (default: True)

        Raises:
            InvalidRecipient: If initial_holder is the null account
            InvalidAmount: If initial_supply is not a valid amount
        """
        if is_null_address(initial_holder):
            raise InvalidRecipient()
        validate_amount(initial_supply)

        self.name = name
        self.symbol = symbol
        self.decimals = decimals
        self.address = address or derive_address("ledger", initial_holder, initial_supply, name)
        self.verbose = verbose
        self.initial_holder = initial_holder
        self.initial_supply = initial_supply
        self.total_supply = initial_supply
        self.balances: Dict[str, int] = {initial_holder: initial_supply}
        self.transfer_log: List[TransferRecord] = []
        self.reserved_accounts: List[str] = []
        self._lock = threading.RLock()

    @classmethod
    def create(cls, initial_holder: str, initial_supply: int, **kwargs: Any) -> Ledger:
        """Create a ledger minting initial_supply to initial_holder."""
        return cls(initial_holder, initial_supply, **kwargs)

    # ========================================================================
    # QUERIES (read-only)
    # ========================================================================

    def balance_of(self, account: str) -> int:
        """Return the balance of account (0 for accounts never credited)."""
        if not isinstance(account, str):
            return 0
        with self._lock:
            return self.balances.get(account, 0)

    def holders(self) -> Dict[str, int]:
        """Return all accounts with a non-zero balance."""
        with self._lock:
            return {acct: bal for acct, bal in self.balances.items() if bal != 0}

    def verify_conservation(self, expected_supply: Optional[int] = None) -> Dict[str, Any]:
        """
        Verify that the sum of all balances equals the total supply.

        Args:
            expected_supply: Optional supply to check against instead of
                             the ledger's own total_supply.

        Returns:
            Dict with keys:
            - 'valid': bool - True if no balance is negative and the sum matches
            - 'supply': int - Supply the sum was checked against
            - 'sum_of_balances': int - Current sum across all accounts
            - 'discrepancy': int - sum_of_balances - supply

        Example:
            result = ledger.verify_conservation()
            assert result['valid'], f"Conservation violated: {result['discrepancy']}"
        """
        with self._lock:
            supply = self.total_supply if expected_supply is None else expected_supply
            # Sorted for a deterministic accumulation order
            total = sum(self.balances[acct] for acct in sorted(self.balances))
            negative = any(bal < 0 for bal in self.balances.values())
            return {
                'valid': total == supply and not negative,
                'supply': supply,
                'sum_of_balances': total,
                'discrepancy': total - supply,
            }

    # ========================================================================
    # TRANSFER (Mutating)
    # ========================================================================

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        """
        Move amount from caller's own account to `to`.

        Validation happens in full before either balance is written, so a
        rejected transfer leaves every balance and the log untouched.

        Args:
            caller: Account being debited (the authenticated invoker)
            to: Account being credited
            amount: Base units to move

        Returns:
            True once the transfer is applied

        Raises:
            InvalidAmount: If amount is not an int in [0, MAX_AMOUNT]
            InvalidSender: If caller is the null account
            InvalidRecipient: If to is the null account
            InsufficientBalance: If caller holds less than amount
        """
        with self._lock:
            try:
                validate_amount(amount)
                if is_null_address(caller):
                    raise InvalidSender()
                if is_null_address(to):
                    raise InvalidRecipient()
                src_balance = self.balances.get(caller, 0)
                if src_balance < amount:
                    raise InsufficientBalance()
            except LedgerError as e:
                if self.verbose:
                    print(f"✗ REJECTED: {caller} → {to} {amount}: {e.reason}")
                raise

            self._apply_transfer(caller, to, amount)
            record = TransferRecord(len(self.transfer_log), caller, to, amount)
            self.transfer_log.append(record)

            if self.verbose:
                print(f"✓ TRANSFER #{record.sequence}: {amount} {self.symbol} {caller} → {to}")
            return True

    def _apply_transfer(self, sender: str, recipient: str, amount: int) -> None:
        """
        Debit sender and credit recipient by amount.

        Both new balances are computed before either is stored; with
        sender == recipient the balance is unchanged.
        """
        if sender == recipient:
            self.balances.setdefault(sender, 0)
            return
        new_src = self.balances.get(sender, 0) - amount
        new_dst = self.balances.get(recipient, 0) + amount
        self.balances[sender] = new_src
        self.balances[recipient] = new_dst

    # ========================================================================
    # ACCOUNT RESERVATION (Mutating)
    # ========================================================================

    def reserve_account(self, account: str) -> str:
        """
        Claim a fresh account for a custodian such as a Treasury.

        The account gets a zero balance entry, so it can never be reserved
        twice and never aliases an account that already holds or has held funds.

        Args:
            account: Account to claim

        Returns:
            The reserved account

        Raises:
            InvalidRecipient: If account is the null account
            AccountInUse: If account already has an entry on this ledger
        """
        with self._lock:
            if is_null_address(account):
                raise InvalidRecipient()
            if account in self.balances:
                if self.verbose:
                    print(f"✗ REJECTED: reserve {account}: {AccountInUse.default_reason}")
                raise AccountInUse()
            self.balances[account] = 0
            self.reserved_accounts.append(account)
            return account

    def allocate_account(self, *parts: Any) -> str:
        """
        Derive and reserve a fresh account from parts plus a nonce.

        The nonce starts at 0 and increments until the derived address is
        unused, so repeated allocations with the same parts yield distinct,
        deterministic accounts (like contract addresses from a deployer nonce).
        """
        with self._lock:
            nonce = 0
            while True:
                account = derive_address(*parts, nonce)
                if account not in self.balances:
                    return self.reserve_account(account)
                nonce += 1

    # ========================================================================
    # LEDGER OPERATIONS
    # ========================================================================

    def clone(self) -> Ledger:
        """
        Create a deep copy of this ledger.

        All state is fully independent: modifications to the clone will not
        affect the original ledger, and vice versa. The clone gets its own lock.

        Returns:
            A new Ledger instance with identical state
        """
        with self._lock:
            cloned = type(self).__new__(type(self))
            cloned.name = self.name
            cloned.symbol = self.symbol
            cloned.decimals = self.decimals
            cloned.address = self.address
            cloned.verbose = self.verbose
            cloned.initial_holder = self.initial_holder
            cloned.initial_supply = self.initial_supply
            cloned.total_supply = self.total_supply
            cloned.balances = dict(self.balances)
            cloned.transfer_log = copy.copy(self.transfer_log)
            cloned.reserved_accounts = list(self.reserved_accounts)
            cloned._lock = threading.RLock()
            return cloned

    def replay(self, upto: Optional[int] = None) -> Ledger:
        """
        Create a new ledger by replaying the transfer log from genesis.

        The replay process:
        1. Create a new ledger with the same metadata, address and initial mint
        2. Re-reserve custody accounts (each was reserved before it saw any transfer)
        3. Re-execute each logged transfer in sequence order

        Args:
            upto: Number of log records to replay (default: all of them)

        Returns:
            New Ledger instance with replayed state

        Raises:
            LedgerError: If a logged transfer is rejected during replay
        """
        with self._lock:
            records = list(self.transfer_log if upto is None else self.transfer_log[:upto])
            reserved = list(self.reserved_accounts)
            new_ledger = type(self)(
                self.initial_holder,
                self.initial_supply,
                name=self.name,
                symbol=self.symbol,
                decimals=self.decimals,
                address=self.address,
                verbose=self.verbose,
            )

        for account in reserved:
            new_ledger.reserve_account(account)

        for record in records:
            try:
                new_ledger.transfer(record.sender, record.recipient, record.amount)
            except LedgerError as e:
                raise LedgerError(f"Replay failed at transfer #{record.sequence}: {e.reason}") from e

        return new_ledger

    def __repr__(self) -> str:
        return (
            f"Ledger({self.name} [{self.symbol}] at {self.address}, "
            f"supply={self.total_supply}, transfers={len(self.transfer_log)})"
        )
