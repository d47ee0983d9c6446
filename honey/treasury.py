"""
treasury.py - Owner-gated custodian of one ledger account

The Treasury holds tokens in its own account on a shared Ledger and lets only
its owner move them out. The ledger handle is fixed at construction; the
treasury never owns funds by containment, only through its address's balance.

Authorization is checked strictly before the ledger is called, so a caller who
is not the owner can never trigger any ledger activity, not even a rejected
transfer. The ledger's own balance checks still apply to everything the owner
does.
"""

from __future__ import annotations
from typing import Optional

from .ledger import Ledger
from .ownable import Ownable


class Treasury(Ownable):
    """
    Single-owner treasury over one Ledger account.

    Example:
        ledger = Ledger("0xalice", 1000, verbose=False)
        treasury = Treasury(ledger, creator="0xalice", verbose=False)
        ledger.transfer("0xalice", treasury.address, 100)
        treasury.transfer("0xalice", "0xbob", 100)
        treasury.balance()   # 0
    """

    def __init__(
        self,
        ledger: Ledger,
        creator: str,
        *,
        address: Optional[str] = None,
        verbose: bool = True,
    ):
        """
        Args:
            ledger: Token ledger the treasury keeps its account on
            creator: Initial owner
            address: Treasury's own ledger account. Must not exist on the
                     ledger yet (default: derived from creator, the ledger's
                     address and a nonce, fresh for every treasury)
            verbose: Print one line per applied or rejected operation

        Raises:
            InvalidOwner: If creator is the null account
            InvalidRecipient: If address is the null account
            AccountInUse: If address already has an entry on the ledger
        """
        super().__init__(creator, verbose=verbose)
        self._ledger = ledger
        if address is None:
            self.address = ledger.allocate_account("treasury", creator, ledger.address)
        else:
            self.address = ledger.reserve_account(address)

    @property
    def ledger(self) -> Ledger:
        """The ledger this treasury holds its account on."""
        return self._ledger

    def balance(self) -> int:
        """Return the treasury's own ledger balance."""
        return self._ledger.balance_of(self.address)

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        """
        Owner-only: move amount from the treasury's account to `to`.

        The owner lock is held across the check and the ledger call so
        ownership cannot change in between.

        Raises:
            NotOwner: If caller is not the current owner (ledger untouched)
            InsufficientBalance, InvalidRecipient, InvalidAmount: From the ledger
        """
        with self._lock:
            self._check_owner(caller)
            return self._ledger.transfer(self.address, to, amount)

    def __repr__(self) -> str:
        return f"Treasury({self.address}, owner={self.owner}, ledger={self._ledger.address})"
