"""
ownable.py - Single-owner access control

Ownable holds one owner address and gates privileged operations on it.
The owner can hand ownership to another account or renounce it; renouncement
sets the owner to ZERO_ADDRESS and is terminal, since no caller can ever
match the null owner again.
"""

from __future__ import annotations
import threading
from typing import List

from .core import (
    OwnershipTransfer,
    ZERO_ADDRESS,
    InvalidOwner, NotOwner,
    is_null_address,
)


class Ownable:
    """
    Base class for components with a single privileged owner.

    Subclasses call _check_owner(caller) at the top of every owner-gated
    method while holding self._lock, and must do so before touching any state.
    """

    def __init__(self, initial_owner: str, verbose: bool = True):
        """
        Args:
            initial_owner: First owner (usually the creator)
            verbose: Print one line per ownership change or rejection

        Raises:
            InvalidOwner: If initial_owner is the null account
        """
        if is_null_address(initial_owner):
            raise InvalidOwner()
        self.verbose = verbose
        self._lock = threading.RLock()
        self._owner = initial_owner
        self.ownership_log: List[OwnershipTransfer] = [
            OwnershipTransfer(0, ZERO_ADDRESS, initial_owner)
        ]

    @property
    def owner(self) -> str:
        """Current owner, or ZERO_ADDRESS once renounced."""
        with self._lock:
            return self._owner

    def is_owner(self, account: str) -> bool:
        with self._lock:
            return not is_null_address(account) and account == self._owner

    def is_renounced(self) -> bool:
        with self._lock:
            return self._owner == ZERO_ADDRESS

    def _check_owner(self, caller: str) -> None:
        """Raise NotOwner unless caller is the current owner."""
        if not self.is_owner(caller):
            if self.verbose:
                print(f"✗ REJECTED: {caller}: {NotOwner.default_reason}")
            raise NotOwner()

    def transfer_ownership(self, caller: str, new_owner: str) -> bool:
        """
        Hand ownership from caller to new_owner.

        Raises:
            NotOwner: If caller is not the current owner
            InvalidOwner: If new_owner is the null account
        """
        with self._lock:
            self._check_owner(caller)
            if is_null_address(new_owner):
                if self.verbose:
                    print(f"✗ REJECTED: {caller}: {InvalidOwner.default_reason}")
                raise InvalidOwner()
            self._set_owner(new_owner)
            return True

    def renounce_ownership(self, caller: str) -> bool:
        """
        Leave the component without an owner. Irreversible.

        Raises:
            NotOwner: If caller is not the current owner
        """
        with self._lock:
            self._check_owner(caller)
            self._set_owner(ZERO_ADDRESS)
            return True

    def _set_owner(self, new_owner: str) -> None:
        previous = self._owner
        self._owner = new_owner
        record = OwnershipTransfer(len(self.ownership_log), previous, new_owner)
        self.ownership_log.append(record)
        if self.verbose:
            print(f"✓ OWNERSHIP #{record.sequence}: {previous} → {new_owner}")
