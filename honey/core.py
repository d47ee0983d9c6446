"""
Core types and pure functions for the Honey token ledger and treasury.

This module provides the foundational pieces shared by the ledger and the treasury:
1. Constants: the null account, amount bounds, token defaults
2. Exceptions: HoneyError and the ledger/ownership error types
3. Immutable records: TransferRecord, OwnershipTransfer
4. Pure helpers: address and amount validation, deterministic address derivation

Nothing in this module holds or mutates state.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import hashlib
from typing import Any, Optional


# ============================================================================
# CONSTANTS
# ============================================================================

# The null account. Owner is set to this on renouncement; transfers to it are rejected.
ZERO_ADDRESS = "0x" + "0" * 40

# Balances and amounts are stored as 96-bit unsigned integers.
AMOUNT_BITS = 96
MAX_AMOUNT = 2 ** AMOUNT_BITS - 1

DEFAULT_NAME = "Honey"
DEFAULT_SYMBOL = "HNY"
DEFAULT_DECIMALS = 18

# One whole token in base units (10 ** decimals).
ONE_TOKEN = 10 ** DEFAULT_DECIMALS

# 10 million whole tokens.
DEFAULT_INITIAL_SUPPLY = 10_000_000 * ONE_TOKEN

# Stable reason strings. Collaborators pattern-match on these; do not change them.
REASON_INSUFFICIENT_BALANCE = "Honey::_transferTokens: transfer amount exceeds balance"
REASON_INVALID_RECIPIENT = "Honey::_transferTokens: cannot transfer to the zero address"
REASON_INVALID_SENDER = "Honey::_transferTokens: cannot transfer from the zero address"
REASON_AMOUNT_OVERFLOW = "Honey::transfer: amount exceeds 96 bits"
REASON_INVALID_AMOUNT = "Honey::transfer: invalid amount"
REASON_NOT_OWNER = "Ownable: caller is not the owner"
REASON_INVALID_OWNER = "Ownable: new owner is the zero address"
REASON_ACCOUNT_IN_USE = "Honey::_reserveAccount: account already in use"


# ============================================================================
# ENUMS
# ============================================================================

class ErrorKind(Enum):
    """
    Machine-checkable category of a rejected operation.

    Every HoneyError carries one of these alongside its human-readable reason,
    so callers can branch on the kind without parsing strings.
    """
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INVALID_RECIPIENT = "invalid_recipient"
    INVALID_SENDER = "invalid_sender"
    INVALID_AMOUNT = "invalid_amount"
    NOT_OWNER = "not_owner"
    INVALID_OWNER = "invalid_owner"
    ACCOUNT_IN_USE = "account_in_use"


# ============================================================================
# EXCEPTIONS
# ============================================================================

class HoneyError(Exception):
    """
    Base exception for all ledger and treasury errors.

    Attributes:
        kind: ErrorKind of the failure
        reason: Stable human-readable reason (also the exception message)
    """
    kind: Optional[ErrorKind] = None
    default_reason: str = ""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class LedgerError(HoneyError):
    """Base exception for token ledger errors."""
    pass


class InsufficientBalance(LedgerError):
    """Raised when a transfer source holds less than the transfer amount."""
    kind = ErrorKind.INSUFFICIENT_BALANCE
    default_reason = REASON_INSUFFICIENT_BALANCE


class InvalidRecipient(LedgerError):
    """Raised when the null account is given as a transfer recipient or initial holder."""
    kind = ErrorKind.INVALID_RECIPIENT
    default_reason = REASON_INVALID_RECIPIENT


class InvalidSender(LedgerError):
    """Raised when the null account attempts to move funds."""
    kind = ErrorKind.INVALID_SENDER
    default_reason = REASON_INVALID_SENDER


class InvalidAmount(LedgerError):
    """Raised when an amount is not an integer in [0, MAX_AMOUNT]."""
    kind = ErrorKind.INVALID_AMOUNT
    default_reason = REASON_INVALID_AMOUNT


class AccountInUse(LedgerError):
    """Raised when an account reserved for custody already exists on the ledger."""
    kind = ErrorKind.ACCOUNT_IN_USE
    default_reason = REASON_ACCOUNT_IN_USE


class OwnershipError(HoneyError):
    """Base exception for owner-gated operation errors."""
    pass


class NotOwner(OwnershipError):
    """Raised when an owner-gated operation is invoked by anyone but the current owner."""
    kind = ErrorKind.NOT_OWNER
    default_reason = REASON_NOT_OWNER


class InvalidOwner(OwnershipError):
    """Raised when the null account is proposed as owner."""
    kind = ErrorKind.INVALID_OWNER
    default_reason = REASON_INVALID_OWNER


# ============================================================================
# RECORDS
# ============================================================================

@dataclass(frozen=True, slots=True)
class TransferRecord:
    """
    An applied transfer of tokens between two accounts.

    Attributes:
        sequence: Monotonic position in the ledger's transfer log (0-based).
        sender: Account debited.
        recipient: Account credited.
        amount: Base units moved.
    """
    sequence: int
    sender: str
    recipient: str
    amount: int

    def __repr__(self) -> str:
        return f"Transfer#{self.sequence}({self.amount}: {self.sender}→{self.recipient})"


@dataclass(frozen=True, slots=True)
class OwnershipTransfer:
    """
    An applied change of owner. Renouncement records new_owner == ZERO_ADDRESS.
    """
    sequence: int
    previous_owner: str
    new_owner: str

    def __repr__(self) -> str:
        return f"OwnershipTransfer#{self.sequence}({self.previous_owner}→{self.new_owner})"


# ============================================================================
# PURE HELPERS
# ============================================================================

def is_null_address(account: Optional[str]) -> bool:
    """Return True for ZERO_ADDRESS, None, or a blank string."""
    if account is None:
        return True
    if not isinstance(account, str):
        return False
    return not account.strip() or account == ZERO_ADDRESS


def validate_amount(amount: Any) -> int:
    """
    Check that amount is a plain int within [0, MAX_AMOUNT].

    Returns:
        The amount, unchanged

    Raises:
        InvalidAmount: If amount is not an int (bool excluded), is negative,
                       or does not fit in AMOUNT_BITS bits.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(REASON_INVALID_AMOUNT)
    if amount < 0:
        raise InvalidAmount(REASON_INVALID_AMOUNT)
    if amount > MAX_AMOUNT:
        raise InvalidAmount(REASON_AMOUNT_OVERFLOW)
    return amount


def derive_address(*parts: Any) -> str:
    """
    Derive a deterministic 20-byte hex address from arbitrary parts.

    Same parts always produce the same address, so ledgers and treasuries
    built from the same inputs are addressable identically across runs.
    """
    content = "|".join(str(p) for p in parts)
    return "0x" + hashlib.sha256(content.encode()).hexdigest()[:40]
