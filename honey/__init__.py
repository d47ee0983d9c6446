"""
honey - Honey Token Ledger and Community Treasury

A fixed-supply token ledger plus an owner-gated treasury that custodies one
ledger account.

Usage:
    from honey import Ledger, Treasury, ONE_TOKEN

    ledger = Ledger("0xalice", 1000 * ONE_TOKEN)
    treasury = Treasury(ledger, creator="0xalice")

    # Fund the treasury from alice's own account
    ledger.transfer("0xalice", treasury.address, 100 * ONE_TOKEN)

    # Only the owner can move treasury funds out
    treasury.transfer("0xalice", "0xbob", 100 * ONE_TOKEN)
    treasury.renounce_ownership("0xalice")
"""

# Core types
from .core import (
    HoneyError,
    LedgerError,
    OwnershipError,
    InsufficientBalance,
    InvalidRecipient,
    InvalidSender,
    InvalidAmount,
    AccountInUse,
    NotOwner,
    InvalidOwner,
    ErrorKind,
    TransferRecord,
    OwnershipTransfer,
    ZERO_ADDRESS,
    MAX_AMOUNT,
    ONE_TOKEN,
    DEFAULT_NAME,
    DEFAULT_SYMBOL,
    DEFAULT_DECIMALS,
    DEFAULT_INITIAL_SUPPLY,
    is_null_address,
    validate_amount,
    derive_address,
)

# Ledger
from .ledger import Ledger

# Access control
from .ownable import Ownable

# Treasury
from .treasury import Treasury

__all__ = [
    # Errors
    'HoneyError', 'LedgerError', 'OwnershipError',
    'InsufficientBalance', 'InvalidRecipient', 'InvalidSender', 'InvalidAmount', 'AccountInUse',
    'NotOwner', 'InvalidOwner', 'ErrorKind',
    # Records
    'TransferRecord', 'OwnershipTransfer',
    # Constants
    'ZERO_ADDRESS', 'MAX_AMOUNT', 'ONE_TOKEN',
    'DEFAULT_NAME', 'DEFAULT_SYMBOL', 'DEFAULT_DECIMALS', 'DEFAULT_INITIAL_SUPPLY',
    # Helpers
    'is_null_address', 'validate_amount', 'derive_address',
    # Components
    'Ledger', 'Ownable', 'Treasury',
]

__version__ = '1.0.0'
