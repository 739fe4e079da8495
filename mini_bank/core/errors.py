from __future__ import annotations

from typing import Tuple


class LedgerError(Exception):
    """Base class for every error raised by the ledger."""


class AccountNotFoundError(LedgerError):
    """Raised when an account name is missing from the registry."""


class InvalidAccountNameError(LedgerError, ValueError):
    """Raised when an account is created with an empty or non-string name."""


class DuplicateAccountError(LedgerError):
    """Raised when creating an account whose name is taken and replacing is disabled."""


class TransactionError(LedgerError):
    """A rejected money movement.

    ``balances`` holds the balances of the accounts involved, untouched by the
    failed call: ``(balance,)`` for deposit/withdraw and
    ``(source_balance, destination_balance)`` for transfer.
    """

    def __init__(self, message: str, balances: Tuple[int, ...] = ()) -> None:
        super().__init__(message)
        self.balances = balances


class InvalidAmountError(TransactionError, ValueError):
    """Raised when an amount is negative or not an integer."""


class InsufficientFundsError(TransactionError):
    """Raised when a withdrawal/transfer would drop balance below zero."""


class SameAccountTransferError(TransactionError, ValueError):
    """Raised when source and destination of a transfer are the same account."""


class HistoryExhaustedError(LedgerError):
    """Raised when a history reader is read again after its last entry."""


class SnapshotIOError(LedgerError):
    """Raised when a snapshot cannot be written or read back."""
