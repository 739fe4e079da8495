from .core.config import Settings, get_settings
from .core.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    HistoryExhaustedError,
    InsufficientFundsError,
    InvalidAccountNameError,
    InvalidAmountError,
    LedgerError,
    SameAccountTransferError,
    SnapshotIOError,
    TransactionError,
)
from .main import create_ledger
from .models import Account, HistoryEntry
from .services import (
    AccountRegistry,
    HistoryReader,
    HistoryStep,
    LedgerService,
    SnapshotStore,
    deposit,
    history,
    transfer,
    withdraw,
)

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountRegistry",
    "DuplicateAccountError",
    "HistoryEntry",
    "HistoryExhaustedError",
    "HistoryReader",
    "HistoryStep",
    "InsufficientFundsError",
    "InvalidAccountNameError",
    "InvalidAmountError",
    "LedgerError",
    "LedgerService",
    "SameAccountTransferError",
    "Settings",
    "SnapshotIOError",
    "SnapshotStore",
    "TransactionError",
    "create_ledger",
    "deposit",
    "get_settings",
    "history",
    "transfer",
    "withdraw",
]
