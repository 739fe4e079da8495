from .history import HistoryReader, HistoryStep, history
from .ledger import LedgerService
from .persistence import SnapshotStore
from .registry import AccountRegistry
from .transactions import deposit, transfer, withdraw

__all__ = [
    "AccountRegistry",
    "HistoryReader",
    "HistoryStep",
    "LedgerService",
    "SnapshotStore",
    "deposit",
    "history",
    "transfer",
    "withdraw",
]
