from .account import Account, HistoryEntry
from .db import AccountRow, HistoryEntryRow, SnapshotInfo, SNAPSHOT_FORMAT_VERSION

__all__ = [
    "Account",
    "HistoryEntry",
    "AccountRow",
    "HistoryEntryRow",
    "SnapshotInfo",
    "SNAPSHOT_FORMAT_VERSION",
]
