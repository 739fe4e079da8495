from __future__ import annotations

from typing import Optional, Tuple

from ..core.config import Settings, get_settings
from ..models import Account
from .history import HistoryReader
from .persistence import SnapshotStore
from .registry import AccountRegistry
from .transactions import deposit, transfer, withdraw


class LedgerService:
    """Name-based entry point over a registry and its snapshot store."""

    def __init__(
        self,
        registry: Optional[AccountRegistry] = None,
        store: Optional[SnapshotStore] = None,
    ) -> None:
        self.registry = registry if registry is not None else AccountRegistry()
        self.store = (
            store if store is not None else SnapshotStore(get_settings().snapshot_path)
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> LedgerService:
        settings = settings or get_settings()
        return cls(AccountRegistry(), SnapshotStore(settings.snapshot_path))

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def create_account(self, name: str, *, replace: bool = True) -> Account:
        return self.registry.create_account(name, replace=replace)

    def get_account(self, name: str) -> Account:
        return self.registry.get_account(name)

    def list_accounts(self) -> str:
        return self.registry.list_accounts()

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------
    def deposit(self, name: str, amount: int) -> int:
        return deposit(self.registry.get_account(name), amount)

    def withdraw(self, name: str, amount: int) -> int:
        return withdraw(self.registry.get_account(name), amount)

    def transfer(
        self, source_name: str, destination_name: str, amount: int
    ) -> Tuple[int, int]:
        source = self.registry.get_account(source_name)
        destination = self.registry.get_account(destination_name)
        return transfer(source, destination, amount)

    def history(self, name: str) -> HistoryReader:
        return HistoryReader(self.registry.get_account(name))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save(self) -> None:
        self.store.save(self.registry)

    def load(self) -> None:
        self.store.load(self.registry)
