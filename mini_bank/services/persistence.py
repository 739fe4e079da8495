from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.db import open_session
from ..core.errors import SnapshotIOError
from ..models import (
    SNAPSHOT_FORMAT_VERSION,
    Account,
    AccountRow,
    HistoryEntry,
    HistoryEntryRow,
    SnapshotInfo,
)
from .registry import AccountRegistry


logger = logging.getLogger(__name__)


class SnapshotStore:
    """Writes and reads whole-registry snapshots to a single SQLite file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    @property
    def _temp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------
    def save(self, registry: AccountRegistry) -> None:
        temp_path = self._temp_path
        try:
            temp_path.unlink(missing_ok=True)
            with open_session(temp_path, create=True) as session:
                self._write(session, registry)
                session.commit()
            os.replace(temp_path, self.path)
        except (OSError, SQLAlchemyError, OverflowError) as exc:
            # OverflowError: balances beyond SQLite's 64-bit INTEGER
            temp_path.unlink(missing_ok=True)
            raise SnapshotIOError(f"Save: writing {self.path} failed: {exc}") from exc

        logger.info(
            "snapshot.saved",
            extra={"path": str(self.path), "accounts": len(registry)},
        )

    def _write(self, session: Session, registry: AccountRegistry) -> None:
        session.add(SnapshotInfo(format_version=SNAPSHOT_FORMAT_VERSION))
        for account in registry:
            session.add(AccountRow(name=account.name, balance=account.balance))
            for position, entry in enumerate(account.history):
                session.add(
                    HistoryEntryRow(
                        account_name=account.name,
                        position=position,
                        amount=entry.amount,
                        balance=entry.balance,
                    )
                )

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load(self, registry: AccountRegistry) -> None:
        """Replace the content of ``registry`` with the stored snapshot.

        A missing snapshot file is not an error: the registry is emptied.
        On any other failure the registry is left as it was.
        """
        if not self.path.exists():
            registry.clear()
            logger.info("snapshot.missing", extra={"path": str(self.path)})
            return

        try:
            with open_session(self.path) as session:
                accounts = self._read(session)
        except (OSError, SQLAlchemyError) as exc:
            raise SnapshotIOError(f"Load: reading {self.path} failed: {exc}") from exc
        except ValueError as exc:
            raise SnapshotIOError(f"Load: {self.path} is corrupt: {exc}") from exc

        registry.replace_all(accounts)
        logger.info(
            "snapshot.loaded",
            extra={"path": str(self.path), "accounts": len(registry)},
        )

    def _read(self, session: Session) -> List[Account]:
        info = session.get(SnapshotInfo, 1)
        if info is None:
            raise ValueError("snapshot header is missing")
        if info.format_version != SNAPSHOT_FORMAT_VERSION:
            raise ValueError(
                f"unsupported snapshot format version {info.format_version}"
            )

        entries: Dict[str, List[HistoryEntry]] = {}
        stmt = select(HistoryEntryRow).order_by(
            HistoryEntryRow.account_name, HistoryEntryRow.position
        )
        for row in session.exec(stmt):
            entries.setdefault(row.account_name, []).append(
                HistoryEntry(amount=row.amount, balance=row.balance)
            )

        accounts = [
            Account.restore(row.name, row.balance, entries.pop(row.name, []))
            for row in session.exec(select(AccountRow))
        ]
        if entries:
            orphans = ", ".join(sorted(entries))
            raise ValueError(f"history entries for unknown accounts: {orphans}")
        return accounts
